"""
Unit tests for the CSV Ingestion Agent.
"""

import os
import tempfile

import pytest

from src.agents.ingestion import CsvIngestionAgent, parse_data

HEADER = (
    "review_id,app_name,review_language,device_type,rating,num_helpful_votes,"
    "review_date,verified_purchase,user_id,user_age,user_country,user_gender"
)


def write_csv(tmpdir, lines, name="reviews.csv"):
    """Write CSV lines to a file and return its path."""
    path = os.path.join(tmpdir, name)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return path


def test_parse_infers_numbers_and_keeps_strings():
    """Numeric columns become numbers, verified_purchase and dates stay text."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            "1,WhatsApp,en,Android,4.5,12,2024-06-01,True,101,34,US,Male",
            "2,Spotify,de,iOS,2.0,0,2024-06-02,False,102,27,DE,Female",
        ])

        result = parse_data(path)

    assert len(result) == 2
    assert result.errors == []
    first = result.records[0]
    assert first["review_id"] == 1
    assert first["app_name"] == "WhatsApp"
    assert first["rating"] == pytest.approx(4.5)
    assert first["verified_purchase"] == "True"
    assert result.records[1]["verified_purchase"] == "False"
    assert first["review_date"] == "2024-06-01"
    assert first["user_age"] == 34


def test_parse_preserves_header_order():
    """Header column names are returned in file order."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [HEADER, "1,A,en,iOS,5,0,2024-06-01,True,1,20,US,Male"])
        result = parse_data(path)

    assert result.fields == HEADER.split(",")
    assert list(result.records[0].keys()) == HEADER.split(",")


def test_blank_lines_are_skipped():
    """Blank lines do not produce records."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            "1,A,en,iOS,5,0,2024-06-01,True,1,20,US,Male",
            "",
            "2,B,en,iOS,3,0,2024-06-01,True,2,21,US,Female",
            "",
        ])
        result = parse_data(path)

    assert [r["review_id"] for r in result.records] == [1, 2]


def test_empty_cells_become_none():
    """Empty cells are None, while 'NA' stays a string."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            "1,A,en,iOS,5,0,2024-06-01,True,1,,NA,",
        ])
        result = parse_data(path)

    record = result.records[0]
    assert record["user_age"] is None
    assert record["user_gender"] is None
    assert record["user_country"] == "NA"


def test_too_many_fields_reported_not_raised():
    """A malformed line becomes a diagnostic and is skipped."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            HEADER,
            "1,A,en,iOS,5,0,2024-06-01,True,1,20,US,Male",
            "2,B,en,iOS,3,0,2024-06-01,True,2,21,US,Female,extra,cells",
            "3,C,en,iOS,1,0,2024-06-01,True,3,22,US,Male",
        ])
        result = parse_data(path)

    assert [r["review_id"] for r in result.records] == [1, 3]
    assert len(result.errors) == 1
    assert result.errors[0].code == "TooManyFields"
    assert result.errors[0].row == 1
    assert "extra" in result.errors[0].fields


def test_extra_cell_in_first_row_does_not_shift_columns():
    """An over-long first data row is reported, not used as an index."""
    result = CsvIngestionAgent().parse_text("\n".join([
        HEADER,
        "1,A,en,iOS,5,0,2024-06-01,True,1,20,US,Male,extra",
        "2,B,en,iOS,3,0,2024-06-01,True,2,21,US,Female",
        "3,C,en,iOS,1,0,2024-06-01,True,3,22,US,Male",
    ]))

    assert [r["review_id"] for r in result.records] == [2, 3]
    assert [r["app_name"] for r in result.records] == ["B", "C"]
    assert [(e.code, e.row) for e in result.errors] == [("TooManyFields", 0)]


def test_trailing_comma_on_every_row_is_reported():
    """Rows with a trailing delimiter are flagged, never shifted."""
    result = CsvIngestionAgent().parse_text("\n".join([
        HEADER,
        "1,A,en,iOS,5,0,2024-06-01,True,1,20,US,Male,",
        "2,B,en,iOS,3,0,2024-06-01,True,2,21,US,Female,",
    ]))

    assert result.records == []
    assert [(e.code, e.row) for e in result.errors] == [
        ("TooManyFields", 0),
        ("TooManyFields", 1),
    ]


def test_too_few_fields_reported_and_kept():
    """A short row is reported and kept with its missing cells as None."""
    result = CsvIngestionAgent().parse_text("\n".join([
        HEADER,
        "1,A,en,iOS,5,0,2024-06-01,True,1,20,US,Male",
        "2,B,en",
    ]))

    assert [r["review_id"] for r in result.records] == [1, 2]
    assert result.records[1]["app_name"] == "B"
    assert result.records[1]["user_age"] is None
    assert [(e.code, e.row) for e in result.errors] == [("TooFewFields", 1)]
    assert result.errors[0].fields == ["2", "B", "en"]


def test_row_index_skips_blank_lines():
    """Diagnostic row numbers count data rows only."""
    result = CsvIngestionAgent().parse_text("\n".join([
        HEADER,
        "",
        "1,A,en,iOS,5,0,2024-06-01,True,1,20,US,Male",
        "",
        "2,B",
    ]))

    assert result.errors[0].row == 1


def test_quoted_commas_are_one_field():
    """Quoted cells containing commas are not split."""
    result = CsvIngestionAgent().parse_text("\n".join([
        HEADER,
        '1,"Photos, Videos & More",en,iOS,5,0,2024-06-01,True,1,20,US,Male',
    ]))

    assert result.errors == []
    assert result.records[0]["app_name"] == "Photos, Videos & More"


def test_missing_columns_reported():
    """A header without expected columns adds a MissingFields diagnostic."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(tmpdir, [
            "review_id,app_name,rating",
            "1,A,5",
        ])
        result = parse_data(path)

    assert len(result) == 1
    assert result.errors[0].code == "MissingFields"
    assert "user_gender" in result.errors[0].fields


def test_empty_file():
    """An empty file yields no records and an EmptyFile diagnostic."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "empty.csv")
        open(path, "w").close()
        result = parse_data(path)

    assert result.records == []
    assert result.errors[0].code == "EmptyFile"


def test_header_only_file():
    """A header without rows yields no records."""
    result = CsvIngestionAgent().parse_text(HEADER + "\n")

    assert result.records == []
    assert result.errors == []


def test_missing_file_raises():
    """A missing file is a fatal error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(FileNotFoundError):
            parse_data(os.path.join(tmpdir, "does_not_exist.csv"))


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
