"""
Ingestion Agent.

Reads an app-review CSV export into raw records.
Rows are split with the csv module so field counts can be checked per row;
type inference on the well-formed rows is delegated to pandas.
"""

import csv
import io
import logging
from typing import List, Tuple

import pandas as pd

from src.models.parse_result import ParseError, ParseResult
import config.settings as settings

logger = logging.getLogger(__name__)


class CsvIngestionAgent:
    """
    Parses a header-delimited CSV file into RawRecord dicts.

    - First row is the header, blank lines are skipped
    - Numeric-looking columns are inferred as numbers
    - Only empty cells become None ("NA", "None" stay as text)
    - Malformed lines are reported in ParseResult.errors, never raised
    """

    def __init__(
        self,
        encoding: str = settings.CSV_ENCODING,
        string_columns=settings.STRING_COLUMNS,
        expected_columns=settings.EXPECTED_COLUMNS
    ):
        """
        Initialize ingestion agent.

        Args:
            encoding: Text encoding of the input file
            string_columns: Columns read as text instead of inferred
            expected_columns: Columns the header should provide
        """
        self.encoding = encoding
        self.string_columns = tuple(string_columns)
        self.expected_columns = tuple(expected_columns)

    def parse(self, path: str) -> ParseResult:
        """
        Parse a CSV file.

        Args:
            path: Path to the CSV file

        Returns:
            ParseResult with records in file order plus diagnostics

        Raises:
            OSError: If the file is missing or unreadable
        """
        try:
            with open(path, "r", encoding=self.encoding) as f:
                text = f.read()
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise

        return self.parse_text(text, source=str(path))

    def parse_text(self, text: str, source: str = "<text>") -> ParseResult:
        """Parse CSV content that is already in memory."""
        if not text.strip():
            logger.warning(f"{source} is empty, no records parsed")
            return ParseResult(errors=[ParseError(code="EmptyFile", message=f"{source} is empty")])

        header, rows, errors = self._split_rows(text)

        missing = [c for c in self.expected_columns if c not in header]
        if missing:
            logger.warning(f"{source} is missing expected columns: {missing}")
            errors.insert(0, ParseError(
                code="MissingFields",
                message=f"Missing expected columns: {', '.join(missing)}",
                fields=missing
            ))

        # Re-serialize the well-formed rows so pandas only infers types
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(header)
        writer.writerows(rows)
        buffer.seek(0)

        df = pd.read_csv(
            buffer,
            index_col=False,
            skip_blank_lines=True,
            keep_default_na=False,
            na_values=[""],
            dtype={c: str for c in self.string_columns if c in header}
        )

        # Replace NaN with None so downstream null checks see one representation
        df = df.astype(object).where(df.notna(), None)
        records = df.to_dict(orient="records")

        if errors:
            logger.warning(f"{source}: {len(errors)} parse diagnostics")
        logger.info(f"Parsed {len(records)} records from {source}")

        return ParseResult(records=records, errors=errors, fields=header)

    def _split_rows(self, text: str) -> Tuple[List[str], List[List[str]], List[ParseError]]:
        """
        Split CSV text into header and data rows, checking field counts.

        Rows with too many fields are reported and skipped. Rows with too
        few fields are reported and kept (pandas pads them with nulls).

        Returns:
            (header, kept rows, diagnostics); ParseError.row is the
            0-based index of the data row, blank lines not counted
        """
        header: List[str] = []
        rows: List[List[str]] = []
        errors: List[ParseError] = []
        row_index = 0

        for cells in csv.reader(io.StringIO(text)):
            if not cells or (len(cells) == 1 and not cells[0].strip()):
                continue  # Blank line

            if not header:
                header = cells
                continue

            if len(cells) > len(header):
                errors.append(ParseError(
                    code="TooManyFields",
                    message=f"Expected {len(header)} fields but parsed {len(cells)}",
                    row=row_index,
                    fields=cells
                ))
            else:
                if len(cells) < len(header):
                    errors.append(ParseError(
                        code="TooFewFields",
                        message=f"Expected {len(header)} fields but parsed {len(cells)}",
                        row=row_index,
                        fields=cells
                    ))
                rows.append(cells)
            row_index += 1

        return header, rows, errors


def parse_data(path: str) -> ParseResult:
    """Parse a review CSV file with the default settings."""
    return CsvIngestionAgent().parse(path)
