"""
Parse result data model.

Holds the rows read from a CSV file plus the diagnostics collected
while reading it.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.models.review import RawRecord


@dataclass
class ParseError:
    """
    A problem found while reading the CSV.
    Reported, never raised.
    """
    code: str  # "TooManyFields", "TooFewFields", "MissingFields", or "EmptyFile"
    message: str
    row: Optional[int] = None  # 0-based data row index, None for file-level problems
    fields: List[str] = field(default_factory=list)  # Raw cells of the offending line

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "row": self.row,
            "fields": self.fields
        }


@dataclass
class ParseResult:
    """Output of the Ingestion Agent."""
    records: List[RawRecord] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)  # Header column names

    def __len__(self) -> int:
        return len(self.records)
