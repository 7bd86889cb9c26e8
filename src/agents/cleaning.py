"""
Cleaning Agent.

Filters out incomplete rows and converts raw records into typed Review objects.
"""

import logging
import math
import numbers
from datetime import date
from typing import Any, Iterable, List, Optional

import pandas as pd

from src.models.review import RawRecord, Review, User
import config.settings as settings

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    """True for None, empty string, or float NaN."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return isinstance(value, float) and math.isnan(value)


def to_int(value: Any) -> int:
    """
    Coerce a raw value to int, truncating toward zero.

    Raises:
        ValueError: For booleans, non-numeric strings, and non-finite numbers
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert boolean {value!r} to int")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            value = float(text)
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot convert {value!r} to int")
    return int(number)


def to_float(value: Any) -> float:
    """
    Coerce a raw value to a finite float.

    Raises:
        ValueError: For booleans, non-numeric strings, and non-finite numbers
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert boolean {value!r} to float")
    number = float(value.strip() if isinstance(value, str) else value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot convert {value!r} to float")
    return number


def to_date(value: Any) -> date:
    """
    Coerce a raw value to a calendar date.

    Raises:
        ValueError: If pandas cannot parse the value
    """
    if isinstance(value, date):
        return value if type(value) is date else pd.Timestamp(value).date()
    timestamp = pd.to_datetime(str(value).strip())
    if pd.isna(timestamp):
        raise ValueError(f"Cannot convert {value!r} to date")
    return timestamp.date()


class CleaningAgent:
    """
    Turns RawRecords into Reviews.

    1. Drops every record with a null or empty field (user_gender excepted)
    2. Nests user_id, user_age, user_country, user_gender under `user`
    3. Coerces ids, counts, rating, date and verified_purchase
    4. Drops records whose coercion fails
    """

    def __init__(
        self,
        required_columns=settings.EXPECTED_COLUMNS,
        nullable_column: str = settings.NULLABLE_COLUMN
    ):
        self.required_columns = tuple(required_columns)
        self.nullable_column = nullable_column

    def clean(self, records: Iterable[RawRecord]) -> List[Review]:
        """
        Clean raw records.

        Args:
            records: Raw records from the Ingestion Agent

        Returns:
            Reviews in input order
        """
        cleaned = []
        incomplete = 0
        invalid = 0

        for record in records:
            if self.contains_null(record):
                incomplete += 1
                continue

            review = self._clean_record(record)
            if review is None:
                invalid += 1
                continue

            cleaned.append(review)

        logger.info(
            f"Cleaned {len(cleaned)} reviews "
            f"({incomplete} incomplete, {invalid} invalid dropped)"
        )
        return cleaned

    def contains_null(self, record: RawRecord) -> bool:
        """True if any field other than the nullable one is missing."""
        for key in self.required_columns:
            if key != self.nullable_column and key not in record:
                return True

        for key, value in record.items():
            if key != self.nullable_column and _is_missing(value):
                return True
        return False

    def _clean_record(self, record: RawRecord) -> Optional[Review]:
        """Build a Review, or None if a field cannot be coerced."""
        try:
            user = User(
                user_id=to_int(record["user_id"]),
                user_age=to_int(record["user_age"]),
                user_country=str(record["user_country"]),
                user_gender=self._clean_gender(record.get("user_gender"))
            )
            return Review(
                review_id=to_int(record["review_id"]),
                app_name=str(record["app_name"]),
                review_language=str(record["review_language"]),
                device_type=str(record["device_type"]),
                rating=to_float(record["rating"]),
                num_helpful_votes=to_int(record["num_helpful_votes"]),
                review_date=to_date(record["review_date"]),
                verified_purchase=self._is_verified(record["verified_purchase"]),
                user=user
            )
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug(f"Dropping review {record.get('review_id')!r}: {e}")
            return None

    @staticmethod
    def _is_verified(value: Any) -> bool:
        # Exact string match only; an inferred boolean True does not count
        return isinstance(value, str) and value == settings.VERIFIED_PURCHASE_TRUE

    @staticmethod
    def _clean_gender(value: Any) -> Optional[str]:
        if _is_missing(value):
            return None
        return str(value)


def clean_data(records: Iterable[RawRecord]) -> List[Review]:
    """Clean raw records with the default settings."""
    return CleaningAgent().clean(records)
