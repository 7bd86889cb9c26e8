"""
Review data model.

Represents a cleaned app-store review produced by the Cleaning Agent.
Raw CSV rows are plain dicts (RawRecord) and never leave the ingestion
and cleaning stages.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

import config.settings as settings

# One parsed CSV row: column name -> raw value (None for empty cells)
RawRecord = Dict[str, Any]


@dataclass(frozen=True)
class User:
    """Reviewer attributes nested under a Review."""
    user_id: int
    user_age: int
    user_country: str
    user_gender: Optional[str] = None  # The only optional field in a review

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "user_age": self.user_age,
            "user_country": self.user_country,
            "user_gender": self.user_gender
        }


@dataclass(frozen=True)
class Review:
    """
    Clean review record.
    Immutable once built; the sole input of every aggregation.
    """
    review_id: int
    app_name: str
    review_language: str  # e.g. ISO language code
    device_type: str
    rating: float  # 0.0-5.0 star rating
    num_helpful_votes: int
    review_date: date
    verified_purchase: bool
    user: User

    def __post_init__(self):
        # Validate rating
        if not (settings.MIN_RATING <= self.rating <= settings.MAX_RATING):
            raise ValueError(
                f"Invalid rating: {self.rating}. "
                f"Must be {settings.MIN_RATING}-{settings.MAX_RATING}"
            )

        # Validate helpful votes
        if self.num_helpful_votes < 0:
            raise ValueError(
                f"Invalid num_helpful_votes: {self.num_helpful_votes}. Must be >= 0"
            )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict with the nested user object."""
        return {
            "review_id": self.review_id,
            "app_name": self.app_name,
            "review_language": self.review_language,
            "device_type": self.device_type,
            "rating": self.rating,
            "num_helpful_votes": self.num_helpful_votes,
            "review_date": self.review_date.isoformat(),
            "verified_purchase": self.verified_purchase,
            "user": self.user.to_dict()
        }
