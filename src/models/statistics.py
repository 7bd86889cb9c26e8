"""
Aggregate statistics data models.

SentimentTally counts labelled reviews for one app or one language.
SummaryResult answers the most-reviewed-app questions.
"""

from dataclasses import dataclass

POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"
SENTIMENT_LABELS = (POSITIVE, NEUTRAL, NEGATIVE)

APP_DIMENSION = "app_name"
LANG_DIMENSION = "lang_name"


@dataclass
class SentimentTally:
    """
    Running sentiment counts for one grouping key.
    Counts only ever go up while reviews are scanned.
    """
    key: str  # App name or language code
    positive: int = 0
    neutral: int = 0
    negative: int = 0
    dimension: str = APP_DIMENSION  # Output name of the key field

    def __post_init__(self):
        if self.dimension not in (APP_DIMENSION, LANG_DIMENSION):
            raise ValueError(
                f"Invalid dimension: {self.dimension}. "
                f"Must be '{APP_DIMENSION}' or '{LANG_DIMENSION}'"
            )

    def increment(self, label: str) -> None:
        """Add one review with the given sentiment label."""
        if label not in SENTIMENT_LABELS:
            raise ValueError(f"Invalid sentiment label: {label}")
        setattr(self, label, getattr(self, label) + 1)

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def to_dict(self) -> dict:
        return {
            self.dimension: self.key,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative
        }


@dataclass
class SummaryResult:
    """Summary statistics for the most reviewed app."""
    most_reviewed_app: str
    most_reviews: int
    most_used_device: str
    most_devices: int
    avg_rating: float

    def to_dict(self) -> dict:
        """Convert to the camelCase report shape."""
        return {
            "mostReviewedApp": self.most_reviewed_app,
            "mostReviews": self.most_reviews,
            "mostUsedDevice": self.most_used_device,
            "mostDevices": self.most_devices,
            "avgRating": self.avg_rating
        }
