"""
Sentiment Labeler.

Maps a star rating to a positive / neutral / negative label.
"""

from dataclasses import dataclass
from typing import Iterable, List

from src.models.review import Review
from src.models.statistics import POSITIVE, NEUTRAL, NEGATIVE
import config.settings as settings


def label_sentiment(rating: float) -> str:
    """
    Label a rating.

    Args:
        rating: Numeric star rating

    Returns:
        "positive" if rating > 4.0, "negative" if rating < 2.0,
        otherwise "neutral" (2.0 <= rating <= 4.0)
    """
    if rating > settings.POSITIVE_THRESHOLD:
        return POSITIVE
    if rating < settings.NEGATIVE_THRESHOLD:
        return NEGATIVE
    return NEUTRAL


@dataclass(frozen=True)
class LabeledReview:
    """A review paired with its sentiment label."""
    review: Review
    sentiment: str


def label_reviews(reviews: Iterable[Review]) -> List[LabeledReview]:
    """Label every review, keeping input order."""
    return [LabeledReview(review, label_sentiment(review.rating)) for review in reviews]
