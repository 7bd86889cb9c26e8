"""
Sentiment Tally and Summary Statistics Aggregators.

Counts sentiment per app and per language, and answers the
most-reviewed-app questions.
"""

import logging
from collections import Counter
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from src.agents.sentiment import label_sentiment
from src.models.review import Review
from src.models.statistics import (
    APP_DIMENSION,
    LANG_DIMENSION,
    SentimentTally,
    SummaryResult,
)

logger = logging.getLogger(__name__)


def _leader(counts: Counter) -> Tuple[str, int]:
    """
    Key with the highest count.

    Ties go to the key counted first: a later key must be strictly
    greater to take the lead.
    """
    best_key, best_count = "", 0
    for key, count in counts.items():
        if count > best_count:
            best_key, best_count = key, count
    return best_key, best_count


class SentimentTallyAggregator:
    """
    Groups reviews by one field and tallies sentiment labels.
    Output order is the order in which keys are first seen.
    """

    KEY_FIELDS: Dict[str, Callable[[Review], str]] = {
        APP_DIMENSION: lambda review: review.app_name,
        LANG_DIMENSION: lambda review: review.review_language,
    }

    def __init__(self, dimension: str):
        """
        Initialize aggregator.

        Args:
            dimension: "app_name" to group by app, "lang_name" to group by review language
        """
        if dimension not in self.KEY_FIELDS:
            raise ValueError(
                f"Invalid dimension: {dimension}. Must be one of {list(self.KEY_FIELDS)}"
            )
        self.dimension = dimension
        self._key_of = self.KEY_FIELDS[dimension]

    def aggregate(self, reviews: Iterable[Review]) -> List[SentimentTally]:
        """
        Tally sentiment per key.

        Args:
            reviews: Clean reviews

        Returns:
            One SentimentTally per distinct key, in first-seen order
        """
        tallies: Dict[str, SentimentTally] = {}

        for review in reviews:
            key = self._key_of(review)
            tally = tallies.get(key)
            if tally is None:
                tally = SentimentTally(key=key, dimension=self.dimension)
                tallies[key] = tally
            tally.increment(label_sentiment(review.rating))

        logger.info(f"Tallied sentiment for {len(tallies)} distinct {self.dimension} values")
        return list(tallies.values())


class SummaryStatisticsAggregator:
    """
    Finds the most reviewed app, its most used device and its average rating.
    """

    def aggregate(self, reviews: Sequence[Review]) -> SummaryResult:
        """
        Compute summary statistics.

        Args:
            reviews: Clean reviews

        Returns:
            SummaryResult; for empty input every count is 0,
            names are "" and avg_rating is 0.0
        """
        app_counts = Counter(review.app_name for review in reviews)
        most_reviewed_app, most_reviews = _leader(app_counts)

        if most_reviews == 0:
            logger.warning("No reviews to summarize, returning empty summary")
            return SummaryResult(
                most_reviewed_app="",
                most_reviews=0,
                most_used_device="",
                most_devices=0,
                avg_rating=0.0
            )

        app_reviews = [r for r in reviews if r.app_name == most_reviewed_app]
        device_counts = Counter(review.device_type for review in app_reviews)
        most_used_device, most_devices = _leader(device_counts)

        rating_sum = sum(review.rating for review in app_reviews)
        avg_rating = rating_sum / len(app_reviews)

        logger.info(
            f"Most reviewed app: {most_reviewed_app} ({most_reviews} reviews, "
            f"top device {most_used_device}, avg rating {avg_rating:.2f})"
        )

        return SummaryResult(
            most_reviewed_app=most_reviewed_app,
            most_reviews=most_reviews,
            most_used_device=most_used_device,
            most_devices=most_devices,
            avg_rating=avg_rating
        )


def sentiment_analysis_app(reviews: Iterable[Review]) -> List[SentimentTally]:
    """Sentiment tallies per app name."""
    return SentimentTallyAggregator(APP_DIMENSION).aggregate(reviews)


def sentiment_analysis_lang(reviews: Iterable[Review]) -> List[SentimentTally]:
    """Sentiment tallies per review language."""
    return SentimentTallyAggregator(LANG_DIMENSION).aggregate(reviews)


def summary_statistics(reviews: Sequence[Review]) -> SummaryResult:
    """Summary statistics for the most reviewed app."""
    return SummaryStatisticsAggregator().aggregate(list(reviews))
