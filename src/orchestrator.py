"""
Pipeline Orchestrator.

Runs the review analysis stages in order over one CSV file.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.agents.ingestion import CsvIngestionAgent
from src.agents.cleaning import CleaningAgent
from src.agents.aggregation import SentimentTallyAggregator, SummaryStatisticsAggregator
from src.agents.sentiment import label_reviews
from src.models.parse_result import ParseError
from src.models.statistics import (
    APP_DIMENSION,
    LANG_DIMENSION,
    SENTIMENT_LABELS,
    SentimentTally,
    SummaryResult,
)
from src.utils.storage import ReportStorage

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Everything one pipeline run produces."""
    source: str
    total_rows: int
    clean_rows: int
    summary: SummaryResult
    app_sentiment: List[SentimentTally] = field(default_factory=list)
    lang_sentiment: List[SentimentTally] = field(default_factory=list)
    parse_errors: List[ParseError] = field(default_factory=list)
    overall_sentiment: Dict[str, int] = field(default_factory=dict)  # label -> review count

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "source": self.source,
            "total_rows": self.total_rows,
            "clean_rows": self.clean_rows,
            "parse_errors": [e.to_dict() for e in self.parse_errors],
            "overall_sentiment": self.overall_sentiment,
            "app_sentiment": [t.to_dict() for t in self.app_sentiment],
            "lang_sentiment": [t.to_dict() for t in self.lang_sentiment],
            "summary": self.summary.to_dict()
        }


class AnalysisPipeline:
    """
    Orchestrates the analysis pipeline.

    Coordinates:
    1. Ingestion → 2. Cleaning → 3. Sentiment labelling
    → 4. Per-app and per-language sentiment → 5. Summary statistics

    Optionally saves the report through ReportStorage.
    """

    def __init__(self, storage: Optional[ReportStorage] = None):
        """
        Initialize pipeline.

        Args:
            storage: Where to save reports; None to keep results in memory only
        """
        self.storage = storage

        self.ingestion_agent = CsvIngestionAgent()
        self.cleaning_agent = CleaningAgent()
        self.app_aggregator = SentimentTallyAggregator(APP_DIMENSION)
        self.lang_aggregator = SentimentTallyAggregator(LANG_DIMENSION)
        self.summary_aggregator = SummaryStatisticsAggregator()

    def run(self, csv_path: str) -> AnalysisReport:
        """
        Run the complete pipeline on a CSV file.

        Args:
            csv_path: Path to the review CSV

        Returns:
            AnalysisReport with tallies and summary

        Raises:
            OSError: If the CSV cannot be read
        """
        logger.info(f"Starting analysis of {csv_path}")

        # STAGE 1: Ingestion
        parsed = self.ingestion_agent.parse(csv_path)

        # STAGE 2: Cleaning
        reviews = self.cleaning_agent.clean(parsed.records)
        if not reviews:
            logger.warning(f"No clean reviews in {csv_path}")

        # STAGE 3: Sentiment labelling
        label_counts = Counter(item.sentiment for item in label_reviews(reviews))
        overall_sentiment = {label: label_counts[label] for label in SENTIMENT_LABELS}

        # STAGE 4-5: Aggregation
        report = AnalysisReport(
            source=str(csv_path),
            total_rows=len(parsed.records),
            clean_rows=len(reviews),
            parse_errors=parsed.errors,
            overall_sentiment=overall_sentiment,
            app_sentiment=self.app_aggregator.aggregate(reviews),
            lang_sentiment=self.lang_aggregator.aggregate(reviews),
            summary=self.summary_aggregator.aggregate(reviews)
        )

        if self.storage is not None:
            self.storage.save_report(report)

        logger.info(
            f"Analysis complete: {report.total_rows} rows → {report.clean_rows} reviews, "
            f"{len(report.app_sentiment)} apps, {len(report.lang_sentiment)} languages"
        )
        return report
