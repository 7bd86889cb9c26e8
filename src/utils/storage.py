"""
Storage utility.

File I/O helpers for exporting analysis reports.
"""

import json
import os
import logging
from typing import Dict, List, Optional

import pandas as pd

from src.models.statistics import APP_DIMENSION, LANG_DIMENSION, SentimentTally
import config.settings as settings

logger = logging.getLogger(__name__)


class ReportStorage:
    """
    Writes analysis reports to an output directory.

    Handles:
    - Per-app sentiment table (app_sentiment.csv)
    - Per-language sentiment table (lang_sentiment.csv)
    - Full report with summary (summary.json)
    """

    def __init__(self, output_root: str):
        """
        Initialize report storage.

        Args:
            output_root: Directory for report files (created if missing)
        """
        self.output_root = str(output_root)
        os.makedirs(self.output_root, exist_ok=True)

        logger.info(f"Initialized ReportStorage with output_root={self.output_root}")

    def save_tallies(
        self,
        tallies: List[SentimentTally],
        filename: str,
        dimension: str = APP_DIMENSION
    ) -> str:
        """
        Save sentiment tallies as CSV.

        Args:
            tallies: Tallies from one aggregation pass
            filename: File name inside the output directory
            dimension: Key column name, used for the header of an empty table

        Returns:
            Path of the written file
        """
        filepath = os.path.join(self.output_root, filename)
        columns = None
        if not tallies:
            columns = [dimension, "positive", "neutral", "negative"]

        try:
            df = pd.DataFrame([t.to_dict() for t in tallies], columns=columns)
            df.to_csv(filepath, index=False)
            logger.info(f"Saved {len(tallies)} tallies to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save tallies to {filepath}: {e}")
            raise
        return filepath

    def save_summary(self, report: Dict) -> str:
        """
        Save the report dict as JSON.

        Returns:
            Path of the written file
        """
        filepath = os.path.join(self.output_root, settings.SUMMARY_FILE)

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(report, f, indent=2, ensure_ascii=False)
            logger.info(f"Saved summary to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save summary to {filepath}: {e}")
            raise
        return filepath

    def load_summary(self) -> Optional[Dict]:
        """
        Load the saved report.

        Returns:
            Report dict, or None if no summary has been saved
        """
        filepath = os.path.join(self.output_root, settings.SUMMARY_FILE)

        if not os.path.exists(filepath):
            logger.debug(f"No summary found at {filepath}")
            return None

        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)

    def save_report(self, report) -> Dict[str, str]:
        """
        Save every part of an AnalysisReport.

        Returns:
            Mapping of artifact name to written path
        """
        return {
            "app_sentiment": self.save_tallies(
                report.app_sentiment, settings.APP_SENTIMENT_FILE, APP_DIMENSION
            ),
            "lang_sentiment": self.save_tallies(
                report.lang_sentiment, settings.LANG_SENTIMENT_FILE, LANG_DIMENSION
            ),
            "summary": self.save_summary(report.to_dict()),
        }
