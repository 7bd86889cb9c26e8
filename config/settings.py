"""
Configuration settings for ReviewStats.

Centralized configuration for the ingestion, cleaning and aggregation stages.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = Path(os.getenv("REVIEW_STATS_DATA_ROOT", PROJECT_ROOT / "data"))
OUTPUT_ROOT = Path(os.getenv("REVIEW_STATS_OUTPUT_ROOT", PROJECT_ROOT / "output"))
DEFAULT_INPUT = DATA_ROOT / "multilingual_mobile_app_reviews_2025.csv"

# Input schema
EXPECTED_COLUMNS = (
    "review_id",
    "app_name",
    "review_language",
    "device_type",
    "rating",
    "num_helpful_votes",
    "review_date",
    "verified_purchase",
    "user_id",
    "user_age",
    "user_country",
    "user_gender",
)
NULLABLE_COLUMN = "user_gender"  # The only field allowed to be empty
USER_COLUMNS = ("user_id", "user_age", "user_country", "user_gender")

# CSV parsing
CSV_ENCODING = "utf-8"
# Read as text so pandas does not turn "True"/"False" into booleans
# or "2024-06-01" into anything but a string.
STRING_COLUMNS = ("verified_purchase", "review_date")
VERIFIED_PURCHASE_TRUE = "True"

# Sentiment thresholds
POSITIVE_THRESHOLD = 4.0  # rating > 4.0 is positive
NEGATIVE_THRESHOLD = 2.0  # rating < 2.0 is negative

# Validation ranges
MIN_RATING = 0.0
MAX_RATING = 5.0

# Report output
APP_SENTIMENT_FILE = "app_sentiment.csv"
LANG_SENTIMENT_FILE = "lang_sentiment.csv"
SUMMARY_FILE = "summary.json"

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "review_stats.log"
