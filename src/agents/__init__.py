"""
Agent implementations for ReviewStats.

Contains the pipeline stages that turn a review CSV into statistics:
- Ingestion Agent (parse_data)
- Cleaning Agent (clean_data)
- Sentiment Labeler (label_sentiment)
- Aggregators (sentiment_analysis_app, sentiment_analysis_lang, summary_statistics)
"""

from src.agents.ingestion import parse_data
from src.agents.cleaning import clean_data
from src.agents.sentiment import label_sentiment
from src.agents.aggregation import (
    sentiment_analysis_app,
    sentiment_analysis_lang,
    summary_statistics,
)

__all__ = [
    "parse_data",
    "clean_data",
    "label_sentiment",
    "sentiment_analysis_app",
    "sentiment_analysis_lang",
    "summary_statistics",
]
