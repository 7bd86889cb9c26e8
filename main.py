"""
ReviewStats - App Review Sentiment Statistics

CLI entry point for running the analysis pipeline.
"""

import argparse
import logging
import sys

from src.orchestrator import AnalysisPipeline, AnalysisReport
from src.utils.storage import ReportStorage
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def print_report(report: AnalysisReport):
    """Print tallies and summary as plain tables."""
    print(f"{'App':<30}{'Positive':>10}{'Neutral':>10}{'Negative':>10}")
    for tally in report.app_sentiment:
        print(f"{tally.key:<30}{tally.positive:>10}{tally.neutral:>10}{tally.negative:>10}")
    print()

    print(f"{'Language':<30}{'Positive':>10}{'Neutral':>10}{'Negative':>10}")
    for tally in report.lang_sentiment:
        print(f"{tally.key:<30}{tally.positive:>10}{tally.neutral:>10}{tally.negative:>10}")
    print()

    summary = report.summary
    print(f"Most reviewed app: {summary.most_reviewed_app} ({summary.most_reviews} reviews)")
    print(f"Most used device:  {summary.most_used_device} ({summary.most_devices} reviews)")
    print(f"Average rating:    {summary.avg_rating:.2f} / 5.0")

    overall = report.overall_sentiment
    print(
        f"Overall sentiment: {overall.get('positive', 0)} positive, "
        f"{overall.get('neutral', 0)} neutral, {overall.get('negative', 0)} negative"
    )


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="ReviewStats - sentiment and usage statistics for app reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze the default dataset and save reports to ./output
  python main.py

  # Analyze another export without writing report files
  python main.py --input reviews.csv --no-save
        """
    )

    parser.add_argument(
        "--input",
        default=str(settings.DEFAULT_INPUT),
        help=f"Review CSV file (default: {settings.DEFAULT_INPUT})"
    )

    parser.add_argument(
        "--output-dir",
        default=str(settings.OUTPUT_ROOT),
        help=f"Report directory (default: {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Print results only, do not write report files"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    # Print banner
    print("=" * 60)
    print("ReviewStats - App Review Sentiment Statistics")
    print("=" * 60)
    print(f"Input: {args.input}")
    print(f"Output: {'(not saved)' if args.no_save else args.output_dir}")
    print("=" * 60)
    print()

    try:
        storage = None if args.no_save else ReportStorage(args.output_dir)
        pipeline = AnalysisPipeline(storage=storage)

        report = pipeline.run(args.input)

        print_report(report)
        print()
        print("=" * 60)
        print(f"✅ Analyzed {report.clean_rows} of {report.total_rows} rows")
        if report.parse_errors:
            print(f"⚠️  {len(report.parse_errors)} parse diagnostics reported")
        print("=" * 60)

        logger.info("ReviewStats completed successfully")
        return 0

    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        print("\n⚠️  Analysis interrupted")
        return 1

    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        print(f"\n❌ Analysis failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        return 1


if __name__ == "__main__":
    sys.exit(main())
