"""Entry point for the bond trading pipeline.

Usage:
    bond-pipeline --config config/pipeline.yaml
    bond-pipeline --data-dir data --output-dir data/out
"""

from __future__ import annotations

import argparse
import logging
import sys

from bond_pipeline.core.config import PipelineConfig, load_config
from bond_pipeline.core.pipeline import TradingPipeline


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to write logs to
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Bond Trading Pipeline",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--data-dir",
        "-d",
        type=str,
        help="Directory holding the input files (overrides config)",
    )

    parser.add_argument(
        "--output-dir",
        "-o",
        type=str,
        help="Directory for history files (overrides config)",
    )

    parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not write history files",
    )

    parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Log file path",
    )

    parser.add_argument(
        "--metrics-file",
        type=str,
        help="Write Prometheus metrics to this file after the run",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load config and assemble the pipeline without replaying",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> PipelineConfig:
    """Build configuration from file and command line args.

    Args:
        args: Parsed command line arguments

    Returns:
        Merged configuration
    """
    config = load_config(args.config)

    if args.data_dir:
        config.inputs.data_dir = args.data_dir

    if args.output_dir:
        config.history.output_dir = args.output_dir

    if args.no_history:
        config.history.enabled = False

    if args.log_level:
        config.log_level = args.log_level

    if args.log_file:
        config.log_file = args.log_file

    if args.metrics_file:
        config.metrics_file = args.metrics_file

    config.validate_semantics()
    return config


def run(config: PipelineConfig, dry_run: bool = False) -> int:
    """Assemble the pipeline and replay the input files.

    Args:
        config: Pipeline configuration
        dry_run: Stop after assembly

    Returns:
        Exit code
    """
    logger = logging.getLogger(__name__)

    try:
        pipeline = TradingPipeline(config)

        if dry_run:
            pipeline.close()
            logger.info("Dry run - configuration valid, pipeline assembled")
            return 0

        results = pipeline.run()
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    for result in results:
        logger.info(
            f"{result.source}: {result.processed} processed, {result.failed} skipped"
        )

    for record in pipeline.sector_risk():
        logger.info(
            f"Sector {record.product_id}: pv01={record.pv01} quantity={record.quantity}"
        )

    if config.metrics_file:
        pipeline.metrics.write(config.metrics_file)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Build configuration
    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    # Set up logging
    setup_logging(config.log_level, config.log_file)

    logger = logging.getLogger(__name__)
    logger.info("Bond pipeline starting")
    logger.info(f"Inputs: {config.inputs.data_dir}")
    if config.history.enabled:
        logger.info(f"History: {config.history.output_dir}")

    return run(config, dry_run=args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
