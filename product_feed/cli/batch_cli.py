"""
Command-line interface for parsing product feed files.

Usage:
    python -m product_feed.cli.batch_cli parse --input <file_path> [<file_path> ...] [options]
    python -m product_feed.cli.batch_cli fields
"""

import argparse
import sys
from pathlib import Path

from product_feed.batch.pipeline import BatchPipeline
from product_feed.core.config import PipelineConfig, PipelineConfigLoader
from product_feed.core.deserializers import ErrorPolicy, LineRejectedError
from product_feed.core.models import PRODUCT_MODULE
from product_feed.observability.logger import get_logger, setup_logger


logger = get_logger(__name__)


def load_config(args) -> PipelineConfig:
    """
    Build the pipeline config from an optional YAML file and CLI overrides.

    Args:
        args: Command-line arguments
    """
    config = PipelineConfigLoader(args.config).load() if args.config else PipelineConfig()

    overrides = {}
    if args.fail_fast:
        overrides["on_error"] = ErrorPolicy.FAIL_FAST
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if args.log_format:
        overrides["log_format"] = args.log_format
    if args.encoding:
        overrides["encoding"] = args.encoding

    return config.model_copy(update=overrides) if overrides else config


def parse_command(args) -> int:
    """
    Parse each input file and print every record.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logger(level=config.log_level, format_type=config.log_format)
    pipeline = BatchPipeline(config=config)

    total_parsed = 0
    total_rejected = 0
    for input_file in args.input:
        input_path = Path(input_file)
        if not input_path.exists():
            logger.error(f"Input file not found: {input_file}")
            return 1

        try:
            result = pipeline.process_file(input_path)
        except LineRejectedError as e:
            logger.error(f"Stopping at first malformed line: {e}")
            return 1

        if not args.summary_only:
            for record in result.records:
                print(PRODUCT_MODULE.describe(record))

        total_parsed += result.parsed_count
        total_rejected += result.rejected_count

    logger.info(f"Total records parsed: {total_parsed}")
    logger.info(f"Total lines rejected: {total_rejected}")
    return 0


def fields_command(args) -> int:
    """
    List the fields of the product record.

    Args:
        args: Command-line arguments
    """
    for field in PRODUCT_MODULE.all_fields:
        kind = "derived" if field.is_derived else "raw"
        print(f"{field.name:<30}{kind:<10}{field.value_type.__name__}")
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Fixed-width product feed parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print every product in a file, skipping malformed lines
  python -m product_feed.cli.batch_cli parse --input data/products.txt

  # Stop at the first malformed line
  python -m product_feed.cli.batch_cli parse --input data/products.txt --fail-fast

  # Use settings from a YAML file, only report counts
  python -m product_feed.cli.batch_cli parse --input data/products.txt \\
      --config config/pipeline.yaml --summary-only

  # List the raw and derived fields of a product record
  python -m product_feed.cli.batch_cli fields
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse product feed files")
    parse_parser.add_argument(
        "--input",
        required=True,
        nargs="+",
        help="Path(s) to input file(s)"
    )
    parse_parser.add_argument(
        "--config",
        help="Path to pipeline configuration YAML file"
    )
    parse_parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first malformed line instead of skipping it"
    )
    parse_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Log level (default: INFO, or LOG_LEVEL env var)"
    )
    parse_parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Log output format (default: json, or LOG_FORMAT env var)"
    )
    parse_parser.add_argument(
        "--encoding",
        help="Input file encoding (default: utf-8)"
    )
    parse_parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Only log counts, do not print records"
    )

    # Fields command
    subparsers.add_parser("fields", help="List product record fields")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "parse":
        return parse_command(args)
    return fields_command(args)


if __name__ == "__main__":
    sys.exit(main())
