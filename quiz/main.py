"""Command Line Entry Point.

A thin wrapper that loads configuration, runs one query and prints the
formatted result.

Usage:
    python -m quiz.main evens 10
    python -m quiz.main squares 50
    python -m quiz.main families data/families.yaml
    python -m quiz.main letters "Hello World"
    python -m quiz.main --config config/config.yaml letters "abc"
"""

import argparse
import logging
import os
import sys

import yaml

from quiz.core.config import QuizConfig, validate_config
from quiz.core.errors import QuizError
from quiz.core.family import get_family_statistic
from quiz.core.formatter import (
    format_family_report,
    format_letter_statistic,
    format_numbers,
)
from quiz.core.letters import get_letter_statistic
from quiz.core.numbers import get_even_numbers, get_squares
from quiz.shell.config_loader import load_config, load_config_from_env
from quiz.shell.records_loader import load_families


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config(config_path: str | None) -> QuizConfig:
    """Load configuration from file or environment."""
    if config_path:
        return load_config(config_path)
    return load_config_from_env()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run queries over numbers, family records and text",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML config file (default: environment variables)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    evens = subparsers.add_parser("evens", help="Even numbers below LIMIT")
    evens.add_argument("limit", type=int, help="Exclusive upper limit")

    squares = subparsers.add_parser(
        "squares", help="Squares divisible by 7 below LIMIT, descending",
    )
    squares.add_argument("limit", type=int, help="Exclusive upper limit")

    families = subparsers.add_parser("families", help="Statistics per family")
    families.add_argument("path", type=str, help="YAML or JSON records file")

    letters = subparsers.add_parser("letters", help="Letter counts in TEXT")
    letters.add_argument("text", type=str, help="Text to analyze")

    return parser


def run_query(args: argparse.Namespace, config: QuizConfig) -> str:
    """Run the selected query and return its formatted output.

    Raises:
        QuizError: If the query rejects its input
    """
    if args.command == "evens":
        return format_numbers(get_even_numbers(args.limit))

    if args.command == "squares":
        return format_numbers(get_squares(args.limit, int_max=config.int_max))

    if args.command == "families":
        summaries = get_family_statistic(load_families(args.path))
        return format_family_report(summaries)

    stats = get_letter_statistic(
        args.text,
        min_code=config.letter_min_code,
        max_code=config.letter_max_code,
    )
    return format_letter_statistic(stats)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _get_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Could not load configuration: %s", e)
        return 1

    logging.getLogger().setLevel(
        getattr(logging, config.log_level.upper(), logging.INFO)
    )

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("Config %s: %s", error.field, error.message)
        return 1

    logger.debug("Running %s query", args.command)

    try:
        output = run_query(args, config)
    except QuizError as e:
        logger.error("Query %s failed: %s", args.command, e)
        return 2
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Could not load input for %s: %s", args.command, e)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
