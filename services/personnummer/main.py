"""
Main CLI module for personnummer validation.

Validates or normalizes a single Swedish personal identity number.
Example: python -m services.personnummer normalize 811218-9876 --reference-date 2018-01-04
"""

import argparse
import sys
from datetime import date, datetime
from typing import List, Optional

from . import __version__
from .errors import InvalidPersonnummerError
from .log_config import configure_logging, get_logger
from .settings import settings
from .validator import normalize, validate


logger = get_logger(__name__)


def parse_date(date_string: str) -> date:
    """
    Parse date string in YYYY-MM-DD format.

    Args:
        date_string: Date in YYYY-MM-DD format

    Returns:
        Parsed date object

    Raises:
        ValueError: If date format is invalid
    """
    try:
        return datetime.strptime(date_string, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValueError(f"Invalid date format '{date_string}'. Expected YYYY-MM-DD") from e


def _reference_date_arg(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def resolve_reference_date(override: Optional[date] = None) -> date:
    """
    Pick the reference date for normalization.

    Order: explicit override, PERSONNUMMER_REFERENCE_DATE setting, today.
    """
    if override is not None:
        return override

    configured = settings().reference_date
    if configured is not None:
        return configured

    return date.today()


def run_validate(pnr: str) -> str:
    """Validate ``pnr`` and return it unchanged."""
    result = validate(pnr)
    logger.info("Personnummer validated")
    return result


def run_normalize(pnr: str, reference_date: Optional[date] = None) -> str:
    """Normalize ``pnr`` against the resolved reference date."""
    ref = resolve_reference_date(reference_date)
    result = normalize(ref, pnr)
    logger.info("Personnummer normalized", reference_date=ref.isoformat())
    return result


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="personnummer",
        description="Validate and normalize Swedish personal identity numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Accepted layouts:
  YYMMDDNNNN  YYMMDD-NNNN  YYMMDD+NNNN
  YYYYMMDDNNNN  YYYYMMDD-NNNN  YYYYMMDD+NNNN

Examples:
  python -m services.personnummer validate 811218-9876
  python -m services.personnummer normalize 811218+9876 --reference-date 2018-01-04
  python -m services.personnummer --log-level DEBUG validate 8112189876
        """
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration"
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Override log format from configuration"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"personnummer {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check structure and checksum, echo the input on success"
    )
    validate_parser.add_argument("pnr", help="Personnummer to validate")

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the canonical 12-digit form YYYYMMDDNNNN"
    )
    normalize_parser.add_argument("pnr", help="Personnummer to normalize")
    normalize_parser.add_argument(
        "--reference-date",
        type=_reference_date_arg,
        help="Resolve the century relative to this date (YYYY-MM-DD, default: today)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for valid input, 1 for invalid input)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_format)

    logger.debug("Command starting", command=args.command, version=__version__)

    try:
        if args.command == "validate":
            result = run_validate(args.pnr)
        else:
            result = run_normalize(args.pnr, args.reference_date)
    except InvalidPersonnummerError as e:
        logger.warning("Invalid personnummer", command=args.command)
        print(str(e), file=sys.stderr)
        return 1

    print(result)
    return 0


def cli_main():
    """Synchronous entry point for setuptools console scripts."""
    return main()


if __name__ == "__main__":
    sys.exit(main())
