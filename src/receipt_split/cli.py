"""Command line interface: ``compute`` a receipt breakdown or write the input ``schema``."""
import argparse
import sys
from typing import List, Optional

from loguru import logger

from receipt_split.config import settings
from receipt_split.errors import ReceiptSplitError
from receipt_split.receipt_processor import process_receipt
from receipt_split.schema import write_schema


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Split a shared receipt into item costs and per-person shares",
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {settings.app_version}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every computation step")

    subparsers = parser.add_subparsers(dest="command", required=True)

    compute = subparsers.add_parser("compute", help="Compute item costs and person shares")
    compute.add_argument("--input-path", required=True,
                         help="Receipt JSON file")
    compute.add_argument("--output-path", default=None,
                         help=f"Output JSON file (default: <input>{settings.output_suffix}.json)")

    schema = subparsers.add_parser("schema", help="Write the JSON Schema of a receipt")
    schema.add_argument("--output-path", default=None,
                        help=f"Schema file (default: {settings.schema_output_path})")

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Route loguru to stderr and, when configured, a rotating log file."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else settings.log_level,
               format="<level>{level: <8}</level> | {message}")
    if settings.log_file:
        logger.add(settings.log_file, rotation="1 MB", level="DEBUG")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "compute":
            process_receipt(args.input_path, args.output_path)
        else:
            write_schema(args.output_path)
    except ReceiptSplitError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
