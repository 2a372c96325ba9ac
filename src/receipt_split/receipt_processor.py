"""Read a receipt file, split it and write the breakdown next to it"""
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import ValidationError

from receipt_split.allocation import split_receipt
from receipt_split.class_models import Receipt, ReceiptBreakdown
from receipt_split.config import settings
from receipt_split.errors import ReceiptIOError, ReceiptParseError

PathLike = Union[str, Path]


def default_output_path(input_path: PathLike) -> Path:
    """Place the output beside the input: ``dinner.json`` -> ``dinner_output.json``."""
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}{settings.output_suffix}.json")


def load_receipt(input_path: PathLike) -> Receipt:
    """
    Parse a receipt JSON file.

    Raises:
        ReceiptIOError: the file cannot be read
        ReceiptParseError: the content is not valid receipt JSON
    """
    path = Path(input_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ReceiptIOError(f"Cannot read receipt {path}: {e}", path) from e
    except UnicodeDecodeError as e:
        raise ReceiptParseError(f"Invalid receipt {path}: not UTF-8 text ({e})") from e

    try:
        receipt = Receipt.model_validate_json(content)
    except ValidationError as e:
        raise ReceiptParseError(f"Invalid receipt {path}:\n{e}") from e

    logger.debug(f"Loaded receipt {path} with {len(receipt.items)} items and {len(receipt.extras)} extras")
    return receipt


def write_breakdown(breakdown: ReceiptBreakdown, output_path: PathLike) -> Path:
    """Write the breakdown as pretty-printed JSON with 2-decimal money strings."""
    path = Path(output_path)
    document = breakdown.model_dump_json(indent=2)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
            f.write("\n")
    except OSError as e:
        raise ReceiptIOError(f"Cannot write output {path}: {e}", path) from e
    return path


def process_receipt(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    tolerance: Optional[float] = None,
) -> Path:
    """
    Load a receipt, split it and write the result.

    Nothing is written unless the split succeeds and passes the consistency checks.

    Args:
        input_path: Receipt JSON file
        output_path: Destination, defaults to default_output_path(input_path)
        tolerance: Consistency tolerance, defaults to settings.consistency_tolerance

    Returns:
        The path that was written
    """
    if output_path is None:
        output_path = default_output_path(input_path)

    receipt = load_receipt(input_path)
    breakdown = split_receipt(receipt, tolerance=tolerance)
    path = write_breakdown(breakdown, output_path)

    logger.info(f"Wrote receipt breakdown to {path}")
    return path
