"""JSON Schema describing a valid receipt input file"""
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger

from receipt_split.class_models import Receipt
from receipt_split.config import settings
from receipt_split.errors import ReceiptIOError

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def receipt_schema() -> Dict[str, Any]:
    """Return the JSON Schema for the Receipt input shape. Needs no receipt data."""
    schema = Receipt.model_json_schema(mode="validation")
    return {"$schema": JSON_SCHEMA_DIALECT, **schema}


def write_schema(output_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Write the receipt JSON Schema, pretty-printed.

    Args:
        output_path: Destination file, defaults to settings.schema_output_path

    Returns:
        The path that was written
    """
    path = Path(output_path) if output_path is not None else settings.schema_output_path
    document = json.dumps(receipt_schema(), indent=2)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
            f.write("\n")
    except OSError as e:
        raise ReceiptIOError(f"Cannot write schema to {path}: {e}", path) from e

    logger.info(f"Wrote receipt schema to {path}")
    return path
