"""Errors raised while loading, splitting or writing a receipt.

Library code raises these; only the command line entry point turns them into
an exit status.
"""
from pathlib import Path
from typing import Optional


class ReceiptSplitError(Exception):
    """Base class for every failure of a single split run."""


class ReceiptIOError(ReceiptSplitError):
    """Input file missing or unreadable, or output path unwritable."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class ReceiptParseError(ReceiptSplitError):
    """Input is not valid JSON or does not match the receipt shape."""


class ConsistencyError(ReceiptSplitError):
    """Computed amounts do not add up to the receipt's declared total."""

    def __init__(self, label: str, computed: float, expected: float, tolerance: float):
        super().__init__(
            f"Sum of {label} is {computed:.4f} but the receipt total is "
            f"{expected:.4f} (tolerance {tolerance})"
        )
        self.label = label
        self.computed = computed
        self.expected = expected
        self.tolerance = tolerance


class DegenerateReceiptError(ReceiptSplitError):
    """Receipt cannot be split without dividing by zero."""

    def __init__(self, message: str, item: Optional[str] = None):
        super().__init__(message)
        self.item = item
