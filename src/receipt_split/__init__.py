"""Split a shared receipt into per-item costs and per-person shares."""

__version__ = "1.0.0"
