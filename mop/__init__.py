"""mop: clean CSV column names."""

__version__ = "0.1.0"

from .normalize import clean_headers, clean_name, to_ascii
from .reconcile import extend_headers, max_width, pad_records, reconcile

__all__ = [
    "__version__",
    "clean_headers", "clean_name", "to_ascii",
    "extend_headers", "max_width", "pad_records", "reconcile",
]
