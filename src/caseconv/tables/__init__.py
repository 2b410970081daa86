"""Case mapping data and the lookup tables built from it."""

from .builder import DuplicateEntryError, TableBuilder, build_table
from .lookup import MAX_CONVERSION_LENGTH, LookupTable

__all__ = [
    "DuplicateEntryError",
    "TableBuilder",
    "build_table",
    "LookupTable",
    "MAX_CONVERSION_LENGTH",
]
