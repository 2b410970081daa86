"""Table driven Unicode case folding and case conversion of UTF-8 text."""

from .config import CaseConvertConfig, load_config
from .conversion import CaseConversion
from .convert import (
    MAX_EXPANSION,
    CapacityExceededError,
    CaseConverter,
    ConversionRegistry,
    case_convert,
    case_convert_into,
    case_convert_string,
    case_convert_text,
    configure,
    convert_files,
    converter_for,
    default_registry,
)
from .tables import DuplicateEntryError, LookupTable

__all__ = [
    "CaseConversion",
    "CaseConvertConfig",
    "load_config",
    "MAX_EXPANSION",
    "CapacityExceededError",
    "CaseConverter",
    "ConversionRegistry",
    "DuplicateEntryError",
    "LookupTable",
    "case_convert",
    "case_convert_into",
    "case_convert_string",
    "case_convert_text",
    "configure",
    "convert_files",
    "converter_for",
    "default_registry",
]
