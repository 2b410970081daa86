"""Case conversion of UTF-8 text."""

from .converter import MAX_EXPANSION, CapacityExceededError, CaseConverter
from .files import convert_files
from .registry import (
    ConversionRegistry,
    case_convert,
    case_convert_into,
    case_convert_string,
    case_convert_text,
    configure,
    converter_for,
    default_registry,
)

__all__ = [
    "MAX_EXPANSION",
    "CapacityExceededError",
    "CaseConverter",
    "ConversionRegistry",
    "case_convert",
    "case_convert_into",
    "case_convert_string",
    "case_convert_text",
    "configure",
    "convert_files",
    "converter_for",
    "default_registry",
]
