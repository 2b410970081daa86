"""The three independent case conversion kinds."""

from __future__ import annotations

from enum import Enum


class CaseConversion(str, Enum):
    FOLD = "fold"
    UPPER = "upper"
    LOWER = "lower"

    @classmethod
    def parse(cls, value: str | CaseConversion) -> CaseConversion:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown case conversion {value!r}; expected one of: {choices}") from None


# Largest growth of any conversion in bytes: U+0390 is 2 bytes and folds to 6.
MAX_EXPANSION = 3
