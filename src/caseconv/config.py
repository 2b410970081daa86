"""Dataclass and loader for case conversion settings."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from caseconv.conversion import MAX_EXPANSION, CaseConversion
from caseconv.tables.builder import DUPLICATE_POLICIES


@dataclass
class CaseConvertConfig:
    conversion: CaseConversion = CaseConversion.FOLD
    on_duplicate: str = "error"
    max_expansion: int = MAX_EXPANSION
    verbose: bool = False

    def __post_init__(self) -> None:
        self.conversion = CaseConversion.parse(self.conversion)
        if self.on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(
                f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {self.on_duplicate!r}"
            )
        if not isinstance(self.max_expansion, int) or self.max_expansion < MAX_EXPANSION:
            raise ValueError(
                f"max_expansion must be an integer of at least {MAX_EXPANSION}, got {self.max_expansion!r}"
            )

    @classmethod
    def from_dict(cls, data: dict | None) -> CaseConvertConfig:
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: Path) -> CaseConvertConfig:
    data = yaml.safe_load(Path(path).read_text())
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}")
    return CaseConvertConfig.from_dict(data)
