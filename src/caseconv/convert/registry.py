"""Process wide registry building each conversion table on first use."""

from __future__ import annotations

import threading
import time

from caseconv.config import CaseConvertConfig
from caseconv.conversion import CaseConversion
from caseconv.tables import builder
from caseconv.tables.lookup import LookupTable

from .converter import CaseConverter


class _ConverterCell:
    __slots__ = ("lock", "converter")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.converter: CaseConverter | None = None


class ConversionRegistry:
    """Owns one converter per conversion kind, each built at most once.

    Requesting one kind never builds the others. Concurrent first use of a
    kind blocks on that kind's lock until the single build finishes.
    """

    def __init__(self, config: CaseConvertConfig | None = None) -> None:
        self.config = config or CaseConvertConfig()
        self._cells = {kind: _ConverterCell() for kind in CaseConversion}

    def is_built(self, conversion: CaseConversion | str) -> bool:
        return self._cells[CaseConversion.parse(conversion)].converter is not None

    def converter_for(self, conversion: CaseConversion | str) -> CaseConverter:
        kind = CaseConversion.parse(conversion)
        cell = self._cells[kind]
        converter = cell.converter
        if converter is None:
            with cell.lock:
                if cell.converter is None:
                    cell.converter = self._build(kind)
                converter = cell.converter
        return converter

    def table_for(self, conversion: CaseConversion | str) -> LookupTable:
        return self.converter_for(conversion).table

    def _build(self, kind: CaseConversion) -> CaseConverter:
        start = time.perf_counter()
        table = builder.build_table(kind, on_duplicate=self.config.on_duplicate)
        if self.config.verbose:
            elapsed = time.perf_counter() - start
            print(
                f"[caseconv] built {kind.value} table: {len(table):,} entries in {elapsed * 1000:.1f} ms",
                flush=True,
            )
        return CaseConverter(table, kind, max_expansion=self.config.max_expansion)


_DEFAULT_REGISTRY: ConversionRegistry | None = None
_DEFAULT_LOCK = threading.Lock()


def default_registry() -> ConversionRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = ConversionRegistry()
    return _DEFAULT_REGISTRY


def configure(config: CaseConvertConfig) -> ConversionRegistry:
    """Replace the default registry with one built from ``config``."""

    global _DEFAULT_REGISTRY
    registry = ConversionRegistry(config)
    with _DEFAULT_LOCK:
        _DEFAULT_REGISTRY = registry
    return registry


def converter_for(conversion: CaseConversion | str) -> CaseConverter:
    return default_registry().converter_for(conversion)


def case_convert(code_point: int, conversion: CaseConversion | str) -> bytes | None:
    return converter_for(conversion).convert_character(code_point)


def case_convert_into(
    mixed: bytes | bytearray | memoryview,
    converted: bytearray | memoryview,
    conversion: CaseConversion | str,
    *,
    length: int | None = None,
    capacity: int | None = None,
) -> int:
    return converter_for(conversion).convert_into(
        mixed, converted, length=length, capacity=capacity
    )


def case_convert_string(mixed: bytes | bytearray | memoryview, conversion: CaseConversion | str) -> bytes:
    return converter_for(conversion).convert_string(mixed)


def case_convert_text(text: str, conversion: CaseConversion | str) -> str:
    return converter_for(conversion).convert_text(text)
