"""Expand the raw case mapping data into a lookup table for one conversion."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from caseconv import utf8
from caseconv.conversion import CaseConversion

from . import data
from .lookup import MAX_CONVERSION_LENGTH, LookupTable

DuplicatePolicy = Literal["error", "shadow"]
DUPLICATE_POLICIES: tuple[str, ...] = ("error", "shadow")

Range = tuple[int, int, int, int]
Pair = tuple[int, int]
ComplexRecord = tuple[bytes, bytes, bytes, bytes]

# Field of a complex record holding the conversion for each kind
_COMPLEX_FIELD = {
    CaseConversion.FOLD: 1,
    CaseConversion.UPPER: 2,
    CaseConversion.LOWER: 3,
}


class DuplicateEntryError(ValueError):
    def __init__(self, conversion: CaseConversion, code_point: int) -> None:
        super().__init__(
            f"Duplicate {conversion.value} conversion for U+{code_point:04X}"
        )
        self.conversion = conversion
        self.code_point = code_point


class TableBuilder:
    """Accumulates conversions for one kind, then freezes them with :meth:`finish`."""

    def __init__(
        self,
        conversion: CaseConversion,
        *,
        on_duplicate: DuplicatePolicy = "error",
    ) -> None:
        if on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {on_duplicate!r}")
        self.conversion = CaseConversion.parse(conversion)
        self.on_duplicate = on_duplicate
        self._pending: list[tuple[int, bytes]] | None = []

    def __len__(self) -> int:
        return len(self._pending or ())

    def add(self, code_point: int, conversion: bytes) -> None:
        if self._pending is None:
            raise RuntimeError("TableBuilder already finished")
        if len(conversion) > MAX_CONVERSION_LENGTH:
            raise ValueError(
                f"Conversion for U+{code_point:04X} is {len(conversion)} bytes; "
                f"limit is {MAX_CONVERSION_LENGTH}"
            )
        self._pending.append((code_point, bytes(conversion)))

    def add_symmetric(self, lower: int, upper: int) -> None:
        if self.conversion is CaseConversion.UPPER:
            self.add(lower, utf8.encode(upper))
        else:
            self.add(upper, utf8.encode(lower))

    def add_ranges(self, ranges: Iterable[Range]) -> None:
        for lower, upper, length, pitch in ranges:
            for j in range(0, length * pitch, pitch):
                self.add_symmetric(lower + j, upper + j)

    def add_pairs(self, pairs: Iterable[Pair]) -> None:
        for lower, upper in pairs:
            self.add_symmetric(lower, upper)

    def add_complex(self, records: Iterable[ComplexRecord]) -> None:
        field = _COMPLEX_FIELD[self.conversion]
        for record in records:
            if record[field]:
                self.add(utf8.decode(record[0]), record[field])

    def finish(self) -> LookupTable:
        if self._pending is None:
            raise RuntimeError("TableBuilder already finished")
        # Stable sort keeps insertion order among equal code points
        ordered = sorted(self._pending, key=lambda entry: entry[0])
        self._pending = None

        characters: list[int] = []
        conversions: list[bytes] = []
        for character, conversion in ordered:
            if characters and characters[-1] == character:
                if self.on_duplicate == "error":
                    raise DuplicateEntryError(self.conversion, character)
                conversions[-1] = conversion
                continue
            characters.append(character)
            conversions.append(conversion)
        return LookupTable(characters, conversions)


def build_table(
    conversion: CaseConversion,
    *,
    on_duplicate: DuplicatePolicy = "error",
    ranges: Iterable[Range] = data.SYMMETRIC_RANGES,
    pairs: Iterable[Pair] = data.SYMMETRIC_PAIRS,
    complexes: Iterable[ComplexRecord] = data.COMPLEX_CONVERSIONS,
) -> LookupTable:
    builder = TableBuilder(conversion, on_duplicate=on_duplicate)
    builder.add_ranges(ranges)
    builder.add_pairs(pairs)
    builder.add_complex(complexes)
    return builder.finish()
