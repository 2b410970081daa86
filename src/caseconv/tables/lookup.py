"""Immutable sorted lookup table from code point to replacement bytes."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator, Sequence

import numpy as np

# Maximum length of a case conversion result in UTF-8
MAX_CONVERSION_LENGTH = 6
MAX_CODE_POINT = 0x10FFFF


class LookupTable:
    """Parallel arrays of sorted code points and their replacements.

    Built once by :class:`~caseconv.tables.builder.TableBuilder` and read only
    afterwards, so concurrent queries need no locking.
    """

    def __init__(self, code_points: Sequence[int], replacements: Sequence[bytes]) -> None:
        if len(code_points) != len(replacements):
            raise ValueError("code_points and replacements must have the same length")
        characters = np.asarray(code_points, dtype=np.int32)
        if characters.size > 1 and not bool(np.all(characters[1:] > characters[:-1])):
            raise ValueError("code_points must be strictly ascending")
        characters.flags.writeable = False
        self._characters = characters
        # Plain ints for per-character bisect
        self._keys = tuple(characters.tolist())
        self._conversions = tuple(bytes(r) for r in replacements)

    def __len__(self) -> int:
        return len(self._conversions)

    def __contains__(self, code_point: object) -> bool:
        return isinstance(code_point, int) and self.find(code_point) is not None

    def __repr__(self) -> str:
        return f"LookupTable(entries={len(self)})"

    @property
    def code_points(self) -> np.ndarray:
        return self._characters

    def find(self, code_point: int) -> bytes | None:
        if not 0 <= code_point <= MAX_CODE_POINT:
            return None
        idx = bisect_left(self._keys, code_point)
        if idx == len(self._keys) or self._keys[idx] != code_point:
            return None
        return self._conversions[idx]

    def items(self) -> Iterator[tuple[int, bytes]]:
        for character, conversion in zip(self._keys, self._conversions):
            yield character, conversion
