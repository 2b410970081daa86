"""Convert UTF-8 byte strings one character at a time through a lookup table."""

from __future__ import annotations

from caseconv import utf8
from caseconv.conversion import MAX_EXPANSION, CaseConversion
from caseconv.tables.lookup import LookupTable


class CapacityExceededError(ValueError):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"Converted text does not fit into {capacity} bytes")
        self.capacity = capacity


class CaseConverter:
    """Applies one kind of case conversion to code points and UTF-8 text."""

    def __init__(
        self,
        table: LookupTable,
        conversion: CaseConversion,
        *,
        max_expansion: int = MAX_EXPANSION,
    ) -> None:
        if max_expansion < MAX_EXPANSION:
            raise ValueError(f"max_expansion must be at least {MAX_EXPANSION}, got {max_expansion}")
        self.table = table
        self.conversion = CaseConversion.parse(conversion)
        self.max_expansion = max_expansion

    def __repr__(self) -> str:
        return f"CaseConverter({self.conversion.value}, entries={len(self.table)})"

    def convert_character(self, code_point: int) -> bytes | None:
        """Return the UTF-8 replacement for ``code_point`` or None if it has none."""

        return self.table.find(code_point)

    def convert_into(
        self,
        mixed: bytes | bytearray | memoryview,
        converted: bytearray | memoryview,
        *,
        length: int | None = None,
        capacity: int | None = None,
    ) -> int:
        """Convert ``mixed`` into the start of ``converted``.

        Only the first ``length`` bytes of ``mixed`` are read and at most
        ``capacity`` bytes are written (default: all of ``converted``). Returns
        the number of bytes written. Raises :class:`CapacityExceededError` if
        the result does not fit, in which case ``converted`` is left untouched.

        Malformed UTF-8 is copied through unchanged one byte at a time.
        """

        source = bytes(mixed)
        if length is not None:
            if not 0 <= length <= len(source):
                raise ValueError(f"length {length} outside input of {len(source)} bytes")
            source = source[:length]
        if capacity is None:
            capacity = len(converted)
        elif not 0 <= capacity <= len(converted):
            raise ValueError(f"capacity {capacity} outside buffer of {len(converted)} bytes")

        find = self.table.find
        result = bytearray()
        pos = 0
        end = len(source)
        while pos < end:
            lead = source[pos]
            conversion = None
            width = 1
            if utf8.is_ascii(lead):
                conversion = find(lead)
            else:
                seq_width = utf8.sequence_width(lead)
                seq = source[pos : pos + seq_width].ljust(seq_width, b"\x00")
                classified = utf8.classify(seq)
                if not classified.invalid:
                    width = classified.width
                    conversion = find(utf8.decode(seq))

            piece = conversion if conversion is not None else source[pos : pos + width]
            if len(result) + len(piece) > capacity:
                raise CapacityExceededError(capacity)
            result += piece
            pos += width

        converted[: len(result)] = result
        return len(result)

    def convert_string(self, mixed: bytes | bytearray | memoryview) -> bytes:
        buffer = bytearray(len(mixed) * self.max_expansion)
        written = self.convert_into(mixed, buffer)
        return bytes(buffer[:written])

    def convert_text(self, text: str) -> str:
        return self.convert_string(text.encode("utf-8")).decode("utf-8")
