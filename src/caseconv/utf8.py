"""UTF-8 byte level helpers used by the case converter.

Classification follows the rules at
http://www.cl.cam.ac.uk/~mgk25/unicode.html#utf-8 and additionally treats the
non-characters U+FFFE, U+FFFF (in every plane) and U+FDD0..U+FDEF as invalid.
"""

from __future__ import annotations

from typing import NamedTuple

UTF8_MAX_BYTES = 4

# Width of a sequence for each possible lead byte. Stray trail bytes and the
# lead bytes that can never start a valid sequence count as a single byte.
BYTES_OF_LEAD: tuple[int, ...] = (
    (1,) * 0x80  # 00 - 7F
    + (1,) * 0x40  # 80 - BF
    + (1,) * 0x02  # C0 - C1
    + (2,) * 0x1E  # C2 - DF
    + (3,) * 0x10  # E0 - EF
    + (4,) * 0x05  # F0 - F4
    + (1,) * 0x0B  # F5 - FF
)


class Classified(NamedTuple):
    width: int
    invalid: bool


def is_ascii(byte: int) -> bool:
    return byte < 0x80


def is_trail_byte(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def sequence_width(lead: int) -> int:
    return BYTES_OF_LEAD[lead]


def _invalid(width: int = 1) -> Classified:
    return Classified(width, True)


def classify(seq: bytes) -> Classified:
    """Classify the character starting ``seq`` as valid or not, with its width.

    Only the bytes present in ``seq`` are considered; a sequence that needs more
    bytes than are available is invalid.
    """

    if not seq:
        return _invalid()
    lead = seq[0]
    if is_ascii(lead):
        return Classified(1, False)

    width = BYTES_OF_LEAD[lead]
    if width == 1 or width > len(seq):
        # Invalid lead byte or truncated sequence
        return _invalid()
    if not is_trail_byte(seq[1]):
        return _invalid()

    if width == 2:
        return Classified(2, False)

    if width == 3:
        if not is_trail_byte(seq[2]):
            return _invalid()
        if lead == 0xE0 and (seq[1] & 0xE0) == 0x80:
            # Overlong
            return _invalid()
        if lead == 0xED and (seq[1] & 0xE0) == 0xA0:
            # Surrogate
            return _invalid()
        if lead == 0xEF and seq[1] == 0xBF and seq[2] in (0xBE, 0xBF):
            # U+FFFE or U+FFFF
            return _invalid(3)
        if lead == 0xEF and seq[1] == 0xB7 and (seq[2] & 0xF0) in (0x90, 0xA0):
            # U+FDD0 .. U+FDEF
            return _invalid(3)
        return Classified(3, False)

    if not (is_trail_byte(seq[2]) and is_trail_byte(seq[3])):
        return _invalid()
    if (seq[1] & 0x0F) == 0x0F and seq[2] == 0xBF and seq[3] in (0xBE, 0xBF):
        # U+nFFFE or U+nFFFF
        return _invalid(4)
    if lead == 0xF4:
        if seq[1] > 0x8F:
            # Beyond U+10FFFF
            return _invalid()
    elif lead == 0xF0 and (seq[1] & 0xF0) == 0x80:
        # Overlong
        return _invalid()
    return Classified(4, False)


def decode(seq: bytes) -> int:
    """Return the code point of the valid sequence at the start of ``seq``."""

    width = sequence_width(seq[0])
    return ord(bytes(seq[:width]).decode("utf-8"))


def encode(code_point: int) -> bytes:
    return chr(code_point).encode("utf-8")
