import pytest

from caseconv import utf8


def test_bytes_of_lead_covers_every_byte() -> None:
    assert len(utf8.BYTES_OF_LEAD) == 256
    assert utf8.sequence_width(0x41) == 1
    assert utf8.sequence_width(0x80) == 1
    assert utf8.sequence_width(0xC1) == 1
    assert utf8.sequence_width(0xC2) == 2
    assert utf8.sequence_width(0xE0) == 3
    assert utf8.sequence_width(0xF4) == 4
    assert utf8.sequence_width(0xF5) == 1


def test_is_ascii() -> None:
    assert utf8.is_ascii(0x7F)
    assert not utf8.is_ascii(0x80)


@pytest.mark.parametrize(
    "seq, width",
    [
        (b"A", 1),
        ("é".encode("utf-8"), 2),
        ("€".encode("utf-8"), 3),
        ("😀".encode("utf-8"), 4),
        ("\U0010fffd".encode("utf-8"), 4),
    ],
)
def test_classify_valid(seq: bytes, width: int) -> None:
    assert utf8.classify(seq) == utf8.Classified(width, False)


@pytest.mark.parametrize(
    "seq, width",
    [
        (b"", 1),
        (b"\x80", 1),  # stray trail byte
        (b"\xc0\x80", 1),  # overlong lead
        (b"\xc3A", 1),  # missing trail byte
        (b"\xe2\x82", 1),  # truncated
        (b"\xe2\x82\x00", 1),
        (b"\xe0\x80\x80", 1),  # overlong
        (b"\xed\xa0\x80", 1),  # surrogate
        (b"\xef\xbf\xbe", 3),  # U+FFFE
        (b"\xef\xbf\xbf", 3),  # U+FFFF
        (b"\xef\xb7\x90", 3),  # U+FDD0
        (b"\xef\xb7\xaf", 3),  # U+FDEF
        (b"\xf0\x80\x80\x80", 1),  # overlong
        (b"\xf4\x90\x80\x80", 1),  # beyond U+10FFFF
        (b"\xf3\xbf\xbf\xbf", 4),  # U+FFFFF
        (b"\xf5\x80\x80\x80", 1),
    ],
)
def test_classify_invalid(seq: bytes, width: int) -> None:
    assert utf8.classify(seq) == utf8.Classified(width, True)


def test_fdf0_is_valid() -> None:
    assert utf8.classify(b"\xef\xb7\xb0") == utf8.Classified(3, False)


def test_decode_and_encode() -> None:
    assert utf8.decode(b"\xe2\x82\xac") == 0x20AC
    assert utf8.decode(b"\xc3\x9fxyz") == 0xDF
    assert utf8.encode(0x1F600) == "😀".encode("utf-8")
    assert utf8.encode(0x41) == b"A"
