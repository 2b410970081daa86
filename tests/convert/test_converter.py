import pytest

from caseconv import (
    CapacityExceededError,
    CaseConversion,
    CaseConverter,
    case_convert,
    case_convert_into,
    case_convert_string,
    case_convert_text,
)
from caseconv.tables import build_table


def test_upper_ascii() -> None:
    assert case_convert_string(b"Hello", CaseConversion.UPPER) == b"HELLO"


def test_lower_ascii() -> None:
    assert case_convert_string(b"ABC", CaseConversion.LOWER) == b"abc"


def test_sharp_s_expands_on_upper() -> None:
    assert case_convert_string(b"\xc3\x9f", CaseConversion.UPPER) == b"SS"
    assert case_convert_text("Straße", "upper") == "STRASSE"
    # No single character lower case form
    assert case_convert_string(b"\xc3\x9f", CaseConversion.LOWER) == b"\xc3\x9f"


def test_greek_eta_fold() -> None:
    # U+1F74 is already folded
    assert case_convert_string(b"\xe1\xbd\xb4", CaseConversion.FOLD) == b"\xe1\xbd\xb4"
    # U+1FCA folds to U+1F74
    assert case_convert_string(b"\xe1\xbf\x8a", CaseConversion.FOLD) == b"\xe1\xbd\xb4"
    # U+1FC2 folds to U+1F74 U+03B9 but has no lower case form
    assert case_convert_string(b"\xe1\xbf\x82", CaseConversion.FOLD) == b"\xe1\xbd\xb4\xce\xb9"
    assert case_convert_string(b"\xe1\xbf\x82", CaseConversion.LOWER) == b"\xe1\xbf\x82"


def test_micro_sign_upper() -> None:
    assert case_convert(0x00B5, CaseConversion.UPPER) == "\u039c".encode("utf-8")
    assert case_convert(0x00B5, CaseConversion.FOLD) == "\u03bc".encode("utf-8")
    assert case_convert(0x00B5, CaseConversion.LOWER) is None


def test_unmapped_character() -> None:
    assert case_convert(ord("1"), CaseConversion.UPPER) is None
    text = "1 + \u4e2d \U0001f600"
    assert case_convert_text(text, CaseConversion.FOLD) == text


def test_pass_through_for_unmapped_code_points() -> None:
    for kind in CaseConversion:
        table = build_table(kind)
        converter = CaseConverter(table, kind)
        for cp in range(0x3000):
            if cp in table:
                continue
            encoded = chr(cp).encode("utf-8")
            assert converter.convert_string(encoded) == encoded


def test_ligatures_and_titlecase() -> None:
    assert case_convert_text("\ufb01", CaseConversion.UPPER) == "FI"
    assert case_convert_text("\ufb03", CaseConversion.FOLD) == "ffi"
    assert case_convert_text("\u01c5", CaseConversion.FOLD) == "\u01c6"
    assert case_convert_text("\u01c5", CaseConversion.UPPER) == "\u01c4"
    assert case_convert_text("\u0130", CaseConversion.LOWER) == "i\u0307"


def test_capacity_zero_raises_without_writing() -> None:
    buffer = bytearray(b"\xaa" * 4)
    with pytest.raises(CapacityExceededError) as excinfo:
        case_convert_into(b"abc", buffer, CaseConversion.UPPER, capacity=0)
    assert excinfo.value.capacity == 0
    assert buffer == bytearray(b"\xaa" * 4)


def test_capacity_smaller_than_result() -> None:
    # U+0149 is 2 bytes and upper cases to 3
    buffer = bytearray(2)
    with pytest.raises(CapacityExceededError):
        case_convert_into(b"\xc5\x89", buffer, CaseConversion.UPPER)
    assert buffer == bytearray(2)

    buffer = bytearray(3)
    assert case_convert_into(b"\xc5\x89", buffer, CaseConversion.UPPER) == 3
    assert bytes(buffer) == b"\xca\xbcN"


def test_largest_expansion_fits_default_buffer() -> None:
    # U+0390 folds to 3 characters, 6 bytes
    assert case_convert_string(b"\xce\x90", CaseConversion.FOLD) == b"\xce\xb9\xcc\x88\xcc\x81"


def test_empty_input_is_success() -> None:
    assert case_convert_into(b"", bytearray(), CaseConversion.FOLD) == 0
    assert case_convert_string(b"", CaseConversion.FOLD) == b""


def test_length_limits_input() -> None:
    buffer = bytearray(10)
    written = case_convert_into(b"abcdef", buffer, CaseConversion.UPPER, length=3)
    assert written == 3
    assert bytes(buffer[:written]) == b"ABC"


def test_writes_into_memoryview() -> None:
    backing = bytearray(8)
    written = case_convert_into(b"xy", memoryview(backing)[2:], CaseConversion.UPPER)
    assert written == 2
    assert bytes(backing) == b"\x00\x00XY\x00\x00\x00\x00"


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        case_convert_into(b"abc", bytearray(4), CaseConversion.UPPER, length=4)
    with pytest.raises(ValueError):
        case_convert_into(b"abc", bytearray(4), CaseConversion.UPPER, capacity=5)
    with pytest.raises(ValueError):
        case_convert_string(b"abc", "title")


@pytest.mark.parametrize(
    "mixed, expected",
    [
        (b"abc\xe2\x82", b"ABC\xe2\x82"),  # truncated at end
        (b"\xc3", b"\xc3"),
        (b"\xc3a", b"\xc3A"),  # lead byte without trail
        (b"\xff\xfeq", b"\xff\xfeQ"),
        (b"\x80a", b"\x80A"),
        (b"\xed\xa0\x80a", b"\xed\xa0\x80A"),  # encoded surrogate
        (b"\xef\xbf\xbfa", b"\xef\xbf\xbfA"),  # U+FFFF
    ],
)
def test_malformed_input_copied_through(mixed: bytes, expected: bytes) -> None:
    assert case_convert_string(mixed, CaseConversion.UPPER) == expected


@pytest.mark.parametrize("max_expansion", [0, 1, 2])
def test_converter_rejects_expansion_below_largest_growth(max_expansion: int) -> None:
    table = build_table(CaseConversion.UPPER, ranges=(), pairs=(), complexes=())
    with pytest.raises(ValueError):
        CaseConverter(table, CaseConversion.UPPER, max_expansion=max_expansion)


def test_default_expansion_fits_worst_case() -> None:
    table = build_table(CaseConversion.FOLD)
    converter = CaseConverter(table, CaseConversion.FOLD)
    mixed = b"\xce\x90" * 50
    assert converter.convert_string(mixed) == b"\xce\xb9\xcc\x88\xcc\x81" * 50
    assert repr(converter) == f"CaseConverter(fold, entries={len(table)})"


@pytest.mark.parametrize(
    "text, kind, expected",
    [
        ("ﬄ", CaseConversion.UPPER, "FFL"),
        ("ﬄ", CaseConversion.FOLD, "ffl"),
        ("ﬅ", CaseConversion.UPPER, "ST"),
        ("ﬆ", CaseConversion.FOLD, "st"),
        ("ﬓ", CaseConversion.FOLD, "մն"),
        ("ﬔ", CaseConversion.UPPER, "ՄԵ"),
        ("ﬕ", CaseConversion.FOLD, "մի"),
        ("ﬖ", CaseConversion.UPPER, "ՎՆ"),
        ("ﬗ", CaseConversion.FOLD, "մխ"),
        ("ﬗ", CaseConversion.UPPER, "ՄԽ"),
    ],
)
def test_trailing_ligatures(text: str, kind: CaseConversion, expected: str) -> None:
    assert case_convert_text(text, kind) == expected
    assert case_convert_text(text, CaseConversion.LOWER) == text
