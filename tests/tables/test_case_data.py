"""Properties of the shipped case mapping tables."""

import pytest

from caseconv import CaseConversion, utf8
from caseconv.tables import MAX_CONVERSION_LENGTH, build_table
from caseconv.tables.data import COMPLEX_CONVERSIONS, SYMMETRIC_PAIRS, SYMMETRIC_RANGES

TABLES = {kind: build_table(kind) for kind in CaseConversion}


def test_raw_data_shapes() -> None:
    assert all(pitch in (1, 2) and length > 0 for _l, _u, length, pitch in SYMMETRIC_RANGES)
    assert all(len(record) == 4 for record in COMPLEX_CONVERSIONS)
    assert all(record[0] and any(record[1:]) for record in COMPLEX_CONVERSIONS)
    assert len(SYMMETRIC_RANGES) == 49
    assert len(SYMMETRIC_PAIRS) == 151
    assert len(COMPLEX_CONVERSIONS) == 307


def test_symmetric_ranges_round_trip() -> None:
    upper = TABLES[CaseConversion.UPPER]
    lower = TABLES[CaseConversion.LOWER]
    for lower_start, upper_start, length, pitch in SYMMETRIC_RANGES:
        for j in range(0, length * pitch, pitch):
            assert upper.find(lower_start + j) == utf8.encode(upper_start + j)
            assert lower.find(upper_start + j) == utf8.encode(lower_start + j)


def test_symmetric_pairs_round_trip() -> None:
    for lower_cp, upper_cp in SYMMETRIC_PAIRS:
        assert TABLES[CaseConversion.UPPER].find(lower_cp) == utf8.encode(upper_cp)
        assert TABLES[CaseConversion.LOWER].find(upper_cp) == utf8.encode(lower_cp)
        assert TABLES[CaseConversion.FOLD].find(upper_cp) == utf8.encode(lower_cp)


@pytest.mark.parametrize("kind", list(CaseConversion))
def test_expansion_bound(kind: CaseConversion) -> None:
    assert all(0 < len(conversion) <= MAX_CONVERSION_LENGTH for _cp, conversion in TABLES[kind].items())


def test_fold_is_idempotent() -> None:
    fold = TABLES[CaseConversion.FOLD]
    for _cp, conversion in fold.items():
        for ch in conversion.decode("utf-8"):
            assert fold.find(ord(ch)) is None, f"U+{ord(ch):04X} folds again"


def test_replacements_are_valid_utf8() -> None:
    for table in TABLES.values():
        for _cp, conversion in table.items():
            conversion.decode("utf-8")
