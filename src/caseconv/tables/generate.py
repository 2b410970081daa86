"""Regenerate the raw case mapping data from the interpreter's Unicode database.

Characters are split into symmetric conversions (a single lower case character
paired with a single upper case character, with folding equal to lowering) and
complex conversions (everything else that changes under fold, upper or lower).
Symmetric conversions are then grouped into ranges where possible.
"""

from __future__ import annotations

import itertools
import string
import sys
import unicodedata
from collections.abc import Iterable, Sequence
from pathlib import Path

Symmetric = tuple[int, int, int]
Complex = tuple[str, str, str, str]

DATA_PATH = Path(__file__).with_name("data.py")
MIN_RANGE_LENGTH = 5

SECTION_START = "# ++Autogenerated -- start of section {name}"
SECTION_END = "# --Autogenerated -- end of section {name}"


def conversion_sets(max_code_point: int = sys.maxunicode) -> tuple[list[Symmetric], list[Complex]]:
    """Return the symmetric (lower, upper, lower - upper) triples and complex records."""

    symmetrics: list[Symmetric] = []
    complexes: list[Complex] = []
    for ch in range(max_code_point + 1):
        if 0xD800 <= ch <= 0xDFFF:
            continue
        uch = chr(ch)
        fold = uch.casefold()
        upper = uch.upper()
        lower = uch.lower()

        symmetric = False
        if uch != upper and len(upper) == 1 and uch == lower and uch == fold:
            if upper.lower() == uch and upper.casefold() == uch:
                symmetric = True
                symmetrics.append((ch, ord(upper), ch - ord(upper)))
        if uch != lower and len(lower) == 1 and uch == upper and lower == fold:
            if lower.upper() == uch:
                # Counterpart of a pair already recorded from its lower case side
                symmetric = True

        if symmetric:
            continue
        fold = "" if fold == uch else fold
        upper = "" if upper == uch else upper
        lower = "" if lower == uch else lower
        if fold or upper or lower:
            complexes.append((uch, fold, upper, lower))
    return symmetrics, complexes


def contiguous_runs(symmetrics: Sequence[Symmetric], step: int) -> list[list[Symmetric]]:
    runs: list[list[Symmetric]] = []
    for item in symmetrics:
        if runs and item[0] == runs[-1][-1][0] + step:
            runs[-1].append(item)
        else:
            runs.append([item])
    return runs


def group_ranges(
    symmetrics: Sequence[Symmetric],
    min_length: int = MIN_RANGE_LENGTH,
) -> tuple[list[tuple[int, int, int, int]], list[tuple[int, int]]]:
    """Group symmetric conversions into (lower, upper, length, pitch) ranges.

    Returns the ranges plus the (lower, upper) pairs not covered by any range.
    """

    ranges: list[tuple[int, int, int, int]] = []
    for _distance, group in itertools.groupby(symmetrics, key=lambda s: s[2]):
        for run in contiguous_runs(list(group), 1):
            if len(run) >= min_length:
                ranges.append((run[0][0], run[0][1], len(run), 1))

    # Upper case letter immediately followed by its lower case form
    one_apart = [s for s in symmetrics if s[2] == 1]
    for run in contiguous_runs(one_apart, 2):
        if len(run) >= min_length:
            ranges.append((run[0][0], run[0][1], len(run), 2))

    ranges.sort()
    covered = {
        lower + j
        for lower, _upper, length, pitch in ranges
        for j in range(0, length * pitch, pitch)
    }
    pairs = [(lower, upper) for lower, upper, _d in symmetrics if lower not in covered]
    return ranges, pairs


def escape(text: str) -> str:
    return "".join(
        chr(b) if chr(b) in string.ascii_letters else f"\\x{b:02x}"
        for b in text.encode("utf-8")
    )


def render_ranges(ranges: Iterable[tuple[int, int, int, int]]) -> list[str]:
    return [f"({lower}, {upper}, {length}, {pitch})," for lower, upper, length, pitch in ranges]


def render_pairs(pairs: Iterable[tuple[int, int]]) -> list[str]:
    return [f"({lower}, {upper})," for lower, upper in pairs]


def render_complexes(complexes: Iterable[Complex]) -> list[str]:
    return [
        "(" + ", ".join(f'b"{escape(field)}"' for field in record) + "),"
        for record in complexes
    ]


def replace_section(text: str, name: str, body: Sequence[str]) -> str:
    """Replace the lines between the markers of section ``name`` with ``body``.

    Body lines take the indentation of the start marker.
    """

    start_marker = SECTION_START.format(name=name)
    end_marker = SECTION_END.format(name=name)
    lines = text.splitlines(keepends=True)
    starts = [i for i, line in enumerate(lines) if line.strip() == start_marker]
    ends = [i for i, line in enumerate(lines) if line.strip() == end_marker]
    if len(starts) != 1 or len(ends) != 1 or ends[0] < starts[0]:
        raise ValueError(f"Section {name!r} markers missing or malformed")
    start, end = starts[0], ends[0]
    indent = lines[start][: len(lines[start]) - len(lines[start].lstrip())]
    replacement = [f"{indent}{line}\n" for line in body]
    return "".join(lines[: start + 1] + replacement + lines[end:])


def regenerate(path: Path = DATA_PATH, *, log: bool = False) -> bool:
    """Rewrite the generated sections of ``path``. Returns True if it changed."""

    symmetrics, complexes = conversion_sets()
    ranges, pairs = group_ranges(symmetrics)
    if log:
        print(
            f"[caseconv] unicode {unicodedata.unidata_version}: "
            f"{len(ranges)} ranges, {len(pairs)} pairs, {len(complexes)} complex",
            flush=True,
        )

    path = Path(path)
    original = path.read_text(encoding="utf-8")
    text = replace_section(original, "symmetric-ranges", render_ranges(ranges))
    text = replace_section(text, "symmetric-pairs", render_pairs(pairs))
    text = replace_section(text, "complex", render_complexes(complexes))
    if text == original:
        if log:
            print(f"[caseconv] {path} unchanged", flush=True)
        return False
    path.write_text(text, encoding="utf-8")
    if log:
        print(f"[caseconv] wrote {path}", flush=True)
    return True
