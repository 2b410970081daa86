#!/usr/bin/env python3
"""Regenerate caseconv's case mapping tables from the running Python's Unicode data."""

from __future__ import annotations

import argparse
from pathlib import Path

from caseconv.tables.generate import DATA_PATH, regenerate


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Regenerate case conversion tables")
    parser.add_argument(
        "--out",
        default=str(DATA_PATH),
        help="Data module to rewrite in place (default: the installed tables)",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress status output")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    out = Path(args.out)
    if not out.is_file():
        raise SystemExit(f"Data module not found: {out}")
    regenerate(out, log=not args.quiet)


if __name__ == "__main__":
    main()
