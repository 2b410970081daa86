#!/usr/bin/env python3
"""Fold or change the case of UTF-8 text files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from caseconv import CaseConversion, CaseConvertConfig, configure, convert_files, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Case convert UTF-8 text")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in CaseConversion],
        help="Conversion to apply (default: taken from --config, else fold)",
    )
    parser.add_argument("--input", nargs="+", help="Input files (default: read stdin)")
    parser.add_argument("--out", help="Output directory for converted files")
    parser.add_argument("--config", help="Optional YAML config path")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable live progress display",
    )
    parser.add_argument("--verbose", action="store_true", help="Print table build and per-file stats")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_config(Path(args.config)) if args.config else CaseConvertConfig()
    if args.verbose:
        config.verbose = True
    registry = configure(config)
    kind = CaseConversion.parse(args.kind) if args.kind else config.conversion

    if not args.input:
        converted = registry.converter_for(kind).convert_string(sys.stdin.buffer.read())
        sys.stdout.buffer.write(converted)
        return

    if not args.out:
        raise SystemExit("--out is required when converting files")
    files = [Path(p) for p in args.input]
    missing = [str(p) for p in files if not p.is_file()]
    if missing:
        raise SystemExit(f"Input files not found: {', '.join(missing)}")
    summary = convert_files(
        files,
        kind,
        Path(args.out),
        registry=registry,
        show_progress=not args.no_progress,
        log=config.verbose,
    )
    print(
        f"Converted {len(summary['files']):,} files ({kind.value}): "
        f"{summary['bytes_in']:,} -> {summary['bytes_out']:,} bytes."
    )


if __name__ == "__main__":
    main()
