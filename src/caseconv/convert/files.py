"""Batch case conversion of files on disk."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from caseconv.conversion import CaseConversion

from .registry import ConversionRegistry, default_registry

try:  # pragma: no cover - optional dependency
    from rich.progress import BarColumn, Progress, TextColumn, TimeElapsedColumn
except ModuleNotFoundError:  # pragma: no cover - rich optional
    Progress = None


def convert_files(
    paths: Sequence[Path],
    conversion: CaseConversion | str,
    out_dir: Path,
    *,
    registry: ConversionRegistry | None = None,
    show_progress: bool = False,
    log: bool = False,
) -> dict[str, Any]:
    """Convert each file in ``paths`` and write the result under ``out_dir``.

    Files are treated as raw UTF-8 bytes; malformed sequences pass through.
    Returns a summary with per-file and total byte counts.
    """

    kind = CaseConversion.parse(conversion)
    names = [Path(p).name for p in paths]
    if len(set(names)) != len(names):
        raise ValueError("Input files must have distinct names")
    converter = (registry or default_registry()).converter_for(kind)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if show_progress and Progress is None:
        print("Progress disabled: install 'rich' to enable live stats.")
        show_progress = False

    progress: Progress | None = None
    task_id: int | None = None
    if show_progress and Progress is not None:
        progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total} files"),
            TimeElapsedColumn(),
            transient=False,
        )
        progress.start()
        task_id = progress.add_task(kind.value, total=len(paths))

    results: list[dict[str, Any]] = []
    try:
        for path in paths:
            path = Path(path)
            raw = path.read_bytes()
            converted = converter.convert_string(raw)
            (out_dir / path.name).write_bytes(converted)
            results.append({"name": path.name, "bytes_in": len(raw), "bytes_out": len(converted)})
            if log:
                print(
                    f"[caseconv] {kind.value} {path.name}: {len(raw):,} -> {len(converted):,} bytes",
                    flush=True,
                )
            if progress and task_id is not None:
                progress.advance(task_id)
    finally:
        if progress:
            progress.stop()

    return {
        "conversion": kind.value,
        "files": results,
        "bytes_in": sum(r["bytes_in"] for r in results),
        "bytes_out": sum(r["bytes_out"] for r in results),
    }
