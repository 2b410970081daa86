import io
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from caseconv.convert import registry as registry_module
from scripts import case_convert


@pytest.fixture(autouse=True)
def restore_default_registry(monkeypatch) -> None:
    monkeypatch.setattr(registry_module, "_DEFAULT_REGISTRY", None)


def test_script_converts_files(tmp_path: Path, monkeypatch, capsys) -> None:
    path = tmp_path / "in.txt"
    path.write_text("Hello World", encoding="utf-8")
    out_dir = tmp_path / "out"
    monkeypatch.setattr(
        sys,
        "argv",
        ["case_convert.py", "--kind", "lower", "--input", str(path), "--out", str(out_dir), "--no-progress"],
    )
    case_convert.main()
    assert (out_dir / "in.txt").read_text(encoding="utf-8") == "hello world"
    assert "Converted 1 files (lower)" in capsys.readouterr().out


def test_script_uses_config_kind(tmp_path: Path, monkeypatch) -> None:
    config = tmp_path / "caseconv.yaml"
    config.write_text("conversion: upper\n")
    stdin = SimpleNamespace(buffer=io.BytesIO("\ufb01ne".encode("utf-8")))
    stdout = SimpleNamespace(buffer=io.BytesIO())
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    monkeypatch.setattr(sys, "argv", ["case_convert.py", "--config", str(config)])
    case_convert.main()
    assert stdout.buffer.getvalue() == b"FINE"


def test_script_requires_out_for_files(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "in.txt"
    path.write_text("x")
    monkeypatch.setattr(sys, "argv", ["case_convert.py", "--input", str(path)])
    with pytest.raises(SystemExit):
        case_convert.main()


def test_script_reports_missing_input(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["case_convert.py", "--input", str(tmp_path / "nope.txt"), "--out", str(tmp_path / "out")],
    )
    with pytest.raises(SystemExit):
        case_convert.main()
