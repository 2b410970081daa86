import threading
import time

import pytest

from caseconv import CaseConversion, CaseConvertConfig, ConversionRegistry
from caseconv.convert import registry as registry_module
from caseconv.tables import builder


def test_builds_only_requested_kind() -> None:
    registry = ConversionRegistry()
    assert not any(registry.is_built(kind) for kind in CaseConversion)
    registry.converter_for(CaseConversion.FOLD)
    assert registry.is_built(CaseConversion.FOLD)
    assert not registry.is_built(CaseConversion.UPPER)
    assert not registry.is_built(CaseConversion.LOWER)


def test_returns_same_converter() -> None:
    registry = ConversionRegistry()
    first = registry.converter_for("upper")
    assert registry.converter_for(CaseConversion.UPPER) is first
    assert registry.table_for("upper") is first.table
    assert first.conversion is CaseConversion.UPPER


def test_unknown_kind() -> None:
    with pytest.raises(ValueError):
        ConversionRegistry().converter_for("title")


def test_concurrent_first_use_builds_once(monkeypatch) -> None:
    calls: list[CaseConversion] = []
    real_build = builder.build_table

    def slow_build(conversion, **kwargs):
        calls.append(conversion)
        time.sleep(0.05)
        return real_build(conversion, **kwargs)

    monkeypatch.setattr(builder, "build_table", slow_build)
    registry = ConversionRegistry()
    barrier = threading.Barrier(8)
    results = []

    def worker() -> None:
        barrier.wait()
        results.append(registry.converter_for(CaseConversion.LOWER))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == [CaseConversion.LOWER]
    assert len(results) == 8
    assert all(result is results[0] for result in results)


def test_config_flows_into_build(monkeypatch, capsys) -> None:
    seen = {}
    real_build = builder.build_table

    def capture(conversion, **kwargs):
        seen.update(kwargs)
        return real_build(conversion, **kwargs)

    monkeypatch.setattr(builder, "build_table", capture)
    config = CaseConvertConfig(on_duplicate="shadow", max_expansion=5, verbose=True)
    converter = ConversionRegistry(config).converter_for(CaseConversion.FOLD)
    assert seen == {"on_duplicate": "shadow"}
    assert converter.max_expansion == 5
    assert "[caseconv] built fold table: 1,490 entries" in capsys.readouterr().out


def test_quiet_by_default(capsys) -> None:
    ConversionRegistry().converter_for(CaseConversion.UPPER)
    assert capsys.readouterr().out == ""


def test_default_registry_and_configure(monkeypatch) -> None:
    monkeypatch.setattr(registry_module, "_DEFAULT_REGISTRY", None)
    default = registry_module.default_registry()
    assert registry_module.default_registry() is default
    assert registry_module.converter_for("fold") is default.converter_for("fold")

    configured = registry_module.configure(CaseConvertConfig(max_expansion=4))
    assert configured is not default
    assert registry_module.default_registry() is configured
    assert registry_module.converter_for("fold").max_expansion == 4
