import json

import pytest

from primacy.bootstrap import bootstrap_selector
from primacy.core.decision import SelectionDecision
from primacy.observability import (
    ConsoleSelectionObserver,
    FileSelectionObserver,
    build_observers,
)


@pytest.fixture
def decision():
    return SelectionDecision(
        population=2,
        identifiers=["not_so_simple_core_calculator", "simple_core_calculator"],
        extras=[],
        selected="not_so_simple_core_calculator",
        rule="builtin_only",
    )


def test_build_observers_from_config(tmp_path):
    observers = build_observers({
        "observers": [
            {"type": "console"},
            {"type": "file", "path": str(tmp_path / "audit.jsonl")},
        ]
    })

    assert isinstance(observers[0], ConsoleSelectionObserver)
    assert isinstance(observers[1], FileSelectionObserver)


def test_unknown_observer_type():
    with pytest.raises(ValueError):
        build_observers({"observers": [{"type": "carrier_pigeon"}]})


def test_file_observer_appends_json_lines(tmp_path, decision):
    path = tmp_path / "audit" / "selection.jsonl"
    observer = FileSelectionObserver(path=str(path))

    observer.record(decision)
    observer.record(decision)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    payload = json.loads(lines[0])
    assert payload["selected"] == "not_so_simple_core_calculator"
    assert payload["rule"] == "builtin_only"


def test_console_observer_prints(capsys, decision):
    ConsoleSelectionObserver().record(decision)

    out = capsys.readouterr().out
    assert "[PRIMACY SELECTION]" in out
    assert "builtin_only" in out


def test_bootstrap_selector_wires_observers(tmp_path, builtin_registry):
    path = tmp_path / "audit.jsonl"
    selector = bootstrap_selector(
        {"selection": {"observers": [{"type": "file", "path": str(path)}]}}
    )

    selector.select(builtin_registry)

    assert json.loads(path.read_text(encoding="utf-8"))["population"] == 2


def test_observer_without_type():
    with pytest.raises(ValueError):
        build_observers({"observers": [{"path": "audit.jsonl"}]})
