"""
Smoke tests for the trace CLI script.
"""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "trace.py"


@pytest.fixture
def trace_cli():
    """Import scripts/trace.py as a module."""
    spec = importlib.util.spec_from_file_location("trace_cli", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_cli(module, monkeypatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["trace.py", *args])
    return module.main()


class TestTraceCli:
    """End-to-end runs of the CLI."""

    def test_default_run(self, trace_cli, monkeypatch, capsys):
        """Dijkstra on the first preset from A."""
        assert run_cli(trace_cli, monkeypatch) == 0
        out = capsys.readouterr().out
        assert "Algorithm: dijkstra" in out
        assert "E: 11  via A → B → D → E" in out

    def test_replay_step(self, trace_cli, monkeypatch, capsys):
        assert run_cli(trace_cli, monkeypatch, "--step", "3") == 0
        out = capsys.readouterr().out
        assert "Replay at step 3" in out
        assert "Highlighted: AB, AC" in out

    def test_graph_file_with_negative_cycle(self, trace_cli, monkeypatch, capsys, tmp_path):
        path = tmp_path / "cycle.json"
        path.write_text(
            json.dumps(
                {
                    "nodes": [{"id": "A"}, {"id": "B"}],
                    "edges": [
                        {"source": "A", "target": "B", "weight": -1},
                        {"source": "B", "target": "A", "weight": -1},
                    ],
                }
            ),
            encoding="utf-8",
        )
        code = run_cli(
            trace_cli, monkeypatch, "--graph", str(path), "--algorithm", "bellman-ford"
        )
        assert code == 0
        assert "Negative cycle detected" in capsys.readouterr().out

    def test_missing_graph_file(self, trace_cli, monkeypatch, capsys, tmp_path):
        code = run_cli(trace_cli, monkeypatch, "--graph", str(tmp_path / "nope.json"))
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_coordinate_in_graph_file(self, trace_cli, monkeypatch, capsys, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"nodes": [{"id": "A", "x": "left"}]}), encoding="utf-8")
        code = run_cli(trace_cli, monkeypatch, "--graph", str(path))
        assert code == 1
        assert "Error:" in capsys.readouterr().err
