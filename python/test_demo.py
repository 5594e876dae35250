"""Tests for the demo driver."""

import pytest
from rich.console import Console

import demo
from caves import PathRules
from samples import ANSWERS, SAMPLES


class TestDemo:
    def test_every_answer_has_a_solver(self) -> None:
        assert set(demo.build_solvers(PathRules())) == set(ANSWERS)

    def test_every_answer_has_a_sample(self) -> None:
        assert {name for name, _ in ANSWERS} == set(SAMPLES)

    def test_run_passes(self) -> None:
        console = Console(record=True, width=80)
        assert demo.run(PathRules(), console) is True
        assert "All samples match" in console.export_text()

    def test_mismatch_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A wrong published answer fails the run and names the expected value."""
        monkeypatch.setattr(demo, "ANSWERS", {("risk_map", 1): 41})
        console = Console(record=True, width=80)
        assert demo.run(PathRules(), console) is False
        output = console.export_text()
        assert "Sample mismatch" in output
        assert "expected 41" in output

    def test_main_exit_status(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr(demo, "ANSWERS", {("caves_small", 1): 10})
        assert demo.main(["--render"]) == 0
        assert "risk 40" in capsys.readouterr().out
