"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gains_engine.cli import main


def _run(tmp_path: Path, *args: str) -> int:
    return main(["--character-file", str(tmp_path / "character.json"), *args])


class TestGenerate:
    def test_prints_workout_json(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        code = _run(
            tmp_path, "generate", "--day", "upper_push",
            "--level", "advanced", "--equipment", "Barbell,Dumbbells",
        )
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["exercises"][0]["key"] == "barbell_bench_press"
        assert len(data["exercises"][0]["sets"]) == 5

    def test_unknown_level_fails(self, tmp_path: Path) -> None:
        code = _run(tmp_path, "generate", "--day", "full_body", "--level", "expert", "--equipment", "")
        assert code == 1

    def test_unknown_day_rejected_by_parser(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            _run(tmp_path, "generate", "--day", "leg_day")


class TestProgression:
    def test_log_then_status(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run(tmp_path, "log", "--weight", "100", "--exercises", "5") == 0
        assert "+260 XP" in capsys.readouterr().out
        assert _run(tmp_path, "status") == 0
        status = json.loads(capsys.readouterr().out)
        assert status["experience"] == 260
        assert status["level"] == 2
        assert status["experience_to_next_level"] == 140

    def test_grant_prints_events(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert _run(tmp_path, "grant", "--xp", "62500") == 0
        out = capsys.readouterr().out
        assert "level_up" in out
        assert "tier_changed" in out

    def test_negative_grant_fails(self, tmp_path: Path) -> None:
        assert _run(tmp_path, "grant", "--strength", "-3") == 1

    def test_reset(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        _run(tmp_path, "grant", "--strength", "10")
        assert _run(tmp_path, "reset") == 0
        capsys.readouterr()
        _run(tmp_path, "status")
        assert json.loads(capsys.readouterr().out)["experience"] == 0
