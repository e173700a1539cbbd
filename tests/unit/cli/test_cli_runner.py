"""Tests for CLI runner."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from lintprogress.cli import main
from lintprogress.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_ISSUES_FOUND,
    EXIT_SUCCESS,
)
from lintprogress.cli.runner import CLIRunner, get_version


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty directory with an empty home."""
    monkeypatch.setenv("LINTPROGRESS_HOME", str(tmp_path / "home"))
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


def _results(workdir: Path, severity: str = "convention") -> Path:
    path = workdir / "results.json"
    path.write_text(json.dumps({
        "files": [
            {
                "path": "a.rb",
                "source": "puts 1\nputs 2\n",
                "offenses": [
                    {"severity": severity, "start": 7, "end": 11, "message": "foo", "rule_id": "Cop/A"},
                ],
            },
            {"path": "b.rb", "offenses": []},
        ]
    }), encoding="utf-8")
    return path


class TestGetVersion:
    """Tests for get_version function."""

    def test_get_version_from_metadata(self) -> None:
        with patch("lintprogress.cli.runner.version", return_value="1.2.3"):
            assert get_version() == "1.2.3"

    def test_get_version_fallback(self) -> None:
        from importlib.metadata import PackageNotFoundError

        from lintprogress import __version__

        with patch(
            "lintprogress.cli.runner.version",
            side_effect=PackageNotFoundError("not found"),
        ):
            assert get_version() == __version__


class TestCLIRunner:
    """Tests for CLIRunner class."""

    def test_run_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert CLIRunner().run(["--help"]) == EXIT_SUCCESS
        assert "usage:" in capsys.readouterr().out.lower()

    def test_run_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert CLIRunner().run(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip()

    def test_run_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert CLIRunner().run([]) == EXIT_SUCCESS
        assert "replay" in capsys.readouterr().out

    def test_bad_arguments(self) -> None:
        assert CLIRunner().run(["replay"]) == EXIT_INVALID_USAGE

    def test_replay_end_to_end(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        results = _results(isolated_env)

        exit_code = main(["replay", str(results)])

        assert exit_code == EXIT_ISSUES_FOUND
        assert capsys.readouterr().out == (
            "C.\n"
            "\n"
            "Offenses:\n"
            "\n"
            "a.rb:2:1: C: foo\n"
            "puts 2\n"
            "^^^^\n"
            "\n"
            "2 files inspected, 1 offense detected\n"
        )

    def test_replay_fail_level_flag(self, isolated_env: Path) -> None:
        results = _results(isolated_env, severity="convention")
        assert main(["replay", str(results), "--fail-level", "warning"]) == EXIT_SUCCESS

    def test_replay_display_rule_ids_flag(
        self, isolated_env: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        results = _results(isolated_env)
        main(["replay", str(results), "--display-rule-ids"])
        assert "a.rb:2:1: C: Cop/A: foo\n" in capsys.readouterr().out

    def test_replay_uses_project_config(
        self, isolated_env: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (isolated_env / ".lintprogress.yml").write_text(
            "output:\n  display_rule_ids: true\nfail_level: error\n", encoding="utf-8"
        )
        results = _results(isolated_env)

        assert main(["replay", str(results)]) == EXIT_SUCCESS
        assert "C: Cop/A: foo" in capsys.readouterr().out

    def test_replay_bad_config(self, isolated_env: Path) -> None:
        (isolated_env / ".lintprogress.yml").write_text("fail_level: severe\n", encoding="utf-8")
        results = _results(isolated_env)
        assert main(["replay", str(results)]) == EXIT_INVALID_USAGE

    def test_validate(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (isolated_env / ".lintprogress.yml").write_text("fail_level: error\n", encoding="utf-8")
        assert main(["validate"]) == EXIT_SUCCESS
        assert "Configuration is valid" in capsys.readouterr().out

    def test_validate_without_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["validate"]) == EXIT_INVALID_USAGE
        assert "No configuration file found" in capsys.readouterr().out

    def test_validate_with_errors(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = isolated_env / "custom.yml"
        config.write_text("fail_level: errror\n", encoding="utf-8")
        assert main(["validate", "--config", str(config)]) == EXIT_ISSUES_FOUND
        assert "did you mean 'error'?" in capsys.readouterr().out
