"""Tests for the replay command."""

from __future__ import annotations

import io
import json
from argparse import Namespace
from pathlib import Path
from typing import Any, Sequence
from unittest.mock import patch

from lintprogress.cli.commands.replay import ReplayCommand, count_failing_offenses
from lintprogress.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_ISSUES_FOUND,
    EXIT_REPORTER_ERROR,
    EXIT_SUCCESS,
)
from lintprogress.config.models import LintProgressConfig, OutputConfig
from lintprogress.core.models import Offense, Severity
from lintprogress.core.results import parse_results
from lintprogress.formatters.base import FormatterPlugin


def _write(tmp_path: Path, files: list) -> Path:
    path = tmp_path / "results.json"
    path.write_text(json.dumps({"files": files}), encoding="utf-8")
    return path


class TestReplayCommand:
    """Tests for ReplayCommand."""

    def test_name(self) -> None:
        assert ReplayCommand().name == "replay"

    def test_clean_run(self, tmp_path: Path) -> None:
        output = io.StringIO()
        results = _write(tmp_path, [{"path": "a.py"}, {"path": "b.py"}])

        exit_code = ReplayCommand(output).execute(Namespace(results=results))

        assert exit_code == EXIT_SUCCESS
        assert output.getvalue() == "..\n\n2 files inspected, no offenses detected\n"

    def test_unknown_formatter(self, tmp_path: Path) -> None:
        results = _write(tmp_path, [{"path": "a.py"}])
        config = LintProgressConfig(output=OutputConfig(format="fancy"))
        assert ReplayCommand(io.StringIO()).execute(Namespace(results=results), config) == EXIT_INVALID_USAGE

    def test_malformed_results(self, tmp_path: Path) -> None:
        bad = tmp_path / "results.json"
        bad.write_text("[]", encoding="utf-8")
        assert ReplayCommand(io.StringIO()).execute(Namespace(results=bad)) == EXIT_INVALID_USAGE

    def test_unknown_severity_is_a_reporter_error(self, tmp_path: Path) -> None:
        output = io.StringIO()
        results = _write(tmp_path, [
            {"path": "a.py", "source": "x", "offenses": [{"severity": "info", "start": 0, "end": 1}]},
        ])
        assert ReplayCommand(output).execute(Namespace(results=results)) == EXIT_REPORTER_ERROR
        assert output.getvalue() == ""

    def test_duplicate_paths_are_a_reporter_error(self, tmp_path: Path) -> None:
        output = io.StringIO()
        results = _write(tmp_path, [{"path": "a.py"}, {"path": "a.py"}])
        assert ReplayCommand(output).execute(Namespace(results=results)) == EXIT_REPORTER_ERROR
        assert output.getvalue() == "."

    def test_offenses_fail_the_run(self, tmp_path: Path) -> None:
        results = _write(tmp_path, [
            {"path": "a.py", "source": "x = 1\n", "offenses": [{"severity": "refactor", "start": 0, "end": 1}]},
        ])
        assert ReplayCommand(io.StringIO()).execute(Namespace(results=results)) == EXIT_ISSUES_FOUND


class TestCountFailingOffenses:
    """Tests for count_failing_offenses."""

    def test_counts_at_or_above_level(self, tmp_path: Path) -> None:
        results = parse_results({"files": [{
            "path": "a.py",
            "source": "abc",
            "offenses": [
                {"severity": "convention", "start": 0},
                {"severity": "warning", "start": 1},
                {"severity": "fatal", "start": 2},
            ],
        }]}, tmp_path)

        assert count_failing_offenses(results, Severity.REFACTOR) == 3
        assert count_failing_offenses(results, Severity.WARNING) == 2
        assert count_failing_offenses(results, Severity.FATAL) == 1


class NeedsColumnsFormatter(FormatterPlugin):
    """Formatter with a required constructor argument the CLI cannot supply."""

    def __init__(self, output: Any, columns: int) -> None:
        super().__init__(output)
        self.columns = columns

    @property
    def name(self) -> str:
        return "columns"

    def started(self, files: Sequence[str]) -> None:
        pass

    def file_finished(self, path: str, offenses: Sequence[Offense]) -> None:
        pass

    def finished(self, files: Sequence[str]) -> None:
        pass


class TestReplayThirdPartyFormatters:
    """Replay with formatters registered through entry points."""

    def test_formatter_that_cannot_be_created(self, tmp_path: Path) -> None:
        results = _write(tmp_path, [{"path": "a.py"}])
        config = LintProgressConfig(output=OutputConfig(format="columns", display_rule_ids=True))
        with patch(
            "lintprogress.formatters.discover_plugins",
            return_value={"columns": NeedsColumnsFormatter},
        ):
            exit_code = ReplayCommand(io.StringIO()).execute(Namespace(results=results), config)
        assert exit_code == EXIT_INVALID_USAGE
