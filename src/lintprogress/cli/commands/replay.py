"""Replay command implementation.

Drives a formatter through a full run using recorded results.
"""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import IO, TYPE_CHECKING, List, Optional

from lintprogress.cli.commands import Command
from lintprogress.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_ISSUES_FOUND,
    EXIT_REPORTER_ERROR,
    EXIT_SUCCESS,
)
from lintprogress.config.models import LintProgressConfig
from lintprogress.core.errors import LintProgressError
from lintprogress.core.logging import get_logger
from lintprogress.core.models import Severity
from lintprogress.core.results import FileResult, ResultsError, load_results
from lintprogress.formatters import get_formatter_plugin, list_available_formatters

if TYPE_CHECKING:
    from lintprogress.formatters.base import FormatterPlugin

LOGGER = get_logger(__name__)


class ReplayCommand(Command):
    """Reports a recorded results document through a formatter."""

    def __init__(self, output: Optional[IO[str]] = None) -> None:
        self._output = output

    @property
    def name(self) -> str:
        """Command identifier."""
        return "replay"

    def execute(self, args: Namespace, config: "LintProgressConfig | None" = None) -> int:
        """Execute the replay command.

        Args:
            args: Parsed command-line arguments.
            config: Effective configuration (defaults when None).

        Returns:
            Exit code: 0 = clean, 1 = offenses at or above the fail level,
            2 = reporting failed, 3 = bad input.
        """
        config = config if config is not None else LintProgressConfig()
        output = self._output if self._output is not None else sys.stdout

        try:
            results = load_results(args.results)
        except ResultsError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        try:
            formatter = get_formatter_plugin(
                config.output.format,
                output,
                display_rule_ids=config.output.display_rule_ids,
            )
        except TypeError as e:
            LOGGER.error(f"Cannot create formatter '{config.output.format}': {e}")
            return EXIT_INVALID_USAGE
        if formatter is None:
            available = ", ".join(list_available_formatters())
            LOGGER.error(f"Unknown formatter '{config.output.format}' (available: {available})")
            return EXIT_INVALID_USAGE

        try:
            self._run(formatter, results)
            failing = count_failing_offenses(results, config.fail_level)
        except LintProgressError as e:
            LOGGER.error(f"Reporting failed: {e}")
            return EXIT_REPORTER_ERROR

        LOGGER.info(f"{failing} offense(s) at or above '{config.fail_level.value}'")
        return EXIT_ISSUES_FOUND if failing else EXIT_SUCCESS

    @staticmethod
    def _run(formatter: "FormatterPlugin", results: List[FileResult]) -> None:
        files = [result.path for result in results]
        formatter.started(files)
        for result in results:
            formatter.file_started(result.path)
            formatter.file_finished(result.path, result.offenses)
        formatter.finished(files)


def count_failing_offenses(results: List[FileResult], fail_level: Severity) -> int:
    """Count offenses whose severity is at or above the fail level."""
    return sum(
        1
        for result in results
        for offense in result.offenses
        if Severity.parse(offense.severity).rank >= fail_level.rank
    )
