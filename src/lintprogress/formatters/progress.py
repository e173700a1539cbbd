"""Progress formatter: one live mark per file, full listing at the end."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import IO, List, Optional, Sequence

from lintprogress.core.errors import ContractViolationError, RenderError
from lintprogress.core.logging import get_logger
from lintprogress.core.models import Offense
from lintprogress.formatters.aggregator import OffenseAggregator
from lintprogress.formatters.base import FormatterPlugin
from lintprogress.formatters.renderer import OffenseRenderer, mark_for
from lintprogress.formatters.summary import SummaryHook, SummaryReporter

LOGGER = get_logger(__name__)

OFFENSES_HEADER = "Offenses:"


def display_path(path: str) -> str:
    """Return the path shown in offense headers.

    Absolute paths under the current working directory are shown relative
    to it. Every other path is returned unchanged.
    """
    if not os.path.isabs(path):
        return path
    cwd = os.getcwd()
    try:
        common = os.path.commonpath([cwd, path])
    except ValueError:
        # Different drives on Windows.
        return path
    if common != cwd:
        return path
    return os.path.relpath(path, cwd)


@dataclass
class RunState:
    """Mutable state of a single run, replaced on every ``started``."""

    files: List[str]
    aggregator: OffenseAggregator = field(default_factory=OffenseAggregator)
    current_file: Optional[str] = None


class ProgressFormatter(FormatterPlugin):
    """Formatter that prints a progress mark per file and lists offenses.

    While the run is in progress each finished file produces exactly one
    character on the output stream, flushed immediately: ``.`` for a clean
    file, otherwise the code of its most severe offense (``R``, ``C``,
    ``W``, ``E`` or ``F``). When the run finishes, every offense is printed
    as a three-line block grouped by file, followed by the summary.

    The formatter is not thread-safe; drivers analyzing files in parallel
    must serialize the lifecycle calls.
    """

    def __init__(
        self,
        output: IO[str],
        summary_hook: Optional[SummaryHook] = None,
        renderer: Optional[OffenseRenderer] = None,
        display_rule_ids: bool = False,
    ) -> None:
        """Initialize ProgressFormatter.

        Args:
            output: Output stream all report text is written to.
            summary_hook: Callable invoked once at the end of every run with
                ``(output, inspected_count, offense_count)``. Defaults to
                ``SummaryReporter``.
            renderer: Offense renderer. Built from ``display_rule_ids`` when
                not given.
            display_rule_ids: Prefix offense messages with their rule id.
        """
        super().__init__(output)
        self.summary_hook: SummaryHook = summary_hook if summary_hook is not None else SummaryReporter()
        self.renderer = renderer if renderer is not None else OffenseRenderer(display_rule_ids)
        self._state: Optional[RunState] = None

    @property
    def name(self) -> str:
        return "progress"

    @property
    def aggregator(self) -> OffenseAggregator:
        return self._require_state("aggregator").aggregator

    def started(self, files: Sequence[str]) -> None:
        self._state = RunState(files=[os.fspath(f) for f in files])
        LOGGER.debug(f"Progress run started with {len(self._state.files)} file(s)")

    def file_started(self, path: str) -> None:
        state = self._require_state("file_started")
        state.current_file = os.fspath(path)

    def file_finished(self, path: str, offenses: Sequence[Offense]) -> None:
        state = self._require_state("file_finished")
        path = os.fspath(path)
        if path in state.aggregator:
            raise ContractViolationError(f"file_finished called twice for {path!r}")

        self.report_file_as_mark(offenses)
        state.aggregator.record(path, offenses)
        state.current_file = None

    def report_file_as_mark(self, offenses: Sequence[Offense]) -> None:
        """Write and flush the single mark for one file's offenses."""
        mark = mark_for(offenses)
        self.output.write(mark)
        self.output.flush()

    def finished(self, files: Sequence[str]) -> None:
        state = self._require_state("finished")
        inspected = [os.fspath(f) for f in files]
        if inspected != state.files:
            raise ContractViolationError(
                f"finished called with {len(inspected)} file(s) that do not match "
                f"the {len(state.files)} file(s) passed to started"
            )

        # End the line of progress marks.
        self.output.write("\n")
        if state.aggregator.has_any():
            self.report_offenses(state.aggregator)

        self.report_summary(len(inspected), state.aggregator.offense_count)
        self.output.flush()
        self._state = None
        LOGGER.debug("Progress run finished")

    def report_offenses(self, aggregator: OffenseAggregator) -> None:
        """Write the ``Offenses:`` header and one block per offense."""
        self.output.write(f"\n{OFFENSES_HEADER}\n\n")
        for path, offenses in aggregator.entries():
            shown = display_path(path)
            for offense in offenses:
                try:
                    block = self.renderer.render(offense, path=shown)
                except RenderError as e:
                    LOGGER.warning(f"Skipping offense {offense.rule_id or '?'} in {path}: {e}")
                    continue
                self.output.write(block)

    def report_summary(self, inspected_count: int, offense_count: int) -> None:
        self.summary_hook(self.output, inspected_count, offense_count)

    def _require_state(self, operation: str) -> RunState:
        if self._state is None:
            raise ContractViolationError(f"{operation} called before started")
        return self._state
