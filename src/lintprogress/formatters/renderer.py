"""Offense rendering and progress mark selection.

Both are pure: the same input always yields the same text, and nothing
here writes to an output stream.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from lintprogress.core.errors import OffenseLocationError
from lintprogress.core.models import Offense, Severity, SourceBuffer

CLEAN_MARK = "."


def worst_severity(offenses: Iterable[Offense]) -> Optional[Severity]:
    """Return the most severe severity among offenses, or None if empty.

    Raises:
        UnknownSeverityError: If any offense has an unrecognized severity.
    """
    severities = [Severity.parse(offense.severity) for offense in offenses]
    if not severities:
        return None
    return max(severities, key=lambda sev: sev.rank)


def mark_for(offenses: Iterable[Offense]) -> str:
    """Return the single progress character for a file's offenses.

    Examples:
        no offenses -> "."
        refactor + error -> "E"
    """
    worst = worst_severity(offenses)
    if worst is None:
        return CLEAN_MARK
    return worst.code


class OffenseRenderer:
    """Formats one offense as a three-line block.

    Output shape::

        path/to/file.py:2:3: C: message
        <source line>
          ^^^

    The caret run covers the part of the offense on its first line, at
    least one character wide and never past the end of that line.
    """

    def __init__(self, display_rule_ids: bool = False) -> None:
        self.display_rule_ids = display_rule_ids

    def render(
        self,
        offense: Offense,
        buffer: Optional[SourceBuffer] = None,
        *,
        path: Optional[str] = None,
    ) -> str:
        """Render an offense.

        Args:
            offense: The offense to render.
            buffer: Source buffer to excerpt from. Defaults to the buffer of
                the offense location.
            path: Path shown in the header. Defaults to the buffer name.

        Returns:
            Three newline-terminated lines.

        Raises:
            UnknownSeverityError: If the offense severity is not recognized.
            OffenseLocationError: If the location lies outside the buffer.
        """
        severity = Severity.parse(offense.severity)
        if buffer is None:
            buffer = offense.location.buffer
        if path is None:
            path = buffer.name

        begin = offense.location.begin_pos
        end = offense.location.end_pos
        if end < begin or end > len(buffer.source):
            raise OffenseLocationError(end, len(buffer.source), buffer.name)
        line, column = buffer.line_column(begin)

        lines: List[str] = [
            self._header(path, line, column, severity, offense),
            buffer.source_line(line),
            self._caret_line(buffer, line, column, begin, end),
        ]
        return "\n".join(lines) + "\n"

    def _header(self, path: str, line: int, column: int, severity: Severity, offense: Offense) -> str:
        message = offense.message
        if self.display_rule_ids and offense.rule_id:
            message = f"{offense.rule_id}: {message}"
        return f"{path}:{line}:{column}: {severity.code}: {message}"

    @staticmethod
    def _caret_line(buffer: SourceBuffer, line: int, column: int, begin: int, end: int) -> str:
        line_begin, line_end = buffer.line_range(line)
        line_length = line_end - line_begin
        # Ranges spanning lines are cut at the end of the first line.
        span = min(end, line_end) - begin
        width = max(1, min(span, line_length - column + 1))
        return " " * (column - 1) + "^" * width
