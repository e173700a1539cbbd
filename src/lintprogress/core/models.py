from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Dict, List, Tuple, Union

from lintprogress.core.errors import OffenseLocationError, UnknownSeverityError


class Severity(str, Enum):
    """Offense severities, lowest first."""

    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def parse(cls, value: Union["Severity", str]) -> "Severity":
        """Resolve a severity member from a member or its name.

        Raises:
            UnknownSeverityError: If the value names no known severity.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnknownSeverityError(value)

    @property
    def rank(self) -> int:
        return SEVERITY_ORDER[self]

    @property
    def code(self) -> str:
        """Single-letter code used in progress marks and offense headers."""
        return SEVERITY_CODES[self]


# Single ordering table: ranks drive max-severity selection, codes are the
# first letter of each name.
SEVERITY_ORDER: Dict[Severity, int] = {
    Severity.REFACTOR: 0,
    Severity.CONVENTION: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
    Severity.FATAL: 4,
}

SEVERITY_CODES: Dict[Severity, str] = {sev: sev.value[0].upper() for sev in SEVERITY_ORDER}


@dataclass(frozen=True)
class SourceBuffer:
    """Immutable source text with offset to (line, column) resolution.

    Offsets, lines and columns all count characters, not bytes, so
    multi-byte text keeps carets aligned. Lines and columns are 1-based.
    """

    name: str
    source: str

    @cached_property
    def _line_starts(self) -> List[int]:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(self.source) if ch == "\n")
        return starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_column(self, offset: int) -> Tuple[int, int]:
        """Resolve a character offset to a 1-based (line, column) pair.

        The offset one past the last character is valid and resolves to the
        position just after the final character.

        Raises:
            OffenseLocationError: If the offset lies outside the buffer.
        """
        if offset < 0 or offset > len(self.source):
            raise OffenseLocationError(offset, len(self.source), self.name)
        index = bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index] + 1

    def line_range(self, line: int) -> Tuple[int, int]:
        """Return (begin, end) offsets of a line's content, terminator excluded."""
        if line < 1 or line > self.line_count:
            raise IndexError(f"Line {line} out of range for {self.name!r}")
        begin = self._line_starts[line - 1]
        if line < self.line_count:
            end = self._line_starts[line] - 1
        else:
            end = len(self.source)
        if end > begin and self.source[end - 1] == "\r":
            end -= 1
        return begin, end

    def source_line(self, line: int) -> str:
        """Return the text of a 1-based line without its line terminator."""
        begin, end = self.line_range(line)
        return self.source[begin:end]


@dataclass(frozen=True)
class SourceRange:
    """Half-open character range ``[begin_pos, end_pos)`` in a buffer."""

    buffer: SourceBuffer
    begin_pos: int
    end_pos: int

    @property
    def line(self) -> int:
        return self.buffer.line_column(self.begin_pos)[0]

    @property
    def column(self) -> int:
        return self.buffer.line_column(self.begin_pos)[1]


@dataclass(frozen=True)
class Offense:
    """A rule violation produced by the analysis engine.

    The severity is stored exactly as supplied. It is resolved with
    ``Severity.parse`` at the point of use so an unknown value surfaces as
    ``UnknownSeverityError`` instead of being silently coerced.
    """

    severity: Union[Severity, str]
    location: SourceRange
    message: str
    rule_id: str = ""

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column
