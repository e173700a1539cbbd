"""Shared pytest fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from lintprogress.core.models import Offense, Severity, SourceBuffer, SourceRange

NINE_LINES = [f"This is line {index + 1}." for index in range(9)]
LINE_LENGTH = len(NINE_LINES[0]) + 1


@pytest.fixture
def nine_line_buffer() -> SourceBuffer:
    """Nine lines of 'This is line N.' without a trailing newline."""
    return SourceBuffer(name="test", source="\n".join(NINE_LINES))


@pytest.fixture
def make_offense(nine_line_buffer: SourceBuffer) -> Callable[..., Offense]:
    """Factory building offenses against the nine-line buffer."""

    def _make(
        severity: Severity | str = Severity.CONVENTION,
        begin: int = 0,
        end: int = 1,
        message: str = "message",
        rule_id: str = "CopName",
        buffer: SourceBuffer | None = None,
    ) -> Offense:
        return Offense(
            severity=severity,
            location=SourceRange(buffer or nine_line_buffer, begin, end),
            message=message,
            rule_id=rule_id,
        )

    return _make
