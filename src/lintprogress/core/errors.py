"""Exception hierarchy for lintprogress.

Two families matter to callers:

- Contract violations and unknown severities are programming or data errors
  in the driver/analysis engine. They are raised immediately and never
  swallowed.
- Render errors are local to a single offense. The progress formatter logs
  them and keeps going so the rest of the report is still produced.
"""

from __future__ import annotations

from typing import Any


class LintProgressError(Exception):
    """Base class for all lintprogress errors."""


class ContractViolationError(LintProgressError):
    """The reporter lifecycle was driven out of order."""


class UnknownSeverityError(LintProgressError):
    """An offense carries a severity outside the known enumeration."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown severity: {value!r}")
        self.value = value


class RenderError(LintProgressError):
    """A single offense could not be rendered."""


class OffenseLocationError(RenderError):
    """An offense location points outside its source buffer."""

    def __init__(self, offset: int, length: int, name: str = "") -> None:
        where = f" in {name}" if name else ""
        super().__init__(f"Offset {offset} is outside the source buffer{where} (length {length})")
        self.offset = offset
        self.length = length
        self.name = name
