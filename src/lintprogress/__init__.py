"""lintprogress - console progress-and-summary reporter for static analysis."""

from lintprogress.core.errors import (
    ContractViolationError,
    LintProgressError,
    OffenseLocationError,
    RenderError,
    UnknownSeverityError,
)
from lintprogress.core.models import Offense, Severity, SourceBuffer, SourceRange
from lintprogress.formatters import (
    OffenseAggregator,
    OffenseRenderer,
    ProgressFormatter,
    SummaryReporter,
    mark_for,
)

__version__ = "0.1.0"

__all__ = [
    "ContractViolationError",
    "LintProgressError",
    "Offense",
    "OffenseAggregator",
    "OffenseLocationError",
    "OffenseRenderer",
    "ProgressFormatter",
    "RenderError",
    "Severity",
    "SourceBuffer",
    "SourceRange",
    "SummaryReporter",
    "UnknownSeverityError",
    "mark_for",
    "__version__",
]
