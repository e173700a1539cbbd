"""Typed configuration objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from lintprogress.core.models import Severity


@dataclass
class OutputConfig:
    """Output settings."""

    format: str = "progress"
    display_rule_ids: bool = False


@dataclass
class LintProgressConfig:
    """Complete lintprogress configuration.

    Attributes:
        output: Formatter selection and rendering options.
        fail_level: Lowest severity that makes a run fail.
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    fail_level: Severity = Severity.REFACTOR

    # Populated by the loader for diagnostics
    _config_sources: List[str] = field(default_factory=list, repr=False)
