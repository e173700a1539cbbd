"""Configuration validation for lintprogress.

Unknown keys are reported as warnings with a "did you mean" hint. Values
that would make loading fail are flagged as fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

import yaml

from lintprogress.core.logging import get_logger
from lintprogress.core.models import SEVERITY_ORDER

LOGGER = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config will fail at runtime
    WARNING = "warning"  # Likely mistake but config usable


@dataclass
class ConfigValidationIssue:
    """A validation issue for configuration with severity."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None


@dataclass
class ConfigValidationWarning:
    """A problem found in one config mapping."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None
    fatal: bool = False

    def describe(self) -> str:
        text = f"{self.message} in {self.source}"
        if self.suggestion:
            text += f" (did you mean '{self.suggestion}'?)"
        return text


VALID_TOP_LEVEL_KEYS: Set[str] = {"output", "fail_level"}
VALID_OUTPUT_KEYS: Set[str] = {"format", "display_rule_ids"}
VALID_SEVERITIES: Set[str] = {sev.value for sev in SEVERITY_ORDER}


def closest_match(value: str, choices: Iterable[str]) -> Optional[str]:
    """Return the choice closest to a misspelled value, if one is close enough."""
    matches = get_close_matches(value, sorted(choices), n=1, cutoff=0.6)
    return matches[0] if matches else None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate a configuration mapping.

    Never raises. Every warning is also logged.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings; fatal ones have ``fatal=True``.
    """
    if not isinstance(data, dict):  # type: ignore[unreachable]
        warnings = [ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
            fatal=True,
        )]
    else:
        warnings = [
            *_check_keys(data, VALID_TOP_LEVEL_KEYS, source, prefix=""),
            *_check_fail_level(data.get("fail_level"), source),
            *_check_output(data.get("output"), source),
        ]

    for warning in warnings:
        LOGGER.warning(warning.describe())
    return warnings


def _check_keys(
    section: Dict[str, Any], valid: Set[str], source: str, prefix: str
) -> Iterator[ConfigValidationWarning]:
    for key in section:
        if key in valid:
            continue
        name = f"{prefix}{key}"
        label = "Unknown top-level key" if not prefix else "Unknown key"
        yield ConfigValidationWarning(
            message=f"{label} '{name}'",
            source=source,
            key=name,
            suggestion=closest_match(str(key), valid),
        )


def _check_fail_level(value: Any, source: str) -> Iterator[ConfigValidationWarning]:
    if value is None:
        return
    if not isinstance(value, str):
        yield ConfigValidationWarning(
            message=f"'fail_level' must be a string, got {type(value).__name__}",
            source=source,
            key="fail_level",
            fatal=True,
        )
    elif value.lower() not in VALID_SEVERITIES:
        yield ConfigValidationWarning(
            message=f"Invalid severity '{value}' for 'fail_level'",
            source=source,
            key="fail_level",
            suggestion=closest_match(value.lower(), VALID_SEVERITIES),
            fatal=True,
        )


def _check_output(output: Any, source: str) -> Iterator[ConfigValidationWarning]:
    if output is None:
        return
    if not isinstance(output, dict):
        yield ConfigValidationWarning(
            message=f"'output' must be a mapping, got {type(output).__name__}",
            source=source,
            key="output",
            fatal=True,
        )
        return

    yield from _check_keys(output, VALID_OUTPUT_KEYS, source, prefix="output.")

    display_rule_ids = output.get("display_rule_ids")
    if display_rule_ids is not None and not isinstance(display_rule_ids, bool):
        yield ConfigValidationWarning(
            message="'output.display_rule_ids' must be a boolean",
            source=source,
            key="output.display_rule_ids",
        )
    fmt = output.get("format")
    if fmt is not None and not isinstance(fmt, str):
        yield ConfigValidationWarning(
            message="'output.format' must be a string",
            source=source,
            key="output.format",
            fatal=True,
        )


def validate_config_file(config_path: Path) -> Tuple[bool, List[ConfigValidationIssue]]:
    """Validate a configuration file from disk.

    Checks file existence, YAML syntax, and configuration semantics.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Tuple of (is_valid, issues) where is_valid is False if any errors exist.
    """
    source = str(config_path)

    if not config_path.exists():
        return False, [ConfigValidationIssue(
            message=f"Configuration file not found: {config_path}",
            source=source,
            severity=ValidationSeverity.ERROR,
        )]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [ConfigValidationIssue(
            message=f"Invalid YAML syntax: {e}",
            source=source,
            severity=ValidationSeverity.ERROR,
        )]

    if data is None:
        return True, [ConfigValidationIssue(
            message="Configuration file is empty",
            source=source,
            severity=ValidationSeverity.WARNING,
        )]

    issues = [
        ConfigValidationIssue(
            message=warning.message,
            source=warning.source,
            severity=ValidationSeverity.ERROR if warning.fatal else ValidationSeverity.WARNING,
            key=warning.key,
            suggestion=warning.suggestion,
        )
        for warning in validate_config(data, source=source)
    ]
    is_valid = not any(i.severity == ValidationSeverity.ERROR for i in issues)
    return is_valid, issues
