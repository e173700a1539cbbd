"""Configuration file loading and merging.

Three layers are combined, later ones winning:

- the global file (~/.lintprogress/config/config.yml)
- the project file (.lintprogress.yml in the project root) or the file
  given with --config
- options passed on the command line
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from lintprogress.config.models import LintProgressConfig, OutputConfig
from lintprogress.config.validation import validate_config
from lintprogress.core.errors import LintProgressError, UnknownSeverityError
from lintprogress.core.logging import get_logger
from lintprogress.core.models import Severity
from lintprogress.core.paths import get_lintprogress_home

LOGGER = get_logger(__name__)

# Searched in order; the first existing file wins.
PROJECT_CONFIG_NAMES = [
    ".lintprogress.yml",
    ".lintprogress.yaml",
    "lintprogress.yml",
    "lintprogress.yaml",
]
GLOBAL_CONFIG_NAME = "config.yml"

_TRUE_STRINGS = ("true", "yes", "1")
_FALSE_STRINGS = ("false", "no", "0")


class ConfigError(LintProgressError):
    """Configuration loading or parsing error."""


def load_config(
    project_root: Path,
    cli_config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LintProgressConfig:
    """Load the effective configuration.

    A broken global file is logged and ignored. A broken project or custom
    file is an error, since the user is pointing at it directly.

    Args:
        project_root: Directory searched for a project config file.
        cli_config_path: Config file given with --config. Replaces the
            project file when set.
        cli_overrides: Values from command-line flags.

    Returns:
        Merged LintProgressConfig instance.

    Raises:
        ConfigError: If the custom file is missing, or the project/custom
            file can't be parsed or holds invalid values.
    """
    sources: List[str] = []
    merged: Dict[str, Any] = {}

    global_path = find_global_config()
    if global_path is not None:
        try:
            merged = apply_layer(merged, _read_layer(global_path))
            sources.append(f"global:{global_path}")
        except (ConfigError, OSError) as e:
            LOGGER.warning(f"Ignoring global config {global_path}: {e}")

    if cli_config_path is not None:
        if not cli_config_path.exists():
            raise ConfigError(f"Config file not found: {cli_config_path}")
        file_source = ("custom", cli_config_path)
    else:
        project_path = find_project_config(project_root)
        file_source = ("project", project_path) if project_path is not None else None

    if file_source is not None:
        label, path = file_source
        merged = apply_layer(merged, _read_layer(path))
        sources.append(f"{label}:{path}")

    if cli_overrides:
        merged = apply_layer(merged, cli_overrides)
        sources.append("cli")

    config = dict_to_config(merged)
    config._config_sources = sources

    LOGGER.debug(f"Config loaded from sources: {sources}")
    return config


def _read_layer(path: Path) -> Dict[str, Any]:
    """Read one config file, validate it and return its values."""
    try:
        data = load_yaml_file(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    validate_config(data, source=str(path))
    LOGGER.debug(f"Read config layer {path}")
    return data


def find_project_config(project_root: Path) -> Optional[Path]:
    """Return the first existing project config file, if any."""
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def find_global_config() -> Optional[Path]:
    """Find global config at ~/.lintprogress/config/config.yml."""
    config_path = get_lintprogress_home() / "config" / GLOBAL_CONFIG_NAME
    if config_path.exists():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Parse a YAML config file into a mapping.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")
    return data


def apply_layer(base: Dict[str, Any], layer: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay one config layer on the values collected so far.

    Top-level values replace earlier ones; the ``output`` section is merged
    key by key so a layer can change one output option without repeating
    the others.
    """
    result = dict(base)
    for key, value in layer.items():
        previous = result.get(key)
        if key == "output" and isinstance(previous, dict) and isinstance(value, dict):
            result[key] = {**previous, **value}
        else:
            result[key] = value
    return result


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")


def dict_to_config(data: Dict[str, Any]) -> LintProgressConfig:
    """Convert a merged config dict to a typed LintProgressConfig.

    Raises:
        ConfigError: If a value cannot be converted.
    """
    output_data = data.get("output") or {}
    if not isinstance(output_data, dict):
        raise ConfigError(f"'output' must be a mapping, got {type(output_data).__name__}")
    output = OutputConfig(
        format=str(output_data.get("format", "progress")),
        display_rule_ids=_parse_bool(
            output_data.get("display_rule_ids", False), "output.display_rule_ids"
        ),
    )

    fail_level = Severity.REFACTOR
    if data.get("fail_level") is not None:
        try:
            fail_level = Severity.parse(data["fail_level"])
        except UnknownSeverityError as e:
            raise ConfigError(f"Invalid 'fail_level': {e}") from e

    return LintProgressConfig(output=output, fail_level=fail_level)
