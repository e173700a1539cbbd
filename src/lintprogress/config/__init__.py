"""Configuration loading and validation for lintprogress."""

from lintprogress.config.loader import ConfigError, load_config
from lintprogress.config.models import LintProgressConfig, OutputConfig

__all__ = [
    "ConfigError",
    "LintProgressConfig",
    "OutputConfig",
    "load_config",
]
