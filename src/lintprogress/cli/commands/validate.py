"""Validate command implementation.

Validates lintprogress configuration files and reports issues.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING

from lintprogress.cli.commands import Command
from lintprogress.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_ISSUES_FOUND, EXIT_SUCCESS
from lintprogress.config.loader import PROJECT_CONFIG_NAMES, find_project_config
from lintprogress.config.validation import ValidationSeverity, validate_config_file

if TYPE_CHECKING:
    from lintprogress.config.models import LintProgressConfig


class ValidateCommand(Command):
    """Validates lintprogress configuration files."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "validate"

    def execute(self, args: Namespace, config: "LintProgressConfig | None" = None) -> int:
        """Execute the validate command.

        Returns:
            Exit code: 0 = valid, 1 = has errors, 3 = file not found.
        """
        config_path = getattr(args, "config", None)
        if config_path:
            config_path = Path(config_path)
        else:
            config_path = find_project_config(Path.cwd())

        if config_path is None:
            print("No configuration file found.")
            print(f"Looked for: {', '.join(PROJECT_CONFIG_NAMES)}")
            return EXIT_INVALID_USAGE

        if not config_path.exists():
            print(f"Configuration file not found: {config_path}")
            return EXIT_INVALID_USAGE

        is_valid, issues = validate_config_file(config_path)

        for issue in issues:
            label = "Error" if issue.severity == ValidationSeverity.ERROR else "Warning"
            line = f"{label}: {issue.message}"
            if issue.suggestion:
                line += f" (did you mean '{issue.suggestion}'?)"
            print(line)

        if is_valid:
            print(f"Configuration is valid: {config_path}")
            return EXIT_SUCCESS
        return EXIT_ISSUES_FOUND
