"""Argument parser construction for lintprogress CLI.

This module builds the argument parser with subcommands:
- lintprogress replay   - Replay recorded results through a formatter
- lintprogress validate - Validate a configuration file
"""

from __future__ import annotations

import argparse
from pathlib import Path

from lintprogress.core.models import SEVERITY_ORDER


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show lintprogress version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _build_replay_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'replay' subcommand parser."""
    replay_parser = subparsers.add_parser(
        "replay",
        help="Report recorded analysis results.",
        description=(
            "Read a JSON results document and report it file by file, "
            "exactly as a live run would."
        ),
    )
    replay_parser.add_argument(
        "results",
        type=Path,
        help="Path to the JSON results document.",
    )

    output_group = replay_parser.add_argument_group("output")
    output_group.add_argument(
        "--format",
        default=None,
        help="Formatter name (default: progress, or as specified in config file).",
    )
    output_group.add_argument(
        "--display-rule-ids",
        action="store_true",
        default=None,
        help="Prefix each offense message with its rule id.",
    )

    config_group = replay_parser.add_argument_group("configuration")
    config_group.add_argument(
        "--fail-level",
        choices=[sev.value for sev in SEVERITY_ORDER],
        default=None,
        help="Exit with code 1 if offenses at or above this severity are found.",
    )
    config_group.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .lintprogress.yml in the current directory).",
    )


def _build_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'validate' subcommand parser."""
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a configuration file.",
    )
    validate_parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .lintprogress.yml in the current directory).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the main argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="lintprogress",
        description="lintprogress - console progress reporter for static analysis.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", title="commands")
    _build_replay_parser(subparsers)
    _build_validate_parser(subparsers)

    return parser
