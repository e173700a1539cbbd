"""CLI runner orchestration.

This module handles command dispatch and execution for the lintprogress CLI.
"""

from __future__ import annotations

from argparse import Namespace
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from lintprogress.cli.arguments import build_parser
from lintprogress.cli.commands.replay import ReplayCommand
from lintprogress.cli.commands.validate import ValidateCommand
from lintprogress.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from lintprogress.config import load_config
from lintprogress.config.loader import ConfigError
from lintprogress.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get lintprogress version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("lintprogress")
    except PackageNotFoundError:
        # Fallback for source checkouts without installed metadata.
        from lintprogress import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        self.parser = build_parser()
        self._version = get_version()
        self.replay_cmd = ReplayCommand()
        self.validate_cmd = ValidateCommand()

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None

        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            # argparse exits on --help (0) and on usage errors (2)
            return EXIT_SUCCESS if e.code in (0, None) else EXIT_INVALID_USAGE

        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)

        if command == "replay":
            return self._handle_replay(args)
        elif command == "validate":
            return self.validate_cmd.execute(args)
        else:
            self.parser.print_help()
            return EXIT_SUCCESS

    def _handle_replay(self, args: Namespace) -> int:
        """Load configuration and run the replay command."""
        try:
            config = load_config(
                project_root=Path.cwd(),
                cli_config_path=args.config,
                cli_overrides=self._cli_overrides(args),
            )
        except ConfigError as e:
            LOGGER.error(f"Configuration error: {e}")
            return EXIT_INVALID_USAGE

        return self.replay_cmd.execute(args, config)

    @staticmethod
    def _cli_overrides(args: Namespace) -> Dict[str, Any]:
        """Collect config overrides from explicitly passed CLI flags."""
        overrides: Dict[str, Any] = {}
        output: Dict[str, Any] = {}
        if args.format is not None:
            output["format"] = args.format
        if args.display_rule_ids is not None:
            output["display_rule_ids"] = args.display_rule_ids
        if output:
            overrides["output"] = output
        if args.fail_level is not None:
            overrides["fail_level"] = args.fail_level
        return overrides
