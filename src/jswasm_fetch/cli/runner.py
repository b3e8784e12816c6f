"""CLI runner for jswasm-fetch.

Resolves settings from the settings file and command-line flags, applies
log levels, and runs the workflow inside one aiohttp session.
"""

from argparse import Namespace
from collections.abc import Sequence

import aiohttp

from jswasm_fetch.cli.parser import CLIParser
from jswasm_fetch.config import Settings, SettingsLoader
from jswasm_fetch.core.workflow import WasmFetchWorkflow, WorkflowResult
from jswasm_fetch.logger import get_logger, update_logger_levels

logger = get_logger(__name__)


class CLIRunner:
    """Parse arguments and execute the workflow."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        """Initialize runner.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        """
        self.args = CLIParser().parse_args(argv)

    def resolve_settings(self, args: Namespace | None = None) -> Settings:
        """Merge settings file values with command-line overrides.

        Raises:
            ConfigurationError: If the result is invalid

        """
        args = args or self.args
        settings = SettingsLoader(args.config_file).load()
        return settings.with_overrides(
            owner=args.owner,
            repo=args.repo,
            asset_suffix=args.asset_suffix,
            output_dir=args.output_dir,
            console_log_level="DEBUG" if args.verbose else None,
        )

    async def run(self) -> WorkflowResult:
        """Run the workflow once.

        Returns:
            WorkflowResult of the run

        """
        settings = self.resolve_settings()
        update_logger_levels(settings.console_log_level, settings.log_level)
        logger.debug("Resolved settings: %s", settings)

        async with aiohttp.ClientSession() as session:
            return await WasmFetchWorkflow(settings, session).run()
