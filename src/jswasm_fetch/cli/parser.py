"""CLI argument parser for jswasm-fetch.

Every option is optional; running with no arguments fetches the default
upstream into ``./sqlite-wasm``.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path

from jswasm_fetch import __version__


class CLIParser:
    """Command-line argument parser for jswasm-fetch."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        return self.create_parser().parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog="jswasm-fetch",
            description=(
                "Download the latest SQLite WASM build from GitHub and "
                "extract its jswasm directory."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Fetch utelle/SQLite3MultipleCiphers into ./sqlite-wasm/jswasm
  %(prog)s

  # Another upstream and destination
  %(prog)s --owner sqlite --repo sqlite-wasm --dest public/sqlite

Environment:
  GITHUB_TOKEN  Token sent as a bearer Authorization header to raise
                API rate limits.
            """,
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        parser.add_argument(
            "--owner",
            help="upstream repository owner (default from settings)",
        )
        parser.add_argument(
            "--repo",
            help="upstream repository name (default from settings)",
        )
        parser.add_argument(
            "--suffix",
            dest="asset_suffix",
            help="asset filename suffix to select (default: -wasm.zip)",
        )
        parser.add_argument(
            "--dest",
            dest="output_dir",
            type=Path,
            help="destination directory (default: sqlite-wasm)",
        )
        parser.add_argument(
            "--config",
            dest="config_file",
            type=Path,
            help="path to settings.conf",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="show debug output on the console",
        )
        return parser
