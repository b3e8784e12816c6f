"""Command-line interface for jswasm-fetch."""

from jswasm_fetch.cli.parser import CLIParser
from jswasm_fetch.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
