"""Console formatter for jswasm-fetch.

INFO records are the tool's user-facing output (release details, the
list of extracted files) and are printed bare, as is any record logged
with ``extra=PLAIN``. Every other record gets a timestamp, the logger
name and, on a terminal, an ANSI-colored level.
"""

import logging

from jswasm_fetch.constants import LOG_COLORS

PLAIN = {"plain": True}


class ConsoleFormatter(logging.Formatter):
    """Bare INFO lines, structured lines for every other level.

    Example Output:
        INFO:     "Version: v2.0.2"
        WARNING:  "12:30:45 - jswasm_fetch.core.workflow - WARNING - ..."
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        use_color: bool = True,
    ) -> None:
        """Initialize formatter.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps
            use_color: Wrap the level name in ANSI color codes

        """
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` according to its level."""
        if record.levelno == logging.INFO or getattr(record, "plain", False):
            return record.getMessage()

        color = LOG_COLORS.get(record.levelname) if self.use_color else None
        if color is None:
            return super().format(record)

        # The record is shared with the file handler; restore it afterwards.
        original = record.levelname
        record.levelname = f"{color}{original}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original
