"""Main CLI entry point for jswasm-fetch."""

import sys
from collections.abc import Sequence

import uvloop

from jswasm_fetch.cli import CLIRunner
from jswasm_fetch.exceptions import JswasmFetchError
from jswasm_fetch.logger import PLAIN, get_logger

logger = get_logger(__name__)


async def async_main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI asynchronously."""
    runner = CLIRunner(argv)
    await runner.run()
    logger.debug("CLI completed successfully")


def main(argv: Sequence[str] | None = None) -> None:
    """Run the CLI application.

    Exits with status 0 on success and 1 on any error, after printing a
    bare ``Error: <message>`` line to standard error.
    """
    try:
        uvloop.run(async_main(argv))
    except KeyboardInterrupt:
        logger.warning("Cancelled by user", extra=PLAIN)
        sys.exit(1)
    except JswasmFetchError as e:
        logger.error("Error: %s", e, extra=PLAIN)  # noqa: TRY400
        logger.debug("Failure details", exc_info=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Error: %s", e, extra=PLAIN)  # noqa: TRY401
        sys.exit(1)


if __name__ == "__main__":
    main()
