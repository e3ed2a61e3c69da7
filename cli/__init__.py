"""CLI package for the calendar share tool."""

import logging
import sys

from calshare.config import ShareConfig

# Third-party loggers kept at WARNING so --verbose shows calshare's own output
QUIET_LOGGERS = ("icalendar", "pytz")


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: ShareConfig | None = None
) -> None:
    """Route calshare logging to a log file and stderr.

    The file always receives DEBUG records, including the observance window
    diagnostics from VTIMEZONE generation. The console shows warnings by
    default, errors with ``quiet``, and everything down to DEBUG with
    ``verbose``.

    Args:
        verbose: If True, show debug output on the console
        quiet: If True, show errors only
        config: ShareConfig with the log location (read from the environment
            when omitted)
    """
    config = config or ShareConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.DEBUG)
    else:
        console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Repeated invocations (tests, REPL) must not stack handlers
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
