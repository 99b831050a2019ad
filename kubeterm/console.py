"""
Shared Rich Console singleton and logging setup.

Every module prints through the one Console created here, so Rich can keep
track of terminal width, color support and live displays in one place, and
tests can patch `console` once to silence or inspect output.

Diagnostic logging (e.g. a command handler raising) goes through the standard
`logging` module under the "kubeterm" logger. `setup_logging()` routes it to
the same Console via Rich's RichHandler so log records and console output
share formatting.

Usage:
    from .console import console
    console.print("[green]Done[/green]")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# The shared console instance. All terminal output outside the Textual app
# flows through this object.
console = Console()

LOGGER_NAME = "kubeterm"


def setup_logging(
    level: int | str = logging.WARNING, handler: logging.Handler | None = None
) -> logging.Logger:
    """Configure the kubeterm logger. Safe to call repeatedly.

    Defaults to a RichHandler on the shared console. The TUI passes Textual's
    own handler instead, since writing to the terminal behind a running
    Textual app would corrupt the screen.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    if not logger.handlers:
        logger.addHandler(
            handler or RichHandler(console=console, show_path=False, rich_tracebacks=True)
        )
    return logger
