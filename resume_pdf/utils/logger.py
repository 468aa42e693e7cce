"""
Rich logging for the command-line tools.

Library modules only create module loggers; handlers are installed here, by
the CLI, once per process.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
}


def level_for_verbosity(verbosity: int) -> int:
    """Map ``-v`` counts to a log level (none: WARNING, -v: INFO, -vv: DEBUG)."""
    return _LEVELS.get(verbosity, logging.DEBUG)


def setup_logging(verbosity: int = 0) -> None:
    """
    Setup rich logging on the root logger.
    
    Args:
        verbosity: Number of ``-v`` flags given on the command line
    """
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=verbosity >= 2,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level_for_verbosity(verbosity))
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)

    # Quiet HTTP internals unless in full debug.
    if verbosity < 3:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
