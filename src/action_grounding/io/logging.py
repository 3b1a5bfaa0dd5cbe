"""Define utility functions to simplify logging to the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("action_grounding")
console = Console()


def configure_logging(level: int | str = logging.INFO) -> None:
    """Route the package's log records to the shared rich console at the given level."""
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(level)


def log_info(message: str) -> None:
    """Log the given string to standard output."""
    logger.info(message)
