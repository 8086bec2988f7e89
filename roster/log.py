"""Logging setup: stdlib logging rendered through Rich on stderr."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int | str, console: Optional[Console] = None) -> RichHandler:
    """Attach a RichHandler to the 'roster' logger.

    Calling again replaces the previous handler instead of stacking another.
    """
    logger = logging.getLogger("roster")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler
