"""Route gitnav's loggers through Rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "gitnav-rich"


def configure_logging(debug: bool = False) -> None:
    """Attach a RichHandler to the ``gitnav`` logger (idempotent)."""
    logger = logging.getLogger("gitnav")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(logger.level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_path=debug,
        markup=False,
        rich_tracebacks=debug,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(logger.level)
    logger.addHandler(handler)
    logger.propagate = False
