# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging helpers for applications that want to see Argmatch's debug output.

The parser core only emits records on the "argmatch" logger and never installs
handlers by itself. `enable_logging()` attaches a single handler to that logger,
either a Rich console handler for humans or a JSON formatter for log shippers,
without touching the root logger or any handler the host application owns.
`disable_logging()` removes it again.

Example:
    enable_logging("cli", level=logging.DEBUG)
    registry.parse(sys.argv[1:])   # bindings and delegations are logged
    disable_logging()
"""
from __future__ import annotations

import logging
from typing import IO

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler

from argmatch.logger import logger

_HANDLER_NAME = "argmatch-handler"


def _installed_handler() -> logging.Handler | None:
    return next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)


def disable_logging() -> None:
    """Remove the handler installed by `enable_logging()`, if any."""
    handler = _installed_handler()
    if handler is None:
        return
    logger.removeHandler(handler)
    handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def enable_logging(
    mode: str = "cli",
    level: int = logging.DEBUG,
    stream: IO[str] | None = None,
    propagate: bool = False,
) -> logging.Handler:
    """
    Attach a handler to the "argmatch" logger.

    Calling it again replaces the previously installed handler, so repeated
    calls never duplicate output.

    Args:
        mode (str):
            - "cli": human-readable Rich output
            - "json": one JSON object per record
        level (int): Level for the "argmatch" logger and its handler.
        stream (IO[str] | None): Destination; defaults to stderr.
        propagate (bool): Whether records should also reach ancestor loggers.

    Returns:
        logging.Handler: The installed handler.

    Raises:
        ValueError: If an invalid `mode` is passed.
    """
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            console=Console(file=stream, stderr=stream is None),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    disable_logging()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
    logger.debug("Logging enabled in '%s' mode.", mode)
    return handler
