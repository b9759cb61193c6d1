"""Structured debug events routed through the standard logging module."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger("judo.debug")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _format_value(value: Any) -> str:
    text = str(value)
    if " " in text or not text:
        return repr(text)
    return text


def emit_debug_event(name: str, /, **data: Any) -> None:
    """Emit a named debug event with key/value context.

    Events are cheap when debug logging is off; the message is only
    formatted if a handler will accept it.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    fields = " ".join(f"{key}={_format_value(value)}" for key, value in data.items() if value is not None)
    if fields:
        logger.debug("%s %s", name, fields)
    else:
        logger.debug("%s", name)


def configure_logging(*, debug: bool, log_file: Path | None) -> logging.Handler | None:
    """Attach a file handler for debug events.

    The terminal is owned by the UI, so events never go to stderr.
    Returns the installed handler, or None when debug logging is disabled.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if not debug or log_file is None:
        logger.setLevel(logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return None

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    emit_debug_event("logging.configured", path=str(log_file))
    return handler
