"""Logging integration for the error observer hook.

The library itself only logs failures of caller-supplied callbacks (on the
``errtuple.observer`` logger). Logging of errors is opt-in by installing an
observer:

    >>> from errtuple import set_error_observer
    >>> from errtuple.observability import configure_logging, logging_observer
    >>> configure_logging("INFO")
    >>> set_error_observer(logging_observer())
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from ..foundation.config import get_settings

if TYPE_CHECKING:
    from ..errors import Err, ErrObserver

logger = logging.getLogger("errtuple.errors")

_HANDLER_NAME = "errtuple-stream"


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping()[(level or get_settings().logging.level).upper()]


def logging_observer(log: logging.Logger | None = None, level: int | str | None = None) -> ErrObserver:
    """Build an observer that logs every constructed Err.

    Args:
        log: Logger to write to (defaults to errtuple.errors)
        level: Record level (defaults to ERRTUPLE_LOG_LEVEL)
    """
    target = log or logger
    lvl = _resolve_level(level)
    include_stack = get_settings().logging.include_stack

    def observe(err: Err) -> None:
        if not target.isEnabledFor(lvl):
            return
        exc_info = err.source if include_stack and err.traceback is not None else None
        target.log(
            lvl, "[%s] %s", err.label, err.message or err.name,
            exc_info=exc_info, extra={"label": err.label, "error_name": err.name},
        )

    return observe


def configure_logging(level: int | str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Attach a stream handler to the ``errtuple`` logger. Safe to call repeatedly."""
    root = logging.getLogger("errtuple")
    root.setLevel(_resolve_level(level))
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)
    return root
