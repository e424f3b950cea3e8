"""Error observer hook: a single optional callback notified on every Err construction.

The process-wide slot is last-write-wins; ``observing()`` overrides it for the
current context only (threads, asyncio tasks) and restores it on exit.

Example:
    >>> seen = []
    >>> with observing(seen.append):
    ...     create_err("NOT_FOUND")
    >>> seen[0].label
    'NOT_FOUND'
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from ..foundation.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .errors import Err
    from .types import ErrObserver

logger = logging.getLogger("errtuple.observer")

_UNSET = object()

_global_observer: ErrObserver | None = None
_scoped_observer: ContextVar[object] = ContextVar("errtuple_observer", default=_UNSET)


def set_error_observer(observer: ErrObserver) -> None:
    """Install the process-wide observer, replacing any previous one."""
    global _global_observer
    _global_observer = observer


def clear_error_observer() -> None:
    """Remove the process-wide observer."""
    global _global_observer
    _global_observer = None


def get_error_observer() -> ErrObserver | None:
    """Observer in effect for the current context (scoped override first)."""
    scoped = _scoped_observer.get()
    return _global_observer if scoped is _UNSET else scoped  # type: ignore[return-value]


@contextmanager
def observing(observer: ErrObserver | None) -> Iterator[None]:
    """Install ``observer`` for the enclosed block. ``None`` silences observation."""
    token = _scoped_observer.set(observer)
    try:
        yield
    finally:
        _scoped_observer.reset(token)


def run_callback(callback: Callable[[Err], None], err: Err, role: str) -> None:
    """Invoke a diagnostic callback with ``err``; its failures are logged, never raised."""
    try:
        callback(err)
    except Exception:
        if get_settings().log_callback_failures:
            logger.exception("%s failed while handling [%s]", role, err.label)


def notify(err: Err) -> None:
    """Hand a freshly constructed Err to the current observer, if any."""
    if (observer := get_error_observer()) is not None:
        run_callback(observer, err, "error observer")
