"""errtuple - tuple-based Result convention for Python.

Turn raising calls into ``(err, value)`` pairs and back, without giving up
interoperability with libraries that raise.

Quick Start:
    >>> import json
    >>> from errtuple import safe, unsafe
    >>>
    >>> error, data = safe(lambda: json.loads(payload), "PARSE_ERROR")
    >>> if error:
    ...     print(error.label, error.message)
    >>>
    >>> unsafe(safe(lambda: 42, "NEVER"))  # back to raising semantics
    42

Wrapping functions:
    >>> from errtuple import from_throwable, from_async_throwable
    >>> parse = from_throwable(json.loads, "PARSE_ERROR")
    >>> error, data = parse('{"a": 1}')
    >>>
    >>> @from_async_throwable(label="FETCH_ERROR")
    ... async def fetch(url: str) -> bytes: ...
    >>> error, body = await fetch("https://example.com")

Observing errors:
    >>> from errtuple import set_error_observer
    >>> from errtuple.observability import logging_observer
    >>> set_error_observer(logging_observer())
"""

from __future__ import annotations

__version__ = "0.1.0"

# Error model
from .errors import (
    Err,
    ErrException,
    ErrObserver,
    Label,
    OnErr,
    Result,
    ResultAsync,
    ResultAsyncFn,
    ResultErr,
    ResultFn,
    ResultOk,
    Source,
    clear_error_observer,
    create_err,
    err,
    err_from,
    get_error_observer,
    observing,
    ok,
    set_error_observer,
)

# Bridge
from .bridge import from_async_throwable, from_throwable, safe, safe_async, unsafe, unsafe_async

# Config
from .foundation.config import ErrtupleSettings, clear_settings_cache, get_settings

__all__ = [
    "__version__",
    # Error model
    "Err", "ErrException", "create_err",
    # Result constructors
    "ok", "err", "err_from",
    # Bridge
    "safe", "unsafe", "from_throwable", "safe_async", "unsafe_async", "from_async_throwable",
    # Observer hook
    "set_error_observer", "clear_error_observer", "get_error_observer", "observing",
    # Types
    "Label", "Source", "OnErr", "ErrObserver",
    "Result", "ResultOk", "ResultErr", "ResultFn", "ResultAsync", "ResultAsyncFn",
    # Config
    "ErrtupleSettings", "get_settings", "clear_settings_cache",
]
