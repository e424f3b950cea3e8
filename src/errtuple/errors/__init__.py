"""Error model for errtuple.

- Err/ErrException: Labeled failure record and its raisable carrier
- create_err: Fresh Err construction (synthesises a source when absent)
- ok/err/err_from: Result tuple constructors
- Observer hook: set_error_observer, clear_error_observer, observing
- Type aliases: Result, ResultOk, ResultErr, ResultFn, ResultAsync, ResultAsyncFn
"""

from .errors import Err, ErrException, create_err, describe
from .observer import clear_error_observer, get_error_observer, observing, set_error_observer
from .result import err, err_from, ok
from .types import (
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
)

__all__ = [
    # Error model
    "Err", "ErrException", "create_err", "describe",
    # Result constructors
    "ok", "err", "err_from",
    # Observer hook
    "set_error_observer", "clear_error_observer", "get_error_observer", "observing",
    # Types
    "Label", "Source", "OnErr", "ErrObserver",
    "Result", "ResultOk", "ResultErr", "ResultFn", "ResultAsync", "ResultAsyncFn",
]
