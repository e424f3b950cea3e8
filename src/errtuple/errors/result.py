"""Result constructors.

A Result is the tuple ``(err, value)``. Exactly one slot is populated:

    >>> ok({"id": 1})
    (None, {'id': 1})
    >>> error, value = err("NOT_FOUND")
    >>> error.label, value
    ('NOT_FOUND', None)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, overload

from .errors import Err, create_err

if TYPE_CHECKING:
    from .types import Label, ResultErr, ResultOk, Source

T = TypeVar("T")


@overload
def ok() -> ResultOk[None]: ...
@overload
def ok(value: T) -> ResultOk[T]: ...


def ok(value: T | None = None) -> ResultOk[T | None]:
    """Construct a success Result: ``(None, value)``."""
    return None, value


@overload
def err(label_or_err: Label, source: Source = None) -> ResultErr: ...
@overload
def err(label_or_err: Err) -> ResultErr: ...


def err(label_or_err: Label | Err, source: Source = None) -> ResultErr:
    """Construct a failure Result from a label (and optional source) or an existing Err.

    An existing Err is used as-is and ``source`` is ignored.
    """
    error = label_or_err if isinstance(label_or_err, Err) else create_err(label_or_err, source)
    return error, None


def err_from(error: Err) -> ResultErr:
    """Wrap an already-constructed Err into a failure Result."""
    if not isinstance(error, Err):
        raise TypeError(f"err_from() expects an Err, got {type(error).__name__}")
    return error, None
