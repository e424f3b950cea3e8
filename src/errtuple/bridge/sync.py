"""Synchronous bridge between raising code and Result tuples.

    >>> safe(lambda: json.loads('{"a":1}'), "PARSE_ERROR")
    (None, {'a': 1})
    >>> error, _ = safe(lambda: json.loads("not json"), "PARSE_ERROR")
    >>> type(error.source).__name__
    'JSONDecodeError'

``unsafe`` goes the other way and re-raises the original source, so
``unsafe(safe(fn, label))`` behaves exactly like ``fn()``.
"""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar, overload

from ..errors import Err, ok

if TYPE_CHECKING:
    from ..errors import Label, OnErr, Result, ResultFn

P = ParamSpec("P")
T = TypeVar("T")


def safe(fn: Callable[[], T], label: Label, on_err: OnErr | None = None) -> Result[T]:
    """Call ``fn()``; a raised exception becomes the source of an Err tagged ``label``."""
    try:
        return ok(fn())
    except Exception as e:
        return Err(label, e).tap(on_err).result()


def unsafe(result: Result[T], on_err: OnErr | None = None) -> T:
    """Return the value of an Ok Result; for an Err, call ``on_err`` then raise its source."""
    error, value = result
    if error is not None:
        error.tap(on_err).raise_source()
    return value  # type: ignore[return-value]


@overload
def from_throwable(fn: Callable[P, T], label: Label, on_err: OnErr | None = None) -> ResultFn[P, T]: ...
@overload
def from_throwable(
    fn: None = None, *, label: Label, on_err: OnErr | None = None,
) -> Callable[[Callable[P, T]], ResultFn[P, T]]: ...


def from_throwable(
    fn: Callable[P, T] | None = None,
    label: Label | None = None,
    on_err: OnErr | None = None,
) -> ResultFn[P, T] | Callable[[Callable[P, T]], ResultFn[P, T]]:
    """Wrap a raising function so it returns a Result instead.

    Works directly or as a decorator factory:
        >>> parse = from_throwable(json.loads, "PARSE_ERROR")
        >>> @from_throwable(label="PARSE_ERROR")
        ... def parse_int(text: str) -> int:
        ...     return int(text)
    """
    if label is None:
        raise TypeError("from_throwable() missing required argument: 'label'")

    def decorator(f: Callable[P, T]) -> ResultFn[P, T]:
        @wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
            return safe(lambda: f(*args, **kwargs), label, on_err)
        return wrapper

    if fn is not None:
        return decorator(fn)
    return decorator
