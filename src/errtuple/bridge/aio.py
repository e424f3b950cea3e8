"""Asynchronous bridge: same contracts as the sync bridge, over awaitables.

    >>> async def boom() -> None:
    ...     raise ConnectionError("x")
    >>> error, value = await safe_async(boom(), "NET_ERROR")
    >>> error.label, error.message, value
    ('NET_ERROR', 'x', None)

Only ``Exception`` subclasses are captured. ``asyncio.CancelledError`` passes
through untouched, so cancelling an awaiting task still cancels it.
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import TYPE_CHECKING, Awaitable, Callable, ParamSpec, TypeVar, overload

from ..errors import Err, ok
from .sync import unsafe

if TYPE_CHECKING:
    from ..errors import Label, OnErr, Result, ResultAsyncFn

P = ParamSpec("P")
T = TypeVar("T")


async def safe_async(awaitable: Awaitable[T], label: Label, on_err: OnErr | None = None) -> Result[T]:
    """Await ``awaitable``; a raised exception becomes the source of an Err tagged ``label``."""
    try:
        return ok(await awaitable)
    except Exception as e:
        return Err(label, e).tap(on_err).result()


async def unsafe_async(result: Awaitable[Result[T]] | Result[T], on_err: OnErr | None = None) -> T:
    """Await a Result, then return its value or raise its source. Plain Results are accepted too."""
    return unsafe(await result if inspect.isawaitable(result) else result, on_err)


@overload
def from_async_throwable(
    fn: Callable[P, Awaitable[T]], label: Label, on_err: OnErr | None = None,
) -> ResultAsyncFn[P, T]: ...
@overload
def from_async_throwable(
    fn: None = None, *, label: Label, on_err: OnErr | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], ResultAsyncFn[P, T]]: ...


def from_async_throwable(
    fn: Callable[P, Awaitable[T]] | None = None,
    label: Label | None = None,
    on_err: OnErr | None = None,
) -> ResultAsyncFn[P, T] | Callable[[Callable[P, Awaitable[T]]], ResultAsyncFn[P, T]]:
    """Wrap an async function so it resolves to a Result instead of raising.

    A synchronous raise from calling ``fn`` is captured like a rejection.
    """
    if label is None:
        raise TypeError("from_async_throwable() missing required argument: 'label'")

    def decorator(f: Callable[P, Awaitable[T]]) -> ResultAsyncFn[P, T]:
        async def call(*args: P.args, **kwargs: P.kwargs) -> T:
            return await f(*args, **kwargs)

        @wraps(f)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
            return await safe_async(call(*args, **kwargs), label, on_err)
        return wrapper

    if fn is not None:
        return decorator(fn)
    return decorator
