"""Type aliases for tuple Results.

A Result is a plain two-slot tuple, error first: ``(None, value)`` on success,
``(Err, None)`` on failure. Consumers destructure it positionally.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, ParamSpec, TypeAlias, TypeVar, Union

if TYPE_CHECKING:
    from .errors import Err

T = TypeVar("T")
P = ParamSpec("P")

Label: TypeAlias = str
Source: TypeAlias = Any

OnErr: TypeAlias = "Callable[[Err], None]"
ErrObserver: TypeAlias = "Callable[[Err], None]"

ResultOk: TypeAlias = tuple[None, T]
ResultErr: TypeAlias = "tuple[Err, None]"
Result: TypeAlias = Union[tuple[None, T], "tuple[Err, None]"]

ResultFn: TypeAlias = Callable[P, Result[T]]
ResultAsync: TypeAlias = Awaitable[Result[T]]
ResultAsyncFn: TypeAlias = Callable[P, Awaitable[Result[T]]]
