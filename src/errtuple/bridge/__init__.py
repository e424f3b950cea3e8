"""Bridge functions crossing the raise/Result boundary in either direction."""

from .aio import from_async_throwable, safe_async, unsafe_async
from .sync import from_throwable, safe, unsafe

__all__ = [
    "safe", "unsafe", "from_throwable",
    "safe_async", "unsafe_async", "from_async_throwable",
]
