"""Structured labeled errors.

Err is the failure arm of every Result: a caller-chosen label plus the
original cause ("source"). Any caught value is accepted as a source and
normalised into a diagnostic message:

- exception: ``str(exc)``, with ``cause``/``traceback``/``stack`` mirrored
- str: the string itself
- JSON-serialisable object: its compact JSON text
- anything else: ``""`` (the source is still kept intact)

Every construction notifies the current error observer exactly once.
"""

from __future__ import annotations

import traceback as tb
from typing import TYPE_CHECKING, Any, NoReturn, Self

import orjson
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..foundation.config import get_settings
from .observer import notify, run_callback

if TYPE_CHECKING:
    from types import TracebackType

    from .types import Label, OnErr, ResultErr, Source


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError


def describe(source: Source) -> str:
    """Render a failure cause as a message. Never raises."""
    if isinstance(source, BaseException):
        try:
            return str(source)
        except Exception:
            return ""
    if isinstance(source, str):
        return source
    option = orjson.OPT_NON_STR_KEYS | (orjson.OPT_SORT_KEYS if get_settings().json_sort_keys else 0)
    try:
        return orjson.dumps(source, default=_json_default, option=option).decode()
    except orjson.JSONEncodeError:
        return ""


class Err(BaseModel):
    """Structured failure record: classification label plus original cause.

    Attributes:
        label: Caller-chosen classification tag (open namespace, e.g. "FETCH_ERROR")
        source: Original failure cause; synthesised as ``Exception(label)`` when absent
        message: Diagnostic message derived from the source
        name: Exception class name of the source, "Err" for non-exception sources

    Example:
        >>> e = Err("PARSE_ERROR", ValueError("bad digit"))
        >>> e.message, e.name
        ('bad digit', 'ValueError')
        >>> Err("NOT_FOUND").source
        Exception('NOT_FOUND')
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "title": "Err",
            "description": "Labeled failure with its original cause",
            "examples": [{"label": "FETCH_ERROR", "message": "connection refused", "name": "ConnectionError"}],
        },
    )

    label: str = Field(description="Classification tag chosen by the caller")
    source: Any = Field(description="Original failure cause", repr=False)
    message: str = Field(default="", description="Message derived from the source")
    name: str = Field(default="Err", description="Source exception class name")

    def __init__(self, label: Label, source: Source = None, **data: Any) -> None:
        super().__init__(label=label, source=source, **data)

    @model_validator(mode="before")
    @classmethod
    def _fill_from_source(cls, data: Any) -> Any:
        """Synthesise a missing source and derive message/name from it."""
        if not isinstance(data, dict):
            return data
        source = data.get("source")
        if source is None:
            source = Exception(data.get("label"))
        derived = {
            "message": describe(source),
            "name": type(source).__name__ if isinstance(source, BaseException) else "Err",
        }
        return {**derived, **data, "source": source}

    def model_post_init(self, __context: Any) -> None:
        notify(self)

    # ─── Mirrored Diagnostics ───────────────────────────────────────────

    @property
    def cause(self) -> BaseException | None:
        """Explicit ``__cause__`` of an exception source."""
        return self.source.__cause__ if isinstance(self.source, BaseException) else None

    @property
    def traceback(self) -> TracebackType | None:
        """Traceback of an exception source, if it was ever raised."""
        return self.source.__traceback__ if isinstance(self.source, BaseException) else None

    @property
    def stack(self) -> str:
        """Formatted traceback text of an exception source, empty otherwise."""
        if self.traceback is None:
            return ""
        return "".join(tb.format_exception(self.source))

    # ─── Construction ───────────────────────────────────────────────────

    @classmethod
    def from_source(cls, source: Source, label: Label) -> Self:
        """Normalise an arbitrary caught value into an Err."""
        return cls(label, source)

    @classmethod
    def result_from(cls, source: Source, label: Label) -> ResultErr:
        """Normalise a caught value straight into an Err-carrying Result."""
        return cls(label, source), None

    # ─── Conversion ─────────────────────────────────────────────────────

    def result(self) -> ResultErr:
        """This error as an Err-carrying Result: ``(self, None)``."""
        return self, None

    def tap(self, on_err: OnErr | None = None) -> Self:
        """Pass self to an optional observation callback, return self."""
        if on_err is not None:
            run_callback(on_err, self, "on_err callback")
        return self

    def raise_source(self) -> NoReturn:
        """Raise the original cause; non-exception sources travel in ErrException."""
        if isinstance(self.source, BaseException):
            raise self.source
        raise ErrException(self)

    def to_dict(self) -> dict[str, str]:
        """JSON-safe summary for logs and telemetry."""
        return {"label": self.label, "name": self.name, "message": self.message, "source": repr(self.source)}

    def __hash__(self) -> int:
        """Hash on the derived fields; sources may be unhashable."""
        return hash((self.label, self.name, self.message))

    def __str__(self) -> str:
        return f"[{self.label}] {self.message}" if self.message else f"[{self.label}]"


class ErrException(Exception):
    """Exception carrying an Err whose source is not itself raisable."""

    __slots__ = ("error",)

    def __init__(self, error: Err) -> None:
        self.error = error
        super().__init__(error.message or error.label)


def create_err(label: Label, source: Source = None) -> Err:
    """Create an Err. Without a source, ``Exception(label)`` fills the slot.

    Example:
        >>> create_err("VALIDATION_ERROR").source
        Exception('VALIDATION_ERROR')
    """
    return Err(label, source)
