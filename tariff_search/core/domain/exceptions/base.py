"""Root of the Tariff Search exception hierarchy.

``TariffSearchError`` records where it was raised and can serialize itself
into the error body returned by the API and printed by the CLI.
"""

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import PurePath
from types import FrameType
from typing import Any


@dataclass
class ExceptionContext:
    """Raise site of an exception."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @classmethod
    def from_frame(cls, frame: FrameType | None) -> "ExceptionContext":
        if frame is None:
            return cls("<unknown>", "<unknown>", "<unknown>", 0)
        owner = frame.f_locals.get("self")
        code = frame.f_code
        return cls(
            class_name=type(owner).__name__ if owner is not None else "<module>",
            method_name=code.co_name,
            file_name=PurePath(code.co_filename.replace("\\", "/")).name,
            line_number=frame.f_lineno,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file_name,
            "line": self.line_number,
            "timestamp": self.timestamp,
        }


def _is_error_init(frame: FrameType) -> bool:
    return frame.f_code.co_name == "__init__" and isinstance(
        frame.f_locals.get("self"), TariffSearchError
    )


def _raise_site() -> FrameType | None:
    """First frame outside this module and outside any error ``__init__``."""
    frame = inspect.currentframe()
    while frame is not None and (
        frame.f_code.co_filename == __file__ or _is_error_init(frame)
    ):
        frame = frame.f_back
    return frame


class TariffSearchError(Exception):
    """Base exception for all Tariff Search errors.

    Attributes:
        error_code: Stable ``TS_*`` code, overridden by every subclass.
        message: Human-readable message, also the ``str()`` of the error.
        cause: Lower-level exception this one wraps, if any.
        extra_context: Key/value details for debugging (ids, collection names).
        location: Where the error was constructed.

    Example:
        try:
            collection.aggregate(pipeline)
        except PyMongoError as e:
            raise DocumentStoreQueryError(
                "Search aggregation failed",
                cause=e,
                context={"collection": collection.name},
            ) from e
    """

    error_code: str = "TS_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = dict(context or {})
        self.location = ExceptionContext.from_frame(_raise_site())
        # Only meaningful while the wrapped exception is being handled
        self.stack_trace = traceback.format_exc() if cause is not None else None

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Serialize as the structured error body.

        Keys: ``error`` (type, code, message) and ``location``, plus
        ``context`` and ``cause`` when present. ``stack_trace`` is added only
        when ``include_trace`` is set and a wrapped exception was active.
        """
        body: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }
        if self.extra_context:
            body["context"] = self.extra_context
        if self.cause is not None:
            body["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        if include_trace and self.stack_trace:
            body["stack_trace"] = [line for line in self.stack_trace.splitlines() if line.strip()]
        return body
