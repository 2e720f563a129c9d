"""Error payloads, error logging and HTTP status mapping.

The API handlers and the CLI both go through these helpers, so a failure
looks the same in a response body, a terminal and the logs.
"""

import json
import logging
import traceback
from pathlib import PurePath
from typing import Any

from ...core.domain.exceptions import DocumentNotFoundError, TariffSearchError, ValidationError

logger = logging.getLogger(__name__)

PYTHON_ERROR_CODE = "PYTHON_ERR"

# First match wins; anything unlisted is a server error
_STATUS_BY_TYPE: tuple[tuple[type[Exception], int], ...] = (
    (ValidationError, 400),
    (DocumentNotFoundError, 404),
)


def _raise_site(exc: BaseException) -> dict[str, Any]:
    """Location of the innermost frame of a plain exception's traceback."""
    frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    if not frames:
        return {"class": "<unknown>", "method": "<unknown>", "file": "<unknown>", "line": 0}
    last = frames[-1]
    return {
        "class": "<unknown>",
        "method": last.name,
        "file": PurePath(last.filename.replace("\\", "/")).name,
        "line": last.lineno,
    }


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the structured error payload for any exception.

    Domain errors serialize themselves; anything else is reported under the
    generic ``PYTHON_ERR`` code with the location taken from its traceback.
    ``extra_context`` is merged over the exception's own context.
    """
    if isinstance(exc, TariffSearchError):
        payload = exc.to_dict(include_trace=include_trace)
    else:
        payload = {
            "error": {"type": type(exc).__name__, "code": PYTHON_ERROR_CODE, "message": str(exc)},
            "location": _raise_site(exc),
        }
        if include_trace:
            lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
            payload["stack_trace"] = [line.strip() for line in lines if line.strip()]

    if extra_context:
        payload["context"] = {**payload.get("context", {}), **extra_context}
    return payload


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log one summary line for ``exc``.

    The full payload, trace included, travels on the record as
    ``error_payload`` for the JSON formatter; plain-text logs get the
    context appended to the line.
    """
    payload = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    error = payload["error"]
    summary = f"[{error['code']}] {error['type']}: {error['message']}"
    if "context" in payload:
        summary = f"{summary} context={json.dumps(payload['context'], default=str)}"
    (log or logger).log(level, summary, extra={"error_payload": payload})


def get_error_code(exc: Exception) -> str:
    """``TS_*`` code of a domain error, ``PYTHON_ERR`` for anything else."""
    return exc.error_code if isinstance(exc, TariffSearchError) else PYTHON_ERROR_CODE


def get_http_status_code(exc: Exception) -> int:
    """HTTP status for an exception.

    Validation problems are 400 and missing documents 404. Store, renderer
    and unexpected failures are all 500.
    """
    for exc_type, status_code in _STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return 500
