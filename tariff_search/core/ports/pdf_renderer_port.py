"""PDF renderer port abstraction."""

from __future__ import annotations

from typing import Protocol


class PdfRendererPort(Protocol):
    """Abstract interface for turning document text into PDF bytes."""

    def render(self, name: str | None, text: str | None) -> bytes:  # pragma: no cover - protocol
        ...
