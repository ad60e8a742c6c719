"""Adapter boundary types for rendering buffers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of the buffer's text and point."""

    text: str
    point: int
    version: int
    attributes: dict[str, str] = field(default_factory=dict)


class BufferValidationError(RuntimeError):
    """Raised when an edit addresses text outside the buffer."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset
