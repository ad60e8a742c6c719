"""Cursor tracking for buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BufferState:
    """Point (offset cursor) of a buffer."""

    point: int = 0

    def set_point(self, offset: int) -> None:
        self.point = offset
