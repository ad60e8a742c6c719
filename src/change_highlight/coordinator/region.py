"""The one styled marker a surface may carry at a time."""

from __future__ import annotations

from typing import Optional, Tuple

from change_highlight.config import HighlightStyle
from change_highlight.host.protocols import HighlightSurface, MarkerHandle


class HighlightRegion:
    """Lazily created marker that is moved, never recreated, while alive."""

    def __init__(self, surface: HighlightSurface) -> None:
        self.surface = surface
        self._handle: Optional[MarkerHandle] = None
        self._span: Optional[Tuple[int, int]] = None
        self._style: Optional[HighlightStyle] = None

    @property
    def exists(self) -> bool:
        return self._handle is not None

    @property
    def span(self) -> Optional[Tuple[int, int]]:
        return self._span

    @property
    def style(self) -> Optional[HighlightStyle]:
        return self._style

    def place(
        self, start: int, end: int, style: HighlightStyle, *, fade: bool = False
    ) -> None:
        if self._handle is None:
            self._handle = self.surface.create_marker(start, end, style, fade=fade)
        else:
            self.surface.move_marker(self._handle, start, end, style, fade=fade)
        self._span = (start, end)
        self._style = style

    def remove(self) -> bool:
        handle, self._handle = self._handle, None
        self._span = None
        self._style = None
        if handle is None:
            return False
        self.surface.delete_marker(handle)
        return True

    def forget(self) -> None:
        """Drop the reference without touching the surface."""

        self._handle = None
        self._span = None
        self._style = None

    def __repr__(self) -> str:
        style = self._style.name if self._style else None
        return f"HighlightRegion(span={self._span}, style={style})"


__all__ = ["HighlightRegion"]
