"""Capabilities the coordinator needs from its host editor."""

from __future__ import annotations

from typing import Hashable, Optional, Protocol

from change_highlight.config import HighlightStyle

from .events import HookList, PostChange, PreChange

MarkerHandle = Hashable


class NotificationSource(Protocol):
    """One editing surface's command and change notifications.

    ``pre_command`` fires once per command cycle, before the command body.
    ``pre_change`` fires before text is removed, ``post_change`` after text
    was inserted; both are delivered synchronously in edit order.
    """

    pre_command: HookList[Optional[str]]
    pre_change: HookList[PreChange]
    post_change: HookList[PostChange]

    def current_command(self) -> Optional[str]:
        """Identifier of the command currently executing, if any."""
        ...


class HighlightSurface(Protocol):
    """Rendering primitives for a single styled marker."""

    def create_marker(
        self, start: int, end: int, style: HighlightStyle, *, fade: bool = False
    ) -> MarkerHandle:
        """Create a styled marker over ``[start, end)`` and return its handle."""
        ...

    def move_marker(
        self,
        handle: MarkerHandle,
        start: int,
        end: int,
        style: HighlightStyle,
        *,
        fade: bool = False,
    ) -> None:
        """Reposition and restyle an existing marker."""
        ...

    def delete_marker(self, handle: MarkerHandle) -> None:
        """Remove a marker; unknown handles are ignored."""
        ...

    def redisplay(self) -> None:
        """Force the surface to paint pending marker changes now."""
        ...


__all__ = ["HighlightSurface", "MarkerHandle", "NotificationSource"]
