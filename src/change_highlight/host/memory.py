"""In-memory highlight surface used by headless sessions and tests."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Dict, List, Optional, Tuple

from change_highlight.config import HighlightStyle


@dataclass(slots=True)
class Marker:
    start: int
    end: int
    style: HighlightStyle
    fading: bool = False


@dataclass(frozen=True, slots=True)
class SurfaceOperation:
    kind: str
    handle: int
    span: Optional[Tuple[int, int]] = None
    style: Optional[str] = None


class RecordingSurface:
    """Keeps markers in a dict and logs every operation applied to them.

    Fading is simulated: markers created or moved with ``fade=True`` stay
    styled until ``complete_fades`` runs, which drops their style the way a
    renderer would once its own fade timer expires.
    """

    def __init__(self) -> None:
        self.markers: Dict[int, Marker] = {}
        self.operations: List[SurfaceOperation] = []
        self.redisplays = 0
        self._handles = count(1)

    def create_marker(
        self, start: int, end: int, style: HighlightStyle, *, fade: bool = False
    ) -> int:
        handle = next(self._handles)
        self.markers[handle] = Marker(start, end, style, fading=fade)
        self.operations.append(
            SurfaceOperation("create", handle, (start, end), style.name)
        )
        return handle

    def move_marker(
        self,
        handle: int,
        start: int,
        end: int,
        style: HighlightStyle,
        *,
        fade: bool = False,
    ) -> None:
        marker = self.markers.get(handle)
        if marker is None:
            return
        marker.start, marker.end = start, end
        marker.style = style
        marker.fading = fade
        self.operations.append(
            SurfaceOperation("move", handle, (start, end), style.name)
        )

    def delete_marker(self, handle: int) -> None:
        if self.markers.pop(handle, None) is not None:
            self.operations.append(SurfaceOperation("delete", handle))

    def redisplay(self) -> None:
        self.redisplays += 1
        self.operations.append(SurfaceOperation("redisplay", 0))

    def complete_fades(self) -> int:
        faded = [handle for handle, marker in self.markers.items() if marker.fading]
        for handle in faded:
            marker = self.markers[handle]
            marker.fading = False
            marker.style = HighlightStyle("faded")
            self.operations.append(SurfaceOperation("fade", handle))
        return len(faded)

    # -- inspection helpers -------------------------------------------------

    def kinds(self) -> List[str]:
        return [operation.kind for operation in self.operations]

    def live_spans(self) -> List[Tuple[int, int, str]]:
        return [
            (marker.start, marker.end, marker.style.name)
            for marker in self.markers.values()
        ]

    def clear_log(self) -> None:
        self.operations.clear()
        self.redisplays = 0


__all__ = ["Marker", "RecordingSurface", "SurfaceOperation"]
