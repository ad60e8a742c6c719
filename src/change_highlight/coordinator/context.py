"""Per-editing-surface coordinator state."""

from __future__ import annotations

from dataclasses import dataclass

from .gate import Gate
from .region import HighlightRegion


@dataclass(slots=True)
class HighlightContext:
    """Everything one surface's coordinator mutates between notifications."""

    region: HighlightRegion
    gate: Gate
    cycle: int = 0
    flashes: int = 0
    insertions: int = 0
    clears: int = 0
    faults: int = 0
