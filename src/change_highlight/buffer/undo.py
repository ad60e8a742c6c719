"""Linear undo/redo history of offset-based edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """One edit: ``removed`` at ``start`` was replaced by ``inserted``."""

    label: str
    start: int
    removed: str
    inserted: str
    point_before: int
    point_after: int

    @property
    def inserted_end(self) -> int:
        return self.start + len(self.inserted)

    @property
    def removed_end(self) -> int:
        return self.start + len(self.removed)


class UndoTimeline:
    """Linear history; pushing after an undo discards the redo tail."""

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []
        self._index: int = -1

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        if self._index < len(self._entries) - 1:
            self._entries = self._entries[: self._index + 1]
        self._entries.append(entry)
        self._index = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]
