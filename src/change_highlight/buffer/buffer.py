"""Reference buffer that announces every edit through change hooks."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from change_highlight.host.events import HookList, PostChange, PreChange
from change_highlight.runtime import telemetry

from .document import BufferDocument
from .state import BufferState
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_offset, ensure_range


@dataclass(slots=True)
class BufferDelta:
    version: int
    start: int
    removed: str
    inserted: str
    label: str


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.undo_timeline = undo or UndoTimeline()
        self.pre_change: HookList[PreChange] = HookList("pre_change")
        self.post_change: HookList[PostChange] = HookList("post_change")

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def text(self) -> str:
        return self.document.text

    def __len__(self) -> int:
        return self.document.length

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.document.text,
            point=self.state.point,
            version=self.document.version,
            attributes=dict(attributes or {}),
        )

    def get_text(self, start: int, end: int) -> str:
        start, end = ensure_range(self.document, start, end)
        return self.document.text[start:end]

    def replace_range(
        self, start: int, end: int, text: str, *, label: str, record: bool = True
    ) -> BufferDelta:
        start, end = ensure_range(self.document, start, end)
        with Transaction(self, label, record=record) as tx:
            removed = self.document.text[start:end]
            if end > start:
                self.pre_change.emit(PreChange(start, end))
            point_before = self.state.point
            self.document = self.document.splice(start, end, text)
            self.state.set_point(start + len(text))
            self.post_change.emit(PostChange(start, start + len(text), end - start))
            tx.commit(
                UndoEntry(
                    label=label,
                    start=start,
                    removed=removed,
                    inserted=text,
                    point_before=point_before,
                    point_after=self.state.point,
                )
            )

        return BufferDelta(
            version=self.document.version,
            start=start,
            removed=removed,
            inserted=text,
            label=label,
        )

    def insert_text(self, text: str, *, at: Optional[int] = None) -> BufferDelta:
        position = self.state.point if at is None else ensure_offset(self.document, at)
        return self.replace_range(position, position, text, label="insert_text")

    def delete_range(self, start: int, end: int) -> BufferDelta:
        return self.replace_range(start, end, "", label="delete_range")

    def undo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.undo()
        if entry is None:
            return None
        delta = self.replace_range(
            entry.start, entry.inserted_end, entry.removed, label="undo", record=False
        )
        self.state.set_point(entry.point_before)
        return delta

    def redo(self) -> Optional[BufferDelta]:
        entry = self.undo_timeline.redo()
        if entry is None:
            return None
        delta = self.replace_range(
            entry.start, entry.removed_end, entry.inserted, label="redo", record=False
        )
        self.state.set_point(entry.point_after)
        return delta


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit in a telemetry span and records it for undo."""

    def __init__(self, buffer: Buffer, label: str, *, record: bool = True) -> None:
        self.buffer = buffer
        self.label = label
        self.record = record
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(self, entry: UndoEntry) -> None:
        if self.record and (entry.removed or entry.inserted):
            self.buffer.undo_timeline.push(entry)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "Transaction"]
