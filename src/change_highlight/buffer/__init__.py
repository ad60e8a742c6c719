"""Reference text buffer with change notifications and undo history."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .state import BufferState
from .sync import BufferMirror, BufferValidationError
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_offset, ensure_range

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "BufferValidationError",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
    "ensure_offset",
    "ensure_range",
]
