"""Change highlight coordinator: gating, filtering and highlight lifecycles."""

from .classifier import CommandClassifier
from .context import HighlightContext
from .coordinator import HOOK_PRIORITY, AttachError, ChangeHighlightCoordinator
from .deletion import DeletionFlasher
from .gate import Gate
from .insertion import InsertionHighlighter
from .lifecycle import CycleLifecycleHook
from .region import HighlightRegion
from .size_filter import SizeFilter

__all__ = [
    "AttachError",
    "ChangeHighlightCoordinator",
    "CommandClassifier",
    "CycleLifecycleHook",
    "DeletionFlasher",
    "Gate",
    "HOOK_PRIORITY",
    "HighlightContext",
    "HighlightRegion",
    "InsertionHighlighter",
    "SizeFilter",
]
