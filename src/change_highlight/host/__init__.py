"""Host-side contracts: change notifications, command dispatch, surfaces."""

from .commands import CommandLoop, UnknownCommandError
from .events import HookList, PostChange, PreChange, Subscription
from .memory import RecordingSurface
from .protocols import HighlightSurface, MarkerHandle, NotificationSource

__all__ = [
    "CommandLoop",
    "HighlightSurface",
    "HookList",
    "MarkerHandle",
    "NotificationSource",
    "PostChange",
    "PreChange",
    "RecordingSurface",
    "Subscription",
    "UnknownCommandError",
]
