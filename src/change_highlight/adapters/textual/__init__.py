"""Textual adapter; the runnable demo lives in ``app``."""

from .controller import (
    KEY_COMMANDS,
    TextualHighlightController,
    TextualHighlightSurface,
    TextualRenderHooks,
)

__all__ = [
    "KEY_COMMANDS",
    "TextualHighlightController",
    "TextualHighlightSurface",
    "TextualRenderHooks",
]
