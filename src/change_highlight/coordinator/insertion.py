"""Fading highlight over freshly inserted text."""

from __future__ import annotations

from typing import Callable, Optional

from change_highlight.config import HighlightStyle
from change_highlight.host.events import PostChange
from change_highlight.runtime import telemetry

from .classifier import CommandClassifier
from .context import HighlightContext
from .size_filter import SizeFilter


class InsertionHighlighter:
    """Moves the region onto each qualifying insertion, last one wins.

    Not gated: a repeated insertion only repositions the marker and costs no
    wait. The fade belongs to the surface and is never tracked here.
    """

    def __init__(
        self,
        context: HighlightContext,
        *,
        classifier: CommandClassifier,
        size_filter: SizeFilter,
        style: HighlightStyle,
        current_command: Callable[[], Optional[str]],
    ) -> None:
        self.context = context
        self.classifier = classifier
        self.size_filter = size_filter
        self.style = style
        self._current_command = current_command

    def should_highlight(self, change: PostChange) -> bool:
        if not change.is_insertion:
            return False
        if not self.size_filter.passes(change.start, change.end):
            return False
        return self.classifier.is_target(self._current_command())

    def __call__(self, change: PostChange) -> bool:
        if not self.should_highlight(change):
            return False
        self.context.region.place(change.start, change.end, self.style, fade=True)
        self.context.insertions += 1
        telemetry.record_event(
            "highlight.insert",
            level="debug",
            data={"start": change.start, "end": change.end, "cycle": self.context.cycle},
        )
        return True


__all__ = ["InsertionHighlighter"]
