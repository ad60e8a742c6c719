"""Blocking flash over text that is about to be deleted."""

from __future__ import annotations

import time
from typing import Callable, Optional

from change_highlight.config import HighlightStyle
from change_highlight.host.events import PreChange
from change_highlight.runtime import telemetry

from .classifier import CommandClassifier
from .context import HighlightContext
from .size_filter import SizeFilter

Sleep = Callable[[float], None]


class DeletionFlasher:
    """Shows the delete style, repaints, then stalls the edit briefly.

    The stall sits between painting and returning so the deletion that
    follows cannot erase the text before the flash is seen. Only the first
    qualifying notification of a target cycle flashes.
    """

    def __init__(
        self,
        context: HighlightContext,
        *,
        classifier: CommandClassifier,
        size_filter: SizeFilter,
        style: HighlightStyle,
        duration: float,
        current_command: Callable[[], Optional[str]],
        sleep: Sleep = time.sleep,
    ) -> None:
        self.context = context
        self.classifier = classifier
        self.size_filter = size_filter
        self.style = style
        self.duration = duration
        self._current_command = current_command
        self._sleep = sleep

    def should_flash(self, change: PreChange) -> bool:
        if change.start == change.end:
            return False
        if not self.classifier.is_target(self._current_command()):
            return False
        # Size first: a rejected notification must leave the gate armed.
        if not self.size_filter.passes(change.start, change.end):
            return False
        return self.context.gate.try_consume()

    def __call__(self, change: PreChange) -> bool:
        if not self.should_flash(change):
            return False
        region = self.context.region
        region.place(change.start, change.end, self.style)
        region.surface.redisplay()
        if self.duration > 0:
            self._sleep(self.duration)
        self.context.flashes += 1
        telemetry.record_event(
            "highlight.flash",
            level="debug",
            data={
                "start": change.start,
                "end": change.end,
                "cycle": self.context.cycle,
                "duration": self.duration,
            },
        )
        return True


__all__ = ["DeletionFlasher", "Sleep"]
