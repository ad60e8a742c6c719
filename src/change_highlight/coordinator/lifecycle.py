"""Per-cycle re-arming and cleanup."""

from __future__ import annotations

from typing import Optional

from change_highlight.runtime import telemetry

from .classifier import CommandClassifier
from .context import HighlightContext


class CycleLifecycleHook:
    """Runs before every command body on the surface.

    Target commands get a fresh gate. Any other command closes the gate and
    tears down a lingering region, so no highlight outlives the first
    non-target cycle after it.
    """

    def __init__(self, context: HighlightContext, classifier: CommandClassifier) -> None:
        self.context = context
        self.classifier = classifier

    def __call__(self, command: Optional[str]) -> None:
        context = self.context
        context.cycle += 1
        if self.classifier.is_target(command):
            context.gate.arm()
            return

        context.gate.close()
        if context.region.remove():
            context.clears += 1
            telemetry.record_event(
                "highlight.clear",
                level="debug",
                data={"command": command, "cycle": context.cycle},
            )


__all__ = ["CycleLifecycleHook"]
