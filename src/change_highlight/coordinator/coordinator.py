"""Wires the highlight components onto one editing surface."""

from __future__ import annotations

import time
from contextlib import suppress
from typing import Callable, List, Optional, TypeVar

from change_highlight.config import HighlightSettings
from change_highlight.host.events import PostChange, PreChange, Subscription
from change_highlight.host.protocols import HighlightSurface, NotificationSource
from change_highlight.runtime import telemetry

from .classifier import CommandClassifier
from .context import HighlightContext
from .deletion import DeletionFlasher, Sleep
from .gate import Gate
from .insertion import InsertionHighlighter
from .lifecycle import CycleLifecycleHook
from .region import HighlightRegion
from .size_filter import SizeFilter

T = TypeVar("T")

# Ahead of ordinary observers so their own edits cannot be seen first.
HOOK_PRIORITY = 50


class AttachError(RuntimeError):
    """Raised when attaching a coordinator that is already attached."""


class ChangeHighlightCoordinator:
    """Highlights what undo-style commands delete or insert on one surface.

    Every handler is contained: a fault is logged and degrades to "no
    highlight"; it is never raised into the command being observed.
    """

    def __init__(
        self,
        source: NotificationSource,
        surface: HighlightSurface,
        settings: Optional[HighlightSettings] = None,
        *,
        sleep: Sleep = time.sleep,
        name: str = "default",
    ) -> None:
        self.source = source
        self.settings = settings or HighlightSettings()
        self.name = name
        self.context = HighlightContext(region=HighlightRegion(surface), gate=Gate())
        self.classifier = CommandClassifier(self.settings.target_commands)
        self.size_filter = SizeFilter(self.settings.minimum_edit_size)
        self.lifecycle = CycleLifecycleHook(self.context, self.classifier)
        self.flasher = DeletionFlasher(
            self.context,
            classifier=self.classifier,
            size_filter=self.size_filter,
            style=self.settings.delete_style,
            duration=self.settings.flash_duration,
            current_command=source.current_command,
            sleep=sleep,
        )
        self.highlighter = InsertionHighlighter(
            self.context,
            classifier=self.classifier,
            size_filter=self.size_filter,
            style=self.settings.insert_style,
            current_command=source.current_command,
        )
        self._subscriptions: List[Subscription] = []

    @property
    def attached(self) -> bool:
        return bool(self._subscriptions)

    @property
    def region(self) -> HighlightRegion:
        return self.context.region

    @property
    def gate(self) -> Gate:
        return self.context.gate

    def attach(self) -> "ChangeHighlightCoordinator":
        if self.attached:
            raise AttachError(f"Coordinator '{self.name}' is already attached")
        source = self.source
        self._subscriptions = [
            source.pre_command.add(self._on_pre_command, priority=HOOK_PRIORITY),
            source.pre_change.add(self._on_pre_change, priority=HOOK_PRIORITY),
            source.post_change.add(self._on_post_change, priority=HOOK_PRIORITY),
        ]
        telemetry.record_event("highlight.attach", data={"surface": self.name})
        return self

    def detach(self) -> None:
        if not self.attached:
            return
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions = []
        self.context.gate.close()
        self._drop_region()
        telemetry.record_event("highlight.detach", data={"surface": self.name})

    def __enter__(self) -> "ChangeHighlightCoordinator":
        return self.attach()

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.detach()
        return False

    def _on_pre_command(self, command: Optional[str]) -> None:
        self._guard("pre_command", self.lifecycle, command)

    def _on_pre_change(self, change: PreChange) -> None:
        self._guard("pre_change", self.flasher, change)

    def _on_post_change(self, change: PostChange) -> None:
        self._guard("post_change", self.highlighter, change)

    def _guard(self, hook: str, handler: Callable[[T], object], payload: T) -> None:
        try:
            handler(payload)
        except Exception as exc:
            self.context.faults += 1
            with suppress(Exception):
                telemetry.record_event(
                    "highlight.fault",
                    level="error",
                    data={
                        "surface": self.name,
                        "hook": hook,
                        "payload": payload,
                        "error": repr(exc),
                    },
                )
            self._drop_region()

    def _drop_region(self) -> None:
        region = self.context.region
        try:
            region.remove()
        except Exception:
            region.forget()


__all__ = ["AttachError", "ChangeHighlightCoordinator", "HOOK_PRIORITY"]
