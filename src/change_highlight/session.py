"""An editing surface: buffer, command loop, marker surface and coordinator."""

from __future__ import annotations

import time
from typing import Optional

from change_highlight.buffer import Buffer, BufferDelta
from change_highlight.config import HighlightSettings
from change_highlight.coordinator import ChangeHighlightCoordinator
from change_highlight.coordinator.deletion import Sleep
from change_highlight.host import CommandLoop, HookList, PostChange, PreChange
from change_highlight.host.memory import RecordingSurface
from change_highlight.host.protocols import HighlightSurface


class EditorSession:
    """Implements ``NotificationSource`` for one buffer.

    The coordinator is attached on construction unless ``highlight=False``;
    each session owns its own, so sessions never share gate or region.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        surface: Optional[HighlightSurface] = None,
        settings: Optional[HighlightSettings] = None,
        sleep: Sleep = time.sleep,
        highlight: bool = True,
    ) -> None:
        self.name = name
        self.buffer = Buffer.from_text(text, name=name)
        self.commands = CommandLoop(name=name)
        self.surface: HighlightSurface = surface or RecordingSurface()
        self.settings = settings or HighlightSettings()
        self._register_default_commands()
        self.coordinator = ChangeHighlightCoordinator(
            self, self.surface, self.settings, sleep=sleep, name=name
        )
        if highlight:
            self.coordinator.attach()

    @property
    def pre_command(self) -> HookList[Optional[str]]:
        return self.commands.pre_command

    @property
    def pre_change(self) -> HookList[PreChange]:
        return self.buffer.pre_change

    @property
    def post_change(self) -> HookList[PostChange]:
        return self.buffer.post_change

    @property
    def text(self) -> str:
        return self.buffer.text

    def current_command(self) -> Optional[str]:
        return self.commands.current_command

    def run(self, command: str, *args: object, **kwargs: object) -> object:
        return self.commands.execute(command, *args, **kwargs)

    def _register_default_commands(self) -> None:
        register = self.commands.register
        register("self-insert", self._self_insert)
        register("insert-text", self._insert_text)
        register("delete-region", self.buffer.delete_range)
        register("delete-backward", self._delete_backward)
        register("goto", self.buffer.state.set_point)
        register("reindent", self._reindent)
        for name in ("undo", "undo-only", "evil-undo", "undo-fu-only-undo"):
            register(name, self.buffer.undo)
        for name in ("redo", "undo-redo", "evil-redo", "undo-fu-only-redo"):
            register(name, self.buffer.redo)

    def _self_insert(self, text: str) -> BufferDelta:
        return self.buffer.insert_text(text)

    def _insert_text(self, text: str, at: Optional[int] = None) -> BufferDelta:
        return self.buffer.insert_text(text, at=at)

    def _delete_backward(self, count: int = 1) -> Optional[BufferDelta]:
        point = self.buffer.state.point
        start = max(0, point - count)
        if start == point:
            return None
        return self.buffer.delete_range(start, point)

    def _reindent(self, row: int, *, width: int = 4) -> Optional[BufferDelta]:
        """Expand tabs in a line's indentation, as automated formatters do."""

        line = self.buffer.document.get_line(row)
        stripped = line.lstrip(" \t")
        indent = line[: len(line) - len(stripped)]
        expanded = indent.expandtabs(width)
        if expanded == indent:
            return None
        start = self.buffer.document.cursor_to_offset(row, 0)
        point = self.buffer.state.point
        delta = self.buffer.replace_range(
            start, start + len(indent), expanded, label="reindent"
        )
        if point > start + len(indent):
            self.buffer.state.set_point(point + len(expanded) - len(indent))
        return delta


__all__ = ["EditorSession"]
