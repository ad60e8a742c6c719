"""Textual-facing highlight surface and key-to-command controller.

Nothing here imports Textual itself; the app wires real widgets in through
``TextualRenderHooks`` so the controller runs headless in tests.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from rich.text import Text

from change_highlight.config import HighlightSettings, HighlightStyle
from change_highlight.coordinator.deletion import Sleep
from change_highlight.host import UnknownCommandError
from change_highlight.runtime import telemetry
from change_highlight.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def _run_now(delay: float, callback: Callable[[], None]) -> None:
    del delay
    callback()


@dataclass(slots=True)
class TextualRenderHooks:
    """Callbacks the surface uses to reach the Textual widgets."""

    render: Callable[[Text], None]
    refresh: Callable[[], None] = _noop
    # schedule(delay_seconds, callback); the host owns the timer
    schedule: Callable[[float, Callable[[], None]], object] = _run_now
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(slots=True)
class _LiveMarker:
    start: int
    end: int
    style: HighlightStyle
    generation: int
    faded: bool = False


class TextualHighlightSurface:
    """``HighlightSurface`` rendering one marker as a Rich span.

    Insert markers fade on the host's timer: ``schedule`` fires after
    ``fade_duration`` and strips the style unless the marker moved since.
    """

    def __init__(
        self,
        hooks: TextualRenderHooks,
        settings: Optional[HighlightSettings] = None,
        *,
        text_provider: Callable[[], str] = str,
    ) -> None:
        self.hooks = hooks
        self.settings = settings or HighlightSettings()
        self.text_provider = text_provider
        self._markers: Dict[int, _LiveMarker] = {}
        self._next_handle = 0
        self._generation = 0

    def create_marker(
        self, start: int, end: int, style: HighlightStyle, *, fade: bool = False
    ) -> int:
        self._next_handle += 1
        handle = self._next_handle
        self._markers[handle] = self._new_marker(start, end, style)
        if fade:
            self._schedule_fade(handle)
        return handle

    def move_marker(
        self,
        handle: int,
        start: int,
        end: int,
        style: HighlightStyle,
        *,
        fade: bool = False,
    ) -> None:
        if handle not in self._markers:
            return
        self._markers[handle] = self._new_marker(start, end, style)
        if fade:
            self._schedule_fade(handle)

    def delete_marker(self, handle: int) -> None:
        if self._markers.pop(handle, None) is not None:
            self.redisplay()

    def redisplay(self) -> None:
        self.hooks.render(self.build_text(self.text_provider()))
        self.hooks.refresh()

    def build_text(self, text: str) -> Text:
        rendered = Text(text)
        for marker in self._markers.values():
            if marker.faded:
                continue
            start = max(0, min(marker.start, len(text)))
            end = max(start, min(marker.end, len(text)))
            if end > start:
                rendered.stylize(marker.style.rich_style, start, end)
        return rendered

    def marker_spans(self) -> list[tuple[int, int, str]]:
        return [
            (m.start, m.end, "faded" if m.faded else m.style.name)
            for m in self._markers.values()
        ]

    def _new_marker(self, start: int, end: int, style: HighlightStyle) -> _LiveMarker:
        self._generation += 1
        return _LiveMarker(start, end, style, generation=self._generation)

    def _schedule_fade(self, handle: int) -> None:
        marker = self._markers[handle]
        generation = marker.generation
        self.hooks.schedule(
            self.settings.fade_duration, lambda: self._fade(handle, generation)
        )

    def _fade(self, handle: int, generation: int) -> None:
        marker = self._markers.get(handle)
        if marker is None or marker.generation != generation:
            return
        marker.faded = True
        self.redisplay()


KEY_COMMANDS: Dict[str, str] = {
    "ctrl+z": "undo",
    "ctrl+y": "redo",
    "ctrl+shift+z": "undo-redo",
    "backspace": "delete-backward",
}


class TextualHighlightController:
    """Translates Textual key names into session commands and repaints."""

    def __init__(
        self,
        hooks: TextualRenderHooks,
        *,
        text: str = "",
        settings: Optional[HighlightSettings] = None,
        sleep: Sleep = time.sleep,
        key_commands: Optional[Dict[str, str]] = None,
    ) -> None:
        self.hooks = hooks
        self.settings = settings or HighlightSettings()
        self.surface = TextualHighlightSurface(hooks, self.settings)
        self.session = EditorSession(
            text, surface=self.surface, settings=self.settings, sleep=sleep
        )
        self.surface.text_provider = lambda: self.session.text
        self.key_commands = dict(KEY_COMMANDS if key_commands is None else key_commands)

    def handle_key(
        self,
        key: str,
        *,
        character: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[str]:
        """Run the command bound to ``key``; return its name, if any."""

        command, args = self._resolve(key, character)
        if command is None:
            return None
        self._log("key ->", key=key, command=command, mods=tuple(modifiers))
        try:
            self.session.run(command, *args)
        except UnknownCommandError as exc:
            telemetry.record_event(
                "textual.unknown_command", level="warning", data={"key": key}
            )
            self.hooks.update_status(str(exc))
            return None
        self.surface.redisplay()
        self.hooks.update_status(self._status_line(command))
        return command

    def render(self) -> None:
        self.surface.redisplay()

    def _resolve(
        self, key: str, character: Optional[str]
    ) -> tuple[Optional[str], tuple[object, ...]]:
        if key in self.key_commands:
            return self.key_commands[key], ()
        if key == "enter":
            return "self-insert", ("\n",)
        if key == "tab":
            return "self-insert", ("\t",)
        if character and character.isprintable():
            return "self-insert", (character,)
        return None, ()

    def _status_line(self, command: str) -> str:
        context = self.session.coordinator.context
        return (
            f"{command} | cycle {context.cycle} | flashes {context.flashes}"
            f" | inserts {context.insertions}"
        )

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items())
        self.hooks.log(" ".join(parts))


__all__ = [
    "KEY_COMMANDS",
    "TextualHighlightController",
    "TextualHighlightSurface",
    "TextualRenderHooks",
]
