from __future__ import annotations

from typing import Callable, List, Tuple

from rich.text import Text

from change_highlight.adapters.textual import (
    TextualHighlightController,
    TextualRenderHooks,
)
from change_highlight.config import HighlightSettings


class Recorder:
    def __init__(self) -> None:
        self.frames: List[Text] = []
        self.statuses: List[str] = []
        self.logs: List[str] = []
        self.timers: List[Tuple[float, Callable[[], None]]] = []
        self.sleeps: List[float] = []

    def hooks(self) -> TextualRenderHooks:
        return TextualRenderHooks(
            render=self.frames.append,
            schedule=lambda delay, callback: self.timers.append((delay, callback)),
            update_status=self.statuses.append,
            log=self.logs.append,
        )

    def fire_timers(self) -> None:
        timers, self.timers = self.timers, []
        for _, callback in timers:
            callback()


def styled_spans(text: Text) -> List[Tuple[int, int]]:
    return [(span.start, span.end) for span in text.spans]


def make_controller(text: str = "") -> Tuple[TextualHighlightController, Recorder]:
    recorder = Recorder()
    controller = TextualHighlightController(
        recorder.hooks(), text=text, sleep=recorder.sleeps.append
    )
    return controller, recorder


def test_typing_inserts_text_without_highlight() -> None:
    controller, recorder = make_controller("")

    assert controller.handle_key("h", character="h") == "self-insert"
    controller.handle_key("i", character="i")
    controller.handle_key("enter")

    assert controller.session.text == "hi\n"
    assert recorder.frames[-1].plain == "hi\n"
    assert all(not frame.spans for frame in recorder.frames)
    assert any(line.startswith("key ->") for line in recorder.logs)


def test_undo_paints_flash_before_text_disappears() -> None:
    controller, recorder = make_controller("hello")
    controller.session.run("insert-text", " world", 5)

    controller.handle_key("ctrl+z")

    flash = recorder.frames[0]
    assert flash.plain == "hello world"
    assert styled_spans(flash) == [(5, 11)]
    assert recorder.sleeps == [0.02]
    assert recorder.frames[-1].plain == "hello"
    assert recorder.statuses[-1].startswith("undo")


def test_redo_highlight_fades_on_host_timer() -> None:
    settings = HighlightSettings(fade_duration=0.25)
    recorder = Recorder()
    controller = TextualHighlightController(
        recorder.hooks(), text="abc", settings=settings, sleep=recorder.sleeps.append
    )
    controller.session.run("insert-text", "def", 3)
    controller.handle_key("ctrl+z")

    controller.handle_key("ctrl+y")

    assert styled_spans(recorder.frames[-1]) == [(3, 6)]
    assert [delay for delay, _ in recorder.timers] == [0.25]

    recorder.fire_timers()

    assert recorder.frames[-1].plain == "abcdef"
    assert recorder.frames[-1].spans == []
    assert controller.surface.marker_spans() == [(3, 6, "faded")]


def test_stale_fade_does_not_clear_newer_highlight() -> None:
    controller, recorder = make_controller("ab")
    controller.session.run("insert-text", "cd", 2)
    controller.session.run("insert-text", "ef", 4)
    controller.handle_key("ctrl+z")
    controller.handle_key("ctrl+z")
    controller.handle_key("ctrl+y")
    controller.handle_key("ctrl+y")

    stale, fresh = recorder.timers
    stale[1]()

    assert controller.surface.marker_spans() == [(4, 6, "insert")]

    fresh[1]()
    assert controller.surface.marker_spans() == [(4, 6, "faded")]


def test_leaving_undo_removes_marker() -> None:
    controller, recorder = make_controller("hello")
    controller.session.run("insert-text", " world", 5)
    controller.handle_key("ctrl+z")

    controller.handle_key("x", character="x")

    assert controller.surface.marker_spans() == []
    assert recorder.frames[-1].spans == []


def test_unbound_keys_are_ignored() -> None:
    controller, recorder = make_controller("abc")

    assert controller.handle_key("f5") is None
    assert controller.session.text == "abc"
    assert recorder.frames == []
