"""Executable Textual app demonstrating change highlighting."""

from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Mapping, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use change_highlight.adapters.textual.app"
    ) from exc

from rich.text import Text

from change_highlight.config import HighlightSettings

from .controller import TextualHighlightController, TextualRenderHooks

SAMPLE_TEXT = """\
Type, delete with backspace, then undo with ctrl+z and redo with ctrl+y.
Text about to be removed flashes red; restored text glows green and fades.
"""


class ChangeHighlightApp(App[None]):
    """Buffer view plus status line; commands run on one worker thread.

    The flash stalls the command thread while the UI thread paints, which is
    what makes it visible before the deletion lands.
    """

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        settings: Optional[HighlightSettings] = None,
        text: str = SAMPLE_TEXT,
    ) -> None:
        super().__init__()
        self.settings = settings or HighlightSettings.from_env()
        self._initial_text = text
        self._command_thread = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="change-highlight"
        )
        self.controller: TextualHighlightController | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualRenderHooks(
            render=lambda text: self.call_from_thread(self._render, text),
            refresh=lambda: self.call_from_thread(self.refresh),
            schedule=self._schedule_on_command_thread,
            update_status=lambda status: self.call_from_thread(
                self._update_status, status
            ),
        )
        self.controller = TextualHighlightController(
            hooks, text=self._initial_text, settings=self.settings
        )
        self._command_thread.submit(self.controller.render)

    def on_unmount(self) -> None:
        self._command_thread.shutdown(wait=False, cancel_futures=True)

    def on_key(self, event: events.Key) -> None:
        if not self.controller or event.key in {"ctrl+c", "ctrl+q"}:
            return
        self._command_thread.submit(
            self.controller.handle_key, event.key, character=event.character
        )
        event.stop()

    def _schedule_on_command_thread(
        self, delay: float, callback: Callable[[], None]
    ) -> None:
        # Timers fire on the UI thread; hand the callback back so marker
        # state is only ever touched from the command thread.
        self.call_from_thread(
            self.set_timer, delay, lambda: self._command_thread.submit(callback)
        )

    def _render(self, text: Text) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(text)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the change highlight demo.")
    parser.add_argument(
        "--flash-duration",
        type=float,
        default=None,
        help="Seconds a pending deletion stays highlighted (default: 0.02)",
    )
    parser.add_argument(
        "--fade-duration",
        type=float,
        default=None,
        help="Seconds before an insertion highlight fades (default: 0.5)",
    )
    parser.add_argument(
        "--min-edit-size",
        type=int,
        default=None,
        help="Smallest span, in characters, that gets highlighted (default: 2)",
    )
    return parser.parse_args(argv)


def build_settings(
    args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None
) -> HighlightSettings:
    """Environment settings, overridden only by flags given on the command line."""

    supplied = {
        attr: value
        for attr, value in (
            ("flash_duration", args.flash_duration),
            ("fade_duration", args.fade_duration),
            ("minimum_edit_size", args.min_edit_size),
        )
        if value is not None
    }
    return HighlightSettings.from_env(environ).with_overrides(**supplied)


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = build_settings(_parse_args(argv))
    app = ChangeHighlightApp(settings=settings)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
