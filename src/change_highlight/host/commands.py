"""Named command dispatch with a pre-command hook per cycle."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from change_highlight.runtime import telemetry

from .events import HookList

CommandHandler = Callable[..., object]


class UnknownCommandError(KeyError):
    """Raised when executing a command name nobody registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Command '{self.name}' is not registered"


class CommandLoop:
    """Owns the command table and drives one command cycle per ``execute``.

    A cycle starts by recording the command name and notifying
    ``pre_command``; the body runs afterwards. The name stays current until
    the next cycle begins.
    """

    def __init__(self, *, name: str = "default") -> None:
        self.name = name
        self.pre_command: HookList[Optional[str]] = HookList("pre_command")
        self._commands: Dict[str, CommandHandler] = {}
        self._current: Optional[str] = None
        self._cycles = 0

    @property
    def current_command(self) -> Optional[str]:
        return self._current

    @property
    def cycles(self) -> int:
        return self._cycles

    def register(
        self, name: str, handler: CommandHandler, *, replace: bool = False
    ) -> CommandHandler:
        if not name:
            raise ValueError("command name cannot be empty")
        if not replace and name in self._commands:
            raise ValueError(f"Command '{name}' already registered")
        self._commands[name] = handler
        return handler

    def commands(self) -> tuple[str, ...]:
        return tuple(sorted(self._commands))

    def execute(self, name: str, *args: object, **kwargs: object) -> object:
        handler = self._commands.get(name)
        if handler is None:
            raise UnknownCommandError(name)
        self._current = name
        self._cycles += 1
        with telemetry.span(
            name=f"command::{name}",
            component="commands",
            metadata={"surface": self.name, "cycle": self._cycles},
        ):
            self.pre_command.emit(name)
            return handler(*args, **kwargs)


__all__ = ["CommandHandler", "CommandLoop", "UnknownCommandError"]
