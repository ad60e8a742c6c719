"""Decides whether the running command is subject to highlighting."""

from __future__ import annotations

from typing import Iterable, Optional


class CommandClassifier:
    def __init__(self, target_commands: Iterable[str]) -> None:
        self.target_commands = frozenset(target_commands)

    def is_target(self, command: Optional[str]) -> bool:
        return command is not None and command in self.target_commands

    __call__ = is_target


__all__ = ["CommandClassifier"]
