"""Settings for the change highlight coordinator."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, Optional

ENV_PREFIX = "CHANGE_HIGHLIGHT_"

DEFAULT_TARGET_COMMANDS: frozenset[str] = frozenset(
    {
        "undo",
        "undo-only",
        "undo-redo",
        "redo",
        "undo-fu-only-undo",
        "undo-fu-only-redo",
        "evil-undo",
        "evil-redo",
    }
)


class SettingsError(ValueError):
    """Raised when a highlight setting is out of range or unparsable."""

    def __init__(self, message: str, *, setting: str | None = None) -> None:
        super().__init__(message)
        self.setting = setting


@dataclass(frozen=True, slots=True)
class HighlightStyle:
    """Look of a highlighted span, expressed as Rich-compatible colours."""

    name: str
    foreground: str | None = None
    background: str | None = None
    bold: bool = False

    @property
    def rich_style(self) -> str:
        parts = []
        if self.bold:
            parts.append("bold")
        if self.foreground:
            parts.append(self.foreground)
        if self.background:
            parts.append(f"on {self.background}")
        return " ".join(parts) or "none"


DIFF_REMOVED = HighlightStyle("delete", foreground="#ffd7d7", background="#7a1f1f")
DIFF_ADDED = HighlightStyle("insert", foreground="#d7ffd7", background="#1f5f2a")


@dataclass(frozen=True, slots=True)
class HighlightSettings:
    """Static configuration shared by every editing surface."""

    target_commands: frozenset[str] = field(default=DEFAULT_TARGET_COMMANDS)
    minimum_edit_size: int = 2
    flash_duration: float = 0.02
    fade_duration: float = 0.5
    delete_style: HighlightStyle = DIFF_REMOVED
    insert_style: HighlightStyle = DIFF_ADDED

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_commands", frozenset(self.target_commands))
        if self.minimum_edit_size < 0:
            raise SettingsError(
                "minimum_edit_size cannot be negative", setting="minimum_edit_size"
            )
        for name in ("flash_duration", "fade_duration"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise SettingsError(
                    f"{name} must be a finite, non-negative number of seconds",
                    setting=name,
                )

    def with_overrides(self, **changes: object) -> "HighlightSettings":
        return replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        prefix: str = ENV_PREFIX,
    ) -> "HighlightSettings":
        """Build settings from ``<prefix>*`` variables, defaulting the rest."""

        env = os.environ if environ is None else environ
        changes: dict[str, object] = {}

        raw_commands = env.get(f"{prefix}TARGET_COMMANDS")
        if raw_commands is not None:
            changes["target_commands"] = _parse_commands(raw_commands)

        raw_size = env.get(f"{prefix}MIN_EDIT_SIZE")
        if raw_size is not None:
            changes["minimum_edit_size"] = _parse_number(
                raw_size, int, "minimum_edit_size"
            )

        for name, attr in (
            ("FLASH_DURATION", "flash_duration"),
            ("FADE_DURATION", "fade_duration"),
        ):
            raw = env.get(f"{prefix}{name}")
            if raw is not None:
                changes[attr] = _parse_number(raw, float, attr)

        return cls(**changes)  # type: ignore[arg-type]


def _parse_commands(raw: str) -> frozenset[str]:
    names = _clean_names(raw.split(","))
    if not names:
        raise SettingsError(
            "TARGET_COMMANDS must name at least one command",
            setting="target_commands",
        )
    return names


def _clean_names(names: Iterable[str]) -> frozenset[str]:
    return frozenset(name.strip() for name in names if name.strip())


def _parse_number(raw: str, kind: type, setting: str) -> object:
    try:
        return kind(raw.strip())
    except ValueError as exc:
        raise SettingsError(
            f"Invalid value {raw!r} for {setting}", setting=setting
        ) from exc


__all__ = [
    "DEFAULT_TARGET_COMMANDS",
    "DIFF_ADDED",
    "DIFF_REMOVED",
    "HighlightSettings",
    "HighlightStyle",
    "SettingsError",
]
