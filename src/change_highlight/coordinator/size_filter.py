"""Rejects edits too small to be the user's real change."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SizeFilter:
    """``passes`` is true when the span covers at least ``minimum_edit_size``.

    Single-character property edits often precede the real edit in the same
    change stream; filtering them keeps them from claiming the highlight.
    """

    minimum_edit_size: int = 2

    def __post_init__(self) -> None:
        if self.minimum_edit_size < 0:
            raise ValueError("minimum_edit_size cannot be negative")

    def passes(self, start: int, end: int) -> bool:
        return (end - start) >= self.minimum_edit_size


__all__ = ["SizeFilter"]
