"""Line-based text storage for the reference buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text store addressed by character offsets.

    Offsets count the newline between lines as one character, so
    ``text[offset]`` and ``document`` agree everywhere.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def length(self) -> int:
        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def splice(self, start: int, end: int, text: str) -> "BufferDocument":
        """Return a document with ``[start, end)`` replaced by ``text``."""

        current = self.text
        return BufferDocument.from_text(
            current[:start] + text + current[end:], version=self.version + 1
        )

    def offset_to_cursor(self, offset: int) -> tuple[int, int]:
        running = 0
        for row, line in enumerate(self._lines):
            if offset <= running + len(line):
                return (row, offset - running)
            running += len(line) + 1
        return (len(self._lines) - 1, len(self._lines[-1]))

    def cursor_to_offset(self, row: int, col: int) -> int:
        offset = 0
        for index in range(row):
            offset += len(self._lines[index]) + 1  # newline
        return offset + col
