"""Line storage backing the in-memory buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text model addressed with 1-based line numbers.

    Scanners read lines one at a time through ``get_line``; nothing here
    caches derived structure, so a replaced document is always seen fresh.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        lines = text.split("\n")
        if len(lines) > 1 and text.endswith("\n"):
            lines.pop()
        return cls(_lines=lines)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=list(lines) or [""])

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(self, lines: Iterable[str]) -> "BufferDocument":
        """Return a new document with the provided lines and bumped version."""

        return BufferDocument(_lines=list(lines) or [""], version=self.version + 1)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, lnum: int) -> str:
        if lnum < 1 or lnum > len(self._lines):
            raise IndexError(f"line {lnum} outside 1..{len(self._lines)}")
        return self._lines[lnum - 1]

    @property
    def text(self) -> str:
        return "\n".join(self._lines)
