"""Jump list recording the origins of committed jumps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .state import Position


@dataclass(slots=True)
class JumpEntry:
    origin: Position
    target: Position


class JumpList:
    """Linear back/forward history of jumps.

    Each committed jump pushes one entry; ``back`` hands its origin out once
    and ``forward`` walks back over entries that were stepped past.
    """

    def __init__(self, *, limit: int = 100) -> None:
        self._entries: List[JumpEntry] = []
        self._index: int = -1
        self._limit = limit

    def push(self, entry: JumpEntry) -> None:
        if self._index < len(self._entries) - 1:
            self._entries = self._entries[: self._index + 1]
        self._entries.append(entry)
        if len(self._entries) > self._limit:
            del self._entries[0]
        self._index = len(self._entries) - 1

    def can_go_back(self) -> bool:
        return self._index >= 0

    def can_go_forward(self) -> bool:
        return self._index < len(self._entries) - 1

    def back(self) -> Optional[Position]:
        if not self.can_go_back():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry.origin

    def forward(self) -> Optional[Position]:
        if not self.can_go_forward():
            return None
        self._index += 1
        return self._entries[self._index].target

    def __len__(self) -> int:
        return len(self._entries)
