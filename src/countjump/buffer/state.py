"""Positions, selections, and cursor/view state for buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Position = Tuple[int, int]  # (line, column), both 1-based

NO_POSITION: Position = (0, 0)


class SelectionMode(str, Enum):
    CHARACTER = "character"
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class Selection:
    anchor: Position
    cursor: Position
    mode: SelectionMode = SelectionMode.CHARACTER

    @property
    def start(self) -> Position:
        return min(self.anchor, self.cursor)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.cursor)


@dataclass(frozen=True, slots=True)
class ViewState:
    """Opaque snapshot handed out by ``save_view`` and taken by ``restore_view``."""

    cursor: Position
    top_line: int
    selection: Optional[Selection]


@dataclass(slots=True)
class BufferState:
    """Mutable cursor, scroll, selection and fold info for a buffer."""

    cursor: Position = (1, 1)
    top_line: int = 1
    selection: Optional[Selection] = None
    closed_folds: List[Tuple[int, int]] = field(default_factory=list)

    def set_cursor(self, line: int, col: int) -> None:
        self.cursor = (line, col)

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(
        self,
        anchor: Position,
        cursor: Position,
        mode: SelectionMode = SelectionMode.CHARACTER,
    ) -> None:
        self.selection = Selection(anchor, cursor, mode)

    def close_fold(self, first: int, last: int) -> None:
        self.closed_folds.append((first, last))

    def open_folds_at(self, lnum: int) -> int:
        """Open every closed fold containing ``lnum``; return how many opened."""

        remaining = [
            (first, last)
            for first, last in self.closed_folds
            if not first <= lnum <= last
        ]
        opened = len(self.closed_folds) - len(remaining)
        self.closed_folds = remaining
        return opened

    def is_folded(self, lnum: int) -> bool:
        return any(first <= lnum <= last for first, last in self.closed_folds)
