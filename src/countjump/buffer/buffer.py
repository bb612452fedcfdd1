"""In-memory editor host combining document, cursor state and jump list."""

from __future__ import annotations

from typing import Iterable, Optional

from countjump.runtime import telemetry

from .document import BufferDocument
from .jumps import JumpEntry, JumpList
from .state import (
    BufferState,
    Position,
    Selection,
    SelectionMode,
    ViewState,
)
from .validation import ensure_position


class Buffer:
    """Reference ``EditorHost`` used by tests and headless callers."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
        jumps: Optional[JumpList] = None,
        height: int = 24,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.jumps = jumps or JumpList()
        self.height = height
        self.bell_count = 0

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", cursor: Position = (1, 1)
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_text(text))
        buffer.set_cursor(cursor)
        return buffer

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, name: str = "default", cursor: Position = (1, 1)
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_lines(lines))
        buffer.set_cursor(cursor)
        return buffer

    def replace_lines(self, lines: Iterable[str]) -> None:
        """Swap in new text, clamping the cursor into the new document."""

        self.document = self.document.replace(lines)
        line = min(self.state.cursor[0], self.document.line_count)
        col = min(self.state.cursor[1], len(self.document.get_line(line)) + 1)
        self.state.set_cursor(line, max(col, 1))
        self.state.clear_selection()

    def line_text(self, lnum: int) -> str:
        return self.document.get_line(lnum)

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def get_cursor(self) -> Position:
        return self.state.cursor

    def set_cursor(self, position: Position) -> None:
        line, col = ensure_position(self.document, position)
        self.state.set_cursor(line, col)
        self._scroll_to(line)

    def save_view(self) -> ViewState:
        return ViewState(
            cursor=self.state.cursor,
            top_line=self.state.top_line,
            selection=self.state.selection,
        )

    def restore_view(self, view: ViewState) -> None:
        self.state.cursor = view.cursor
        self.state.top_line = view.top_line
        self.state.selection = view.selection

    def open_fold(self, lnum: int) -> None:
        opened = self.state.open_folds_at(lnum)
        if opened:
            telemetry.record_event(
                "host.open_fold",
                level="debug",
                data={"buffer": self.name, "line": lnum, "opened": opened},
            )

    def bell(self) -> None:
        self.bell_count += 1
        telemetry.record_event(
            "host.bell", level="debug", data={"buffer": self.name}
        )

    def get_selection(self) -> Optional[Selection]:
        return self.state.selection

    def set_selection(
        self,
        anchor: Position,
        cursor: Position,
        mode: SelectionMode = SelectionMode.CHARACTER,
    ) -> None:
        ensure_position(self.document, anchor)
        self.set_cursor(cursor)
        self.state.set_selection(anchor, cursor, mode)

    def clear_selection(self) -> None:
        self.state.clear_selection()

    def record_jump(self, origin: Position, target: Position) -> None:
        self.jumps.push(JumpEntry(origin=origin, target=target))

    def jump_back(self) -> Optional[Position]:
        """Return to the origin of the most recent unvisited jump."""

        origin = self.jumps.back()
        if origin is not None:
            self.set_cursor(origin)
        return origin

    def jump_forward(self) -> Optional[Position]:
        target = self.jumps.forward()
        if target is not None:
            self.set_cursor(target)
        return target

    def _scroll_to(self, line: int) -> None:
        if line < self.state.top_line:
            self.state.top_line = line
        elif line >= self.state.top_line + self.height:
            self.state.top_line = line - self.height + 1
