"""Collaborator protocol every editor host implements for the jump core."""

from __future__ import annotations

from typing import Optional, Protocol

from .state import Position, Selection, SelectionMode, ViewState


class EditorHost(Protocol):
    """Buffer/viewport surface consumed by scanners, searches and jumps."""

    def line_text(self, lnum: int) -> str:
        """Return the text of 1-based line ``lnum``."""
        ...

    @property
    def line_count(self) -> int:
        ...

    def get_cursor(self) -> Position:
        ...

    def set_cursor(self, position: Position) -> None:
        ...

    def save_view(self) -> ViewState:
        ...

    def restore_view(self, view: ViewState) -> None:
        ...

    def open_fold(self, lnum: int) -> None:
        """Expand any closed fold that hides ``lnum``."""
        ...

    def bell(self) -> None:
        ...

    def get_selection(self) -> Optional[Selection]:
        ...

    def set_selection(
        self, anchor: Position, cursor: Position, mode: SelectionMode
    ) -> None:
        ...

    def clear_selection(self) -> None:
        ...

    def record_jump(self, origin: Position, target: Position) -> None:
        """Remember ``origin`` so a later back-navigation can return to it."""
        ...


class PositionError(RuntimeError):
    """Raised when a host is handed an out-of-range position."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position
