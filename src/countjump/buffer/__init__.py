"""Buffer abstractions: positions, the host protocol and the in-memory host."""

from .buffer import Buffer
from .document import BufferDocument
from .host import EditorHost, PositionError
from .jumps import JumpEntry, JumpList
from .state import (
    NO_POSITION,
    BufferState,
    Position,
    Selection,
    SelectionMode,
    ViewState,
)
from .validation import ensure_position

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "EditorHost",
    "JumpEntry",
    "JumpList",
    "NO_POSITION",
    "Position",
    "PositionError",
    "Selection",
    "SelectionMode",
    "ViewState",
    "ensure_position",
]
