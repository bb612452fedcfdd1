"""Validation helpers shared across buffer hosts."""

from __future__ import annotations

from .document import BufferDocument
from .host import PositionError
from .state import Position


def ensure_position(document: BufferDocument, position: Position) -> Position:
    line, col = position
    if line < 1 or line > document.line_count:
        raise PositionError("Line out of range", position=position)
    text = document.get_line(line)
    if col < 1 or col > len(text) + 1:
        raise PositionError("Column out of range", position=position)
    return position
