"""Single-character cursor nudges that honour the caret-wrap setting."""

from __future__ import annotations

from countjump.buffer import EditorHost, Position
from countjump.runtime.settings import EditorSettings


def step_right(host: EditorHost, position: Position, settings: EditorSettings) -> Position:
    """One character right; onto the next line only when caret wrap is on.

    Without wrapping, the end of a line yields the column just past its last
    character.
    """

    line, col = position
    length = len(host.line_text(line))
    if col < length:
        return (line, col + 1)
    if settings.caret_wrap and line < host.line_count:
        return (line + 1, 1)
    return (line, length + 1)


def step_left(host: EditorHost, position: Position, settings: EditorSettings) -> Position:
    line, col = position
    if col > 1:
        return (line, col - 1)
    if settings.caret_wrap and line > 1:
        return (line - 1, max(len(host.line_text(line - 1)), 1))
    return position


def step_line(host: EditorHost, position: Position, step: int) -> Position:
    """Move to column 1 of the adjacent line, staying put at buffer edges."""

    line = position[0] + step
    if line < 1 or line > host.line_count:
        return position
    return (line, 1)


def line_end(host: EditorHost, line: int) -> Position:
    """Position of the last character of ``line`` (column 1 when empty)."""

    return (line, max(len(host.line_text(line)), 1))


__all__ = ["step_right", "step_left", "step_line", "line_end"]
