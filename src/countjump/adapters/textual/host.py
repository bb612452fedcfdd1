"""Editor host backed by a Textual ``TextArea`` widget."""

from __future__ import annotations

from typing import Optional

from textual.widgets import TextArea
from textual.widgets.text_area import Selection as TextSelection

from countjump.buffer import (
    JumpEntry,
    JumpList,
    Position,
    PositionError,
    Selection,
    SelectionMode,
    ViewState,
)
from countjump.runtime import telemetry
from countjump.runtime.settings import EditorSettings


class TextAreaHost:
    """Adapts a ``TextArea`` to the ``EditorHost`` protocol.

    Textual locations are 0-based and place the cursor between characters;
    positions here are 1-based and name characters. ``TextArea`` has no
    folds, so ``open_fold`` only logs. With an exclusive ``selection``
    setting, character selections arrive with their end already one past the
    last selected character.
    """

    def __init__(
        self,
        text_area: TextArea,
        *,
        name: str = "textarea",
        settings: Optional[EditorSettings] = None,
    ) -> None:
        self.text_area = text_area
        self.name = name
        self.settings = settings or EditorSettings()
        self.jumps = JumpList()
        self._selection: Optional[Selection] = None
        self._applied: Optional[TextSelection] = None

    def line_text(self, lnum: int) -> str:
        return self.text_area.document.get_line(lnum - 1)

    @property
    def line_count(self) -> int:
        return self.text_area.document.line_count

    def get_cursor(self) -> Position:
        selection = self.get_selection()
        if selection is not None:
            return selection.cursor
        row, col = self.text_area.cursor_location
        return (row + 1, col + 1)

    def set_cursor(self, position: Position) -> None:
        line, col = self._validate(position)
        self._selection = None
        self.text_area.selection = TextSelection.cursor((line - 1, col - 1))

    def save_view(self) -> ViewState:
        return ViewState(
            cursor=self.get_cursor(),
            top_line=int(self.text_area.scroll_offset.y) + 1,
            selection=self.get_selection(),
        )

    def restore_view(self, view: ViewState) -> None:
        if view.selection is not None:
            selection = view.selection
            self.set_selection(selection.anchor, selection.cursor, selection.mode)
        else:
            self.set_cursor(view.cursor)
        self.text_area.scroll_to(y=view.top_line - 1, animate=False)

    def open_fold(self, lnum: int) -> None:
        telemetry.record_event(
            "host.open_fold", level="debug", data={"host": self.name, "line": lnum}
        )

    def bell(self) -> None:
        self.text_area.app.bell()
        telemetry.record_event("host.bell", level="debug", data={"host": self.name})

    def get_selection(self) -> Optional[Selection]:
        if self._selection is None or self.text_area.selection != self._applied:
            return None
        return self._selection

    def set_selection(
        self,
        anchor: Position,
        cursor: Position,
        mode: SelectionMode = SelectionMode.CHARACTER,
    ) -> None:
        self._validate(anchor)
        self._validate(cursor)
        applied = self._to_textual(anchor, cursor, mode)
        self.text_area.selection = applied
        self._selection = Selection(anchor, cursor, mode)
        self._applied = self.text_area.selection

    def clear_selection(self) -> None:
        cursor = self.get_cursor()
        self._selection = None
        line, col = cursor
        self.text_area.selection = TextSelection.cursor((line - 1, col - 1))

    def record_jump(self, origin: Position, target: Position) -> None:
        self.jumps.push(JumpEntry(origin=origin, target=target))

    def jump_back(self) -> Optional[Position]:
        origin = self.jumps.back()
        if origin is not None:
            self.set_cursor(origin)
        return origin

    def _validate(self, position: Position) -> Position:
        line, col = position
        if line < 1 or line > self.line_count:
            raise PositionError("Line out of range", position=position)
        if col < 1 or col > len(self.line_text(line)) + 1:
            raise PositionError("Column out of range", position=position)
        return position

    def _to_textual(
        self, anchor: Position, cursor: Position, mode: SelectionMode
    ) -> TextSelection:
        if mode is SelectionMode.LINE:
            first, last = sorted((anchor[0], cursor[0]))
            return TextSelection(
                (first - 1, 0), (last - 1, len(self.line_text(last)))
            )
        if self.settings.is_exclusive:
            return TextSelection(
                (anchor[0] - 1, anchor[1] - 1), (cursor[0] - 1, cursor[1] - 1)
            )
        # Inclusive character span: extend past whichever end comes last.
        if cursor >= anchor:
            end_col = min(cursor[1], len(self.line_text(cursor[0])))
            return TextSelection(
                (anchor[0] - 1, anchor[1] - 1), (cursor[0] - 1, end_col)
            )
        start_col = min(anchor[1], len(self.line_text(anchor[0])))
        return TextSelection(
            (anchor[0] - 1, start_col), (cursor[0] - 1, cursor[1] - 1)
        )


__all__ = ["TextAreaHost"]
