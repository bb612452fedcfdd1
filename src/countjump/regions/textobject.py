"""Text object selecting the region around the cursor."""

from __future__ import annotations

from countjump.actions.caret import line_end
from countjump.buffer import NO_POSITION, Position, SelectionMode
from countjump.modes import EditorContext
from countjump.textobjects import TextObject

from .predicates import LinePredicate, negate
from .scanner import last_line_matching, scan_region_end


def make_region_text_object(
    predicate: LinePredicate,
    *,
    selection_mode: SelectionMode = SelectionMode.LINE,
    name: str = "region",
) -> TextObject:
    """Inner selects the region under the cursor (plus ``count - 1`` more);
    outer also takes the non-region lines that follow the last one.
    """

    gap = negate(predicate)

    def begin(context: EditorContext, count: int, is_inner: bool) -> Position:
        first = scan_region_end(context, count, predicate, -1)
        if first == NO_POSITION:
            return NO_POSITION
        return (first[0], 1)

    def end(context: EditorContext, count: int, is_inner: bool) -> Position:
        last = scan_region_end(context, count, predicate, 1)
        if last == NO_POSITION:
            return NO_POSITION
        if not is_inner:
            trailing = last_line_matching(context.host, gap, last[0] + 1, 1)
            if trailing != NO_POSITION:
                last = trailing
        return line_end(context.host, last[0])

    return TextObject(
        name=name,
        selection_mode=selection_mode,
        begin_locate=begin,
        end_locate=end,
        exclude_boundaries=False,
    )


__all__ = ["make_region_text_object"]
