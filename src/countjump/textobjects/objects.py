"""Text objects as first-class values, including pattern-delimited ones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from countjump.buffer import Position, SelectionMode
from countjump.modes import EditorContext, JumpMode
from countjump.search import Pattern, count_search
from countjump.search.pattern import RegexLike

from .span import SpanLocate, SpanResult, build_text_object_span


@dataclass(frozen=True, slots=True)
class TextObject:
    """Begin/end locators bound into inner and outer selections."""

    name: str
    selection_mode: SelectionMode
    begin_locate: SpanLocate
    end_locate: SpanLocate
    exclude_boundaries: Optional[bool] = None

    def select(
        self,
        context: EditorContext,
        mode: JumpMode,
        is_inner: bool,
        count: int = 1,
    ) -> SpanResult:
        return build_text_object_span(
            context,
            mode,
            is_inner,
            self.selection_mode,
            self.begin_locate,
            self.end_locate,
            count=count,
            exclude_boundaries=self.exclude_boundaries,
        )

    def inner(
        self,
        context: EditorContext,
        mode: JumpMode = JumpMode.OPERATOR_PENDING,
        count: int = 1,
    ) -> SpanResult:
        return self.select(context, mode, True, count)

    def outer(
        self,
        context: EditorContext,
        mode: JumpMode = JumpMode.OPERATOR_PENDING,
        count: int = 1,
    ) -> SpanResult:
        return self.select(context, mode, False, count)


def make_pattern_text_object(
    begin_pattern: RegexLike,
    end_pattern: RegexLike,
    *,
    selection_mode: SelectionMode = SelectionMode.CHARACTER,
    name: str = "pattern",
) -> TextObject:
    """Text object spanning from a ``begin_pattern`` match to an ``end_pattern`` match.

    Outer spans run from the start of the begin match to the end of the end
    match; inner spans sit strictly between the two matches.
    """

    def begin(context: EditorContext, count: int, is_inner: bool) -> Position:
        pattern = Pattern(
            begin_pattern,
            backward=True,
            accept_at_cursor=True,
            to_end=is_inner,
            wrap=False,
        )
        return count_search(context, count, pattern, ring_bell=False)

    def end(context: EditorContext, count: int, is_inner: bool) -> Position:
        # Inner searches start past the begin match, so a directly adjacent
        # end delimiter sits at the cursor.
        pattern = Pattern(
            end_pattern,
            accept_at_cursor=is_inner,
            to_end=not is_inner,
            wrap=False,
        )
        return count_search(context, count, pattern, ring_bell=False)

    return TextObject(
        name=name,
        selection_mode=selection_mode,
        begin_locate=begin,
        end_locate=end,
    )


__all__ = ["TextObject", "make_pattern_text_object"]
