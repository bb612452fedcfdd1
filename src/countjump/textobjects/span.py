"""Build a selection between a located begin and end boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from countjump.actions.caret import line_end, step_left, step_right
from countjump.buffer import NO_POSITION, EditorHost, Position, SelectionMode
from countjump.modes import EditorContext, JumpMode, normalize_count
from countjump.runtime import telemetry
from countjump.runtime.settings import caret_wrap

SpanStatus = Literal["selected", "no_match", "enclosure_violation"]

# (context, count, is_inner) -> boundary position or NO_POSITION
SpanLocate = Callable[[EditorContext, int, bool], Position]


@dataclass(frozen=True, slots=True)
class SpanResult:
    """Outcome of a text-object selection."""

    status: SpanStatus
    start: Position = NO_POSITION
    end: Position = NO_POSITION
    mode: SelectionMode = SelectionMode.CHARACTER

    @property
    def failed(self) -> bool:
        return self.status != "selected"


def _shrink(
    host: EditorHost,
    begin: Position,
    end: Position,
    selection_mode: SelectionMode,
    context: EditorContext,
) -> Optional[tuple[Position, Position]]:
    """Move both borders one unit inward; ``None`` when nothing is left."""

    if selection_mode is SelectionMode.LINE:
        first, last = begin[0] + 1, end[0] - 1
        if first > last:
            return None
        return (first, 1), line_end(host, last)
    start = step_right(host, begin, context.settings)
    stop = step_left(host, end, context.settings)
    if stop < start:
        return None
    return start, stop


def build_text_object_span(
    context: EditorContext,
    mode: JumpMode,
    is_inner: bool,
    selection_mode: SelectionMode,
    begin_locate: SpanLocate,
    end_locate: SpanLocate,
    *,
    count: int = 1,
    exclude_boundaries: Optional[bool] = None,
) -> SpanResult:
    """Select from the enclosing begin boundary to the ``count``-th end boundary.

    The begin locator always runs with a count of 1 from the cursor; the end
    locator runs with ``count`` from the begin boundary. ``exclude_boundaries``
    (defaulting to ``is_inner``) trims one character, or one line for
    line-wise spans, off each side. An end located before the original
    cursor does not enclose it and fails the selection.
    """

    host = context.host
    count = normalize_count(count)
    with telemetry.span(
        "textobject::build",
        component="textobjects",
        metadata={
            "mode": mode.value,
            "inner": is_inner,
            "selection": selection_mode.value,
            "count": count,
        },
    ) as handle:
        exclude = is_inner if exclude_boundaries is None else exclude_boundaries
        view = host.save_view()
        cursor = host.get_cursor()
        status: SpanStatus = "no_match"
        start = end = NO_POSITION

        with caret_wrap(context.settings):
            begin = begin_locate(context, 1, is_inner)
            if begin != NO_POSITION:
                host.set_cursor(begin)
                if exclude and selection_mode is not SelectionMode.LINE:
                    host.set_cursor(step_right(host, begin, context.settings))
                found = end_locate(context, count, is_inner)
                if found == NO_POSITION:
                    status = "no_match"
                elif found < cursor:
                    status = "enclosure_violation"
                elif exclude:
                    shrunk = _shrink(host, begin, found, selection_mode, context)
                    if shrunk is not None:
                        start, end = shrunk
                        status = "selected"
                else:
                    start, end = begin, found
                    status = "selected"

        if status != "selected":
            host.restore_view(view)
            if not mode.is_visual:
                # An operator must not act on a stale selection.
                host.clear_selection()
            handle.miss(status)
            telemetry.record_event(
                "textobject.fail", data={"status": status, "mode": mode.value}
            )
            context.bell(f"textobject.{status}")
            return SpanResult(status=status, mode=selection_mode)

        if selection_mode is SelectionMode.LINE:
            start, end = (start[0], 1), line_end(host, end[0])
        if context.settings.is_exclusive:
            end = step_right(host, end, context.settings)
        host.set_selection(start, end, selection_mode)
        handle.add_metadata("span", (start, end))
        return SpanResult(status="selected", start=start, end=end, mode=selection_mode)


__all__ = ["SpanLocate", "SpanResult", "SpanStatus", "build_text_object_span"]
