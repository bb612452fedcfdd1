"""Counted pattern searches: all-or-nothing repetition of one search."""

from __future__ import annotations

from typing import Callable, Optional

from countjump.buffer import NO_POSITION, Position
from countjump.modes import EditorContext, normalize_count
from countjump.runtime import telemetry

from .engine import search_pos
from .pattern import Pattern

StepObserver = Callable[[Position, Position, Pattern], None]


def _repeat_search(
    context: EditorContext,
    count: int,
    pattern: Pattern,
    observe: Optional[StepObserver] = None,
    *,
    ring_bell: bool = True,
) -> Position:
    host = context.host
    count = normalize_count(count)
    with telemetry.span(
        "search::count",
        component="search",
        metadata={
            "count": count,
            "pattern": pattern.source,
            "backward": pattern.backward,
        },
    ) as handle:
        view = host.save_view()
        current = pattern
        position = NO_POSITION
        for iteration in range(1, count + 1):
            previous = host.get_cursor()
            position = search_pos(context, current)
            if position == NO_POSITION:
                if iteration > 1:
                    # No partial progress: go back to where the count started.
                    host.restore_view(view)
                handle.miss(f"iteration {iteration} of {count}")
                telemetry.record_event(
                    "search.miss",
                    data={"pattern": pattern.source, "count": count},
                )
                if ring_bell:
                    context.bell("search.miss")
                return NO_POSITION
            if observe is not None:
                observe(previous, position, current)
            # Accepting a match at the cursor would stall repeated iterations.
            current = current.without_accept_at_cursor()

        host.open_fold(position[0])
        handle.add_metadata("position", position)
        return position


def count_search(
    context: EditorContext, count: int, pattern: Pattern, *, ring_bell: bool = True
) -> Position:
    """Jump to the ``count``-th match of ``pattern``, or return ``NO_POSITION``.

    The cursor is left untouched on failure and the bell rings once.
    """

    return _repeat_search(context, count, pattern, ring_bell=ring_bell)


def _wrapped(previous: Position, found: Position, pattern: Pattern) -> bool:
    if found == previous:
        return not pattern.accept_at_cursor
    if pattern.backward:
        return found > previous
    return found < previous


def count_search_with_wrap_message(
    context: EditorContext, count: int, search_name: str, pattern: Pattern
) -> Position:
    """``count_search`` that reports wrap-around and misses on the event bus."""

    wrap_messages: list[str] = []

    def observe(previous: Position, found: Position, used: Pattern) -> None:
        if not _wrapped(previous, found, used):
            return
        if used.backward:
            wrap_messages.append("search hit TOP, continuing at BOTTOM")
        else:
            wrap_messages.append("search hit BOTTOM, continuing at TOP")

    position = _repeat_search(context, count, pattern, observe)
    if position == NO_POSITION:
        context.message(f"Pattern not found: {search_name}")
    elif wrap_messages:
        context.message(wrap_messages[-1])
    else:
        context.message(("?" if pattern.backward else "/") + search_name)
    return position


__all__ = ["count_search", "count_search_with_wrap_message"]
