"""Region scanning: locate region borders relative to the cursor line.

A region is a maximal run of consecutive lines satisfying a line predicate.
Regions are recomputed from the live host on every call and nothing here
moves the cursor; callers commit results through ``jump``.
"""

from __future__ import annotations

from countjump.buffer import NO_POSITION, EditorHost, Position
from countjump.modes import EditorContext, ensure_step, normalize_count
from countjump.runtime import telemetry

from .predicates import LinePredicate, match_column


def last_line_matching(
    host: EditorHost, predicate: LinePredicate, start: int, step: int
) -> Position:
    """Last line of the run that starts at ``start`` and extends by ``step``.

    Returns ``NO_POSITION`` when ``start`` itself does not match.
    """

    col = match_column(predicate, host, start)
    if not col:
        return NO_POSITION
    line = start
    while True:
        next_col = match_column(predicate, host, line + step)
        if not next_col:
            return (line, col)
        line, col = line + step, next_col


def first_line_matching(
    host: EditorHost, predicate: LinePredicate, start: int, step: int
) -> Position:
    line = start
    while 1 <= line <= host.line_count:
        col = match_column(predicate, host, line)
        if col:
            return (line, col)
        line += step
    return NO_POSITION


def scan_region_end(
    context: EditorContext, count: int, predicate: LinePredicate, step: int
) -> Position:
    """Border where the ``count``-th region, starting with the current one, ends.

    The cursor line must lie inside a region. ``step`` picks the direction;
    scanning backwards therefore finds region starts.
    """

    host = context.host
    step = ensure_step(step)
    remaining = normalize_count(count)
    with telemetry.span(
        "regions::scan_end",
        component="regions",
        metadata={"count": remaining, "step": step},
    ) as handle:
        line = host.get_cursor()[0]
        while True:
            end = last_line_matching(host, predicate, line, step)
            if end == NO_POSITION:
                handle.miss(f"line {line} outside region")
                return NO_POSITION
            remaining -= 1
            if remaining == 0:
                return end
            start = first_line_matching(host, predicate, end[0] + step, step)
            if start == NO_POSITION:
                handle.miss(f"{remaining} region(s) short")
                return NO_POSITION
            line = start[0]


def scan_next_region_boundary(
    context: EditorContext,
    count: int,
    predicate: LinePredicate,
    step: int,
    want_end: bool,
) -> Position:
    """Start (or, with ``want_end``, far border) of the ``count``-th next region.

    Starting inside a region: with ``want_end`` that region is the first one
    crossed, so a count of 1 lands on its own far border; without it the
    region is finished first and does not use up the count. Starting on a
    region's last line (in scan direction) simply steps off it.
    """

    host = context.host
    step = ensure_step(step)
    remaining = normalize_count(count)
    with telemetry.span(
        "regions::scan_boundary",
        component="regions",
        metadata={"count": remaining, "step": step, "want_end": want_end},
    ) as handle:
        line = host.get_cursor()[0]
        in_region = bool(match_column(predicate, host, line))
        next_in_region = bool(match_column(predicate, host, line + step))

        if in_region and next_in_region:
            current_end = last_line_matching(host, predicate, line, step)
            if want_end:
                if remaining == 1:
                    return current_end
                remaining -= 1
            line = current_end[0] + step
        elif in_region:
            line += step

        while True:
            start = first_line_matching(host, predicate, line, step)
            if start == NO_POSITION:
                handle.miss(f"{remaining} region(s) short")
                return NO_POSITION
            remaining -= 1
            if remaining == 0:
                if want_end:
                    return last_line_matching(host, predicate, start[0], step)
                return start
            line = last_line_matching(host, predicate, start[0], step)[0] + step


__all__ = [
    "first_line_matching",
    "last_line_matching",
    "scan_next_region_boundary",
    "scan_region_end",
]
