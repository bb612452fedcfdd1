"""Region locators for ``jump`` and the motions built from them."""

from __future__ import annotations

from dataclasses import dataclass

from countjump.actions.caret import line_end
from countjump.actions.motions import Motion
from countjump.buffer import NO_POSITION, Position
from countjump.modes import EditorContext

from .predicates import LinePredicate
from .scanner import scan_next_region_boundary, scan_region_end


def jump_to_region_end(
    context: EditorContext,
    count: int,
    predicate: LinePredicate,
    step: int,
    to_end_of_line: bool = False,
) -> Position:
    position = scan_region_end(context, count, predicate, step)
    if position != NO_POSITION and to_end_of_line:
        position = line_end(context.host, position[0])
    return position


def jump_to_next_region(
    context: EditorContext,
    count: int,
    predicate: LinePredicate,
    step: int,
    want_end: bool,
    to_end_of_line: bool = False,
) -> Position:
    position = scan_next_region_boundary(context, count, predicate, step, want_end)
    if position != NO_POSITION and to_end_of_line:
        position = line_end(context.host, position[0])
    return position


@dataclass(frozen=True, slots=True)
class RegionMotions:
    next_start: Motion
    next_end: Motion
    prev_start: Motion
    prev_end: Motion

    def all(self) -> tuple[Motion, ...]:
        return (self.next_start, self.next_end, self.prev_start, self.prev_end)


def make_region_motions(
    predicate: LinePredicate, *, to_end_of_line: bool = False, name: str = "region"
) -> RegionMotions:
    """The four motions over regions of ``predicate``.

    ``to_end_of_line`` lands end motions on the last character of the border
    line; operator-pending use then includes that character.
    """

    return RegionMotions(
        next_start=Motion(
            name=f"{name}.next_start",
            locate=jump_to_next_region,
            args=(predicate, 1, False),
        ),
        next_end=Motion(
            name=f"{name}.next_end",
            locate=jump_to_next_region,
            args=(predicate, 1, True, to_end_of_line),
            to_end=to_end_of_line,
        ),
        # Backwards, the far border of a region is its first line.
        prev_start=Motion(
            name=f"{name}.prev_start",
            locate=jump_to_next_region,
            args=(predicate, -1, True),
        ),
        prev_end=Motion(
            name=f"{name}.prev_end",
            locate=jump_to_next_region,
            args=(predicate, -1, False, to_end_of_line),
            to_end=to_end_of_line,
        ),
    )


__all__ = [
    "RegionMotions",
    "jump_to_next_region",
    "jump_to_region_end",
    "make_region_motions",
]
