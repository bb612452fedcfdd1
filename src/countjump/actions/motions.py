"""Factories producing motions as first-class callables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from countjump.buffer import Position
from countjump.modes import EditorContext, JumpMode
from countjump.search import (
    Pattern,
    count_search,
    count_search_with_wrap_message,
)
from countjump.search.pattern import RegexLike

from .jump import Locate, jump


@dataclass(frozen=True, slots=True)
class Motion:
    """A locator bound to its arguments, committed through ``jump``.

    ``to_end`` marks motions landing on the end of a match; invoked from
    operator-pending mode they include that last character.
    """

    name: str
    locate: Locate
    args: tuple[object, ...] = ()
    to_end: bool = False
    ring_bell: bool = True

    def __call__(
        self,
        context: EditorContext,
        mode: JumpMode = JumpMode.NORMAL,
        count: int = 1,
    ) -> Position:
        if self.to_end and mode is JumpMode.OPERATOR_PENDING:
            mode = JumpMode.OPERATOR_PENDING_TO_END
        return jump(
            context,
            mode,
            self.locate,
            *self.args,
            count=count,
            ring_bell=self.ring_bell,
        )


@dataclass(frozen=True, slots=True)
class BracketMotions:
    next_begin: Motion
    prev_begin: Motion
    next_end: Optional[Motion] = None
    prev_end: Optional[Motion] = None

    def all(self) -> tuple[Motion, ...]:
        motions = (self.next_begin, self.prev_begin, self.next_end, self.prev_end)
        return tuple(motion for motion in motions if motion is not None)


def make_count_search_motion(
    pattern: Pattern, *, name: Optional[str] = None, search_name: Optional[str] = None
) -> Motion:
    """Motion to the ``count``-th match of ``pattern``.

    With ``search_name`` the motion reports wrap-around on the event bus.
    """

    label = name or f"search:{pattern.source}"
    if search_name is not None:
        return Motion(
            name=label,
            locate=count_search_with_wrap_message,
            args=(search_name, pattern),
            to_end=pattern.to_end,
            ring_bell=False,
        )
    return Motion(
        name=label,
        locate=count_search,
        args=(pattern,),
        to_end=pattern.to_end,
        ring_bell=False,
    )


def make_bracket_motions(
    begin_pattern: RegexLike,
    end_pattern: Optional[RegexLike] = None,
    *,
    end_to_end: bool = False,
    wrap: Optional[bool] = False,
    search_name: Optional[str] = None,
    name: str = "bracket",
) -> BracketMotions:
    """Forward/backward motions to the begin (and optionally end) of a block.

    ``end_to_end`` lands the end motions on the last character of the end
    match instead of its first.
    """

    def build(regex: RegexLike, label: str, *, backward: bool, to_end: bool) -> Motion:
        pattern = Pattern(regex, backward=backward, to_end=to_end, wrap=wrap)
        return make_count_search_motion(
            pattern, name=f"{name}.{label}", search_name=search_name
        )

    next_end = prev_end = None
    if end_pattern is not None:
        next_end = build(end_pattern, "next_end", backward=False, to_end=end_to_end)
        prev_end = build(end_pattern, "prev_end", backward=True, to_end=end_to_end)
    return BracketMotions(
        next_begin=build(begin_pattern, "next_begin", backward=False, to_end=False),
        prev_begin=build(begin_pattern, "prev_begin", backward=True, to_end=False),
        next_end=next_end,
        prev_end=prev_end,
    )


def make_motion_with_jump_functions(
    forward: Locate,
    backward: Locate,
    *args: object,
    name: str = "motion",
    ring_bell: bool = True,
) -> tuple[Motion, Motion]:
    """Pair two locators sharing ``args`` into forward/backward motions.

    Pass ``ring_bell=False`` when the locators ring the bell themselves, as
    ``count_search`` does.
    """

    return (
        Motion(
            name=f"{name}.forward", locate=forward, args=args, ring_bell=ring_bell
        ),
        Motion(
            name=f"{name}.backward", locate=backward, args=args, ring_bell=ring_bell
        ),
    )


__all__ = [
    "BracketMotions",
    "Motion",
    "make_bracket_motions",
    "make_count_search_motion",
    "make_motion_with_jump_functions",
]
