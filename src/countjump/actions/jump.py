"""Jump committer: locate a position, then commit it as the new cursor."""

from __future__ import annotations

from typing import Callable

from countjump.buffer import NO_POSITION, Position, SelectionMode
from countjump.modes import EditorContext, JumpMode, normalize_count
from countjump.runtime import telemetry
from countjump.runtime.settings import caret_wrap
from countjump.search import Pattern, count_search, count_search_with_wrap_message

from .caret import step_right

Locate = Callable[..., Position]


def jump(
    context: EditorContext,
    mode: JumpMode,
    locate: Locate,
    *args: object,
    count: int = 1,
    ring_bell: bool = True,
) -> Position:
    """Call ``locate(context, count, *args)`` and commit what it finds.

    ``locate`` must leave no trace when it fails; ``jump`` restores the view
    it saved either way. Pass ``ring_bell=False`` for locators that signal
    their own failures.
    """

    host = context.host
    count = normalize_count(count)
    with telemetry.span(
        "jump::commit",
        component="jump",
        metadata={"mode": mode.value, "count": count},
    ) as handle:
        view = host.save_view()
        origin = host.get_cursor()
        selection = host.get_selection() if mode.is_visual else None
        if selection is not None:
            # Resume from the moving end of the active selection.
            host.set_cursor(selection.cursor)
            origin = selection.cursor

        position = locate(context, count, *args)
        if position == NO_POSITION:
            host.restore_view(view)
            handle.miss("no match")
            telemetry.record_event(
                "jump.fail", data={"mode": mode.value, "count": count}
            )
            if ring_bell:
                context.bell("jump.fail")
            return NO_POSITION

        host.record_jump(origin, position)
        if mode.is_visual:
            anchor = selection.anchor if selection is not None else origin
            selection_mode = (
                selection.mode if selection is not None else SelectionMode.CHARACTER
            )
            host.set_selection(anchor, position, selection_mode)
        else:
            host.set_cursor(position)

        if mode is JumpMode.OPERATOR_PENDING_TO_END:
            # Make the operator's span cover the last character of the match.
            with caret_wrap(context.settings) as settings:
                host.set_cursor(step_right(host, position, settings))

        handle.add_metadata("position", position)
        context.bus.emit(
            "jump.commit", {"origin": origin, "target": position, "mode": mode}
        )
        return position


def count_jump(
    context: EditorContext, mode: JumpMode, pattern: Pattern, *, count: int = 1
) -> Position:
    """Jump to the ``count``-th match of ``pattern``."""

    return jump(context, mode, count_search, pattern, count=count, ring_bell=False)


def count_jump_with_wrap_message(
    context: EditorContext,
    mode: JumpMode,
    search_name: str,
    pattern: Pattern,
    *,
    count: int = 1,
) -> Position:
    return jump(
        context,
        mode,
        count_search_with_wrap_message,
        search_name,
        pattern,
        count=count,
        ring_bell=False,
    )


__all__ = ["Locate", "jump", "count_jump", "count_jump_with_wrap_message"]
