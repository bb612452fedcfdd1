"""Line-by-line regex search over an editor host."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from countjump.buffer import NO_POSITION, EditorHost, Position
from countjump.modes import EditorContext

from .pattern import Pattern


def _match_starts(regex: "re.Pattern[str]", text: str) -> Iterator["re.Match[str]"]:
    # One leftmost match per start column, so overlapping matches are seen.
    pos = 0
    while pos <= len(text):
        match = regex.search(text, pos)
        if match is None:
            return
        yield match
        pos = match.start() + 1


def line_matches(pattern: Pattern, lnum: int, text: str) -> list[Position]:
    """Positions the pattern lands on in ``text``, in ascending column order."""

    positions = []
    for match in _match_starts(pattern.compiled, text):
        if pattern.to_end:
            col = max(match.end(), match.start() + 1)
        else:
            col = match.start() + 1
        positions.append((lnum, col))
    return positions


def _scan_order(
    host: EditorHost, start_line: int, *, backward: bool, wrap: bool
) -> Iterable[tuple[int, bool]]:
    """Yield ``(line, wrapped)`` in search order, revisiting the start line last."""

    last = host.line_count
    if backward:
        for lnum in range(start_line, 0, -1):
            yield lnum, False
        if wrap:
            for lnum in range(last, start_line - 1, -1):
                yield lnum, True
    else:
        for lnum in range(start_line, last + 1):
            yield lnum, False
        if wrap:
            for lnum in range(1, start_line + 1):
                yield lnum, True


def find_match(
    host: EditorHost, pattern: Pattern, origin: Position, *, wrap: bool
) -> Optional[Position]:
    accept = pattern.accept_at_cursor
    for lnum, wrapped in _scan_order(
        host, origin[0], backward=pattern.backward, wrap=wrap
    ):
        candidates = line_matches(pattern, lnum, host.line_text(lnum))
        if not wrapped and lnum == origin[0]:
            if pattern.backward:
                candidates = [
                    pos for pos in candidates if pos < origin or (accept and pos == origin)
                ]
            else:
                candidates = [
                    pos for pos in candidates if pos > origin or (accept and pos == origin)
                ]
        if candidates:
            return candidates[-1] if pattern.backward else candidates[0]
    return None


def search_pos(
    context: EditorContext, pattern: Pattern, *, move_cursor: bool = True
) -> Position:
    """Search from the cursor; move there and return the match, or the sentinel."""

    host = context.host
    wrap = context.settings.wrapscan if pattern.wrap is None else pattern.wrap
    found = find_match(host, pattern, host.get_cursor(), wrap=wrap)
    if found is None:
        return NO_POSITION
    if move_cursor:
        host.set_cursor(found)
    return found


__all__ = ["find_match", "line_matches", "search_pos"]
