from __future__ import annotations

import pytest

from countjump.buffer import NO_POSITION, Buffer, Position
from countjump.modes import EditorContext
from countjump.runtime.settings import EditorSettings
from countjump.search import (
    Pattern,
    count_search,
    count_search_with_wrap_message,
    search_pos,
)

LINES = ["foo bar foo", "baz foo", "qux", "foo"]


def make_context(
    lines: list[str] | None = None,
    *,
    cursor: Position = (1, 1),
    settings: EditorSettings | None = None,
) -> EditorContext:
    buffer = Buffer.from_lines(lines or LINES, cursor=cursor)
    return EditorContext(host=buffer, settings=settings or EditorSettings())


def bells(context: EditorContext) -> int:
    assert isinstance(context.host, Buffer)
    return context.host.bell_count


def test_pattern_parse_flags() -> None:
    pattern = Pattern.parse("x", "bceW")

    assert pattern.backward
    assert pattern.accept_at_cursor
    assert pattern.to_end
    assert pattern.wrap is False
    assert Pattern.parse("x", "w").wrap is True
    assert Pattern.parse("x").wrap is None


def test_pattern_parse_rejects_unknown_flags() -> None:
    with pytest.raises(ValueError):
        Pattern.parse("x", "bz")


def test_search_pos_skips_match_at_cursor() -> None:
    context = make_context()

    assert search_pos(context, Pattern("foo")) == (1, 9)
    assert context.host.get_cursor() == (1, 9)


def test_search_pos_without_moving() -> None:
    context = make_context()

    assert search_pos(context, Pattern("bar"), move_cursor=False) == (1, 5)
    assert context.host.get_cursor() == (1, 1)


def test_search_pos_finds_overlapping_matches() -> None:
    context = make_context(["aaa"])

    assert search_pos(context, Pattern("aa")) == (1, 2)


def test_search_pos_backward_and_to_end() -> None:
    context = make_context(cursor=(4, 1))

    assert search_pos(context, Pattern("foo", backward=True)) == (2, 5)
    assert search_pos(context, Pattern("foo", backward=True, to_end=True)) == (1, 11)


def test_search_pos_honours_wrapscan() -> None:
    wrapping = make_context(cursor=(4, 1))
    stopping = make_context(cursor=(4, 1), settings=EditorSettings(wrapscan=False))

    assert search_pos(wrapping, Pattern("foo")) == (1, 1)
    assert search_pos(stopping, Pattern("foo")) == NO_POSITION
    assert search_pos(stopping, Pattern("foo", wrap=True)) == (1, 1)


@pytest.mark.parametrize(
    ("count", "expected"),
    [(1, (1, 9)), (2, (2, 5)), (3, (4, 1))],
)
def test_count_search_lands_on_nth_match(count: int, expected: Position) -> None:
    context = make_context()

    assert count_search(context, count, Pattern("foo", wrap=False)) == expected
    assert context.host.get_cursor() == expected
    assert bells(context) == 0


def test_count_search_is_all_or_nothing() -> None:
    context = make_context()

    result = count_search(context, 4, Pattern("foo", wrap=False))

    assert result == NO_POSITION
    assert context.host.get_cursor() == (1, 1)
    assert bells(context) == 1


def test_count_search_miss_on_first_iteration_rings_once() -> None:
    context = make_context(cursor=(2, 1))

    assert count_search(context, 3, Pattern("nothing")) == NO_POSITION
    assert context.host.get_cursor() == (2, 1)
    assert bells(context) == 1


def test_count_search_can_stay_quiet() -> None:
    context = make_context()

    assert count_search(context, 1, Pattern("nothing"), ring_bell=False) == NO_POSITION
    assert bells(context) == 0


def test_accept_at_cursor_applies_to_first_iteration_only() -> None:
    first = make_context()
    second = make_context()
    pattern = Pattern("foo", accept_at_cursor=True)

    assert count_search(first, 1, pattern) == (1, 1)
    assert count_search(second, 2, pattern) == (1, 9)


def test_zero_count_behaves_like_one() -> None:
    context = make_context()

    assert count_search(context, 0, Pattern("foo")) == (1, 9)


def test_count_search_opens_fold_at_match() -> None:
    context = make_context()
    buffer = context.host
    assert isinstance(buffer, Buffer)
    buffer.state.close_fold(2, 3)

    count_search(context, 2, Pattern("foo"))

    assert not buffer.state.is_folded(2)


def test_wrap_message_reports_wrap_around() -> None:
    context = make_context(cursor=(4, 1))
    messages: list[object] = []
    context.bus.subscribe("search.message", messages.append)

    result = count_search_with_wrap_message(context, 1, "foo", Pattern("foo"))

    assert result == (1, 1)
    assert messages == ["search hit BOTTOM, continuing at TOP"]


def test_wrap_message_backward_wrap() -> None:
    context = make_context(cursor=(1, 1))
    messages: list[object] = []
    context.bus.subscribe("search.message", messages.append)

    result = count_search_with_wrap_message(
        context, 1, "foo", Pattern("foo", backward=True)
    )

    assert result == (4, 1)
    assert messages == ["search hit TOP, continuing at BOTTOM"]


def test_wrap_message_echoes_search_without_wrap() -> None:
    context = make_context()
    messages: list[object] = []
    context.bus.subscribe("search.message", messages.append)

    count_search_with_wrap_message(context, 1, "foo", Pattern("foo"))

    assert messages == ["/foo"]


def test_wrap_message_reports_missing_pattern() -> None:
    context = make_context()
    messages: list[object] = []
    context.bus.subscribe("search.message", messages.append)

    result = count_search_with_wrap_message(context, 1, "zzz", Pattern("zzz"))

    assert result == NO_POSITION
    assert messages == ["Pattern not found: zzz"]
    assert bells(context) == 1
