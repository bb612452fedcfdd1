from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

import pytest
from textual.app import App, ComposeResult
from textual.widgets import TextArea

from countjump.adapters.textual import TextAreaHost
from countjump.buffer import NO_POSITION, PositionError, Selection, SelectionMode
from countjump.modes import EditorContext
from countjump.regions import make_region_motions, pattern_predicate
from countjump.runtime.settings import EditorSettings
from countjump.search import Pattern, count_search
from countjump.textobjects import make_pattern_text_object


class HostApp(App[None]):
    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text

    def compose(self) -> ComposeResult:
        yield TextArea(self._text)


def run_with_host(
    text: str,
    check: Callable[[TextAreaHost], None],
    *,
    settings: Optional[EditorSettings] = None,
) -> None:
    async def run() -> None:
        app = HostApp(text)
        async with app.run_test() as pilot:
            host = TextAreaHost(app.query_one(TextArea), settings=settings)
            check(host)
            await pilot.pause()

    asyncio.run(run())


def test_host_reads_lines() -> None:
    def check(host: TextAreaHost) -> None:
        assert host.line_count == 3
        assert host.line_text(1) == "alpha"
        assert host.line_text(3) == ""
        assert host.get_cursor() == (1, 1)

    run_with_host("alpha\nbeta\n", check)


def test_host_rejects_out_of_range_positions() -> None:
    def check(host: TextAreaHost) -> None:
        with pytest.raises(PositionError) as excinfo:
            host.set_cursor((5, 1))
        assert excinfo.value.position == (5, 1)

    run_with_host("one\ntwo", check)


def test_region_motion_moves_text_area_cursor() -> None:
    def check(host: TextAreaHost) -> None:
        context = EditorContext(host=host)
        motions = make_region_motions(pattern_predicate("^A"))

        assert motions.next_start(context) == (4, 1)
        assert host.text_area.cursor_location == (3, 0)
        assert host.jump_back() == (1, 1)
        assert host.get_cursor() == (1, 1)

    run_with_host("A\nA\nB\nA", check)


def test_count_search_on_text_area() -> None:
    def check(host: TextAreaHost) -> None:
        context = EditorContext(host=host)

        assert count_search(context, 2, Pattern("x")) == (2, 3)
        assert host.get_cursor() == (2, 3)

    run_with_host("ax\nbbx", check)


def test_text_object_selects_in_text_area() -> None:
    def check(host: TextAreaHost) -> None:
        context = EditorContext(host=host)
        host.set_cursor((1, 6))

        result = make_pattern_text_object(r"\(", r"\)").inner(context)

        assert (result.start, result.end) == ((1, 5), (1, 7))
        assert host.text_area.selected_text == "bar"
        assert host.get_selection() == Selection((1, 5), (1, 7))
        assert host.get_cursor() == (1, 7)

    run_with_host("foo(bar)baz", check)


def test_line_wise_selection_covers_whole_lines() -> None:
    def check(host: TextAreaHost) -> None:
        host.set_selection((1, 2), (2, 1), SelectionMode.LINE)

        assert host.text_area.selected_text == "one\ntwo"
        host.clear_selection()
        assert host.get_selection() is None

    run_with_host("one\ntwo\nthree", check)


def test_failed_motion_rings_bell_and_keeps_cursor() -> None:
    def check(host: TextAreaHost) -> None:
        context = EditorContext(host=host)
        bells: List[object] = []
        context.bus.subscribe("bell", bells.append)
        host.set_cursor((1, 2))

        assert count_search(context, 1, Pattern("missing")) == NO_POSITION
        assert host.get_cursor() == (1, 2)
        assert len(bells) == 1

    run_with_host("abc\ndef", check)


def test_exclusive_text_object_selects_delimited_text() -> None:
    settings = EditorSettings(selection="exclusive")

    def check(host: TextAreaHost) -> None:
        context = EditorContext(host=host, settings=settings)
        host.set_cursor((1, 6))

        result = make_pattern_text_object(r"\(", r"\)").outer(context)

        assert result.end == (1, 9)
        assert host.text_area.selected_text == "(bar)"

    run_with_host("foo(bar)baz", check, settings=settings)


def test_inclusive_text_object_selects_delimited_text() -> None:
    def check(host: TextAreaHost) -> None:
        context = EditorContext(host=host)
        host.set_cursor((1, 6))

        make_pattern_text_object(r"\(", r"\)").outer(context)

        assert host.text_area.selected_text == "(bar)"

    run_with_host("foo(bar)baz", check)
