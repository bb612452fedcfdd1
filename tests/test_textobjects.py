from __future__ import annotations

from countjump.buffer import NO_POSITION, Buffer, Position, Selection, SelectionMode
from countjump.modes import EditorContext, JumpMode
from countjump.runtime.settings import EditorSettings
from countjump.textobjects import build_text_object_span, make_pattern_text_object

PARENS = make_pattern_text_object(r"\(", r"\)", name="parens")
BRACES = make_pattern_text_object(
    r"^\{", r"^\}", selection_mode=SelectionMode.LINE, name="braces"
)


def make_context(
    lines: list[str],
    *,
    cursor: Position = (1, 1),
    settings: EditorSettings | None = None,
) -> EditorContext:
    host = Buffer.from_lines(lines, cursor=cursor)
    if settings is None:
        return EditorContext(host=host)
    return EditorContext(host=host, settings=settings)


def buffer_of(context: EditorContext) -> Buffer:
    assert isinstance(context.host, Buffer)
    return context.host


def test_inner_span_excludes_delimiters() -> None:
    context = make_context(["foo(bar)baz"], cursor=(1, 6))

    result = PARENS.inner(context)

    assert result.status == "selected"
    assert (result.start, result.end) == ((1, 5), (1, 7))
    assert buffer_of(context).get_selection() == Selection((1, 5), (1, 7))
    assert buffer_of(context).get_cursor() == (1, 7)


def test_outer_span_includes_delimiters() -> None:
    context = make_context(["foo(bar)baz"], cursor=(1, 6))

    result = PARENS.outer(context)

    assert (result.start, result.end) == ((1, 4), (1, 8))


def test_inner_span_across_lines() -> None:
    context = make_context(["call(", "  arg,", "  arg2", ")"], cursor=(2, 3))

    result = PARENS.inner(context)

    assert (result.start, result.end) == ((2, 1), (3, 6))


def test_line_wise_spans() -> None:
    lines = ["{", "a", "b", "}"]

    inner = BRACES.inner(make_context(lines, cursor=(2, 1)))
    outer = BRACES.outer(make_context(lines, cursor=(2, 1)))

    assert inner.mode is SelectionMode.LINE
    assert (inner.start, inner.end) == ((2, 1), (3, 1))
    assert (outer.start, outer.end) == ((1, 1), (4, 1))


def test_end_before_cursor_is_not_an_enclosure() -> None:
    context = make_context(["(", "a", ")", "cursor", "("], cursor=(4, 1))

    result = PARENS.inner(context)

    assert result.status == "enclosure_violation"
    assert result.failed
    assert buffer_of(context).get_cursor() == (4, 1)
    assert buffer_of(context).get_selection() is None
    assert buffer_of(context).bell_count == 1


def test_visual_failure_keeps_prior_selection() -> None:
    context = make_context(["(", "a", ")", "cursor", "("])
    buffer = buffer_of(context)
    buffer.set_selection((4, 1), (4, 3))

    result = PARENS.inner(context, JumpMode.VISUAL)

    assert result.failed
    assert buffer.get_selection() == Selection((4, 1), (4, 3))
    assert buffer.get_cursor() == (4, 3)


def test_operator_pending_failure_clears_selection() -> None:
    context = make_context(["(", "a", ")", "cursor", "("])
    buffer = buffer_of(context)
    buffer.set_selection((4, 1), (4, 3))

    PARENS.inner(context, JumpMode.OPERATOR_PENDING)

    assert buffer.get_selection() is None


def test_exclusive_selection_extends_end() -> None:
    context = make_context(
        ["foo(bar)baz"],
        cursor=(1, 6),
        settings=EditorSettings(selection="exclusive"),
    )

    result = PARENS.outer(context)

    assert (result.start, result.end) == ((1, 4), (1, 9))


def test_count_selects_further_end_delimiter() -> None:
    context = make_context(["(a) (b)"], cursor=(1, 2))

    result = PARENS.outer(context, count=2)

    assert (result.start, result.end) == ((1, 1), (1, 7))


def test_empty_inner_span_fails() -> None:
    context = make_context(["()"])

    result = PARENS.inner(context)

    assert result.status == "no_match"
    assert buffer_of(context).bell_count == 1


def test_missing_begin_fails_without_moving() -> None:
    context = make_context(["no delimiters here"], cursor=(1, 4))

    result = build_text_object_span(
        context,
        JumpMode.OPERATOR_PENDING,
        False,
        SelectionMode.CHARACTER,
        lambda ctx, count, is_inner: NO_POSITION,
        lambda ctx, count, is_inner: (1, 10),
    )

    assert result.status == "no_match"
    assert result.start == NO_POSITION
    assert buffer_of(context).get_cursor() == (1, 4)
    assert buffer_of(context).bell_count == 1


def test_caret_wrap_setting_restored_after_selection() -> None:
    context = make_context(["call(", "  arg", ")"], cursor=(2, 1))

    PARENS.inner(context)

    assert context.settings.caret_wrap is False
