"""Line predicates defining regions."""

from __future__ import annotations

import re
from typing import Callable, Union

from countjump.buffer import EditorHost
from countjump.search.pattern import RegexLike

# Returns a truthy 1-based match column, True for a line-level match, or a
# falsy value when the line is outside the region.
LinePredicate = Callable[[str], Union[bool, int]]


def match_column(predicate: LinePredicate, host: EditorHost, lnum: int) -> int:
    """Column where ``predicate`` matches line ``lnum``; 0 if it does not.

    Lines outside the buffer never match.
    """

    if lnum < 1 or lnum > host.line_count:
        return 0
    result = predicate(host.line_text(lnum))
    if isinstance(result, bool):
        return 1 if result else 0
    if not result:
        return 0
    return int(result)


def pattern_predicate(regex: RegexLike, *, is_match: bool = True) -> LinePredicate:
    """Region of lines matching ``regex`` (or not matching, with ``is_match=False``).

    Matching lines report the column of the first match; non-matching lines
    report column 1.
    """

    compiled = regex if isinstance(regex, re.Pattern) else re.compile(regex)

    def predicate(text: str) -> int:
        match = compiled.search(text)
        if is_match:
            return match.start() + 1 if match else 0
        return 0 if match else 1

    return predicate


def negate(predicate: LinePredicate) -> LinePredicate:
    def negated(text: str) -> bool:
        result = predicate(text)
        return not result

    return negated


blank_line: LinePredicate = pattern_predicate(r"^\s*$")
non_blank_line: LinePredicate = pattern_predicate(r"^\s*$", is_match=False)


__all__ = [
    "LinePredicate",
    "blank_line",
    "match_column",
    "negate",
    "non_blank_line",
    "pattern_predicate",
]
