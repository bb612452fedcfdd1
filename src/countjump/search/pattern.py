"""Search patterns and their direction/landing modifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Optional, Union

RegexLike = Union[str, "re.Pattern[str]"]

_FLAG_CHARS = frozenset("bcewW")


@dataclass(frozen=True, slots=True)
class Pattern:
    """A regular expression plus the modifiers that steer one search.

    ``accept_at_cursor`` lets a match starting exactly at the cursor count;
    ``to_end`` lands on the last character of the match instead of the first;
    ``wrap`` of ``None`` defers to the ``wrapscan`` setting.
    """

    regex: RegexLike
    backward: bool = False
    accept_at_cursor: bool = False
    to_end: bool = False
    wrap: Optional[bool] = None
    compiled: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = (
            self.regex if isinstance(self.regex, re.Pattern) else re.compile(self.regex)
        )
        object.__setattr__(self, "compiled", compiled)

    @property
    def source(self) -> str:
        return self.compiled.pattern

    @classmethod
    def parse(cls, regex: RegexLike, flags: str = "") -> "Pattern":
        """Build a pattern from vim-style search flags (``b``, ``c``, ``e``, ``w``, ``W``)."""

        unknown = set(flags) - _FLAG_CHARS
        if unknown:
            raise ValueError(f"Unsupported search flags: {''.join(sorted(unknown))}")
        wrap: Optional[bool] = None
        if "W" in flags:
            wrap = False
        elif "w" in flags:
            wrap = True
        return cls(
            regex,
            backward="b" in flags,
            accept_at_cursor="c" in flags,
            to_end="e" in flags,
            wrap=wrap,
        )

    def without_accept_at_cursor(self) -> "Pattern":
        if not self.accept_at_cursor:
            return self
        return replace(self, accept_at_cursor=False)

    def reversed(self) -> "Pattern":
        return replace(self, backward=not self.backward)


__all__ = ["Pattern", "RegexLike"]
