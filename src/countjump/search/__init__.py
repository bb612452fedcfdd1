"""Pattern searches and the counted search driver."""

from .counter import count_search, count_search_with_wrap_message
from .engine import find_match, line_matches, search_pos
from .pattern import Pattern

__all__ = [
    "Pattern",
    "count_search",
    "count_search_with_wrap_message",
    "find_match",
    "line_matches",
    "search_pos",
]
