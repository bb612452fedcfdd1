"""Regions of lines satisfying a predicate: scanning, motions, text object."""

from .motions import (
    RegionMotions,
    jump_to_next_region,
    jump_to_region_end,
    make_region_motions,
)
from .predicates import (
    LinePredicate,
    blank_line,
    match_column,
    negate,
    non_blank_line,
    pattern_predicate,
)
from .scanner import (
    first_line_matching,
    last_line_matching,
    scan_next_region_boundary,
    scan_region_end,
)
from .textobject import make_region_text_object

__all__ = [
    "LinePredicate",
    "RegionMotions",
    "blank_line",
    "first_line_matching",
    "jump_to_next_region",
    "jump_to_region_end",
    "last_line_matching",
    "make_region_motions",
    "make_region_text_object",
    "match_column",
    "negate",
    "non_blank_line",
    "pattern_predicate",
    "scan_next_region_boundary",
    "scan_region_end",
]
