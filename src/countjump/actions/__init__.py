"""Jump committing, caret nudges and motion factories."""

from .caret import line_end, step_left, step_line, step_right
from .jump import Locate, count_jump, count_jump_with_wrap_message, jump
from .motions import (
    BracketMotions,
    Motion,
    make_bracket_motions,
    make_count_search_motion,
    make_motion_with_jump_functions,
)

__all__ = [
    "BracketMotions",
    "Locate",
    "Motion",
    "count_jump",
    "count_jump_with_wrap_message",
    "jump",
    "line_end",
    "make_bracket_motions",
    "make_count_search_motion",
    "make_motion_with_jump_functions",
    "step_left",
    "step_line",
    "step_right",
]
