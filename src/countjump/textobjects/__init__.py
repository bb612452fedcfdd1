"""Text-object span building and text-object factories."""

from .objects import TextObject, make_pattern_text_object
from .span import SpanLocate, SpanResult, SpanStatus, build_text_object_span

__all__ = [
    "SpanLocate",
    "SpanResult",
    "SpanStatus",
    "TextObject",
    "build_text_object_span",
    "make_pattern_text_object",
]
