"""Jump modes, the event bus and the editor context."""

from .base import EditorContext, EventBus, JumpMode, ensure_step, normalize_count

__all__ = [
    "EditorContext",
    "EventBus",
    "JumpMode",
    "ensure_step",
    "normalize_count",
]
