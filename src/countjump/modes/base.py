"""Jump modes and the explicit context every core function receives."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict

from countjump.buffer import EditorHost
from countjump.runtime.settings import EditorSettings


class JumpMode(str, Enum):
    """Editing mode a motion or text object was invoked from."""

    NORMAL = "normal"
    VISUAL = "visual"
    OPERATOR_PENDING = "operator_pending"
    # Operator-pending where the located end must be included in the span.
    OPERATOR_PENDING_TO_END = "operator_pending_to_end"

    @property
    def is_visual(self) -> bool:
        return self is JumpMode.VISUAL


class EventBus:
    """Minimal event bus letting hosts observe jumps, bells and messages."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Host, options and event bus bundled for one editor window."""

    host: EditorHost
    settings: EditorSettings = field(default_factory=EditorSettings)
    bus: EventBus = field(default_factory=EventBus)

    def bell(self, reason: str) -> None:
        """Signal a failed motion to the user."""

        self.host.bell()
        self.bus.emit("bell", reason)

    def message(self, text: str) -> None:
        self.bus.emit("search.message", text)


def normalize_count(count: int | None) -> int:
    if count is None or count < 1:
        return 1
    return count


def ensure_step(step: int) -> int:
    if step not in (1, -1):
        raise ValueError(f"step must be 1 or -1, got {step!r}")
    return step
