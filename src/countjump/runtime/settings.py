"""Editor options the jump core consults, plus scoped overrides."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from . import telemetry

_SELECTION_VALUES = ("inclusive", "exclusive")


@dataclass(slots=True)
class EditorSettings:
    """Host options that change how searches and nudges behave.

    ``wrapscan``
        Searches without an explicit wrap flag continue past the buffer end.
    ``caret_wrap``
        Single-character moves may cross line boundaries.
    ``selection``
        ``"exclusive"`` selections stop before their end character, so text
        objects extend the located end by one.
    """

    wrapscan: bool = True
    caret_wrap: bool = False
    selection: str = "inclusive"

    def __post_init__(self) -> None:
        if self.selection not in _SELECTION_VALUES:
            raise ValueError(
                f"selection must be one of {_SELECTION_VALUES}, got {self.selection!r}"
            )

    @property
    def is_exclusive(self) -> bool:
        return self.selection == "exclusive"

    @classmethod
    def from_env(cls) -> "EditorSettings":
        return cls(
            wrapscan=telemetry.env_flag("WRAPSCAN", True),
            caret_wrap=telemetry.env_flag("CARET_WRAP", False),
            selection=(telemetry.env("SELECTION") or "inclusive").lower(),
        )


@contextmanager
def caret_wrap(settings: EditorSettings) -> Iterator[EditorSettings]:
    """Temporarily permit cursor moves that wrap across lines.

    The previous value is restored on every exit path.
    """

    saved = settings.caret_wrap
    settings.caret_wrap = True
    try:
        yield settings
    finally:
        settings.caret_wrap = saved


__all__ = ["EditorSettings", "caret_wrap"]
