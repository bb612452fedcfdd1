"""Textual integration: an editor host over ``TextArea``."""

from .host import TextAreaHost

__all__ = ["TextAreaHost"]
