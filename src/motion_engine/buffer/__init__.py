"""Cursor and buffer state shared by the locators."""

from .state import BufferState, CursorState
from .validation import BufferValidationError, ensure_cursor

__all__ = [
    "BufferState",
    "CursorState",
    "BufferValidationError",
    "ensure_cursor",
]
