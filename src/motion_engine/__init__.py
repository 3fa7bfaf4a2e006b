"""Cursor-motion engine for a modal text editor."""

from .buffer import BufferState, BufferValidationError, CursorState, ensure_cursor
from .locators import (
    CharInLineLocator,
    LastLineLocator,
    LineBoundaryLocator,
    LineNumLocator,
    Locator,
    NonWhitespaceOrNewlineLocator,
    OntoLineLocator,
    RelativeLineLocator,
    RelativeLineStartLocator,
    locate,
)
from .text import Direction, InvalidTextError, TextReader, TextTree

__all__ = [
    "BufferState",
    "BufferValidationError",
    "CharInLineLocator",
    "CursorState",
    "Direction",
    "InvalidTextError",
    "LastLineLocator",
    "LineBoundaryLocator",
    "LineNumLocator",
    "Locator",
    "NonWhitespaceOrNewlineLocator",
    "OntoLineLocator",
    "RelativeLineLocator",
    "RelativeLineStartLocator",
    "TextReader",
    "TextTree",
    "ensure_cursor",
    "locate",
]

__version__ = "0.1.0"
