"""Cursor locators: pure functions from ``BufferState`` to ``CursorState``."""

from .chars import CharInLineLocator, OntoLineLocator
from .dispatch import LOCATOR_TYPES, Locator, locate
from .lines import (
    LastLineLocator,
    LineBoundaryLocator,
    LineNumLocator,
    NonWhitespaceOrNewlineLocator,
    RelativeLineStartLocator,
)
from .vertical import RelativeLineLocator

__all__ = [
    "CharInLineLocator",
    "OntoLineLocator",
    "RelativeLineStartLocator",
    "RelativeLineLocator",
    "LineBoundaryLocator",
    "NonWhitespaceOrNewlineLocator",
    "LineNumLocator",
    "LastLineLocator",
    "LOCATOR_TYPES",
    "Locator",
    "locate",
]
