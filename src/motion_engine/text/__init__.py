"""Text storage consumed by the locators."""

from .direction import Direction
from .reader import Cluster, TextReader
from .tree import InvalidTextError, TextTree

__all__ = [
    "Cluster",
    "Direction",
    "InvalidTextError",
    "TextReader",
    "TextTree",
]
