"""Cursor and buffer snapshots threaded through every locator."""

from __future__ import annotations

from dataclasses import dataclass, field

from motion_engine.runtime.config import get_config, parse_tab_width
from motion_engine.text import TextReader


@dataclass(frozen=True, slots=True)
class CursorState:
    """Position plus the virtual columns remembered by vertical motions."""

    position: int = 0
    logical_offset: int = 0

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("position cannot be negative")
        if self.logical_offset < 0:
            raise ValueError("logical_offset cannot be negative")

    def moved_to(self, position: int) -> "CursorState":
        """Cursor after a non-vertical move to ``position``.

        The remembered column survives only when the position is unchanged.
        """

        if position == self.position:
            return self
        return CursorState(position=position)


def _default_tab_width() -> int:
    return get_config().tab_width


@dataclass(frozen=True, slots=True)
class BufferState:
    """Read-only view handed to ``Locator.locate``."""

    tree: TextReader
    cursor: CursorState = field(default_factory=CursorState)
    tab_width: int = field(default_factory=_default_tab_width)

    def __post_init__(self) -> None:
        parse_tab_width(self.tab_width)


__all__ = ["BufferState", "CursorState"]
