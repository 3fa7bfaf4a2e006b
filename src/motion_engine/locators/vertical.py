"""Vertical motion that remembers the intended visual column."""

from __future__ import annotations

from dataclasses import dataclass

from motion_engine.buffer import BufferState, CursorState
from motion_engine.text import Direction

from .base import check_count, clamp_line
from .columns import position_for_column, visual_column


@dataclass(frozen=True, slots=True)
class RelativeLineLocator:
    """Move ``count`` lines up or down, keeping the visual column.

    The column aimed for is the cursor's drawn column plus its
    ``logical_offset``. When the target line is too short, or the column falls
    inside a tab, the cursor lands on the nearest cluster before it and the
    unreached columns are stored in ``logical_offset`` so a later move onto a
    longer line restores the column. The jump is made in one step, so the
    lengths of the lines in between never matter.
    """

    direction: Direction
    count: int = 1

    def __post_init__(self) -> None:
        check_count(self.count)

    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        cursor = state.cursor
        line_num = tree.line_num_for_position(cursor.position)
        target_line = clamp_line(tree, line_num + self.direction.sign * self.count)
        if target_line == line_num:
            return cursor

        column = visual_column(tree, cursor.position, state.tab_width)
        column += cursor.logical_offset
        position, remainder = position_for_column(
            tree, target_line, column, state.tab_width
        )
        return CursorState(position=position, logical_offset=remainder)


__all__ = ["RelativeLineLocator"]
