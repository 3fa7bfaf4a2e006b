"""Locators that move between grapheme clusters of the current line."""

from __future__ import annotations

from dataclasses import dataclass

from motion_engine.buffer import BufferState, CursorState
from motion_engine.text import Direction

from .base import check_count, clamp_position, last_cluster_start, line_content_end


@dataclass(frozen=True, slots=True)
class CharInLineLocator:
    """Move ``count`` clusters along the current line.

    Forward motion stops on the last content cluster unless
    ``include_end_of_line_or_file`` allows landing on the terminator (or end
    of file). Backward motion stops at the line start; with the flag set, a
    step past the line start lands on the previous line's terminator.
    """

    direction: Direction
    count: int = 1
    include_end_of_line_or_file: bool = False

    def __post_init__(self) -> None:
        check_count(self.count)

    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        position = clamp_position(tree, state.cursor.position)
        line_num = tree.line_num_for_position(position)
        content_end = line_content_end(tree, line_num)
        sign = self.direction.sign

        if self.direction is Direction.BACKWARD:
            limit = tree.line_start_position(line_num)
        elif self.include_end_of_line_or_file:
            limit = content_end
        else:
            limit = last_cluster_start(tree, line_num)

        stops = [start for start, _ in tree.line_clusters(line_num)]
        stops.append(content_end)
        # Cluster starts strictly past the cursor, up to and including the limit.
        ahead = sorted(
            (
                stop
                for stop in stops
                if (stop - position) * sign > 0 and (limit - stop) * sign >= 0
            ),
            key=lambda stop: abs(stop - position),
        )

        if self.count == 0:
            return state.cursor.moved_to(position)
        if self.count <= len(ahead):
            return state.cursor.moved_to(ahead[self.count - 1])
        if (
            self.direction is Direction.BACKWARD
            and self.include_end_of_line_or_file
            and line_num > 0
        ):
            return state.cursor.moved_to(line_content_end(tree, line_num - 1))
        if ahead:
            return state.cursor.moved_to(ahead[-1])
        return state.cursor.moved_to(position)


@dataclass(frozen=True, slots=True)
class OntoLineLocator:
    """Pull a cursor sitting on a terminator or past the end back onto content."""

    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        position = clamp_position(tree, state.cursor.position)
        line_num = tree.line_num_for_position(position)
        if position < line_content_end(tree, line_num):
            return state.cursor.moved_to(position)
        return state.cursor.moved_to(last_cluster_start(tree, line_num))


__all__ = ["CharInLineLocator", "OntoLineLocator"]
