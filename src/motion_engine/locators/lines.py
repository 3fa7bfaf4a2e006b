"""Locators that jump to line starts, line ends, and line numbers."""

from __future__ import annotations

from dataclasses import dataclass

from motion_engine.buffer import BufferState, CursorState
from motion_engine.text import Direction

from .base import (
    check_count,
    clamp_line,
    clamp_position,
    last_cluster_start,
    line_content_end,
)


@dataclass(frozen=True, slots=True)
class RelativeLineStartLocator:
    """Start of the line ``count`` lines away, clamped to the document."""

    direction: Direction
    count: int = 1

    def __post_init__(self) -> None:
        check_count(self.count)

    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        line_num = tree.line_num_for_position(state.cursor.position)
        target = clamp_line(tree, line_num + self.direction.sign * self.count)
        return state.cursor.moved_to(tree.line_start_position(target))


@dataclass(frozen=True, slots=True)
class LineBoundaryLocator:
    """Start or end of the current line.

    Forward lands on the last content cluster, or on the terminator / end of
    file when ``include_end_of_line_or_file`` is set.
    """

    direction: Direction
    include_end_of_line_or_file: bool = False

    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        line_num = tree.line_num_for_position(state.cursor.position)
        if self.direction is Direction.BACKWARD:
            target = tree.line_start_position(line_num)
        elif self.include_end_of_line_or_file:
            target = line_content_end(tree, line_num)
        else:
            target = last_cluster_start(tree, line_num)
        return state.cursor.moved_to(target)


def _is_blank(cluster: str) -> bool:
    return cluster.isspace() and "\n" not in cluster and "\r" not in cluster


@dataclass(frozen=True, slots=True)
class NonWhitespaceOrNewlineLocator:
    """Skip horizontal whitespace without leaving the line."""

    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        position = clamp_position(tree, state.cursor.position)
        line_num = tree.line_num_for_position(position)
        content_end = line_content_end(tree, line_num)
        if position >= content_end:
            return state.cursor.moved_to(position)

        for start, cluster in tree.line_clusters(line_num):
            if start >= position and not _is_blank(cluster):
                return state.cursor.moved_to(start)
        return state.cursor.moved_to(content_end)


@dataclass(frozen=True, slots=True)
class LineNumLocator:
    """Start of the 0-indexed line ``line_num``, clamped to the last line."""

    line_num: int

    def __post_init__(self) -> None:
        check_count(self.line_num, name="line_num")

    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        target = clamp_line(tree, self.line_num)
        return state.cursor.moved_to(tree.line_start_position(target))


@dataclass(frozen=True, slots=True)
class LastLineLocator:
    def locate(self, state: BufferState) -> CursorState:
        tree = state.tree
        target = clamp_line(tree, tree.num_lines() - 1)
        return state.cursor.moved_to(tree.line_start_position(target))


__all__ = [
    "LastLineLocator",
    "LineBoundaryLocator",
    "LineNumLocator",
    "NonWhitespaceOrNewlineLocator",
    "RelativeLineStartLocator",
]
