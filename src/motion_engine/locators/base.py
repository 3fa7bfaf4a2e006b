"""Line geometry helpers shared by the locator variants."""

from __future__ import annotations

from motion_engine.text import TextReader


def check_count(count: int, *, name: str = "count") -> None:
    if count < 0:
        raise ValueError(f"{name} cannot be negative")


def clamp_line(tree: TextReader, line_num: int) -> int:
    return max(0, min(line_num, tree.num_lines() - 1))


def clamp_position(tree: TextReader, position: int) -> int:
    return min(position, tree.num_chars())


def line_content_end(tree: TextReader, line_num: int) -> int:
    """Position of the line terminator, or end of document on the last line."""

    start = tree.line_start_position(line_num)
    return start + tree.line_length(line_num, exclude_terminator=True)


def last_cluster_start(tree: TextReader, line_num: int) -> int:
    clusters = tree.line_clusters(line_num)
    if not clusters:
        return tree.line_start_position(line_num)
    return clusters[-1][0]


__all__ = [
    "check_count",
    "clamp_line",
    "clamp_position",
    "last_cluster_start",
    "line_content_end",
]
