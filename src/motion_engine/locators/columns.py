"""Tab-aware visual column arithmetic.

Every grapheme cluster occupies one column except a tab, which extends to
the next multiple of the tab width.
"""

from __future__ import annotations

from typing import Tuple

from motion_engine.text import TextReader


def cluster_width(cluster: str, column: int, tab_width: int) -> int:
    if cluster == "\t":
        return tab_width - (column % tab_width)
    return 1


def visual_column(tree: TextReader, position: int, tab_width: int) -> int:
    """Column at which ``position`` is drawn on its own line."""

    line_num = tree.line_num_for_position(position)
    column = 0
    for start, cluster in tree.line_clusters(line_num):
        if start >= position:
            break
        column += cluster_width(cluster, column, tab_width)
    return column


def position_for_column(
    tree: TextReader, line_num: int, column: int, tab_width: int
) -> Tuple[int, int]:
    """Map a visual column on ``line_num`` to ``(position, remainder)``.

    ``remainder`` is how many columns past the start of the cluster at
    ``position`` the requested column lies: non-zero inside a tab or when
    the line is too short to reach ``column``.
    """

    current = 0
    landing = (tree.line_start_position(line_num), column)
    for start, cluster in tree.line_clusters(line_num):
        width = cluster_width(cluster, current, tab_width)
        if column < current + width:
            return start, column - current
        landing = (start, column - current)
        current += width
    return landing


__all__ = ["cluster_width", "position_for_column", "visual_column"]
