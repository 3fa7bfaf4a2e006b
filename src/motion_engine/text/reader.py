"""Read-only text interface the locators consume."""

from __future__ import annotations

from typing import List, Protocol, Tuple

from .direction import Direction

Cluster = Tuple[int, str]  # (start position, grapheme cluster)


class TextReader(Protocol):
    """Protocol describing the text storage a host hands to the locators.

    Line numbers are 0-indexed and follow the POSIX end-of-file rule: a
    trailing line terminator does not open another line.
    """

    def num_chars(self) -> int:
        ...

    def is_empty(self) -> bool:
        ...

    def num_lines(self) -> int:
        ...

    def line_start_position(self, line_num: int) -> int:
        ...

    def line_num_for_position(self, position: int) -> int:
        ...

    def line_length(self, line_num: int, exclude_terminator: bool = True) -> int:
        ...

    def line_clusters(self, line_num: int) -> List[Cluster]:
        """Return the content clusters of a line, terminator excluded."""
        ...

    def next_grapheme_cluster_boundary(
        self, position: int, direction: Direction
    ) -> int:
        ...


__all__ = ["Cluster", "TextReader"]
