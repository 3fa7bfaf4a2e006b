"""String-backed text tree implementing the ``TextReader`` protocol."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import List

import grapheme

from motion_engine.runtime import telemetry

from .direction import Direction
from .reader import Cluster


class InvalidTextError(ValueError):
    """Raised when raw input cannot be represented as UTF-8 text."""


class TextTree:
    """Immutable document with a line index and grapheme segmentation.

    Positions are code point offsets. A line ends with ``\\n`` or ``\\r\\n``;
    the terminator is treated as a single cluster. The document always has at
    least one line, and a trailing terminator does not add an empty one.
    """

    __slots__ = ("_text", "_line_starts")

    def __init__(self, text: str = "") -> None:
        self._text = text
        starts = [0]
        index = text.find("\n")
        while index != -1:
            starts.append(index + 1)
            index = text.find("\n", index + 1)
        if len(starts) > 1 and starts[-1] == len(text):
            starts.pop()
        self._line_starts = starts

    @classmethod
    def from_string(cls, text: str) -> "TextTree":
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidTextError(f"Text is not valid UTF-8: {exc.reason}") from exc
        tree = cls(text)
        telemetry.record_event(
            "text_tree.build",
            level="debug",
            data={"chars": len(text), "lines": tree.num_lines()},
        )
        return tree

    @classmethod
    def from_bytes(cls, data: bytes) -> "TextTree":
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidTextError(
                f"Invalid UTF-8 at byte {exc.start}: {exc.reason}"
            ) from exc
        return cls.from_string(text)

    def text(self) -> str:
        return self._text

    def num_chars(self) -> int:
        return len(self._text)

    def is_empty(self) -> bool:
        return not self._text

    def num_lines(self) -> int:
        return len(self._line_starts)

    def _clamp_line(self, line_num: int) -> int:
        return max(0, min(line_num, len(self._line_starts) - 1))

    def line_start_position(self, line_num: int) -> int:
        return self._line_starts[self._clamp_line(line_num)]

    def line_num_for_position(self, position: int) -> int:
        return self._clamp_line(bisect_right(self._line_starts, position) - 1)

    def _line_end(self, line_num: int) -> int:
        if line_num + 1 < len(self._line_starts):
            return self._line_starts[line_num + 1]
        return len(self._text)

    def _content_end(self, line_num: int) -> int:
        start = self._line_starts[line_num]
        end = self._line_end(line_num)
        if end > start and self._text[end - 1] == "\n":
            end -= 1
            if end > start and self._text[end - 1] == "\r":
                end -= 1
        return end

    def line_length(self, line_num: int, exclude_terminator: bool = True) -> int:
        line_num = self._clamp_line(line_num)
        if exclude_terminator:
            end = self._content_end(line_num)
        else:
            end = self._line_end(line_num)
        return end - self._line_starts[line_num]

    def line_clusters(self, line_num: int) -> List[Cluster]:
        line_num = self._clamp_line(line_num)
        position = self._line_starts[line_num]
        content = self._text[position : self._content_end(line_num)]
        clusters: List[Cluster] = []
        for cluster in grapheme.graphemes(content):
            clusters.append((position, cluster))
            position += len(cluster)
        return clusters

    def next_grapheme_cluster_boundary(
        self, position: int, direction: Direction
    ) -> int:
        """Return the closest cluster boundary strictly past ``position``.

        Returns ``position`` (clamped to the document) when there is nothing
        left to read in ``direction``.
        """

        position = max(0, min(position, len(self._text)))
        line_num = self.line_num_for_position(position)
        line_start = self._line_starts[line_num]
        content_end = self._content_end(line_num)
        starts = [start for start, _ in self.line_clusters(line_num)]

        if direction is Direction.FORWARD:
            if position >= content_end:
                return max(position, self._line_end(line_num))
            index = bisect_right(starts, position)
            return starts[index] if index < len(starts) else content_end

        if position > content_end:
            return content_end
        if position == line_start:
            if line_num == 0:
                return 0
            return self._content_end(line_num - 1)
        return starts[bisect_left(starts, position) - 1]


__all__ = ["InvalidTextError", "TextTree"]
