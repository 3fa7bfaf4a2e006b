"""Validation helpers for cursors a host is about to commit."""

from __future__ import annotations

from motion_engine.text import TextReader

from .state import CursorState


class BufferValidationError(RuntimeError):
    """Raised when a cursor does not sit on a legal position."""

    def __init__(self, message: str, *, cursor: CursorState | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(tree: TextReader, cursor: CursorState) -> CursorState:
    position = cursor.position
    if position > tree.num_chars():
        raise BufferValidationError("Position past end of document", cursor=cursor)

    line_num = tree.line_num_for_position(position)
    line_start = tree.line_start_position(line_num)
    content_end = line_start + tree.line_length(line_num, exclude_terminator=True)
    line_end = line_start + tree.line_length(line_num, exclude_terminator=False)
    if position in (line_start, content_end, line_end):
        return cursor
    if position > content_end:
        raise BufferValidationError("Position splits a line terminator", cursor=cursor)
    if not any(start == position for start, _ in tree.line_clusters(line_num)):
        raise BufferValidationError("Position splits a grapheme cluster", cursor=cursor)
    return cursor


__all__ = ["BufferValidationError", "ensure_cursor"]
