"""Read direction shared by the text tree and the symmetric locators."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Axis along which a motion reads the document."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def sign(self) -> int:
        return 1 if self is Direction.FORWARD else -1

    def reverse(self) -> "Direction":
        if self is Direction.FORWARD:
            return Direction.BACKWARD
        return Direction.FORWARD


__all__ = ["Direction"]
