"""Closed set of locator variants and the traced ``locate`` entry point."""

from __future__ import annotations

from typing import Union

from motion_engine.buffer import BufferState, CursorState
from motion_engine.runtime import get_config, telemetry

from .chars import CharInLineLocator, OntoLineLocator
from .lines import (
    LastLineLocator,
    LineBoundaryLocator,
    LineNumLocator,
    NonWhitespaceOrNewlineLocator,
    RelativeLineStartLocator,
)
from .vertical import RelativeLineLocator

LOGGER_NAME = "motion_engine.locators"

Locator = Union[
    CharInLineLocator,
    OntoLineLocator,
    RelativeLineStartLocator,
    RelativeLineLocator,
    LineBoundaryLocator,
    NonWhitespaceOrNewlineLocator,
    LineNumLocator,
    LastLineLocator,
]

LOCATOR_TYPES: tuple[type, ...] = (
    CharInLineLocator,
    OntoLineLocator,
    RelativeLineStartLocator,
    RelativeLineLocator,
    LineBoundaryLocator,
    NonWhitespaceOrNewlineLocator,
    LineNumLocator,
    LastLineLocator,
)


def locate(locator: Locator, state: BufferState) -> CursorState:
    """Run ``locator`` against ``state``, tracing the call when enabled."""

    if not isinstance(locator, LOCATOR_TYPES):
        raise TypeError(f"Unsupported locator {type(locator).__name__}")
    if not get_config().trace:
        return locator.locate(state)

    with telemetry.span(
        f"locate::{type(locator).__name__}",
        logger_name=LOGGER_NAME,
        component="locators",
        metadata={
            "position": state.cursor.position,
            "logical_offset": state.cursor.logical_offset,
        },
    ) as handle:
        result = locator.locate(state)
        handle.add_metadata("result", result.position)
        handle.add_metadata("result_offset", result.logical_offset)
        return result


__all__ = ["LOCATOR_TYPES", "Locator", "locate"]
