from __future__ import annotations

import pytest

from motion_engine import (
    BufferState,
    BufferValidationError,
    CharInLineLocator,
    CursorState,
    Direction,
    LastLineLocator,
    LineBoundaryLocator,
    LineNumLocator,
    Locator,
    NonWhitespaceOrNewlineLocator,
    OntoLineLocator,
    RelativeLineLocator,
    RelativeLineStartLocator,
    TextTree,
    ensure_cursor,
    locate,
)

DOCUMENTS = (
    "",
    "\n",
    "\n\n\n",
    "abcd",
    "abcd\nefgh\nijkl\n",
    "ab\r\ncd\r\n",
    "  \tx y\n\n\tz",
    "abe\u0301\nfgh\u0301i\r\n\u00e9\n",
    "a\tb\tc\nabcdefghijklmnop\nxy",
)


def all_locators() -> list[Locator]:
    locators: list[Locator] = [
        OntoLineLocator(),
        NonWhitespaceOrNewlineLocator(),
        LastLineLocator(),
        LineNumLocator(0),
        LineNumLocator(1),
        LineNumLocator(99),
    ]
    for direction in Direction:
        for include in (False, True):
            locators.append(LineBoundaryLocator(direction, include))
            for count in (0, 1, 3, 100):
                locators.append(CharInLineLocator(direction, count, include))
        for count in (1, 2, 100):
            locators.append(RelativeLineStartLocator(direction, count))
            locators.append(RelativeLineLocator(direction, count))
    return locators


def legal_positions(tree: TextTree) -> list[int]:
    positions = {tree.num_chars()}
    for line_num in range(tree.num_lines()):
        start = tree.line_start_position(line_num)
        positions.add(start)
        positions.add(start + tree.line_length(line_num, exclude_terminator=True))
        positions.update(position for position, _ in tree.line_clusters(line_num))
    return sorted(positions)


def test_every_result_is_a_legal_position() -> None:
    for text in DOCUMENTS:
        tree = TextTree.from_string(text)
        for position in legal_positions(tree):
            state = BufferState(tree=tree, cursor=CursorState(position))
            for locator in all_locators():
                result = locate(locator, state)
                assert 0 <= result.position <= len(text)
                assert ensure_cursor(tree, result) == result


def test_empty_document_keeps_position_and_offset() -> None:
    state = BufferState(tree=TextTree.from_string(""), cursor=CursorState(0, 3))
    for locator in all_locators():
        assert locate(locator, state) == CursorState(0, 3)


def test_onto_line_is_idempotent_everywhere() -> None:
    for text in DOCUMENTS:
        tree = TextTree.from_string(text)
        for position in range(len(text) + 2):
            once = OntoLineLocator().locate(
                BufferState(tree=tree, cursor=CursorState(position))
            )
            twice = OntoLineLocator().locate(BufferState(tree=tree, cursor=once))
            assert twice == once


def test_non_vertical_moves_reset_or_preserve_offset() -> None:
    vertical = (RelativeLineLocator,)
    for text in DOCUMENTS:
        tree = TextTree.from_string(text)
        for position in legal_positions(tree):
            cursor = CursorState(position, 7)
            state = BufferState(tree=tree, cursor=cursor)
            for locator in all_locators():
                if isinstance(locator, vertical):
                    continue
                result = locate(locator, state)
                if result.position == position:
                    assert result.logical_offset == 7
                else:
                    assert result.logical_offset == 0


def test_line_jumps_clamp_to_document() -> None:
    tree = TextTree.from_string("abcd\nefgh\nijkl\n")
    state = BufferState(tree=tree, cursor=CursorState(6))

    forward = RelativeLineStartLocator(Direction.FORWARD, 10_000)
    backward = RelativeLineStartLocator(Direction.BACKWARD, 10_000)
    assert locate(forward, state) == CursorState(10)
    assert locate(backward, state) == CursorState(0)
    assert locate(LineNumLocator(10_000), state) == CursorState(10)


def test_line_num_respects_posix_end_of_file() -> None:
    state = BufferState(
        tree=TextTree.from_string("abcd\nefgh\nijkl\n"), cursor=CursorState(1)
    )
    assert locate(LineNumLocator(2), state) == CursorState(10)


def test_vertical_move_remembers_column_deficit() -> None:
    tree = TextTree.from_string("abc\nefghijkl")
    locator = RelativeLineLocator(Direction.BACKWARD, 1)
    state = BufferState(tree=tree, cursor=CursorState(9))
    assert locate(locator, state) == CursorState(2, 3)


def test_last_line_normalizes_to_line_start() -> None:
    tree = TextTree.from_string("ab\ncd\nef\n")
    state = BufferState(tree=tree, cursor=CursorState(7))
    assert locate(LastLineLocator(), state) == CursorState(6)


def test_locate_rejects_unknown_locator() -> None:
    state = BufferState(tree=TextTree.from_string("abc"))
    with pytest.raises(TypeError):
        locate(object(), state)  # type: ignore[arg-type]


def test_cursor_state_rejects_negative_fields() -> None:
    with pytest.raises(ValueError):
        CursorState(-1)
    with pytest.raises(ValueError):
        CursorState(0, -1)


def test_ensure_cursor_rejects_split_cluster() -> None:
    tree = TextTree.from_string("abe\u0301c")
    with pytest.raises(BufferValidationError) as excinfo:
        ensure_cursor(tree, CursorState(3))
    assert excinfo.value.cursor == CursorState(3)


def test_ensure_cursor_rejects_split_terminator() -> None:
    tree = TextTree.from_string("ab\r\ncd")
    with pytest.raises(BufferValidationError):
        ensure_cursor(tree, CursorState(3))


def test_ensure_cursor_rejects_position_past_end() -> None:
    tree = TextTree.from_string("ab")
    with pytest.raises(BufferValidationError):
        ensure_cursor(tree, CursorState(3))
