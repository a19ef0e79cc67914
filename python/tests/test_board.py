"""Board model: validation, parsing and value semantics."""

from __future__ import annotations

import pytest

from backend.models.board import GOAL, Board, InvalidBoardError


def test_goal_constant() -> None:
    assert GOAL.tiles == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert GOAL.blank == 8
    assert GOAL.is_solved()


def test_from_flat_records_blank_position() -> None:
    board = Board.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])
    assert board.blank == 4
    assert board.get_tile(1, 1) == 0
    assert not board.is_solved()


@pytest.mark.parametrize(
    "tiles",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],  # too short
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],  # too long
        [1, 1, 3, 4, 5, 6, 7, 8, 0],  # duplicate
        [1, 2, 3, 4, 5, 6, 7, 8, 9],  # no blank
        ["a", 2, 3, 4, 5, 6, 7, 8, 0],  # not a number
    ],
    ids=["short", "long", "duplicate", "no_blank", "non_numeric"],
)
def test_malformed_boards_are_rejected(tiles: list) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(tiles)


def test_invalid_board_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Board.parse("12345678")


@pytest.mark.parametrize("text", ["1,2,3,4,5,6,7,0,8", "123456708", " 1, 2, 3, 4, 5, 6, 7, 0, 8 "])
def test_parse_accepts_both_notations(text: str) -> None:
    assert Board.parse(text) == Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])


def test_key_is_concatenated_tiles() -> None:
    assert Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]).key == "123456708"


def test_equal_boards_hash_alike() -> None:
    a = Board.from_flat([0, 1, 3, 4, 2, 5, 7, 8, 6])
    b = Board.parse("013425786")
    assert a == b
    assert len({a, b}) == 1


def test_swapped_returns_copy() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    moved = board.swapped(7, 8)
    assert moved == GOAL
    assert moved.blank == 8
    assert board.tiles == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    assert board.blank == 7


def test_tile_correctness() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(2, 1)
    assert not board.is_tile_correct(2, 2)


def test_constructor_accepts_list_tiles() -> None:
    board = Board(tiles=[1, 2, 3, 4, 5, 6, 7, 8, 0])
    assert board.tiles == GOAL.tiles
    assert board.is_solved()
    assert board == GOAL
    assert hash(Board(tiles=[1, 2, 3, 4, 5, 6, 7, 0, 8])) == hash(Board.parse("123456708"))


@pytest.mark.parametrize(
    "tiles",
    [
        [1.9, 2, 3, 4, 5, 6, 7, 8, 0],
        [1.0, 2, 3, 4, 5, 6, 7, 8, 0],
        ["1.5", 2, 3, 4, 5, 6, 7, 8, 0],
    ],
    ids=["fractional", "float", "fractional_text"],
)
def test_non_integer_tiles_are_rejected(tiles: list) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(tiles)
    with pytest.raises(InvalidBoardError):
        Board(tiles=tiles)
