"""Board model for the 8-puzzle search engine."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import StrEnum
from functools import cached_property

SIZE = 3
TILE_COUNT = SIZE * SIZE


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of 0-8."""


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """A 3×3 tile arrangement stored row-major. 0 represents the blank.

    Boards are values: equal tiles mean equal boards, and every
    successor is a new instance.
    """

    tiles: tuple[int, ...]
    blank: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        try:
            tiles = tuple(self.tiles)
        except TypeError as exc:
            raise InvalidBoardError(f"Tiles must be a sequence, got {self.tiles!r}.") from exc
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in tiles):
            raise InvalidBoardError(f"Tiles must be integers, got {list(tiles)}.")
        object.__setattr__(self, "tiles", tiles)
        if len(self.tiles) != TILE_COUNT or sorted(self.tiles) != list(range(TILE_COUNT)):
            raise InvalidBoardError(
                f"Expected a permutation of 0-{TILE_COUNT - 1}, got {list(self.tiles)}."
            )
        object.__setattr__(self, "blank", self.tiles.index(0))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        try:
            tiles = tuple(int(v) if isinstance(v, str) else operator.index(v) for v in flat)
        except (TypeError, ValueError) as exc:
            raise InvalidBoardError(f"Tiles must be integers, got {flat!r}.") from exc
        return cls(tiles=tiles)

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse ``"1,2,3,4,5,6,7,0,8"`` or ``"123456708"``."""
        text = text.strip()
        if "," in text:
            parts = [p.strip() for p in text.split(",")]
        else:
            parts = [c for c in text if not c.isspace()]
        return cls.from_flat(parts)

    @classmethod
    def _trusted(cls, tiles: tuple[int, ...], blank: int) -> Board:
        """Build a board from tiles already known to be a permutation."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        object.__setattr__(obj, "blank", blank)
        return obj

    # -- queries --------------------------------------------------------------

    @cached_property
    def key(self) -> str:
        """Canonical serialisation used by visited sets."""
        return "".join(str(v) for v in self.tiles)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * SIZE + col]

    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def is_solved(self) -> bool:
        return self.tiles == GOAL.tiles

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.get_tile(row, col) == GOAL.get_tile(row, col)

    def swapped(self, a: int, b: int) -> Board:
        """Return a copy with the tiles at indices *a* and *b* exchanged."""
        tiles = list(self.tiles)
        tiles[a], tiles[b] = tiles[b], tiles[a]
        blank = b if a == self.blank else a if b == self.blank else self.blank
        return Board._trusted(tuple(tiles), blank)

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) if v else "." for v in row) for row in self.rows())


GOAL = Board(tiles=(1, 2, 3, 4, 5, 6, 7, 8, 0))
