"""Square value type and coordinate helpers.

Board layout (row-major, White at the bottom)::

    row 7   a8 b8 c8 d8 e8 f8 g8 h8   <- Black back rank
    row 6   pawns (Black)
    ...
    row 1   pawns (White)
    row 0   a1 b1 c1 d1 e1 f1 g1 h1   <- White back rank
            col 0 ................ col 7

Square names are only a convenience for tests and log output.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A ``(row, col)`` coordinate. May lie off the board; check ``in_bounds``."""

    row: int
    col: int

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, drow: int, dcol: int) -> Square:
        return Square(self.row + drow, self.col + dcol)

    def __str__(self) -> str:
        if not self.in_bounds:
            return f"({self.row}, {self.col})"
        return square_name(self)


def is_on_board(sq: tuple[int, int]) -> bool:
    """Whether *sq* is a pair of integers inside the 8x8 board."""
    try:
        row, col = sq
    except (TypeError, ValueError):
        return False
    if type(row) is not int or type(col) is not int:
        return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def all_squares() -> Iterator[Square]:
    """Every board square in row-major order, a1 first."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. ``Square(1, 4)`` → ``'e2'``."""
    row, col = sq
    return chr(ord("a") + col) + str(row + 1)


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. ``'e4'`` → ``Square(3, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(int(name[1]) - 1, ord(name[0]) - ord("a"))
