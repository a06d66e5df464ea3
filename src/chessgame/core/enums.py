"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side to move. White is side A, Black is side B."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step."""
        return 1 if self == Side.WHITE else -1

    @property
    def pawn_start_row(self) -> int:
        return 1 if self == Side.WHITE else 6

    @property
    def back_row(self) -> int:
        return 0 if self == Side.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6

    @property
    def symbol(self) -> str:
        """Display letter, e.g. ``N`` for a knight."""
        return _SYMBOLS[self]


_SYMBOLS: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.PAWN: "P",
}


class GameStatus(IntEnum):
    """Situation of one side after a move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)
