"""Piece model."""

from __future__ import annotations

from chessgame.core.enums import PieceType, Side
from chessgame.core.types import Square

_UNICODE: dict[tuple[Side, PieceType], str] = {
    (Side.WHITE, PieceType.PAWN): "♙",
    (Side.WHITE, PieceType.KNIGHT): "♘",
    (Side.WHITE, PieceType.BISHOP): "♗",
    (Side.WHITE, PieceType.ROOK): "♖",
    (Side.WHITE, PieceType.QUEEN): "♕",
    (Side.WHITE, PieceType.KING): "♔",
    (Side.BLACK, PieceType.PAWN): "♟",
    (Side.BLACK, PieceType.KNIGHT): "♞",
    (Side.BLACK, PieceType.BISHOP): "♝",
    (Side.BLACK, PieceType.ROOK): "♜",
    (Side.BLACK, PieceType.QUEEN): "♛",
    (Side.BLACK, PieceType.KING): "♚",
}


class Piece:
    """A piece of a given kind and side standing on ``square``.

    Kind and side are fixed for the piece's lifetime; ``square`` is
    updated in place when the engine moves the piece. Two pieces with the
    same three fields are interchangeable.
    """

    __slots__ = ("_kind", "_side", "square")

    def __init__(self, kind: PieceType, side: Side, square: tuple[int, int]) -> None:
        self._kind = kind
        self._side = side
        self.square = Square(*square)

    @property
    def kind(self) -> PieceType:
        return self._kind

    @property
    def side(self) -> Side:
        return self._side

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Single letter K/Q/R/B/N/P, regardless of side."""
        return self._kind.symbol

    @property
    def unicode_symbol(self) -> str:
        return _UNICODE[(self._side, self._kind)]

    def __str__(self) -> str:
        """Upper-case letter for White, lower-case for Black."""
        return self.symbol if self._side == Side.WHITE else self.symbol.lower()

    # ── Copying / comparison ─────────────────────────────────────────────

    def copy(self) -> Piece:
        return Piece(self._kind, self._side, self.square)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._side == other._side
            and self.square == other.square
        )

    def __hash__(self) -> int:
        return hash((self._kind, self._side))

    def __repr__(self) -> str:
        return f"Piece({self._kind.name}, {self._side.name}, {self.square})"
