"""GameEngine — authoritative board, turn order and legality oracle."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chessgame.core.board import Board
from chessgame.core.enums import GameStatus, Side
from chessgame.core.piece import Piece
from chessgame.core.rules import Rules
from chessgame.core.types import Square, is_on_board, square_name

_LOGGER = logging.getLogger(__name__)


class GameEngine:
    """Owns the board and the side to move; the only API a front end uses.

    State changes only through :meth:`commit_move` and :meth:`reset`.
    Queries never leave a visible mark, though they play moves on
    scratch cells internally, so one engine must be driven from one
    thread, one call at a time.

    The engine does not stop accepting moves after checkmate or
    stalemate. Callers decide when the game is over.
    """

    __slots__ = ("_board", "_side_to_move")

    def __init__(self) -> None:
        self._board = Board.initial()
        self._side_to_move = Side.WHITE

    @classmethod
    def from_pieces(
        cls,
        pieces: Iterable[Piece],
        *,
        side_to_move: Side = Side.WHITE,
    ) -> GameEngine:
        """Engine set up on a custom position.

        The pieces are copied. Raises ``ValueError`` if a piece is off the
        board or two pieces share a square.
        """
        engine = cls()
        engine._board = Board.from_pieces(p.copy() for p in pieces)
        engine._side_to_move = side_to_move
        return engine

    # ── Properties / read access ─────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self._side_to_move

    def piece_at(self, sq: tuple[int, int]) -> Piece | None:
        """Copy of the piece on *sq*, or ``None`` (also for off-board squares)."""
        piece = self._board[sq]
        return piece.copy() if piece is not None else None

    def pieces(self, side: Side | None = None) -> list[Piece]:
        """Copies of all pieces on the board, optionally for one side."""
        return [p.copy() for p in self._board.pieces(side)]

    def board_snapshot(self) -> Board:
        """Independent copy of the board."""
        return self._board.copy()

    def is_own_piece(self, sq: tuple[int, int]) -> bool:
        """Whether *sq* holds a piece of the side to move."""
        piece = self._board[sq]
        return piece is not None and piece.side == self._side_to_move

    # ── Legality ─────────────────────────────────────────────────────────

    def legal_destinations(
        self,
        sq: tuple[int, int],
        *,
        any_side: bool = False,
    ) -> set[Square]:
        """Squares the piece on *sq* may legally move to.

        Empty for an empty or off-board square. Also empty for a piece of
        the side not to move, unless *any_side* is set.
        """
        piece = self._board[sq]
        if piece is None:
            return set()
        if piece.side != self._side_to_move and not any_side:
            return set()
        return Rules.legal_destinations(self._board, sq)

    def commit_move(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> bool:
        """Play *from_sq* → *to_sq* for the side to move.

        Returns ``False`` and changes nothing if the move is not legal.
        Otherwise captures whatever stands on *to_sq*, relocates the
        mover, hands the turn over and returns ``True``.
        """
        if not is_on_board(from_sq) or not is_on_board(to_sq):
            _LOGGER.debug("Rejected move %r -> %r: off the board", from_sq, to_sq)
            return False
        from_sq = Square(*from_sq)
        to_sq = Square(*to_sq)

        piece = self._board[from_sq]
        if piece is None:
            _LOGGER.debug("Rejected move from empty square %s", square_name(from_sq))
            return False
        if piece.side != self._side_to_move:
            _LOGGER.debug(
                "Rejected move %s%s: %s to move",
                square_name(from_sq),
                square_name(to_sq),
                self._side_to_move,
            )
            return False
        if to_sq not in Rules.legal_destinations(self._board, from_sq):
            _LOGGER.debug(
                "Rejected illegal move %s%s", square_name(from_sq), square_name(to_sq)
            )
            return False

        captured = self._board[to_sq]
        self._board[to_sq] = piece
        self._board[from_sq] = None
        piece.square = to_sq
        self._side_to_move = self._side_to_move.opposite

        _LOGGER.debug(
            "%s %s%s%s",
            piece.side,
            square_name(from_sq),
            "x" if captured is not None else "-",
            square_name(to_sq),
        )
        return True

    # ── Check / end-of-game queries ──────────────────────────────────────

    def is_in_check(self, side: Side) -> bool:
        return Rules.is_in_check(self._board, side)

    def is_checkmate(self, side: Side) -> bool:
        return Rules.is_checkmate(self._board, side)

    def is_stalemate(self, side: Side) -> bool:
        return Rules.is_stalemate(self._board, side)

    def status(self, side: Side | None = None) -> GameStatus:
        """Situation of *side* (default: the side to move)."""
        if side is None:
            side = self._side_to_move
        return Rules.status(self._board, side)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Back to the standard starting position, White to move."""
        self._board = Board.initial()
        self._side_to_move = Side.WHITE
        _LOGGER.debug("Engine reset to starting position")

    def __repr__(self) -> str:
        return f"GameEngine({self._side_to_move} to move)\n{self._board!r}"
