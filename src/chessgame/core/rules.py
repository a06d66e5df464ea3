"""Attack detection, own-king safety, checkmate and stalemate."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from chessgame.core.board import Board
from chessgame.core.enums import GameStatus, PieceType, Side
from chessgame.core.movement import is_geometric_move
from chessgame.core.types import Square, all_squares, is_on_board


@contextmanager
def simulate_move(board: Board, from_sq: Square, to_sq: Square) -> Iterator[Board]:
    """Temporarily play *from_sq* → *to_sq* on *board*.

    A copy of the moving piece is placed on the destination so the real
    piece keeps its square. Both cells are restored on exit, whether the
    body returns or raises.
    """
    moving = board[from_sq]
    captured = board[to_sq]
    if moving is None:
        raise ValueError(f"No piece on {from_sq} to simulate")

    ghost = moving.copy()
    ghost.square = Square(*to_sq)
    board[to_sq] = ghost
    board[from_sq] = None
    try:
        yield board
    finally:
        board[from_sq] = moving
        board[to_sq] = captured


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Turn order is not tracked here; every query names the side it is
    about.
    """

    @staticmethod
    def find_king(board: Board, side: Side) -> Square | None:
        """Square of *side*'s king, or ``None`` if it is not on the board."""
        for piece in board:
            if piece.kind == PieceType.KING and piece.side == side:
                return piece.square
        return None

    @staticmethod
    def is_square_attacked(board: Board, sq: Square, by_side: Side) -> bool:
        """Is *sq* reachable by any piece of *by_side* under raw geometry?

        The attacker's own king safety is ignored, which keeps the check
        non-recursive.
        """
        for attacker in board.pieces(by_side):
            if is_geometric_move(board, attacker.square, sq):
                return True
        return False

    @staticmethod
    def is_in_check(board: Board, side: Side) -> bool:
        """Is *side*'s king attacked? A side without a king is never in check."""
        king_sq = Rules.find_king(board, side)
        if king_sq is None:
            return False
        return Rules.is_square_attacked(board, king_sq, side.opposite)

    @staticmethod
    def leaves_king_safe(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Whether moving the piece on *from_sq* keeps its own king out of check."""
        piece = board[from_sq]
        if piece is None:
            return False
        with simulate_move(board, from_sq, to_sq):
            return not Rules.is_in_check(board, piece.side)

    @staticmethod
    def legal_destinations(board: Board, from_sq: tuple[int, int]) -> set[Square]:
        """Every square the piece on *from_sq* may legally move to.

        Legal means: the movement rule allows it, the destination is not a
        same-side piece, and the mover's king is not left in check. The
        piece's own side is used; whose turn it is does not matter here.
        All 64 destinations are tried.
        """
        if not is_on_board(from_sq):
            return set()
        from_sq = Square(*from_sq)
        if board[from_sq] is None:
            return set()

        return {
            to_sq
            for to_sq in all_squares()
            if is_geometric_move(board, from_sq, to_sq)
            and Rules.leaves_king_safe(board, from_sq, to_sq)
        }

    @staticmethod
    def has_legal_move(board: Board, side: Side) -> bool:
        # Squares are collected up front; simulation swaps cells as we go.
        for sq in board.occupied_squares(side):
            if Rules.legal_destinations(board, sq):
                return True
        return False

    @staticmethod
    def is_checkmate(board: Board, side: Side) -> bool:
        if not Rules.is_in_check(board, side):
            return False
        return not Rules.has_legal_move(board, side)

    @staticmethod
    def is_stalemate(board: Board, side: Side) -> bool:
        if Rules.is_in_check(board, side):
            return False
        return not Rules.has_legal_move(board, side)

    @staticmethod
    def status(board: Board, side: Side) -> GameStatus:
        """Classify *side*'s situation: checkmate, check, stalemate or neither."""
        in_check = Rules.is_in_check(board, side)
        can_move = Rules.has_legal_move(board, side)
        if in_check:
            return GameStatus.CHECK if can_move else GameStatus.CHECKMATE
        return GameStatus.IN_PROGRESS if can_move else GameStatus.STALEMATE
