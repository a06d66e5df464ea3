"""Per-kind geometric movement rules and path clearance.

These checks look only at the board as it stands: they know nothing
about whose turn it is or whether the move would expose the mover's
own king. See :mod:`chessgame.core.rules` for that.
"""

from __future__ import annotations

from collections.abc import Callable

from chessgame.core.board import Board
from chessgame.core.enums import PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import Square, is_on_board

MoveRule = Callable[[Board, Piece, Square, Square], bool]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    Walks one step at a time along the unit direction vector, so callers
    must only pass straight or diagonal lines.
    """
    step_row = _sign(to_sq.row - from_sq.row)
    step_col = _sign(to_sq.col - from_sq.col)

    sq = from_sq.offset(step_row, step_col)
    while sq != to_sq:
        if board[sq] is not None:
            return False
        sq = sq.offset(step_row, step_col)
    return True


# -- Per-kind rules ---------------------------------------------------------


def _pawn_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    direction = piece.side.pawn_direction
    drow = to_sq.row - from_sq.row
    target = board[to_sq]

    if from_sq.col == to_sq.col and target is None:
        if drow == direction:
            return True
        if from_sq.row == piece.side.pawn_start_row and drow == 2 * direction:
            return board.is_empty(from_sq.offset(direction, 0))
        return False

    # Diagonal steps are capture-only.
    return (
        abs(to_sq.col - from_sq.col) == 1
        and drow == direction
        and target is not None
        and target.side != piece.side
    )


def _rook_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    del piece
    if from_sq.row != to_sq.row and from_sq.col != to_sq.col:
        return False
    return is_path_clear(board, from_sq, to_sq)


def _bishop_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    del piece
    if abs(to_sq.row - from_sq.row) != abs(to_sq.col - from_sq.col):
        return False
    return is_path_clear(board, from_sq, to_sq)


def _queen_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return _rook_move(board, piece, from_sq, to_sq) or _bishop_move(
        board, piece, from_sq, to_sq
    )


def _knight_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    del board, piece
    deltas = (abs(to_sq.row - from_sq.row), abs(to_sq.col - from_sq.col))
    return deltas in ((1, 2), (2, 1))


def _king_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    del board, piece
    return abs(to_sq.row - from_sq.row) <= 1 and abs(to_sq.col - from_sq.col) <= 1


_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: _pawn_move,
    PieceType.ROOK: _rook_move,
    PieceType.BISHOP: _bishop_move,
    PieceType.QUEEN: _queen_move,
    PieceType.KNIGHT: _knight_move,
    PieceType.KING: _king_move,
}


def is_geometric_move(
    board: Board, from_sq: tuple[int, int], to_sq: tuple[int, int]
) -> bool:
    """Whether the piece on *from_sq* may reach *to_sq* by its movement rule.

    Both squares must be on the board, *from_sq* must hold a piece, and
    *to_sq* must not hold a piece of the same side (this also rules out
    null moves). Own-king safety is not considered.
    """
    if not is_on_board(from_sq) or not is_on_board(to_sq):
        return False
    from_sq = Square(*from_sq)
    to_sq = Square(*to_sq)

    piece = board[from_sq]
    if piece is None:
        return False

    target = board[to_sq]
    if target is not None and target.side == piece.side:
        return False

    return _RULES[piece.kind](board, piece, from_sq, to_sq)
