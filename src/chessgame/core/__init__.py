"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessgame.core import Board, Rules, Side, Square

    board = Board.initial()
    Rules.legal_destinations(board, Square(1, 4))  # {e3, e4}
    Rules.is_in_check(board, Side.WHITE)           # False
"""

from chessgame.core.board import Board
from chessgame.core.enums import GameStatus, PieceType, Side
from chessgame.core.movement import is_geometric_move, is_path_clear
from chessgame.core.piece import Piece
from chessgame.core.rules import Rules, simulate_move
from chessgame.core.types import (
    BOARD_SIZE,
    Square,
    all_squares,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "GameStatus",
    "PieceType",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "all_squares",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Rules",
    # Movement
    "is_geometric_move",
    "is_path_clear",
    "simulate_move",
]
