"""chessgame — standard chess rules engine with a tap-driven controller."""

from chessgame.core import GameStatus, Piece, PieceType, Side, Square
from chessgame.game import GameController, GameEngine

__version__ = "0.1.0"

__all__ = [
    "GameController",
    "GameEngine",
    "GameStatus",
    "Piece",
    "PieceType",
    "Side",
    "Square",
    "__version__",
]
