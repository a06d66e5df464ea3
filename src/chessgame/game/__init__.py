"""Game layer — engine, tap controller, Qt bridge.

Quick start::

    from chessgame.game import GameEngine
    from chessgame.core import Square

    engine = GameEngine()
    engine.legal_destinations(Square(1, 4))       # {Square(2, 4), Square(3, 4)}
    engine.commit_move(Square(1, 4), Square(3, 4))  # True

The Qt bridge is imported separately (``chessgame.game.qt_bridge``) so
the engine and controller work without a Qt installation.
"""

from chessgame.game.controller import (
    GameController,
    GameEvents,
    MoveEvent,
    Notice,
    TapOutcome,
    describe_status,
)
from chessgame.game.engine import GameEngine

__all__ = [
    "GameController",
    "GameEngine",
    "GameEvents",
    "MoveEvent",
    "Notice",
    "TapOutcome",
    "describe_status",
]
