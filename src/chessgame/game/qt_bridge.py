"""Qt bridge exposing a GameController as signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessgame.core.types import Square
from chessgame.game.controller import GameController, MoveEvent, Notice


class GameBridge(QObject):
    """GUI-thread adapter: board views call the slots, listen to the signals.

    Square payloads are :class:`~chessgame.core.types.Square` values;
    pieces are copies, so views can keep them.
    """

    selection_changed = pyqtSignal(object, object)  # Square | None, frozenset
    piece_moved = pyqtSignal(object, object)  # from Square, to Square
    piece_captured = pyqtSignal(object)  # Piece
    notice = pyqtSignal(str)
    turn_changed = pyqtSignal(object)  # Side
    game_over = pyqtSignal(object)  # GameStatus
    board_reset = pyqtSignal()

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_selection.append(self._on_selection)
        events.on_move.append(self._on_move)
        events.on_notice.append(self._on_notice)
        events.on_reset.append(self.board_reset.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(int, int, result=int)
    def tap(self, row: int, col: int) -> int:
        """Forward a tap on ``(row, col)``; returns the :class:`TapOutcome` value."""
        return int(self._controller.tap(Square(row, col)))

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()
        self.turn_changed.emit(self._controller.engine.side_to_move)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_selection(self, selected: Square | None, highlights: frozenset) -> None:
        self.selection_changed.emit(selected, highlights)

    def _on_move(self, event: MoveEvent) -> None:
        if event.captured is not None:
            self.piece_captured.emit(event.captured)
        self.piece_moved.emit(event.from_sq, event.to_sq)
        self.turn_changed.emit(self._controller.engine.side_to_move)
        if event.status.is_terminal:
            self.game_over.emit(event.status)

    def _on_notice(self, notice: Notice) -> None:
        self.notice.emit(notice.text)
