"""GameController — turns square taps into engine calls.

Coordinates: GameEngine, the current selection, end-of-turn notices.
Emits events via simple callbacks so the UI / tests can subscribe.
Nothing here draws anything; a front end maps its own hit-testing to
squares and reacts to the events.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessgame.core.enums import GameStatus, Side
from chessgame.core.piece import Piece
from chessgame.core.types import Square, is_on_board, square_name
from chessgame.game.engine import GameEngine

_LOGGER = logging.getLogger(__name__)


class TapOutcome(IntEnum):
    """What a single tap did."""

    IGNORED = auto()
    SELECTED = auto()
    CLEARED = auto()
    MOVED = auto()
    ILLEGAL = auto()
    WRONG_TURN = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class MoveEvent:
    """A committed move, as seen after the fact."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None
    status: GameStatus


@dataclass(frozen=True, slots=True)
class Notice:
    """Short message for the player, e.g. ``"Check to BLACK."``."""

    text: str
    status: GameStatus | None = None


def describe_status(status: GameStatus, side: Side) -> str | None:
    """Notice text for *side* being in *status*, or ``None`` if nothing to say."""
    if status == GameStatus.CHECKMATE:
        return f"Checkmate! {side.opposite.name.capitalize()} wins."
    if status == GameStatus.CHECK:
        return f"Check to {side.name}."
    if status == GameStatus.STALEMATE:
        return "Stalemate. Draw."
    return None


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveEvent], None]
SelectionCallback = Callable[[Square | None, frozenset[Square]], None]
NoticeCallback = Callable[[Notice], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection: list[SelectionCallback] = field(default_factory=list)
    on_notice: list[NoticeCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Select-then-move interaction on top of a :class:`GameEngine`.

    Tap an own piece to select it and get its destinations, tap one of
    them to move. After every move the side now to move is checked for
    check, checkmate and stalemate and a notice is published.

    The engine keeps accepting moves after mate; with
    ``lock_on_game_over`` (the default) this controller stops instead.

    Thread-safety: single thread only (the UI thread).
    """

    __slots__ = (
        "_engine",
        "_selected",
        "_highlights",
        "_status",
        "_lock_on_game_over",
        "events",
    )

    def __init__(
        self,
        engine: GameEngine | None = None,
        *,
        lock_on_game_over: bool = True,
    ) -> None:
        self._engine = engine if engine is not None else GameEngine()
        self._selected: Square | None = None
        self._highlights: frozenset[Square] = frozenset()
        self._status = self._engine.status()
        self._lock_on_game_over = lock_on_game_over
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def highlights(self) -> frozenset[Square]:
        """Legal destinations of the selected piece."""
        return self._highlights

    @property
    def status(self) -> GameStatus:
        """Status of the side to move, as of the last move."""
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    def _locked(self) -> bool:
        return self._lock_on_game_over and self.is_game_over

    # ── Input ────────────────────────────────────────────────────────────

    def tap(self, sq: tuple[int, int]) -> TapOutcome:
        """Handle a tap on *sq* (a piece or an empty square)."""
        if self._locked():
            return TapOutcome.GAME_OVER
        if not is_on_board(sq):
            self.clear_selection()
            return TapOutcome.CLEARED
        sq = Square(*sq)

        piece = self._engine.piece_at(sq)
        side = self._engine.side_to_move

        if self._selected is None:
            if piece is None:
                return TapOutcome.IGNORED
            if piece.side != side:
                self._emit_notice(Notice(f"It's {side.name}'s turn"))
                return TapOutcome.WRONG_TURN
            self.select(sq)
            return TapOutcome.SELECTED

        if sq in self._highlights:
            self.move(self._selected, sq)
            return TapOutcome.MOVED

        if piece is not None and piece.side == side:
            self.select(sq)
            return TapOutcome.SELECTED

        if piece is not None:
            self._emit_notice(Notice("Not a legal move"))
            return TapOutcome.ILLEGAL

        self.clear_selection()
        return TapOutcome.CLEARED

    def select(self, sq: tuple[int, int]) -> bool:
        """Select the side-to-move's piece on *sq*; clears selection otherwise."""
        if self._locked() or not self._engine.is_own_piece(sq):
            self.clear_selection()
            return False
        self._selected = Square(*sq)
        self._highlights = frozenset(self._engine.legal_destinations(sq))
        _LOGGER.debug(
            "Selected %s with %d destinations",
            square_name(self._selected),
            len(self._highlights),
        )
        self._emit_selection()
        return True

    def clear_selection(self) -> None:
        if self._selected is None and not self._highlights:
            return
        self._selected = None
        self._highlights = frozenset()
        self._emit_selection()

    def move(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> bool:
        """Commit a move directly. Returns ``False`` if the engine refuses it."""
        if self._locked():
            return False

        captured = self._engine.piece_at(to_sq)
        if not self._engine.commit_move(from_sq, to_sq):
            self._emit_notice(Notice("Move failed (illegal)"))
            self.clear_selection()
            return False

        to_sq = Square(*to_sq)
        mover = self._engine.piece_at(to_sq)
        assert mover is not None

        side = self._engine.side_to_move
        self._status = self._engine.status(side)

        self.clear_selection()
        self._emit_move(
            MoveEvent(Square(*from_sq), to_sq, mover, captured, self._status)
        )

        text = describe_status(self._status, side)
        if text is not None:
            _LOGGER.info(text)
            self._emit_notice(Notice(text, self._status))
        return True

    def new_game(self) -> None:
        """Reset the engine and forget the selection."""
        self._engine.reset()
        self._selected = None
        self._highlights = frozenset()
        self._status = GameStatus.IN_PROGRESS
        for cb in self.events.on_reset:
            cb()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection:
            cb(self._selected, self._highlights)

    def _emit_move(self, event: MoveEvent) -> None:
        for cb in self.events.on_move:
            cb(event)

    def _emit_notice(self, notice: Notice) -> None:
        for cb in self.events.on_notice:
            cb(notice)
