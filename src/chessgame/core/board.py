"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chessgame.core.enums import PieceType, Side
from chessgame.core.piece import Piece
from chessgame.core.types import BOARD_SIZE, Square, all_squares, is_on_board

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces.

    The board owns every piece it holds: overwriting or clearing a cell
    drops the piece for good. Reads outside the grid return ``None``.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        if not is_on_board(sq):
            return None
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        if not is_on_board(sq):
            raise ValueError(f"Square off the board: {sq!r}")
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    def place(self, piece: Piece) -> None:
        """Put *piece* on its own square; the square must be free."""
        if not piece.square.in_bounds:
            raise ValueError(f"{piece!r} is off the board")
        if self[piece.square] is not None:
            raise ValueError(f"Square {piece.square} is already occupied")
        self[piece.square] = piece

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        """Pieces in row-major order."""
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def pieces(self, side: Side | None = None) -> list[Piece]:
        if side is None:
            return list(self)
        return [p for p in self if p.side == side]

    def occupied_squares(self, side: Side) -> list[Square]:
        return [p.square for p in self if p.side == side]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: pieces are duplicated, not shared."""
        b = Board()
        for sq in all_squares():
            piece = self[sq]
            if piece is not None:
                b[sq] = piece.copy()
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(BOARD_SIZE):
            for side in Side:
                b.place(Piece(PieceType.PAWN, side, (side.pawn_start_row, col)))

        for col, kind in enumerate(BACK_RANK):
            for side in Side:
                b.place(Piece(kind, side, (side.back_row, col)))
        return b

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Board:
        b = cls()
        for piece in pieces:
            b.place(piece)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._grid[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
