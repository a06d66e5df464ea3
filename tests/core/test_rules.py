"""Tests for Rules: check, own-king safety, checkmate, stalemate."""

import pytest

from chessgame.core.board import Board
from chessgame.core.enums import GameStatus, PieceType, Side
from chessgame.core.piece import Piece
from chessgame.core.rules import Rules, simulate_move
from chessgame.core.types import Square


def _w(kind: PieceType, row: int, col: int) -> Piece:
    return Piece(kind, Side.WHITE, (row, col))


def _b(kind: PieceType, row: int, col: int) -> Piece:
    return Piece(kind, Side.BLACK, (row, col))


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Side.WHITE)
        assert not Rules.is_in_check(board, Side.BLACK)

    def test_rook_on_open_file(self) -> None:
        board = Board.from_pieces([_w(PieceType.KING, 0, 4), _b(PieceType.ROOK, 7, 4)])
        assert Rules.is_in_check(board, Side.WHITE)

    def test_blocked_rook_gives_no_check(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 4),
                _w(PieceType.PAWN, 1, 4),
                _b(PieceType.ROOK, 7, 4),
            ]
        )
        assert not Rules.is_in_check(board, Side.WHITE)

    def test_pawn_attacks_diagonally(self) -> None:
        board = Board.from_pieces([_w(PieceType.KING, 3, 3), _b(PieceType.PAWN, 4, 4)])
        assert Rules.is_in_check(board, Side.WHITE)

    def test_pawn_does_not_attack_forward(self) -> None:
        board = Board.from_pieces([_w(PieceType.KING, 3, 3), _b(PieceType.PAWN, 4, 3)])
        assert not Rules.is_in_check(board, Side.WHITE)

    def test_attack_ignores_attacker_pin(self) -> None:
        # The black knight is pinned to its own king but still gives check.
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 4),
                _w(PieceType.ROOK, 2, 0),
                _b(PieceType.KNIGHT, 2, 3),
                _b(PieceType.KING, 2, 7),
            ]
        )
        assert Rules.is_in_check(board, Side.WHITE)

    def test_missing_king_is_never_in_check(self) -> None:
        board = Board.from_pieces([_b(PieceType.QUEEN, 0, 0)])
        assert not Rules.is_in_check(board, Side.WHITE)
        assert Rules.find_king(board, Side.WHITE) is None


class TestSimulateMove:
    def test_restores_cells(self) -> None:
        board = Board.initial()
        with simulate_move(board, Square(1, 4), Square(3, 4)) as scratch:
            assert scratch[Square(1, 4)] is None
            assert scratch[Square(3, 4)].square == Square(3, 4)
        assert board == Board.initial()

    def test_real_piece_keeps_square(self) -> None:
        board = Board.initial()
        pawn = board[Square(1, 4)]
        with simulate_move(board, Square(1, 4), Square(3, 4)):
            pass
        assert board[Square(1, 4)] is pawn
        assert pawn.square == Square(1, 4)

    def test_restores_captured_piece(self) -> None:
        board = Board.from_pieces([_w(PieceType.ROOK, 0, 0), _b(PieceType.ROOK, 0, 5)])
        victim = board[Square(0, 5)]
        with simulate_move(board, Square(0, 0), Square(0, 5)):
            assert board[Square(0, 5)].side == Side.WHITE
        assert board[Square(0, 5)] is victim

    def test_restores_on_exception(self) -> None:
        board = Board.initial()
        with pytest.raises(RuntimeError):
            with simulate_move(board, Square(0, 6), Square(2, 5)):
                raise RuntimeError("boom")
        assert board == Board.initial()

    def test_empty_source_raises(self) -> None:
        with pytest.raises(ValueError):
            with simulate_move(Board(), Square(3, 3), Square(4, 4)):
                pass


class TestLegalDestinations:
    def test_e_pawn_from_start(self) -> None:
        dests = Rules.legal_destinations(Board.initial(), Square(1, 4))
        assert dests == {Square(2, 4), Square(3, 4)}

    def test_knight_from_start(self) -> None:
        dests = Rules.legal_destinations(Board.initial(), Square(0, 1))
        assert dests == {Square(2, 0), Square(2, 2)}

    def test_empty_and_off_board(self) -> None:
        board = Board.initial()
        assert Rules.legal_destinations(board, Square(4, 4)) == set()
        assert Rules.legal_destinations(board, Square(8, 4)) == set()

    def test_rook_blocked_by_own_pawn(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.ROOK, 0, 0),
                _w(PieceType.PAWN, 1, 0),
                _w(PieceType.KING, 0, 4),
                _b(PieceType.KING, 7, 4),
            ]
        )
        dests = Rules.legal_destinations(board, Square(0, 0))
        assert dests == {Square(0, 1), Square(0, 2), Square(0, 3)}
        assert Square(1, 0) not in dests
        assert Square(2, 0) not in dests

    def test_pinned_rook_stays_on_file(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 4),
                _w(PieceType.ROOK, 1, 4),
                _b(PieceType.ROOK, 7, 4),
                _b(PieceType.KING, 7, 0),
            ]
        )
        dests = Rules.legal_destinations(board, Square(1, 4))
        assert dests == {Square(r, 4) for r in range(2, 8)}

    def test_pinned_knight_has_no_moves(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 4),
                _w(PieceType.KNIGHT, 1, 4),
                _b(PieceType.ROOK, 7, 4),
                _b(PieceType.KING, 7, 0),
            ]
        )
        assert Rules.legal_destinations(board, Square(1, 4)) == set()

    def test_king_cannot_step_into_attack(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 4),
                _b(PieceType.ROOK, 7, 3),
                _b(PieceType.KING, 7, 7),
            ]
        )
        dests = Rules.legal_destinations(board, Square(0, 4))
        assert Square(0, 3) not in dests
        assert Square(1, 3) not in dests
        assert dests == {Square(0, 5), Square(1, 4), Square(1, 5)}

    def test_queries_leave_board_unchanged(self) -> None:
        board = Board.initial()
        for sq in [Square(0, c) for c in range(8)] + [Square(1, c) for c in range(8)]:
            Rules.legal_destinations(board, sq)
        assert board == Board.initial()


class TestCheckmate:
    def test_three_rooks_mate(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 4),
                _b(PieceType.ROOK, 7, 3),
                _b(PieceType.ROOK, 7, 4),
                _b(PieceType.ROOK, 7, 5),
                _b(PieceType.KING, 7, 7),
            ]
        )
        assert Rules.is_checkmate(board, Side.WHITE)
        assert not Rules.is_stalemate(board, Side.WHITE)
        assert Rules.status(board, Side.WHITE) == GameStatus.CHECKMATE

    def test_back_rank_mate(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 6),
                _w(PieceType.PAWN, 1, 5),
                _w(PieceType.PAWN, 1, 6),
                _w(PieceType.PAWN, 1, 7),
                _b(PieceType.ROOK, 0, 0),
                _b(PieceType.KING, 7, 4),
            ]
        )
        assert Rules.is_checkmate(board, Side.WHITE)

    def test_not_mate_when_king_can_escape(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 4),
                _b(PieceType.ROOK, 7, 4),
                _b(PieceType.KING, 7, 0),
            ]
        )
        assert Rules.is_in_check(board, Side.WHITE)
        assert not Rules.is_checkmate(board, Side.WHITE)
        assert Rules.status(board, Side.WHITE) == GameStatus.CHECK

    def test_not_mate_when_capture_possible(self) -> None:
        board = Board.from_pieces(
            [
                _w(PieceType.KING, 0, 6),
                _w(PieceType.PAWN, 1, 5),
                _w(PieceType.PAWN, 1, 6),
                _w(PieceType.PAWN, 1, 7),
                _w(PieceType.ROOK, 5, 0),
                _b(PieceType.ROOK, 0, 0),
                _b(PieceType.KING, 7, 4),
            ]
        )
        assert Rules.is_in_check(board, Side.WHITE)
        assert not Rules.is_checkmate(board, Side.WHITE)

    def test_not_mate_without_check(self) -> None:
        assert not Rules.is_checkmate(Board.initial(), Side.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        board = Board.from_pieces(
            [
                _b(PieceType.KING, 7, 7),
                _w(PieceType.KING, 5, 5),
                _w(PieceType.QUEEN, 5, 6),
            ]
        )
        assert Rules.is_stalemate(board, Side.BLACK)
        assert not Rules.is_checkmate(board, Side.BLACK)
        assert Rules.status(board, Side.BLACK) == GameStatus.STALEMATE

    def test_blocked_pawn_does_not_prevent_stalemate(self) -> None:
        board = Board.from_pieces(
            [
                _b(PieceType.KING, 7, 7),
                _b(PieceType.PAWN, 4, 0),
                _w(PieceType.PAWN, 3, 0),
                _w(PieceType.KING, 5, 5),
                _w(PieceType.QUEEN, 5, 6),
            ]
        )
        assert Rules.is_stalemate(board, Side.BLACK)

    def test_not_stalemate_when_has_moves(self) -> None:
        board = Board.from_pieces([_b(PieceType.KING, 7, 7), _w(PieceType.KING, 5, 5)])
        assert not Rules.is_stalemate(board, Side.BLACK)
        assert Rules.status(board, Side.BLACK) == GameStatus.IN_PROGRESS

    def test_starting_position(self) -> None:
        assert not Rules.is_stalemate(Board.initial(), Side.WHITE)
        assert not Rules.is_stalemate(Board.initial(), Side.BLACK)
