"""Tests for pawn movement: steps, blocking, captures and en passant."""

import pytest

from chesskata.core.board import Board
from chesskata.core.enums import PieceKind, Player
from chesskata.core.piece import Piece
from chesskata.core.settings import BoardSettings
from chesskata.core.types import Square


class TestWhitePawns:
    def test_single_step_after_first_move(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(1, 0), pawn)
        pawn.move_to(board, Square.at(2, 0))

        moves = pawn.available_moves(board)

        assert moves == [Square.at(3, 0)]

    def test_one_or_two_steps_on_first_move(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(1, 7), pawn)

        moves = pawn.available_moves(board)

        assert len(moves) == 2
        assert set(moves) == {Square.at(2, 7), Square.at(3, 7)}

    def test_no_moves_at_top_of_board(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(7, 3), pawn)

        assert pawn.available_moves(board) == []

    def test_en_passant_offered(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        board.set_piece(Square.at(6, 3), Piece.pawn(Player.BLACK))
        board.current_player = Player.BLACK
        board.move_piece(Square.at(6, 3), Square.at(4, 3))

        assert Square.at(5, 3) in pawn.available_moves(board)

    def test_en_passant_removes_black_pawn(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        black_pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(4, 4), pawn)
        board.set_piece(Square.at(6, 3), black_pawn)
        board.current_player = Player.BLACK
        board.move_piece(Square.at(6, 3), Square.at(4, 3))

        record = pawn.move_to(board, Square.at(5, 3))

        assert board.get_piece(Square.at(4, 3)) is None
        assert board.get_piece(Square.at(5, 3)) is pawn
        assert record.is_en_passant
        assert record.captured is black_pawn
        assert record.capture_sq == Square.at(4, 3)

    def test_en_passant_window_closes_after_other_moves(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        other_white = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(1, 0), other_white)
        other_black = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(6, 7), other_black)
        black_pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(6, 3), black_pawn)
        board.current_player = Player.BLACK

        black_pawn.move_to(board, Square.at(4, 3))
        other_white.move_to(board, Square.at(2, 0))
        other_black.move_to(board, Square.at(5, 7))

        assert Square.at(5, 3) not in pawn.available_moves(board)

    def test_no_en_passant_after_single_steps(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        black_pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(6, 3), black_pawn)
        board.current_player = Player.BLACK

        black_pawn.move_to(board, Square.at(5, 3))
        board.current_player = Player.BLACK
        black_pawn.move_to(board, Square.at(4, 3))

        assert Square.at(5, 3) not in pawn.available_moves(board)

    def test_no_en_passant_against_non_adjacent_pawn(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        pawn.move_count = 1
        board.set_piece(Square.at(4, 5), pawn)
        board.set_piece(Square.at(6, 3), Piece.pawn(Player.BLACK))
        board.move_piece(Square.at(6, 3), Square.at(4, 3))

        moves = pawn.available_moves(board)

        assert Square.at(5, 3) not in moves
        assert moves == [Square.at(5, 5)]

    def test_no_en_passant_against_own_pawn(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        pawn.move_count = 1
        board.set_piece(Square.at(3, 4), pawn)
        board.set_piece(Square.at(1, 3), Piece.pawn(Player.WHITE))
        board.move_piece(Square.at(1, 3), Square.at(3, 3))

        assert pawn.available_moves(board) == [Square.at(4, 4)]

    def test_no_en_passant_after_rook_double_slide(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        board.set_piece(Square.at(6, 3), Piece.rook(Player.BLACK))
        board.move_piece(Square.at(6, 3), Square.at(4, 3))

        assert Square.at(5, 3) not in pawn.available_moves(board)


class TestBlackPawns:
    @pytest.fixture
    def board(self) -> Board:
        return Board(Player.BLACK)

    def test_single_step_after_first_move(self, board: Board) -> None:
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(6, 0), pawn)
        pawn.move_to(board, Square.at(5, 0))

        assert pawn.available_moves(board) == [Square.at(4, 0)]

    def test_one_or_two_steps_on_first_move(self, board: Board) -> None:
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(6, 7), pawn)

        moves = pawn.available_moves(board)

        assert len(moves) == 2
        assert set(moves) == {Square.at(5, 7), Square.at(4, 7)}

    def test_no_moves_at_bottom_of_board(self, board: Board) -> None:
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(0, 3), pawn)

        assert pawn.available_moves(board) == []

    def test_en_passant_offered(self) -> None:
        board = Board()
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(3, 1), pawn)
        board.set_piece(Square.at(1, 0), Piece.pawn(Player.WHITE))
        board.move_piece(Square.at(1, 0), Square.at(3, 0))

        assert Square.at(2, 0) in pawn.available_moves(board)

    def test_en_passant_removes_white_pawn(self) -> None:
        board = Board()
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(3, 1), pawn)
        board.set_piece(Square.at(1, 0), Piece.pawn(Player.WHITE))
        board.move_piece(Square.at(1, 0), Square.at(3, 0))

        pawn.move_to(board, Square.at(2, 0))

        assert board.get_piece(Square.at(3, 0)) is None
        assert board.get_piece(Square.at(2, 0)) is pawn


class TestBlocking:
    def test_piece_in_front_blocks_all_forward_moves(self, board: Board) -> None:
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(6, 3), pawn)
        board.set_piece(Square.at(5, 3), Piece.rook(Player.WHITE))

        assert pawn.available_moves(board) == []

    def test_piece_two_ahead_blocks_only_double_step(self, board: Board) -> None:
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(6, 3), pawn)
        board.set_piece(Square.at(4, 3), Piece.rook(Player.WHITE))

        moves = pawn.available_moves(board)

        assert Square.at(4, 3) not in moves
        assert moves == [Square.at(5, 3)]

    def test_friendly_piece_in_front_blocks(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(1, 2), pawn)
        board.set_piece(Square.at(2, 2), Piece.knight(Player.WHITE))

        assert pawn.available_moves(board) == []


class TestDiagonalCapture:
    def test_captures_opposing_piece(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        board.set_piece(Square.at(5, 3), Piece.rook(Player.BLACK))

        assert Square.at(5, 3) in pawn.available_moves(board)

    def test_no_diagonal_without_target(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)

        assert Square.at(5, 3) not in pawn.available_moves(board)

    def test_cannot_take_friendly_piece(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        board.set_piece(Square.at(5, 3), Piece.rook(Player.WHITE))

        assert Square.at(5, 3) not in pawn.available_moves(board)

    def test_cannot_take_opposing_king(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        board.set_piece(Square.at(5, 3), Piece.king(Player.BLACK))

        assert Square.at(5, 3) not in pawn.available_moves(board)

    def test_edge_column_checks_one_diagonal(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        pawn.move_count = 1
        board.set_piece(Square.at(3, 0), pawn)
        board.set_piece(Square.at(4, 1), Piece.bishop(Player.BLACK))

        assert set(pawn.available_moves(board)) == {Square.at(4, 0), Square.at(4, 1)}

    def test_capture_removes_target(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        target = Piece.rook(Player.BLACK)
        board.set_piece(Square.at(4, 4), pawn)
        board.set_piece(Square.at(5, 3), target)

        record = pawn.move_to(board, Square.at(5, 3))

        assert board.get_piece(Square.at(5, 3)) is pawn
        assert board.get_piece(Square.at(4, 4)) is None
        assert record.captured is target
        assert not record.is_en_passant


class TestMoveCounter:
    def test_white_move_increments_counter(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(4, 4), pawn)
        assert pawn.move_count == 0

        board.move_piece(Square.at(4, 4), Square.at(5, 4))

        moved = board.get_piece(Square.at(5, 4))
        assert moved is pawn
        assert moved.move_count == 1

    def test_unvalidated_move_increments_counter(self) -> None:
        board = Board(settings=BoardSettings(validate_moves=False))
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(4, 4), pawn)

        board.move_piece(Square.at(4, 4), Square.at(4, 6))

        moved = board.get_piece(Square.at(4, 6))
        assert moved is pawn
        assert moved.move_count == 1


class TestPromotion:
    def test_promotes_to_queen_by_default(self, board: Board) -> None:
        pawn = Piece.pawn(Player.WHITE)
        pawn.move_count = 5
        board.set_piece(Square.at(6, 2), pawn)

        record = pawn.move_to(board, Square.at(7, 2))

        assert board.get_piece(Square.at(7, 2)) is pawn
        assert pawn.kind == PieceKind.QUEEN
        assert pawn.move_count == 6
        assert record.promotion == PieceKind.QUEEN

    def test_promotes_to_requested_kind(self, board: Board) -> None:
        pawn = Piece.pawn(Player.BLACK)
        board.set_piece(Square.at(1, 5), pawn)
        board.current_player = Player.BLACK

        board.move_piece(Square.at(1, 5), Square.at(0, 5), PieceKind.KNIGHT)

        assert pawn.kind == PieceKind.KNIGHT

    def test_configured_default_kind(self) -> None:
        board = Board(settings=BoardSettings(promotion_kind=PieceKind.ROOK))
        pawn = Piece.pawn(Player.WHITE)
        board.set_piece(Square.at(6, 0), pawn)

        board.move_piece(Square.at(6, 0), Square.at(7, 0))

        assert pawn.kind == PieceKind.ROOK
