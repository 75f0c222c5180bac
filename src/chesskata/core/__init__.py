"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chesskata.core import Board, Piece, Player, Square

    board = Board()
    pawn = Piece.pawn(Player.WHITE)
    board.set_piece(Square.at(1, 4), pawn)
    print(pawn.available_moves(board))
    # [Square(row=2, col=4), Square(row=3, col=4)]
    pawn.move_to(board, Square.at(3, 4))
"""

from chesskata.core.board import Board
from chesskata.core.enums import PROMOTION_KINDS, PieceKind, Player
from chesskata.core.errors import (
    ChessError,
    EmptySquareError,
    IllegalMoveError,
    OutOfBoundsError,
    PieceNotOnBoardError,
    WrongTurnError,
)
from chesskata.core.move import LastMove, MoveRecord
from chesskata.core.move_generator import MoveGenerator
from chesskata.core.piece import Piece
from chesskata.core.settings import BoardSettings
from chesskata.core.types import BOARD_SIZE, Square, all_squares, is_on_board

__all__ = [
    # Enums
    "PROMOTION_KINDS",
    "PieceKind",
    "Player",
    # Errors
    "ChessError",
    "EmptySquareError",
    "IllegalMoveError",
    "OutOfBoundsError",
    "PieceNotOnBoardError",
    "WrongTurnError",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "all_squares",
    "is_on_board",
    # Domain objects
    "Board",
    "BoardSettings",
    "LastMove",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
]
