"""Exception hierarchy for rule violations."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by the rules engine."""


class OutOfBoundsError(ChessError, ValueError):
    """Coordinates outside the 8x8 grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Square ({row}, {col}) is off the board")
        self.row = row
        self.col = col


class EmptySquareError(ChessError, ValueError):
    """A move was requested from a square with no piece on it."""


class IllegalMoveError(ChessError, ValueError):
    """The requested destination is not a legal move for the piece."""


class WrongTurnError(IllegalMoveError):
    """The moving piece does not belong to the side to move."""


class PieceNotOnBoardError(ChessError, LookupError):
    """The piece is not (or no longer) placed on the board."""
