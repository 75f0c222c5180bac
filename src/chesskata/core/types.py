"""Square value type and coordinate helpers.

Board layout: ``row`` 0 is white's back rank, ``row`` 7 is black's.
``col`` 0 is the a-file.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesskata.core.errors import OutOfBoundsError

BOARD_SIZE = 8


def is_on_board(row: int, col: int) -> bool:
    """Check whether (row, col) lies inside the grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable, validated board coordinate."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.col):
            raise OutOfBoundsError(self.row, self.col)

    @classmethod
    def at(cls, row: int, col: int) -> Square:
        return cls(row, col)

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Square shifted by the given deltas, or ``None`` off the board."""
        row = self.row + d_row
        col = self.col + d_col
        if not is_on_board(row, col):
            return None
        return Square(row, col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def all_squares() -> Iterator[Square]:
    """Every square, row by row from row 0."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Square(row, col)
