"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side identity. WHITE moves first and advances toward higher rows."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def direction(self) -> int:
        """Row delta of a forward step: +1 for white, -1 for black."""
        return 1 if self == Player.WHITE else -1

    @property
    def last_row(self) -> int:
        """Row on which this side's pawns promote."""
        return 7 if self == Player.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece variants ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_KINDS: frozenset[PieceKind] = frozenset(
    {PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.ROOK, PieceKind.QUEEN}
)
