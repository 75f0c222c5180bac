"""Move value objects: last-move memory and committed-move records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesskata.core.enums import PieceKind, Player
    from chesskata.core.piece import Piece
    from chesskata.core.types import Square


@dataclass(frozen=True, slots=True)
class LastMove:
    """The most recent relocation, consulted for en passant."""

    piece: Piece
    from_sq: Square
    to_sq: Square

    @property
    def row_distance(self) -> int:
        return abs(self.to_sq.row - self.from_sq.row)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Everything needed to describe and revert one committed move."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: Piece | None
    capture_sq: Square | None
    previous_last_move: LastMove | None
    previous_player: Player
    is_en_passant: bool = False
    promotion: PieceKind | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
