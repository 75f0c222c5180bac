"""Board configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chesskata.core.enums import PROMOTION_KINDS, PieceKind


@dataclass(frozen=True, slots=True)
class BoardSettings:
    """Rule-enforcement switches for :class:`~chesskata.core.board.Board`."""

    # Reject moves by the side that is not to move.
    strict_turn_order: bool = False
    # Re-check the destination against the piece's available moves.
    validate_moves: bool = True
    # Kind a pawn becomes on its last row when none is requested.
    promotion_kind: PieceKind = PieceKind.QUEEN

    def __post_init__(self) -> None:
        if self.promotion_kind not in PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {self.promotion_kind.name}")
