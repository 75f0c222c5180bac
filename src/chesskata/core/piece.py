"""Piece: a tagged variant carrying owner and move counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesskata.core.enums import PieceKind, Player
from chesskata.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesskata.core.board import Board
    from chesskata.core.move import MoveRecord
    from chesskata.core.types import Square

_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

_UNICODE: dict[tuple[Player, PieceKind], str] = {
    (Player.WHITE, PieceKind.PAWN): "♙",
    (Player.WHITE, PieceKind.KNIGHT): "♘",
    (Player.WHITE, PieceKind.BISHOP): "♗",
    (Player.WHITE, PieceKind.ROOK): "♖",
    (Player.WHITE, PieceKind.QUEEN): "♕",
    (Player.WHITE, PieceKind.KING): "♔",
    (Player.BLACK, PieceKind.PAWN): "♟",
    (Player.BLACK, PieceKind.KNIGHT): "♞",
    (Player.BLACK, PieceKind.BISHOP): "♝",
    (Player.BLACK, PieceKind.ROOK): "♜",
    (Player.BLACK, PieceKind.QUEEN): "♛",
    (Player.BLACK, PieceKind.KING): "♚",
}


@dataclass(eq=False, slots=True)
class Piece:
    """A piece on (or off) a board.

    Pieces compare by identity: moving relocates the same instance, and
    promotion changes ``kind`` in place. Pieces never reference the board;
    board-aware methods take it as an argument.
    """

    kind: PieceKind
    player: Player
    move_count: int = 0

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def pawn(cls, player: Player) -> Piece:
        return cls(PieceKind.PAWN, player)

    @classmethod
    def knight(cls, player: Player) -> Piece:
        return cls(PieceKind.KNIGHT, player)

    @classmethod
    def bishop(cls, player: Player) -> Piece:
        return cls(PieceKind.BISHOP, player)

    @classmethod
    def rook(cls, player: Player) -> Piece:
        return cls(PieceKind.ROOK, player)

    @classmethod
    def queen(cls, player: Player) -> Piece:
        return cls(PieceKind.QUEEN, player)

    @classmethod
    def king(cls, player: Player) -> Piece:
        return cls(PieceKind.KING, player)

    # ── Board interaction ────────────────────────────────────────────────

    def available_moves(self, board: Board) -> list[Square]:
        """Destinations this piece may move to on *board*.

        Check is not considered; the opposing king is never a target.
        """
        return MoveGenerator(board).available_moves(board.find_piece(self))

    def move_to(self, board: Board, destination: Square) -> MoveRecord:
        """Move this piece from wherever it stands on *board*."""
        return board.move_piece(board.find_piece(self), destination)

    def copy(self) -> Piece:
        return Piece(self.kind, self.player, self.move_count)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN-style letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.kind]
        return letter if self.player == Player.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.player, self.kind)]
