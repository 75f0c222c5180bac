"""Board - piece placement, turn tracking and move execution on an 8x8 grid."""

from __future__ import annotations

import logging

from chesskata.core.enums import PROMOTION_KINDS, PieceKind, Player
from chesskata.core.errors import (
    EmptySquareError,
    IllegalMoveError,
    PieceNotOnBoardError,
    WrongTurnError,
)
from chesskata.core.move import LastMove, MoveRecord
from chesskata.core.move_generator import MoveGenerator
from chesskata.core.piece import Piece
from chesskata.core.settings import BoardSettings
from chesskata.core.types import BOARD_SIZE, Square, all_squares

_LOGGER = logging.getLogger(__name__)

_BACK_ROW: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable board: occupancy, side to move and last-move memory.

    Occupancy changes only through :meth:`move_piece`, :meth:`undo_move`
    or direct placement (:meth:`set_piece` / item assignment), which is
    meant for scenario setup and bypasses every rule.
    """

    __slots__ = ("_grid", "current_player", "last_move", "settings", "_history")

    def __init__(
        self,
        starting_player: Player = Player.WHITE,
        settings: BoardSettings | None = None,
    ) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.current_player = starting_player
        self.last_move: LastMove | None = None
        self.settings = settings if settings is not None else BoardSettings()
        self._history: list[MoveRecord] = []

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq.row][sq.col] = piece

    def get_piece(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        """Place *piece* on *sq* unconditionally (``None`` clears it)."""
        self._grid[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    # -- Query helpers ------------------------------------------------------

    def find_piece(self, piece: Piece) -> Square:
        """Square holding this exact piece instance."""
        for sq in all_squares():
            if self._grid[sq.row][sq.col] is piece:
                return sq
        raise PieceNotOnBoardError(
            f"{piece.player.name} {piece.kind.name} is not on the board"
        )

    def pieces(self, player: Player, kind: PieceKind | None = None) -> list[Square]:
        """Squares occupied by *player*'s pieces, optionally of one *kind*."""
        squares: list[Square] = []
        for sq in all_squares():
            piece = self._grid[sq.row][sq.col]
            if piece is None or piece.player != player:
                continue
            if kind is None or piece.kind == kind:
                squares.append(sq)
        return squares

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        """Committed moves, oldest first."""
        return tuple(self._history)

    # -- Move execution -----------------------------------------------------

    def move_piece(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> MoveRecord:
        """Move the piece on *from_sq* to *to_sq* and pass the turn.

        Every check runs before the board is touched, so a rejected move
        leaves it unchanged. En passant removes the bypassed pawn; a pawn
        reaching its last row is promoted in place.

        Raises:
            EmptySquareError: *from_sq* holds no piece.
            WrongTurnError: strict turn order is on and the mover is not
                the side to move.
            IllegalMoveError: *to_sq* is not an available move (when
                validation is on) or *promotion* is invalid.
        """
        piece = self[from_sq]
        if piece is None:
            raise EmptySquareError(f"No piece on {from_sq}")

        if self.settings.strict_turn_order and piece.player != self.current_player:
            raise WrongTurnError(
                f"It is {self.current_player.name.lower()}'s turn, "
                f"cannot move {piece.player.name.lower()} piece"
            )

        gen = MoveGenerator(self)
        if self.settings.validate_moves and to_sq not in gen.available_moves(from_sq):
            raise IllegalMoveError(
                f"{piece.player.name.lower()} {piece.kind.name.lower()} cannot move "
                f"from {from_sq} to {to_sq}"
            )

        promotion = self._resolve_promotion(piece, to_sq, promotion)

        is_en_passant = to_sq == gen.en_passant_target(from_sq, piece)
        capture_sq = Square(from_sq.row, to_sq.col) if is_en_passant else to_sq
        captured = self[capture_sq]

        record = MoveRecord(
            piece=piece,
            from_sq=from_sq,
            to_sq=to_sq,
            captured=captured,
            capture_sq=capture_sq if captured is not None else None,
            previous_last_move=self.last_move,
            previous_player=self.current_player,
            is_en_passant=is_en_passant,
            promotion=promotion,
        )

        self[capture_sq] = None
        self[from_sq] = None
        self[to_sq] = piece
        piece.move_count += 1
        if promotion is not None:
            piece.kind = promotion

        self.last_move = LastMove(piece, from_sq, to_sq)
        self.current_player = self.current_player.opposite
        self._history.append(record)

        _LOGGER.debug(
            "%s %s %s -> %s%s",
            record.previous_player,
            piece.kind.name.lower(),
            from_sq,
            to_sq,
            " (en passant)" if is_en_passant else "",
        )
        return record

    def undo_move(self) -> MoveRecord | None:
        """Revert the most recent move. Returns its record, or ``None``.

        Raises:
            IllegalMoveError: the moved piece no longer stands on its
                destination (the board was edited since); history is kept.
        """
        if not self._history:
            return None

        record = self._history[-1]
        piece = record.piece
        if self[record.to_sq] is not piece:
            raise IllegalMoveError(
                f"Board changed on {record.to_sq} since the last move, cannot undo"
            )
        self._history.pop()

        self[record.to_sq] = None
        self[record.from_sq] = piece
        if record.captured is not None and record.capture_sq is not None:
            self[record.capture_sq] = record.captured
        piece.move_count -= 1
        if record.promotion is not None:
            piece.kind = PieceKind.PAWN

        self.last_move = record.previous_last_move
        self.current_player = record.previous_player

        _LOGGER.debug("undo %s -> %s", record.from_sq, record.to_sq)
        return record

    def _resolve_promotion(
        self,
        piece: Piece,
        to_sq: Square,
        promotion: PieceKind | None,
    ) -> PieceKind | None:
        promotes = piece.kind == PieceKind.PAWN and to_sq.row == piece.player.last_row
        if not promotes:
            if promotion is not None:
                raise IllegalMoveError(f"Move to {to_sq} is not a promotion")
            return None
        if promotion is None:
            return self.settings.promotion_kind
        if promotion not in PROMOTION_KINDS:
            raise IllegalMoveError(f"Cannot promote to {promotion.name}")
        return promotion

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Independent copy with cloned pieces, without move history."""
        b = Board(self.current_player, self.settings)
        clones: dict[int, Piece] = {}
        for sq in all_squares():
            piece = self[sq]
            if piece is not None:
                clone = piece.copy()
                clones[id(piece)] = clone
                b[sq] = clone
        if self.last_move is not None:
            last = self.last_move
            moved = clones.get(id(last.piece))
            if moved is not None:
                b.last_move = LastMove(moved, last.from_sq, last.to_sq)
        return b

    def clear(self) -> None:
        """Empty the grid and drop last move and history.

        ``current_player`` and ``settings`` are kept.
        """
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.last_move = None
        self._history.clear()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(
        cls,
        starting_player: Player = Player.WHITE,
        settings: BoardSettings | None = None,
    ) -> Board:
        """Standard starting position, white on rows 0-1."""
        b = cls(starting_player, settings)
        for col in range(BOARD_SIZE):
            b[Square(1, col)] = Piece.pawn(Player.WHITE)
            b[Square(6, col)] = Piece.pawn(Player.BLACK)

        for col, kind in enumerate(_BACK_ROW):
            b[Square(0, col)] = Piece(kind, Player.WHITE)
            b[Square(7, col)] = Piece(kind, Player.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._grid[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
