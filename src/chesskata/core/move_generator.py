"""Per-piece move generation: ray casting, jumps, pawn rules, en passant."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesskata.core.enums import PieceKind, Player
from chesskata.core.errors import EmptySquareError
from chesskata.core.types import Square, all_squares

if TYPE_CHECKING:
    from collections.abc import Callable

    from chesskata.core.board import Board
    from chesskata.core.piece import Piece

    _Generator = Callable[[MoveGenerator, Square, Piece], list[Square]]


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# (row delta, col delta)
LATERAL_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ALL_DIRS: tuple[tuple[int, int], ...] = LATERAL_DIRS + DIAGONAL_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in all_squares():
        moves: list[Square] = []
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if to_sq is not None:
                moves.append(to_sq)
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in all_squares():
        square_rays: list[tuple[Square, ...]] = []
        for d_row, d_col in directions:
            ray: list[Square] = []
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(d_row, d_col)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_LATERAL_RAYS = _build_rays(LATERAL_DIRS)
_DIAGONAL_RAYS = _build_rays(DIAGONAL_DIRS)
_ALL_RAYS = _build_rays(ALL_DIRS)


class MoveGenerator:
    """Computes destination squares for pieces on a :class:`Board`.

    Generation is read-only: it consults occupancy, the board's last-move
    memory and each piece's move counter, and never mutates anything.
    Check is not modelled; the opposing king is simply never a target.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def available_moves(self, sq: Square) -> list[Square]:
        """Destinations for the piece standing on *sq*."""
        piece = self._board[sq]
        if piece is None:
            raise EmptySquareError(f"No piece on {sq}")
        return self._GENERATORS[piece.kind](self, sq, piece)

    def moves_for(self, player: Player) -> dict[Square, list[Square]]:
        """Origin → destinations for every piece of *player* that can move."""
        result: dict[Square, list[Square]] = {}
        for sq in self._board.pieces(player):
            moves = self.available_moves(sq)
            if moves:
                result[sq] = moves
        return result

    def lateral_moves(self, sq: Square, player: Player) -> list[Square]:
        """Rook-style rays from *sq* for a piece of *player*."""
        return self._cast_rays(_LATERAL_RAYS[sq], player)

    def diagonal_moves(self, sq: Square, player: Player) -> list[Square]:
        """Bishop-style rays from *sq* for a piece of *player*."""
        return self._cast_rays(_DIAGONAL_RAYS[sq], player)

    def en_passant_target(self, sq: Square, pawn: Piece) -> Square | None:
        """Landing square of an en passant capture by *pawn* on *sq*, if any.

        Only the immediately preceding move can open the window: an opposing
        pawn that just advanced two rows and now stands beside *pawn*.
        """
        last = self._board.last_move
        if last is None or pawn.kind != PieceKind.PAWN:
            return None
        moved = last.piece
        if moved.kind != PieceKind.PAWN or moved.player == pawn.player:
            return None
        if last.row_distance != 2:
            return None
        if last.to_sq.row != sq.row or abs(last.to_sq.col - sq.col) != 1:
            return None
        if self._board[last.to_sq] is not moved:
            return None
        target = sq.offset(pawn.player.direction, last.to_sq.col - sq.col)
        if target is None or not self._board.is_empty(target):
            return None
        return target

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, pawn: Piece) -> list[Square]:
        board = self._board
        direction = pawn.player.direction
        moves: list[Square] = []

        one_step = sq.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if pawn.move_count == 0:
                two_step = sq.offset(2 * direction, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(direction, d_col)
            if cap_sq is not None and self._is_capturable(cap_sq, pawn.player):
                moves.append(cap_sq)

        ep_sq = self.en_passant_target(sq, pawn)
        if ep_sq is not None:
            moves.append(ep_sq)
        return moves

    def _gen_knight(self, sq: Square, piece: Piece) -> list[Square]:
        player = piece.player
        return [
            to_sq for to_sq in _KNIGHT_TARGETS[sq] if self._can_land(to_sq, player)
        ]

    def _gen_bishop(self, sq: Square, piece: Piece) -> list[Square]:
        return self.diagonal_moves(sq, piece.player)

    def _gen_rook(self, sq: Square, piece: Piece) -> list[Square]:
        return self.lateral_moves(sq, piece.player)

    def _gen_queen(self, sq: Square, piece: Piece) -> list[Square]:
        return self._cast_rays(_ALL_RAYS[sq], piece.player)

    def _gen_king(self, sq: Square, piece: Piece) -> list[Square]:
        player = piece.player
        return [
            to_sq for to_sq in _KING_TARGETS[sq] if self._can_land(to_sq, player)
        ]

    _GENERATORS: dict[PieceKind, _Generator] = {
        PieceKind.PAWN: _gen_pawn,
        PieceKind.KNIGHT: _gen_knight,
        PieceKind.BISHOP: _gen_bishop,
        PieceKind.ROOK: _gen_rook,
        PieceKind.QUEEN: _gen_queen,
        PieceKind.KING: _gen_king,
    }

    # -- Helpers ------------------------------------------------------------

    def _cast_rays(
        self,
        rays: tuple[tuple[Square, ...], ...],
        player: Player,
    ) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.player != player and target.kind != PieceKind.KING:
                    moves.append(to_sq)
                break
        return moves

    def _is_capturable(self, sq: Square, player: Player) -> bool:
        target = self._board[sq]
        return (
            target is not None
            and target.player != player
            and target.kind != PieceKind.KING
        )

    def _can_land(self, sq: Square, player: Player) -> bool:
        return self._board.is_empty(sq) or self._is_capturable(sq, player)
