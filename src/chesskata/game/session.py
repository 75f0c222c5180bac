"""GameSession: the orchestration seam between the rules core and a UI.

Owns one :class:`Board`, enforces strict turn order, turns rule errors
into return values and emits events via simple callbacks so the UI / tests
can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chesskata.core.board import Board
from chesskata.core.enums import PieceKind, Player
from chesskata.core.errors import ChessError
from chesskata.core.move import MoveRecord
from chesskata.core.move_generator import MoveGenerator
from chesskata.core.settings import BoardSettings
from chesskata.core.types import Square

_LOGGER = logging.getLogger(__name__)

_STRICT = BoardSettings(strict_turn_order=True, validate_moves=True)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, Board], None]
RejectedCallback = Callable[[Square, Square, str], None]  # from, to, reason
TurnCallback = Callable[[Player], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """A single game progressing through strictly sequential calls.

    Turn order is always strict. Custom *settings* keep their other
    fields; a caller-supplied *board* is adopted and its settings are
    replaced by a copy with ``strict_turn_order=True``.

    Not thread-safe: one writer per session (e.g. the UI thread).
    """

    __slots__ = ("_board", "events")

    def __init__(
        self,
        settings: BoardSettings | None = None,
        starting_player: Player = Player.WHITE,
        board: Board | None = None,
    ) -> None:
        self.events = SessionEvents()
        self._board = self._make_board(settings, starting_player, board)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Player:
        return self._board.current_player

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return self._board.history

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(
        self,
        settings: BoardSettings | None = None,
        starting_player: Player = Player.WHITE,
        board: Board | None = None,
    ) -> None:
        """Reset to a fresh board (standard setup unless *board* is given)."""
        self._board = self._make_board(settings, starting_player, board)
        self._emit_turn_changed()

    def legal_moves(self, sq: Square) -> list[Square]:
        """Destinations for the piece on *sq* if its side is to move."""
        piece = self._board[sq]
        if piece is None or piece.player != self._board.current_player:
            return []
        return MoveGenerator(self._board).available_moves(sq)

    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> bool:
        """Submit a move. Returns True if legal and applied."""
        try:
            record = self._board.move_piece(from_sq, to_sq, promotion)
        except ChessError as exc:
            _LOGGER.warning("Rejected move %s -> %s: %s", from_sq, to_sq, exc)
            self._emit_rejected(from_sq, to_sq, str(exc))
            return False

        self._emit_move(record)
        self._emit_turn_changed()
        return True

    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
        try:
            record = self._board.undo_move()
        except ChessError as exc:
            _LOGGER.warning("Cannot undo: %s", exc)
            return False
        if record is None:
            return False
        for cb in self.events.on_undo:
            cb(record, self._board)
        self._emit_turn_changed()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    @staticmethod
    def _make_board(
        settings: BoardSettings | None,
        starting_player: Player,
        board: Board | None,
    ) -> Board:
        # Strict turn order is forced on, whatever the caller passed.
        if board is not None:
            board.settings = replace(board.settings, strict_turn_order=True)
            return board
        if settings is None:
            settings = _STRICT
        else:
            settings = replace(settings, strict_turn_order=True)
        return Board.initial(starting_player, settings)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._board)

    def _emit_rejected(self, from_sq: Square, to_sq: Square, reason: str) -> None:
        for cb in self.events.on_rejected:
            cb(from_sq, to_sq, reason)

    def _emit_turn_changed(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._board.current_player)
