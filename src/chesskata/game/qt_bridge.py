"""Qt bridge exposing a GameSession through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesskata.core.board import Board
from chesskata.core.enums import Player
from chesskata.core.move import MoveRecord
from chesskata.core.types import Square
from chesskata.game.session import GameSession


class SessionBridge(QObject):
    """Relays UI requests to a :class:`GameSession` and session events back.

    Holds no rule logic of its own; every decision is the session's.
    """

    move_committed = pyqtSignal(object)  # MoveRecord
    move_undone = pyqtSignal(object)  # MoveRecord
    move_rejected = pyqtSignal(object, object, str)  # from, to, reason
    turn_changed = pyqtSignal(object)  # Player

    def __init__(
        self,
        session: GameSession | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else GameSession()
        events = self._session.events
        events.on_move.append(self._on_move)
        events.on_undo.append(self._on_undo)
        events.on_rejected.append(self._on_rejected)
        events.on_turn_changed.append(self._on_turn_changed)

    @property
    def session(self) -> GameSession:
        return self._session

    @pyqtSlot(object, object)
    def request_move(self, from_obj: object, to_obj: object) -> None:
        """Submit a move; the outcome arrives as a signal."""
        if not isinstance(from_obj, Square) or not isinstance(to_obj, Square):
            self.move_rejected.emit(from_obj, to_obj, "Invalid squares")
            return
        self._session.submit_move(from_obj, to_obj)

    @pyqtSlot()
    def request_undo(self) -> None:
        self._session.undo_move()

    # -- Session callbacks --------------------------------------------------

    def _on_move(self, record: MoveRecord, _board: Board) -> None:
        self.move_committed.emit(record)

    def _on_undo(self, record: MoveRecord, _board: Board) -> None:
        self.move_undone.emit(record)

    def _on_rejected(self, from_sq: Square, to_sq: Square, reason: str) -> None:
        self.move_rejected.emit(from_sq, to_sq, reason)

    def _on_turn_changed(self, player: Player) -> None:
        self.turn_changed.emit(player)
