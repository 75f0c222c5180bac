"""Game layer: session orchestration and the Qt signal bridge.

Quick start::

    from chesskata.core import Square
    from chesskata.game import GameSession

    session = GameSession()
    session.events.on_move.append(lambda record, board: print(record.to_sq))
    session.submit_move(Square.at(1, 4), Square.at(3, 4))

``SessionBridge`` lives in :mod:`chesskata.game.qt_bridge` and is imported
from there so the session stays usable without a Qt runtime.
"""

from chesskata.game.session import GameSession, SessionEvents

__all__ = [
    "GameSession",
    "SessionEvents",
]
