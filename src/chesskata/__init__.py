"""chesskata: chess rules engine: pieces, move generation and board state."""

__version__ = "0.1.0"
