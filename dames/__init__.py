"""Checkers board model: positions, moves, pieces with move generation, and the board."""

__version__ = "0.1.0"
__all__ = ["board", "move", "piece", "position"]