"""A move as the sequence of squares it visits."""

from __future__ import annotations

from dataclasses import dataclass

from dames.position import Position


@dataclass(frozen=True)
class Move:
    """Squares visited by a move; in captures, odd entries are captured pieces."""

    positions: tuple[Position, ...] = ()

    @property
    def origin(self) -> Position:
        return self.positions[0]

    @property
    def destination(self) -> Position:
        return self.positions[-1]

    def extend(self, captured: Position, landing: Position) -> Move:
        """Return a new move that also captures ``captured`` and lands on ``landing``."""
        return Move(self.positions + (captured, landing))

    def __len__(self) -> int:
        return len(self.positions)