"""Board coordinates and their algebraic notation."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

ROWS = 8
COLUMNS = 8


@dataclass(frozen=True)
class Position:
    """A square on the board; row 0 is rank 8 and column 0 is file a."""

    row: int = -1
    column: int = -1

    @classmethod
    def from_string(cls, text: str) -> Position:
        """Parse algebraic notation such as ``"c3"``."""
        if len(text) < 2:
            raise ValueError(f"not a board position: {text!r}")
        row = (ROWS - 1) - (ord(text[1]) - ord("1"))
        column = ord(text[0]) - ord("a")
        return cls(row, column)

    def to_string(self) -> str:
        """Return the position in algebraic notation."""
        file_char = chr(ord("a") + self.column)
        rank_char = chr(ord("1") + (ROWS - 1) - self.row)
        return file_char + rank_char

    def __str__(self) -> str:
        return self.to_string()


def read_piece(path: str | PathLike) -> tuple[str, Position]:
    """Read a piece symbol followed by its position from a file."""
    content = Path(path).read_text().lstrip()
    if not content:
        raise ValueError(f"no piece in {path}")
    kind = content[0]
    tokens = content[1:].split()
    if not tokens:
        raise ValueError(f"no position in {path}")
    return kind, Position.from_string(tokens[0])


def write_piece(path: str | PathLike, kind: str, position: Position) -> None:
    """Write a piece symbol and its position to a file."""
    Path(path).write_text(f"{kind} {position}")