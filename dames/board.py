"""The draughts board and the rules for moving pieces on it."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from dames.move import Move
from dames.piece import Color, Piece, PieceKind
from dames.position import COLUMNS, ROWS, Position

_SYMBOLS = {
    "O": (PieceKind.NORMAL, Color.WHITE),
    "X": (PieceKind.NORMAL, Color.BLACK),
    "D": (PieceKind.KING, Color.WHITE),
    "R": (PieceKind.KING, Color.BLACK),
}
_CHARS = {value: key for key, value in _SYMBOLS.items()}


class Board:
    """An 8x8 grid of pieces."""

    def __init__(self) -> None:
        self._grid: list[list[Piece]] = [[Piece() for _ in range(COLUMNS)] for _ in range(ROWS)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build a board from 8 rows of 8 symbols (O, X, D, R; anything else is empty)."""
        rows = list(rows)
        if len(rows) != ROWS or any(len(r) != COLUMNS for r in rows):
            raise ValueError(f"a board needs {ROWS} rows of {COLUMNS} squares")
        board = cls()
        for i, line in enumerate(rows):
            for j, symbol in enumerate(line):
                kind, color = _SYMBOLS.get(symbol, (PieceKind.EMPTY, Color.BLACK))
                board._grid[i][j] = Piece(kind, color, Position(i, j))
        return board

    def piece_at(self, row: int, column: int) -> Piece:
        if not (0 <= row < ROWS and 0 <= column < COLUMNS):
            raise IndexError(f"square ({row}, {column}) is off the board")
        return self._grid[row][column]

    def _squares(self) -> Iterable[tuple[Position, Piece]]:
        for i, line in enumerate(self._grid):
            for j, piece in enumerate(line):
                yield Position(i, j), piece

    def update_valid_moves(self) -> None:
        """Recompute the stored moves of every square."""
        for position, piece in self._squares():
            piece.update_valid_moves(self, position)

    def possible_destinations(self, origin: Position) -> list[Position]:
        """Distinct final squares of the stored moves of the piece at ``origin``."""
        piece = self.piece_at(origin.row, origin.column)
        found: list[Position] = []
        for move in piece.valid_moves:
            if len(move) > 1 and move.destination not in found:
                found.append(move.destination)
        return found

    def _capture_available(self) -> bool:
        for position, piece in self._squares():
            if piece.is_empty:
                continue
            probe = copy.copy(piece)
            probe.update_valid_moves(self, position)
            if any(len(move) > 2 for move in probe.valid_moves):
                return True
        return False

    def move_piece(self, origin: Position, destination: Position) -> bool:
        """Move the piece at ``origin`` to ``destination`` if the rules allow it."""
        piece = self.piece_at(origin.row, origin.column)
        self._grid[origin.row][origin.column] = Piece()

        capture_possible = self._capture_available()

        piece.update_valid_moves(self, origin)
        moves = piece.valid_moves
        max_steps = max((len(m) for m in moves), default=0)
        chosen: Move | None = next(
            (m for m in moves if m.destination == destination and len(m) == max_steps),
            None,
        )

        if chosen is None or (capture_possible and max_steps == 2):
            self._grid[origin.row][origin.column] = piece
            return False

        for square in chosen.positions[1::2]:
            self._grid[square.row][square.column] = Piece()

        piece.position = destination
        if piece.kind is PieceKind.NORMAL and (
            (piece.color is Color.WHITE and destination.row == ROWS - 1)
            or (piece.color is Color.BLACK and destination.row == 0)
        ):
            piece.promote()

        self._grid[destination.row][destination.column] = piece
        return True

    def __str__(self) -> str:
        lines = []
        for i, line in enumerate(self._grid):
            cells = "".join(
                ("_" if p.is_empty else _CHARS[(p.kind, p.color)]) + " " for p in line
            )
            lines.append(f"{ROWS - i}: {cells}\n")
        lines.append("  a b c d e f g h\n")
        return "".join(lines)