"""Pieces and the generation of their legal moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from dames.move import Move
from dames.position import COLUMNS, ROWS, Position

if TYPE_CHECKING:
    from dames.board import Board

MAX_MOVES = 50

_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class PieceKind(Enum):
    NORMAL = "normal"
    KING = "king"
    EMPTY = "empty"


class Color(Enum):
    BLACK = "black"
    WHITE = "white"


def _inside(row: int, column: int) -> bool:
    return 0 <= row < ROWS and 0 <= column < COLUMNS


@dataclass
class Piece:
    """The content of a square, together with its last computed moves."""

    kind: PieceKind = PieceKind.EMPTY
    color: Color = Color.BLACK
    position: Position = field(default_factory=Position)
    valid_moves: list[Move] = field(default_factory=list, compare=False)

    @property
    def is_empty(self) -> bool:
        return self.kind is PieceKind.EMPTY

    def promote(self) -> None:
        """Turn this piece into a king."""
        self.kind = PieceKind.KING

    def update_valid_moves(self, board: Board, position: Position) -> None:
        """Recompute the moves this piece can make from ``position`` on ``board``."""
        moves: list[Move] = []
        start = Move((position,))
        if self.kind is PieceKind.NORMAL:
            self._simple_moves(board, position, moves)
            self._chain_captures(board, start, set(), moves)
        elif self.kind is PieceKind.KING:
            for distance in range(1, ROWS):
                for dr, dc in ((1, 1), (1, -1), (-1, 1), (-1, -1)):
                    self._king_slide(board, position, dr, dc, distance, moves)
            self._chain_captures(board, start, set(), moves)
        self.valid_moves = moves

    @staticmethod
    def _add(moves: list[Move], move: Move) -> None:
        if len(moves) < MAX_MOVES:
            moves.append(move)

    @staticmethod
    def _empty(board: Board, row: int, column: int) -> bool:
        return board.piece_at(row, column).is_empty

    def _simple_moves(self, board: Board, position: Position, moves: list[Move]) -> None:
        step = 1 if self.color is Color.BLACK else -1
        row = position.row + step
        for dc in (1, -1):
            column = position.column + dc
            if _inside(row, column) and self._empty(board, row, column):
                self._add(moves, Move((position, Position(row, column))))

    def _king_slide(
        self, board: Board, position: Position, dr: int, dc: int, distance: int, moves: list[Move]
    ) -> None:
        path = [
            Position(position.row + i * dr, position.column + i * dc)
            for i in range(1, distance + 1)
        ]
        target = path[-1]
        if not _inside(target.row, target.column):
            return
        if all(self._empty(board, p.row, p.column) for p in path):
            self._add(moves, Move((position, *path)))

    def _chain_captures(
        self, board: Board, move: Move, captured: set[Position], moves: list[Move]
    ) -> None:
        for dr, dc in _DIRECTIONS:
            self._try_capture(board, move, captured, dr, dc, moves)
        if len(move) > 1:
            self._add(moves, move)

    def _capturable(self, board: Board, row: int, column: int) -> bool:
        target = board.piece_at(row, column)
        return not target.is_empty and target.color is not self.color

    def _try_capture(
        self,
        board: Board,
        move: Move,
        captured: set[Position],
        dr: int,
        dc: int,
        moves: list[Move],
    ) -> None:
        here = move.destination
        row, column = here.row + dr, here.column + dc
        if self.kind is PieceKind.KING:
            while _inside(row, column) and self._empty(board, row, column):
                row += dr
                column += dc
        if not _inside(row, column) or not self._capturable(board, row, column):
            return
        land_row, land_column = row + dr, column + dc
        victim = Position(row, column)
        if (
            not _inside(land_row, land_column)
            or not self._empty(board, land_row, land_column)
            or victim in captured
        ):
            return
        extended = move.extend(victim, Position(land_row, land_column))
        captured.add(victim)
        self._chain_captures(board, extended, captured, moves)
        self._add(moves, extended)
        captured.discard(victim)