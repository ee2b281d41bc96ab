# dames

A small library that models an 8×8 checkers (draughts) board. It finds the
moves of every piece, including chained captures and the long moves of a
king. It applies a move only when the capture rules allow it, and it promotes
men that end on their promotion row.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dames.position`: `Position`, a frozen `(row, column)` pair with
  `Position.from_string` and `to_string` for algebraic names. It also has
  `read_piece` and `write_piece`.
- `dames.move`: `Move`, a frozen tuple of the squares a move visits. In a
  capture, the odd entries are the captured pieces and the even entries are
  the landing squares. `origin`, `destination`, `extend` and `len()` are
  available.
- `dames.piece`: the enums `PieceKind` (`NORMAL`, `KING`, `EMPTY`) and `Color`
  (`BLACK`, `WHITE`). It also has `Piece`, which keeps its last computed moves
  in `valid_moves`; `update_valid_moves(board, position)` fills them in.
- `dames.board`: `Board`, the grid of pieces.

## Board notation

`Board.from_rows` takes exactly eight strings of eight characters each. Any
other size raises `ValueError`.

| Character     | Piece        |
|---------------|--------------|
| `O`           | white man    |
| `X`           | black man    |
| `D`           | white king   |
| `R`           | black king   |
| anything else | empty square |

Row 0 is the top row, which is rank 8. `a8` is row 0, column 0, and `h1` is
row 7, column 7. `Board.piece_at(row, column)` raises `IndexError` for a
square off the board.

## Rules as implemented

- A black man steps diagonally to higher rows. A white man steps to lower
  rows.
- Men and kings capture in all four diagonal directions. A capture may
  chain, and a captured piece cannot be taken twice in one move.
- A king slides any distance along a free diagonal. When it captures, it may
  start from a distance and lands on the square just past the captured piece.
- A piece keeps at most 50 stored moves.
- `Board.move_piece(origin, destination)` picks a move of the piece at
  `origin` that ends on `destination` and is as long as that piece's longest
  move. If it finds none, the move is refused. The move is also refused when
  another piece on the board has a capture available and the moving piece
  has no capture. A refused move returns `False` and leaves the board as it
  was. A move that is made returns `True` and removes the captured pieces.
- A white man that ends on row 7 (rank 1) becomes a king. A black man that
  ends on row 0 (rank 8) becomes a king.

## Usage

```python
from dames.board import Board
from dames.position import Position

board = Board.from_rows([
    "________",
    "________",
    "________",
    "________",
    "________",
    "__X_____",
    "_O______",
    "________",
])

board.update_valid_moves()
print(board.possible_destinations(Position.from_string("b2")))

if board.move_piece(Position.from_string("b2"), Position.from_string("d4")):
    print(board)
```

`possible_destinations` reads the moves stored by the last
`update_valid_moves` call, so call that method first. `str(board)` draws the
board with rank numbers down the left side and file letters along the
bottom.

### Saving a single piece

`write_piece` writes a piece symbol and its square to a text file.
`read_piece` reads them back:

```python
from dames.position import Position, read_piece, write_piece

write_piece("piece.txt", "O", Position.from_string("c3"))
kind, position = read_piece("piece.txt")
```

## What it does not do

This is a board model only. It has no command-line program and no game loop.
It does not track whose turn it is and does not detect the end of a game. It
cannot load or save a whole board from a file. To build a board, pass rows to
`Board.from_rows`.