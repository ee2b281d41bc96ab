from dames.board import Board
from dames.piece import MAX_MOVES, Color, Piece, PieceKind
from dames.position import Position


def _board(squares):
    rows = [["_"] * 8 for _ in range(8)]
    for (row, column), symbol in squares.items():
        rows[row][column] = symbol
    return Board.from_rows(["".join(r) for r in rows])


def _destinations(piece):
    return [m.destination for m in piece.valid_moves]


def test_white_moves_up_right_then_left():
    board = _board({(5, 2): "O"})
    piece = board.piece_at(5, 2)
    piece.update_valid_moves(board, Position(5, 2))
    assert _destinations(piece) == [Position(4, 3), Position(4, 1)]


def test_black_moves_down():
    board = _board({(2, 2): "X"})
    piece = board.piece_at(2, 2)
    piece.update_valid_moves(board, Position(2, 2))
    assert _destinations(piece) == [Position(3, 3), Position(3, 1)]


def test_edge_piece_has_single_move():
    board = _board({(5, 0): "O"})
    piece = board.piece_at(5, 0)
    piece.update_valid_moves(board, Position(5, 0))
    assert _destinations(piece) == [Position(4, 1)]


def test_capture_is_generated():
    board = _board({(5, 2): "O", (4, 3): "X"})
    piece = board.piece_at(5, 2)
    piece.update_valid_moves(board, Position(5, 2))
    captures = [m for m in piece.valid_moves if len(m) == 3]
    assert captures
    assert all(
        m.positions == (Position(5, 2), Position(4, 3), Position(3, 4)) for m in captures
    )
    assert Position(4, 1) in _destinations(piece)
    assert Position(4, 3) not in _destinations(piece)


def test_normal_piece_captures_backwards():
    board = _board({(3, 2): "O", (4, 3): "X"})
    piece = board.piece_at(3, 2)
    piece.update_valid_moves(board, Position(3, 2))
    assert Position(5, 4) in _destinations(piece)


def test_own_colour_is_not_captured():
    board = _board({(5, 2): "O", (4, 3): "O"})
    piece = board.piece_at(5, 2)
    piece.update_valid_moves(board, Position(5, 2))
    assert all(len(m) == 2 for m in piece.valid_moves)


def test_chained_capture():
    board = _board({(5, 0): "O", (4, 1): "X", (2, 3): "X"})
    piece = board.piece_at(5, 0)
    piece.update_valid_moves(board, Position(5, 0))
    longest = max(piece.valid_moves, key=len)
    assert longest.positions == (
        Position(5, 0),
        Position(4, 1),
        Position(3, 2),
        Position(2, 3),
        Position(1, 4),
    )


def test_king_slides_along_diagonal():
    board = _board({(7, 0): "D"})
    piece = board.piece_at(7, 0)
    piece.update_valid_moves(board, Position(7, 0))
    expected = {Position(7 - i, i) for i in range(1, 8)}
    assert set(_destinations(piece)) == expected
    for move in piece.valid_moves:
        assert move.origin == Position(7, 0)
        steps = len(move) - 1
        assert move.positions[1:] == tuple(Position(7 - i, i) for i in range(1, steps + 1))


def test_king_stops_before_blocker():
    board = _board({(7, 0): "D", (4, 3): "O"})
    piece = board.piece_at(7, 0)
    piece.update_valid_moves(board, Position(7, 0))
    assert set(_destinations(piece)) == {Position(6, 1), Position(5, 2)}


def test_king_captures_from_distance():
    board = _board({(7, 0): "D", (4, 3): "X"})
    piece = board.piece_at(7, 0)
    piece.update_valid_moves(board, Position(7, 0))
    captures = [m for m in piece.valid_moves if Position(4, 3) in m.positions]
    assert captures
    assert captures[0].positions == (Position(7, 0), Position(4, 3), Position(3, 4))


def test_move_count_never_exceeds_limit():
    board = _board({(3, 3): "R"})
    piece = board.piece_at(3, 3)
    piece.update_valid_moves(board, Position(3, 3))
    assert 0 < len(piece.valid_moves) <= MAX_MOVES


def test_empty_square_has_no_moves():
    board = _board({})
    piece = board.piece_at(0, 0)
    piece.update_valid_moves(board, Position(0, 0))
    assert piece.valid_moves == []


def test_promote():
    piece = Piece(PieceKind.NORMAL, Color.WHITE, Position(0, 1))
    piece.promote()
    assert piece.kind is PieceKind.KING
    assert piece.color is Color.WHITE