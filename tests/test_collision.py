from falling_block_rl.game import GameGrid, Piece, TetrominoType, drop_distance, is_valid_move, rotate

from helpers import grid_with

W, H = 10, 20


def test_piece_inside_empty_board_is_valid():
    grid = GameGrid.empty(W, H)
    for kind in TetrominoType:
        piece = Piece.from_kind(kind)
        for x in range(W - piece.width + 1):
            for y in range(H - piece.height + 1):
                assert is_valid_move(grid, piece.moved(x, y))


def test_walls_and_floor_reject():
    grid = GameGrid.empty(W, H)
    o = Piece.from_kind(TetrominoType.O, 0, 0)
    assert not is_valid_move(grid, o, -1, 0)
    assert not is_valid_move(grid, o.moved(W - 2, 0), 1, 0)
    assert not is_valid_move(grid, o.moved(0, H - 2), 0, 1)
    assert is_valid_move(grid, o.moved(W - 2, H - 2))


def test_cells_above_top_are_allowed():
    grid = GameGrid.empty(W, H)
    vertical_i = Piece.from_kind(TetrominoType.I).rotated()
    assert is_valid_move(grid, vertical_i, 0, -3)
    assert is_valid_move(grid, vertical_i.moved(0, -10))


def test_cells_above_top_still_respect_walls():
    grid = GameGrid.empty(W, H)
    o = Piece.from_kind(TetrominoType.O, 0, -5)
    assert not is_valid_move(grid, o, -1, 0)
    assert not is_valid_move(grid, o.moved(W - 1, 0))


def test_overlap_with_filled_cell():
    grid = grid_with(cells=[(5, 10)])
    o = Piece.from_kind(TetrominoType.O, 4, 8)
    assert is_valid_move(grid, o)
    assert not is_valid_move(grid, o, 0, 1)
    assert not is_valid_move(grid, o, 0, 2)
    assert is_valid_move(grid, o, -2, 2)


def test_shape_override():
    grid = GameGrid.empty(W, H)
    flat_i = Piece.from_kind(TetrominoType.I, 3, H - 1)
    assert is_valid_move(grid, flat_i)
    assert not is_valid_move(grid, flat_i, 0, 0, rotate(flat_i.shape))


def test_drop_distance():
    grid = GameGrid.empty(W, H)
    o = Piece.from_kind(TetrominoType.O, 4, 0)
    assert drop_distance(grid, o) == H - 2
    assert drop_distance(grid_with(cells=[(4, 10)]), o) == 8
    assert drop_distance(grid, o.moved(0, H - 2)) == 0
