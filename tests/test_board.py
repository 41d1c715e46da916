import pytest

from tetris_board import (Cell, EMPTY, cell_at, clear_lines, collides, create_empty,
                          ghost_offset, grid_size, lock)
from tetris_piece import KINDS, SHAPES, Piece, rotate, spawn


def test_create_empty():
    g = create_empty()
    assert grid_size(g) == (20, 10)
    assert all(cell == EMPTY and not cell.filled and cell.kind is None for row in g for cell in row)


def test_create_empty_rejects_bad_size():
    with pytest.raises(ValueError):
        create_empty(0, 10)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (20, 0), (0, 10)])
def test_cell_at_fails_fast_out_of_range(grid, row, col):
    with pytest.raises(IndexError):
        cell_at(grid, row, col)


def test_cell_at_reads(grid, filled_rows):
    g = filled_rows(grid, [19], kind="T")
    assert cell_at(g, 19, 9) == Cell(True, "T")
    assert cell_at(g, 18, 9) == EMPTY


@pytest.mark.parametrize("x,y", [(-1, 5), (9, 5), (4, 19), (-3, 0), (12, 2)])
def test_collides_outside_walls_and_floor(grid, x, y):
    assert collides(grid, Piece("O", SHAPES["O"], x, y))


def test_rows_above_the_top_do_not_collide(grid):
    p = Piece("O", SHAPES["O"], 4, -1)
    assert not collides(grid, p)
    assert not collides(grid, p, 0, -5)


@pytest.mark.parametrize("kind", KINDS)
def test_every_piece_collides_past_the_edges(grid, kind):
    p = spawn(kind)
    assert not collides(grid, p)
    assert collides(grid, p, -p.x - p.size, 0)
    assert collides(grid, p, 10, 0)
    assert collides(grid, p, 0, 20)


def test_collides_with_filled_cells(grid):
    g = lock(grid, Piece("O", SHAPES["O"], 0, 18))
    p = Piece("O", SHAPES["O"], 0, 16)
    assert not collides(g, p)
    assert collides(g, p, 0, 1)
    assert not collides(g, p, 2, 1)


def test_lock_writes_kind_and_keeps_input(grid):
    p = Piece("T", SHAPES["T"], 3, 18)
    g = lock(grid, p)
    assert grid == create_empty()
    assert cell_at(g, 18, 4) == Cell(True, "T")
    assert [cell_at(g, 19, c).filled for c in (2, 3, 4, 5, 6)] == [False, True, True, True, False]


def test_lock_skips_cells_above_the_board(grid):
    g = lock(grid, Piece("O", SHAPES["O"], 4, -1))
    filled = [(r, c) for r, row in enumerate(g) for c, cell in enumerate(row) if cell.filled]
    assert filled == [(0, 4), (0, 5)]


def test_clear_single_line(grid, filled_rows):
    g = filled_rows(grid, [19])
    g = lock(g, Piece("O", SHAPES["O"], 0, 17))  # rows 17-18 in cols 0-1
    out, n = clear_lines(g)
    assert n == 1
    assert grid_size(out) == (20, 10)
    assert out[0] == (EMPTY,) * 10
    assert [c.filled for c in out[19]] == [True, True] + [False] * 8
    assert [c.filled for c in out[18]] == [True, True] + [False] * 8
    assert not any(c.filled for c in out[17])


def test_clear_four_lines_then_nothing(grid, filled_rows):
    g = filled_rows(grid, [16, 17, 18, 19], kind="I")
    g = filled_rows(g, [15], kind="S", gap=3)
    out, n = clear_lines(g)
    assert n == 4
    assert [c.kind for c in out[19]] == ["S"] * 3 + [None] + ["S"] * 6
    assert not any(c.filled for row in out[:19] for c in row)
    again, n2 = clear_lines(out)
    assert n2 == 0
    assert again == out


def test_clear_non_adjacent_rows(grid, filled_rows):
    g = filled_rows(grid, [17, 19])
    g = filled_rows(g, [18], kind="J", gap=0)
    out, n = clear_lines(g)
    assert n == 2
    assert [c.kind for c in out[19]] == [None] + ["J"] * 9
    assert not any(c.filled for row in out[:19] for c in row)


def test_clear_lines_without_full_rows(grid, filled_rows):
    g = filled_rows(grid, [19], gap=5)
    out, n = clear_lines(g)
    assert n == 0
    assert out == g


@pytest.mark.parametrize("kind", ["O", "T", "S", "I"])
def test_ghost_on_empty_grid(grid, kind):
    p = spawn(kind)
    assert ghost_offset(grid, p) == 20 - p.height - p.y - next(r for r, row in enumerate(p.shape) if any(row))


def test_ghost_o_lands_on_the_floor(grid):
    assert ghost_offset(grid, Piece("O", SHAPES["O"], 0, 0)) == 18


def test_ghost_is_the_last_free_offset(grid, filled_rows):
    g = filled_rows(grid, [10], gap=9)
    p = spawn("T")
    d = ghost_offset(g, p)
    assert d == 8
    assert not collides(g, p, 0, d)
    assert collides(g, p, 0, d + 1)


def test_ghost_finds_gaps_below_overhangs(grid, filled_rows):
    g = filled_rows(grid, [12], gap=4)
    p = rotate(spawn("I"))  # vertical in column 4
    assert ghost_offset(g, p) == 16
