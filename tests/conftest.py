import pytest

from tetris_board import Cell, EMPTY, create_empty
from tetris_config import CONFIG
from tetris_game import Game
from tetris_rng import SequenceRandom


@pytest.fixture
def grid():
    return create_empty()


@pytest.fixture
def walls():
    """Build a 20x10 grid filled from `top` down everywhere except `open_cols`."""
    def build(top, open_cols, height=20, width=10, kind="Z"):
        return tuple(
            tuple(Cell(True, kind) if r >= top and c not in open_cols else EMPTY
                  for c in range(width))
            for r in range(height)
        )
    return build


@pytest.fixture
def filled_rows():
    """Copy a grid with whole rows filled, optionally leaving column `gap` open."""
    def build(grid, rows, kind="O", gap=None):
        out = list(grid)
        for r in rows:
            out[r] = tuple(EMPTY if c == gap else Cell(True, kind) for c in range(len(grid[r])))
        return tuple(out)
    return build


@pytest.fixture
def make_game():
    def build(kinds, **kw):
        return Game(rng=SequenceRandom(kinds), **kw)
    return build


@pytest.fixture
def restore_config():
    saved = dict(CONFIG)
    yield CONFIG
    CONFIG.clear()
    CONFIG.update(saved)
