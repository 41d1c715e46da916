
"""Board model and helpers: collides, lock, clear_lines, ghost_offset"""
import logging
from typing import NamedTuple, Optional, Tuple
from tetris_piece import Piece, COLS, ROWS

log = logging.getLogger(__name__)


class Cell(NamedTuple):
    filled: bool = False
    kind: Optional[str] = None


EMPTY = Cell()

Row = Tuple[Cell, ...]
Grid = Tuple[Row, ...]


def empty_row(width: int = COLS) -> Row:
    return (EMPTY,) * width


def create_empty(height: int = ROWS, width: int = COLS) -> Grid:
    if height <= 0 or width <= 0:
        raise ValueError(f"grid size must be positive, got {height}x{width}")
    return (empty_row(width),) * height


def grid_size(grid: Grid) -> Tuple[int, int]:
    return len(grid), len(grid[0])


def cell_at(grid: Grid, row: int, col: int) -> Cell:
    h, w = grid_size(grid)
    if not (0 <= row < h and 0 <= col < w):
        raise IndexError(f"cell ({row}, {col}) outside {h}x{w} grid")
    return grid[row][col]


def collides(grid: Grid, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    """Return True if the piece hits a wall, the floor or a filled cell.

    Rows above the top of the board never collide so pieces may spawn
    partially outside it.
    """
    h, w = grid_size(grid)
    for bx, by in piece.cells(dx, dy):
        if bx < 0 or bx >= w or by >= h:
            return True
        if by >= 0 and grid[by][bx].filled:
            return True
    return False


def lock(grid: Grid, piece: Piece) -> Grid:
    """Write the piece into a new grid; cells outside the board are dropped."""
    h, w = grid_size(grid)
    rows = [list(r) for r in grid]
    for bx, by in piece.cells():
        if 0 <= by < h and 0 <= bx < w:
            rows[by][bx] = Cell(True, piece.kind)
    log.debug("locked %s at x=%d y=%d", piece.kind, piece.x, piece.y)
    return tuple(tuple(r) for r in rows)


def clear_lines(grid: Grid) -> Tuple[Grid, int]:
    """Remove full rows and return the new grid with the number removed."""
    h, w = grid_size(grid)
    rows = list(grid)
    c = 0; y = h - 1
    while y >= 0:
        if all(cell.filled for cell in rows[y]):
            del rows[y]; rows.insert(0, empty_row(w)); c += 1
        else:
            y -= 1
    if c:
        log.debug("cleared %d line(s)", c)
    return tuple(rows), c


def ghost_offset(grid: Grid, piece: Piece) -> int:
    """How far the piece can fall before it collides."""
    d = 0
    while not collides(grid, piece, 0, d + 1):
        d += 1
    return d
