
"""Piece catalog, spawning and rotation"""
from dataclasses import dataclass, replace
from typing import Dict, Tuple

COLS, ROWS = 10, 20

Shape = Tuple[Tuple[int, ...], ...]

KINDS = ("I", "J", "L", "O", "S", "T", "Z")

SHAPES: Dict[str, Shape] = {
    "I": ((0,0,0,0),
          (1,1,1,1),
          (0,0,0,0),
          (0,0,0,0)),
    "J": ((1,0,0),
          (1,1,1),
          (0,0,0)),
    "L": ((0,0,1),
          (1,1,1),
          (0,0,0)),
    "O": ((1,1),
          (1,1)),
    "S": ((0,1,1),
          (1,1,0),
          (0,0,0)),
    "T": ((0,1,0),
          (1,1,1),
          (0,0,0)),
    "Z": ((1,1,0),
          (0,1,1),
          (0,0,0)),
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (0, 255, 255),
    "J": (0, 0, 255),
    "L": (255, 127, 0),
    "O": (255, 255, 0),
    "S": (0, 255, 0),
    "T": (128, 0, 128),
    "Z": (255, 0, 0),
}

# Line the I piece occupies in its 4x4 box, by rotation state.
# Even states are rows, odd states are columns.
I_LINE = {0: 1, 1: 1, 2: 1, 3: 2}


@dataclass(frozen=True)
class Piece:
    kind: str
    shape: Shape
    x: int
    y: int
    rotation: int = 0

    @property
    def size(self) -> int:
        return len(self.shape)

    def cells(self, dx: int = 0, dy: int = 0):
        """Yield (col, row) board coordinates of every occupied cell."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c + dx, self.y + r + dy

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    @property
    def height(self) -> int:
        """Number of rows spanned by the occupied cells."""
        rows = [r for r, row in enumerate(self.shape) if any(row)]
        return rows[-1] - rows[0] + 1


def spawn_x(shape: Shape, width: int = COLS) -> int:
    return (width - len(shape[0])) // 2


def spawn(kind: str, width: int = COLS) -> Piece:
    """Base shape at rotation 0, centered horizontally on row 0."""
    shape = SHAPES[kind]
    return Piece(kind, shape, spawn_x(shape, width), 0, 0)


def respawn(piece: Piece, width: int = COLS) -> Piece:
    """The same kind back at its default rotation and spawn position."""
    return spawn(piece.kind, width)


def spawn_random(rng, width: int = COLS) -> Piece:
    return spawn(rng.next_kind(), width)


def rotate_cw(m: Shape) -> Shape:
    return tuple(tuple(r) for r in zip(*m[::-1]))


def _rehome_i(shape: Shape, rotation: int) -> Shape:
    n = len(shape)
    line = I_LINE[rotation]
    if rotation % 2:
        return tuple(tuple(1 if c == line else 0 for c in range(n)) for _ in range(n))
    return tuple(tuple(1 if r == line else 0 for _ in range(n)) for r in range(n))


def rotate(piece: Piece) -> Piece:
    """Rotate 90 degrees clockwise in place; no wall kicks.

    O has a single visual state and is returned as is. The I piece is
    re-centered after the matrix rotation so its pivot does not drift
    between horizontal and vertical states.
    """
    if piece.kind == "O":
        return piece
    rotation = (piece.rotation + 1) % 4
    shape = rotate_cw(piece.shape)
    if piece.kind == "I":
        shape = _rehome_i(shape, rotation)
    return replace(piece, shape=shape, rotation=rotation)
