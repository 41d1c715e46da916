# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

PREVIEW_CELLS = 4


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview: int

    def hold_origin(self):
        return self.margin, self.board_y + 30

    def next_origin(self):
        return self.panel_x + 12, self.panel_y + 150


def compute_dims(cols: int = COLS, rows: int = ROWS) -> Dims:
    """Hold column | board | info panel, side by side."""
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 220
    preview = max(14, int(cell * 0.75))
    hold_w = preview * PREVIEW_CELLS + margin

    board_w = cols * cell
    board_h = rows * cell

    board_x = margin + hold_w + margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    total_w = panel_x + panel_w + margin
    total_h = margin + board_h + margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview=preview,
    )
