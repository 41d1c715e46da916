
"""Score table, level formula and gravity speeds"""

LINES_PER_LEVEL = 10

SOFT_DROP_POINTS = 1   # per cell moved by the player
HARD_DROP_POINTS = 2   # per cell of hard-drop distance

# Base points per lines cleared at once, multiplied by the level
LINE_CLEAR_POINTS = {1: 100, 2: 300, 3: 500, 4: 800}
TETRIS_LINES = 4

# Milliseconds between gravity steps, level 1 first
LEVEL_SPEEDS = (800, 720, 630, 550, 470, 380, 300, 220, 130, 100, 80, 80, 70, 70, 60)


def line_clear_score(lines: int, level: int) -> int:
    return LINE_CLEAR_POINTS.get(lines, 0) * level


def level_for_lines(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1


def drop_interval(level: int) -> int:
    """Gravity interval for a 1-based level, clamped to the fastest speed."""
    if level >= len(LEVEL_SPEEDS):
        return LEVEL_SPEEDS[-1]
    return LEVEL_SPEEDS[max(level, 1) - 1]
