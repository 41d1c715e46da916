
"""Key bindings and DAS/ARR auto-repeat"""
import pygame
from tetris_config import CONFIG
from tetris_game import Intent

KEYMAP = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_DOWN: Intent.SOFT_DROP,
    pygame.K_UP: Intent.ROTATE,
    pygame.K_SPACE: Intent.HARD_DROP,
    pygame.K_LSHIFT: Intent.HOLD,
    pygame.K_RSHIFT: Intent.HOLD,
    pygame.K_c: Intent.HOLD,
    pygame.K_p: Intent.PAUSE,
    pygame.K_r: Intent.RESTART,
}

# Handled by ShiftRepeat rather than on key down
REPEATING = {pygame.K_LEFT, pygame.K_RIGHT}


def intent_for_key(key):
    return KEYMAP.get(key)


class ShiftRepeat:
    """Turns held left/right keys into move steps.

    The first step fires on press, then after das_ms the direction repeats
    every arr_ms (0 means every update). Switching or releasing resets it.
    """
    def __init__(self, das_ms=None, arr_ms=None):
        self.das_ms = CONFIG["DAS_MS"] if das_ms is None else das_ms
        self.arr_ms = CONFIG["ARR_MS"] if arr_ms is None else arr_ms
        self.reset(0)

    def reset(self, direction):
        self.direction = direction
        self.held_ms = 0
        self.since_step = 0
        self.fired = False

    def update(self, dt, left, right) -> int:
        """Return -1, 0 or 1: the column step to apply this frame."""
        direction = (1 if right else 0) - (1 if left else 0)
        if direction != self.direction:
            self.reset(direction)
        if not direction:
            return 0
        self.held_ms += dt
        if not self.fired:
            self.fired = True
            return direction
        if self.held_ms < self.das_ms:
            return 0
        if self.arr_ms == 0:
            return direction
        self.since_step += dt
        if self.since_step >= self.arr_ms:
            self.since_step = 0
            return direction
        return 0

    def intent(self, dt, left, right):
        step = self.update(dt, left, right)
        if step < 0:
            return Intent.MOVE_LEFT
        if step > 0:
            return Intent.MOVE_RIGHT
        return None
