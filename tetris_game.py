
"""Game session and the loop that drives it.

`Game` owns the only mutable state in the engine. Every player intent and
every gravity tick is handled synchronously: the pure helpers in
tetris_piece and tetris_board compute new pieces and grids, the game
stores them, refreshes the ghost offset and publishes a `Snapshot` to
its listeners.

Intents that make no sense in the current state (moving while paused,
holding twice in a turn, anything after game over except restart) are
ignored. The host is expected to call `tick(elapsed_ms)` on a schedule;
nothing here sleeps or owns a timer.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from tetris_board import Grid, create_empty, collides, lock, clear_lines, ghost_offset
from tetris_piece import Piece, COLS, ROWS, respawn, rotate, spawn_random
from tetris_rng import UniformRandom
from tetris_scoring import (SOFT_DROP_POINTS, HARD_DROP_POINTS, TETRIS_LINES,
                            drop_interval, level_for_lines, line_clear_score)

log = logging.getLogger(__name__)

# Horizontal offsets tried, in order, when a rotation collides
ROTATION_KICKS = (1, -1, 2, -2)


class Status(Enum):
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"


class Intent(Enum):
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"
    SOFT_DROP = "SOFT_DROP"
    ROTATE = "ROTATE"
    HARD_DROP = "HARD_DROP"
    HOLD = "HOLD"
    PAUSE = "PAUSE"
    RESTART = "RESTART"


@dataclass
class Session:
    grid: Grid
    active: Optional[Piece]
    next: Piece
    held: Optional[Piece] = None
    hold_used: bool = False
    ghost_offset: int = 0
    score: int = 0
    level: int = 1
    lines: int = 0
    tetris_count: int = 0
    total_pieces: int = 0
    status: Status = Status.PLAYING
    drop_timer: float = 0.0


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to renderers and score displays."""
    grid: Grid
    active: Optional[Piece]
    next: Piece
    held: Optional[Piece]
    hold_used: bool
    ghost_offset: int
    score: int
    level: int
    lines: int
    tetris_count: int
    total_pieces: int
    status: Status

    @property
    def ghost(self) -> Optional[Piece]:
        if self.active is None:
            return None
        return self.active.moved(0, self.ghost_offset)


Listener = Callable[[Snapshot], None]


class Game:
    def __init__(self, rng=None, stats=None, height: int = ROWS, width: int = COLS):
        self.rng = rng if rng is not None else UniformRandom()
        self.stats = stats
        self.height = height
        self.width = width
        self.best = None
        if stats is not None:
            try:
                self.best = stats.load()
            except Exception:
                log.exception("could not load game stats")
        self._listeners: List[Listener] = []
        self.session = self._new_session()

    # ---------- session lifecycle ----------
    def _new_session(self) -> Session:
        grid = create_empty(self.height, self.width)
        active = spawn_random(self.rng, self.width)
        nxt = spawn_random(self.rng, self.width)
        log.debug("new session: active=%s next=%s", active.kind, nxt.kind)
        return Session(grid=grid, active=active, next=nxt,
                       ghost_offset=ghost_offset(grid, active))

    def restart(self):
        self.session = self._new_session()
        log.info("game restarted")
        self._publish()

    # ---------- listeners ----------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def snapshot(self) -> Snapshot:
        s = self.session
        return Snapshot(
            grid=s.grid, active=s.active, next=s.next, held=s.held,
            hold_used=s.hold_used, ghost_offset=s.ghost_offset,
            score=s.score, level=s.level, lines=s.lines,
            tetris_count=s.tetris_count, total_pieces=s.total_pieces,
            status=s.status,
        )

    def _publish(self):
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ---------- helpers ----------
    @property
    def status(self) -> Status:
        return self.session.status

    @property
    def playing(self) -> bool:
        return self.session.status is Status.PLAYING and self.session.active is not None

    def _set_active(self, piece: Piece):
        s = self.session
        s.active = piece
        s.ghost_offset = ghost_offset(s.grid, piece)

    def _promote_next(self):
        s = self.session
        self._set_active(respawn(s.next, self.width))
        s.next = spawn_random(self.rng, self.width)

    def _lock_and_clear(self):
        s = self.session
        grid, cleared = clear_lines(lock(s.grid, s.active))
        s.grid = grid
        if cleared:
            s.score += line_clear_score(cleared, s.level)
            s.lines += cleared
            s.level = level_for_lines(s.lines)
            if cleared == TETRIS_LINES:
                s.tetris_count += 1
        if collides(grid, respawn(s.next, self.width)):
            s.active = None
            s.ghost_offset = 0
            s.status = Status.GAME_OVER
            log.info("game over: score=%d level=%d lines=%d", s.score, s.level, s.lines)
            self._record_game()
            return
        self._promote_next()
        s.hold_used = False
        s.total_pieces += 1

    def _record_game(self):
        if self.stats is None:
            return
        s = self.session
        try:
            self.best = self.stats.record_game(s.score, s.level, s.lines)
        except Exception:
            log.exception("could not record game stats")

    # ---------- intents ----------
    def move_horizontal(self, direction: int):
        if direction not in (-1, 1) or not self.playing:
            return
        s = self.session
        if collides(s.grid, s.active, direction, 0):
            return
        self._set_active(s.active.moved(direction, 0))
        self._publish()

    def move_left(self):
        self.move_horizontal(-1)

    def move_right(self):
        self.move_horizontal(1)

    def soft_drop(self):
        # A blocked soft drop never locks; only gravity and hard drop do.
        if not self.playing:
            return
        s = self.session
        if collides(s.grid, s.active, 0, 1):
            return
        self._set_active(s.active.moved(0, 1))
        s.score += SOFT_DROP_POINTS
        self._publish()

    def rotate(self):
        if not self.playing:
            return
        s = self.session
        rotated = rotate(s.active)
        if rotated is s.active:
            return
        for dx in (0,) + ROTATION_KICKS:
            if not collides(s.grid, rotated, dx, 0):
                self._set_active(rotated.moved(dx, 0))
                self._publish()
                return

    def hard_drop(self):
        if not self.playing:
            return
        s = self.session
        d = ghost_offset(s.grid, s.active)
        s.score += HARD_DROP_POINTS * d
        s.active = s.active.moved(0, d)
        self._lock_and_clear()
        self._publish()

    def hold(self):
        if not self.playing or self.session.hold_used:
            return
        s = self.session
        if s.held is None:
            s.held = respawn(s.active, self.width)
            self._promote_next()
        else:
            s.held, active = respawn(s.active, self.width), respawn(s.held, self.width)
            self._set_active(active)
        s.hold_used = True
        self._publish()

    def pause(self):
        if self.session.status is Status.PLAYING:
            self.session.status = Status.PAUSED
            self._publish()

    def resume(self):
        if self.session.status is Status.PAUSED:
            self.session.status = Status.PLAYING
            self._publish()

    def toggle_pause(self):
        if self.session.status is Status.PLAYING:
            self.pause()
        else:
            self.resume()

    def dispatch(self, intent: Intent):
        handler = {
            Intent.MOVE_LEFT: self.move_left,
            Intent.MOVE_RIGHT: self.move_right,
            Intent.SOFT_DROP: self.soft_drop,
            Intent.ROTATE: self.rotate,
            Intent.HARD_DROP: self.hard_drop,
            Intent.HOLD: self.hold,
            Intent.PAUSE: self.toggle_pause,
            Intent.RESTART: self.restart,
        }[intent]
        handler()

    # ---------- gravity ----------
    def tick(self, elapsed_ms: float):
        """Advance the gravity clock; step or lock once the level interval has passed."""
        if not self.playing:
            return
        s = self.session
        s.drop_timer += elapsed_ms
        if s.drop_timer <= drop_interval(s.level):
            return
        s.drop_timer = 0.0
        if collides(s.grid, s.active, 0, 1):
            self._lock_and_clear()
        else:
            self._set_active(s.active.moved(0, 1))
        self._publish()
