
"""Best-effort persistence of player records"""
import json
import logging
import os
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, Optional

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameStats:
    high_score: int = 0
    high_level: int = 0
    total_lines: int = 0
    games_played: int = 0
    last_played: Optional[str] = None


def updated(stats: GameStats, score: int, level: int, lines: int,
            now: Optional[datetime] = None) -> GameStats:
    now = now or datetime.now()
    return GameStats(
        high_score=max(stats.high_score, score),
        high_level=max(stats.high_level, level),
        total_lines=stats.total_lines + lines,
        games_played=stats.games_played + 1,
        last_played=now.isoformat(),
    )


class MemoryStatsStore:
    """Keeps records for the lifetime of the process."""
    def __init__(self, stats: Optional[GameStats] = None):
        self.stats = stats or GameStats()

    def load(self) -> GameStats:
        return self.stats

    def record_game(self, score: int, level: int, lines: int) -> GameStats:
        self.stats = updated(self.stats, score, level, lines)
        return self.stats


class JsonStatsStore:
    """Stores records as one JSON object in a file.

    Read and write failures are logged and otherwise ignored: a broken
    or missing file reads as empty records and a failed write keeps the
    in-memory result.
    """
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _read(self) -> Dict:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning("could not read stats from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring malformed stats in %s", self.path)
            return {}
        return data

    def load(self) -> GameStats:
        data = self._read()
        try:
            return GameStats(
                high_score=int(data.get("high_score", 0)),
                high_level=int(data.get("high_level", 0)),
                total_lines=int(data.get("total_lines", 0)),
                games_played=int(data.get("games_played", 0)),
                last_played=data.get("last_played"),
            )
        except (TypeError, ValueError) as e:
            log.warning("ignoring malformed stats in %s: %s", self.path, e)
            return GameStats()

    def save(self, stats: GameStats) -> bool:
        try:
            d = os.path.dirname(self.path)
            if d:
                os.makedirs(d, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(asdict(stats), f, indent=2)
        except OSError as e:
            log.warning("could not write stats to %s: %s", self.path, e)
            return False
        return True

    def record_game(self, score: int, level: int, lines: int) -> GameStats:
        stats = updated(self.load(), score, level, lines)
        self.save(stats)
        return stats
