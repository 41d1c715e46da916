
"""Piece randomizers injected into the game"""
import random
from itertools import cycle
from typing import Iterable, Optional
from tetris_piece import KINDS


class UniformRandom:
    """Uniform choice among the seven kinds.

    Owns its own random.Random so the game never touches the global
    random state; pass a seed for a reproducible sequence.
    """
    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_kind(self) -> str:
        return self._random.choice(self.PIECES)


class SequenceRandom:
    """Deals kinds from a fixed sequence, repeating it when exhausted."""
    def __init__(self, kinds: Iterable[str]):
        kinds = list(kinds)
        for k in kinds:
            if k not in KINDS:
                raise KeyError(k)
        if not kinds:
            raise ValueError("sequence must not be empty")
        self._it = cycle(kinds)

    def next_kind(self) -> str:
        return next(self._it)


def kind_for_seed(seed: int) -> str:
    """Fixed mapping from an integer to a kind (seed modulo 7)."""
    return KINDS[seed % len(KINDS)]


class SeededOrder:
    """Walks kind_for_seed from a starting seed: start, start+1, ..."""
    def __init__(self, start: int = 0):
        self.seed = start

    def next_kind(self) -> str:
        k = kind_for_seed(self.seed)
        self.seed += 1
        return k


RANDOMIZERS = ("uniform", "seeded")


def make_randomizer(name: str = "uniform", seed: Optional[int] = None):
    """Build the random source named by CONFIG["RANDOMIZER"]."""
    if name == "uniform":
        return UniformRandom(seed)
    if name == "seeded":
        return SeededOrder(seed or 0)
    raise ValueError(f"unknown randomizer {name!r}, expected one of {RANDOMIZERS}")
