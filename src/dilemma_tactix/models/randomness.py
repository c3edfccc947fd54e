"""Randomness sources used to sample payoff values.

Two sources exist and are chosen once, when a game is configured:

- DeterministicSource: seeded explicitly; the same seed and the same draw
  order always reproduce the same values. Used for tests and benchmarks.
- EntropySource: seeded from OS entropy when constructed; not reproducible.

Each source owns its own generator, so concurrent game sessions never share
state. Sources are not safe for concurrent draws; serialize access with a lock
if a single source must be shared between threads.
"""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from dilemma_tactix.errors import InvalidRange


@runtime_checkable
class RandomnessSource(Protocol):
    """Protocol for integer sources with an inclusive range."""

    def next_in_range(self, low: int, high: int) -> int:
        """Return v with low <= v <= high.

        Raises InvalidRange if low > high.
        """
        ...


def _check_range(low: int, high: int) -> None:
    if low > high:
        raise InvalidRange(f"low must be <= high, got low={low}, high={high}")


class DeterministicSource:
    """Reproducible source keyed by a seed."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)
        self._draws = 0

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def draws(self) -> int:
        """Number of values drawn so far."""
        return self._draws

    def next_in_range(self, low: int, high: int) -> int:
        _check_range(low, high)
        self._draws += 1
        return self._rng.randint(low, high)

    def __repr__(self) -> str:
        return f"DeterministicSource(seed={self._seed}, draws={self._draws})"


class EntropySource:
    """Non-reproducible source seeded from OS entropy."""

    def __init__(self) -> None:
        self._rng = random.Random(int.from_bytes(os.urandom(32), "big"))

    def next_in_range(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._rng.randint(low, high)

    def __repr__(self) -> str:
        return "EntropySource()"


@dataclass(frozen=True)
class Deterministic:
    """Randomness mode producing a DeterministicSource for `seed`."""

    seed: int

    def create_source(self) -> DeterministicSource:
        return DeterministicSource(self.seed)


@dataclass(frozen=True)
class NonDeterministic:
    """Randomness mode producing a fresh EntropySource."""

    def create_source(self) -> EntropySource:
        return EntropySource()


RandomnessMode = Union[Deterministic, NonDeterministic]
