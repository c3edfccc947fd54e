"""Dilemma Tactix: payoff grids for the iterated Prisoner's Dilemma."""

from dilemma_tactix.errors import (
    BuilderError,
    DuplicateChoiceName,
    EmptyChoiceName,
    IncompleteConfiguration,
    InvalidRange,
    UnknownChoice,
)
from dilemma_tactix.models import (
    Choice,
    ChoiceNameOptions,
    Deterministic,
    DeterministicSource,
    EntropySource,
    GameGrid,
    GameOptions,
    GameOptionsBuilder,
    NonDeterministic,
    NumberPair,
    RandomnessSource,
)

__all__ = [
    "BuilderError",
    "DuplicateChoiceName",
    "EmptyChoiceName",
    "IncompleteConfiguration",
    "InvalidRange",
    "UnknownChoice",
    "Choice",
    "ChoiceNameOptions",
    "Deterministic",
    "DeterministicSource",
    "EntropySource",
    "GameGrid",
    "GameOptions",
    "GameOptionsBuilder",
    "NonDeterministic",
    "NumberPair",
    "RandomnessSource",
]
