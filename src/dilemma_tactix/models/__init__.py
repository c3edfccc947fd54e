"""Dilemma Tactix game models.

This module exports the core data structures for the game.
"""

from .choice import (
    CHOICE_NAME_PRESETS,
    OUTCOME_KEYS,
    OUTCOMES,
    Choice,
    ChoiceNameOptions,
    Outcome,
)
from .game_grid import GameGrid
from .game_options import GameOptions
from .game_options_builder import (
    CLASSIC_MAX_VALUE,
    CLASSIC_MIN_VALUE,
    CLASSIC_PAYOFFS,
    GameOptionsBuilder,
)
from .number_pair import NumberPair
from .randomness import (
    Deterministic,
    DeterministicSource,
    EntropySource,
    NonDeterministic,
    RandomnessMode,
    RandomnessSource,
)

__all__ = [
    # Choices
    "Choice",
    "ChoiceNameOptions",
    "Outcome",
    "OUTCOMES",
    "OUTCOME_KEYS",
    "CHOICE_NAME_PRESETS",
    # Scores
    "NumberPair",
    # Randomness
    "RandomnessSource",
    "DeterministicSource",
    "EntropySource",
    "RandomnessMode",
    "Deterministic",
    "NonDeterministic",
    # Configuration and grid
    "GameOptions",
    "GameOptionsBuilder",
    "GameGrid",
    "CLASSIC_MIN_VALUE",
    "CLASSIC_MAX_VALUE",
    "CLASSIC_PAYOFFS",
]
