"""Builder turning accumulated settings into a GameGrid.

Settings can be supplied in any order. Nothing is validated until build()
(or options()) is called, and build() is all-or-nothing: configuration
errors are raised before any value is drawn from the randomness source and
no grid is returned on failure.
"""

from __future__ import annotations

import logging
from typing import Mapping

from dilemma_tactix.errors import IncompleteConfiguration
from dilemma_tactix.models.choice import Choice, ChoiceNameOptions, Outcome
from dilemma_tactix.models.game_grid import GameGrid
from dilemma_tactix.models.game_options import GameOptions
from dilemma_tactix.models.number_pair import NumberPair
from dilemma_tactix.models.randomness import (
    Deterministic,
    NonDeterministic,
    RandomnessMode,
    RandomnessSource,
)

logger = logging.getLogger(__name__)


# Textbook Prisoner's Dilemma cells: T=5 > R=4 > P=3 > S=0
CLASSIC_MIN_VALUE = 0
CLASSIC_MAX_VALUE = 5
CLASSIC_PAYOFFS: dict[Outcome, NumberPair] = {
    (Choice.COOPERATE, Choice.COOPERATE): NumberPair(4, 4),
    (Choice.COOPERATE, Choice.DEFECT): NumberPair(0, 5),
    (Choice.DEFECT, Choice.COOPERATE): NumberPair(5, 0),
    (Choice.DEFECT, Choice.DEFECT): NumberPair(3, 3),
}


class GameOptionsBuilder:
    """Fluent builder for GameOptions and the GameGrid they produce.

    Example:
        grid = (
            GameOptionsBuilder()
            .payoff_range(1, 5)
            .deterministic(42)
            .choice_names("Cooperate", "Defect")
            .build()
        )
        grid.payoff_for(Choice.COOPERATE, Choice.DEFECT)

    Each builder creates its own randomness source at build time, so two
    identically configured deterministic builders produce identical grids.
    """

    def __init__(self) -> None:
        self._min_value: int | None = None
        self._max_value: int | None = None
        self._cooperate_name: str | None = None
        self._defect_name: str | None = None
        self._mode: RandomnessMode = NonDeterministic()
        self._source: RandomnessSource | None = None
        self._overrides: dict[Outcome, NumberPair] = {}

    @classmethod
    def classic(cls) -> GameOptionsBuilder:
        """Builder preloaded with the textbook payoff grid on [0, 5]."""
        return cls().payoff_range(CLASSIC_MIN_VALUE, CLASSIC_MAX_VALUE).payoffs(CLASSIC_PAYOFFS)

    def payoff_range(self, low: int, high: int) -> GameOptionsBuilder:
        self._min_value = low
        self._max_value = high
        return self

    def min_value(self, value: int) -> GameOptionsBuilder:
        self._min_value = value
        return self

    def max_value(self, value: int) -> GameOptionsBuilder:
        self._max_value = value
        return self

    def choice_names(self, cooperate: str, defect: str) -> GameOptionsBuilder:
        self._cooperate_name = cooperate
        self._defect_name = defect
        return self

    def deterministic(self, seed: int) -> GameOptionsBuilder:
        return self.randomness(Deterministic(seed))

    def non_deterministic(self) -> GameOptionsBuilder:
        return self.randomness(NonDeterministic())

    def randomness(self, mode: RandomnessMode) -> GameOptionsBuilder:
        self._mode = mode
        return self

    def source(self, source: RandomnessSource) -> GameOptionsBuilder:
        """Draw from an existing source instead of creating one from the mode.

        Builders sharing a source interleave their draws, so reproducibility
        then depends on the order in which the caller builds them.
        """
        self._source = source
        return self

    def payoff(self, mine: Choice, theirs: Choice, pair: NumberPair) -> GameOptionsBuilder:
        """Fix the scores of one outcome cell instead of sampling them."""
        self._overrides[(mine, theirs)] = pair
        return self

    def payoffs(self, pairs: Mapping[Outcome, NumberPair]) -> GameOptionsBuilder:
        for (mine, theirs), pair in pairs.items():
            self.payoff(mine, theirs, pair)
        return self

    def options(self) -> GameOptions:
        """Validate accumulated settings without sampling.

        Raises:
            IncompleteConfiguration: If either payoff bound was never set.
            InvalidRange: If min > max or an override lies outside the bounds.
            EmptyChoiceName: If a choice name is empty.
            DuplicateChoiceName: If both choice names are equal.
        """
        missing = [
            name
            for name, value in (("min_value", self._min_value), ("max_value", self._max_value))
            if value is None
        ]
        if missing:
            raise IncompleteConfiguration(f"payoff bounds not set: {', '.join(missing)}")

        defaults = ChoiceNameOptions()
        names = ChoiceNameOptions(
            cooperate=defaults.cooperate if self._cooperate_name is None else self._cooperate_name,
            defect=defaults.defect if self._defect_name is None else self._defect_name,
        )
        return GameOptions(
            min_value=self._min_value,
            max_value=self._max_value,
            choice_names=names,
            randomness=self._mode,
            overrides=self._overrides,
        )

    def build(self) -> GameGrid:
        """Validate, sample every cell without an override and return the grid.

        Cells are sampled in canonical order (cc, cd, dc, dd), drawing `own`
        then `other` independently within the inclusive bounds.
        """
        options = self.options()
        source = self._source if self._source is not None else options.randomness.create_source()
        logger.debug(
            "Building grid on [%d, %d] with %r (%d override(s))",
            options.min_value,
            options.max_value,
            source,
            len(options.overrides),
        )

        cells = dict(options.overrides)
        for outcome in options.sampled_outcomes():
            own = source.next_in_range(options.min_value, options.max_value)
            other = source.next_in_range(options.min_value, options.max_value)
            cells[outcome] = NumberPair(own, other)
            logger.debug("Sampled %s/%s -> %s", outcome[0].value, outcome[1].value, cells[outcome])

        return GameGrid.from_cells(options, cells)
