"""Validated game configuration.

GameOptions is the frozen result of GameOptionsBuilder validation. It carries
everything needed to realize a grid: the inclusive payoff bounds, the choice
labels, the randomness mode and any explicit per-cell payoffs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from dilemma_tactix.errors import BuilderError, InvalidRange
from dilemma_tactix.models.choice import OUTCOMES, ChoiceNameOptions, Outcome
from dilemma_tactix.models.number_pair import NumberPair
from dilemma_tactix.models.randomness import NonDeterministic, RandomnessMode


@dataclass(frozen=True)
class GameOptions:
    """Complete, validated configuration for one game grid.

    Constraints:
    - min_value <= max_value (both inclusive)
    - every override is keyed by a known outcome and lies within the bounds
    """

    min_value: int
    max_value: int
    choice_names: ChoiceNameOptions = field(default_factory=ChoiceNameOptions)
    randomness: RandomnessMode = field(default_factory=NonDeterministic)
    overrides: Mapping[Outcome, NumberPair] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate bounds and overrides."""
        if self.min_value > self.max_value:
            raise InvalidRange(
                f"min_value must be <= max_value, got min_value={self.min_value}, "
                f"max_value={self.max_value}"
            )
        for outcome, pair in self.overrides.items():
            if outcome not in OUTCOMES:
                raise BuilderError(f"unknown outcome {outcome!r}; expected a (Choice, Choice) pair")
            if not self.contains(pair):
                raise InvalidRange(
                    f"payoff {pair} for {outcome[0].value}/{outcome[1].value} is outside "
                    f"[{self.min_value}, {self.max_value}]"
                )
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    def contains(self, pair: NumberPair) -> bool:
        """True if both scores of pair lie within the bounds."""
        return (
            self.min_value <= pair.own <= self.max_value
            and self.min_value <= pair.other <= self.max_value
        )

    def sampled_outcomes(self) -> list[Outcome]:
        """Outcomes without an override, in canonical sampling order."""
        return [outcome for outcome in OUTCOMES if outcome not in self.overrides]

    def __str__(self) -> str:
        return (
            f"min_value: {self.min_value}, max_value: {self.max_value}, "
            f"choice_cooperate: {self.choice_names.cooperate}, "
            f"choice_defect: {self.choice_names.defect}"
        )
