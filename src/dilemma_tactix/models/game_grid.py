"""The realized 2x2 payoff grid.

A GameGrid is produced by GameOptionsBuilder.build() and never changes
afterwards. Cells are indexed by (mine, theirs):
- cc: both cooperate
- cd: I cooperate, they defect
- dc: I defect, they cooperate
- dd: both defect
"""

from __future__ import annotations

from dataclasses import dataclass

from dilemma_tactix.errors import UnknownChoice
from dilemma_tactix.models.choice import OUTCOMES, Choice, ChoiceNameOptions, Outcome
from dilemma_tactix.models.game_options import GameOptions
from dilemma_tactix.models.number_pair import NumberPair

_INDEX = {Choice.COOPERATE: 0, Choice.DEFECT: 1}


@dataclass(frozen=True)
class GameGrid:
    """Immutable lookup table from a pair of choices to a pair of scores."""

    options: GameOptions
    cc: NumberPair  # (Cooperate, Cooperate)
    cd: NumberPair  # (Cooperate, Defect)
    dc: NumberPair  # (Defect, Cooperate)
    dd: NumberPair  # (Defect, Defect)

    @classmethod
    def from_cells(cls, options: GameOptions, cells: dict[Outcome, NumberPair]) -> GameGrid:
        """Assemble a grid from a complete outcome -> pair mapping."""
        missing = [outcome for outcome in OUTCOMES if outcome not in cells]
        if missing:
            raise ValueError(f"grid is missing cells: {missing}")
        cc, cd, dc, dd = (cells[outcome] for outcome in OUTCOMES)
        return cls(options=options, cc=cc, cd=cd, dc=dc, dd=dd)

    def payoff_for(self, mine: Choice, theirs: Choice) -> NumberPair:
        """Scores for one round: own score for `mine`, other for `theirs`."""
        try:
            row, col = _INDEX[mine], _INDEX[theirs]
        except (KeyError, TypeError):
            raise UnknownChoice(f"expected Choice values, got {mine!r} and {theirs!r}") from None
        outcomes = [[self.cc, self.cd], [self.dc, self.dd]]
        return outcomes[row][col]

    def payoff_for_labels(self, mine: str, theirs: str) -> NumberPair:
        """Like payoff_for, resolving display names or A/B shortcuts first."""
        names = self.choice_names
        return self.payoff_for(names.choice_for(mine), names.choice_for(theirs))

    def cells(self) -> dict[Outcome, NumberPair]:
        return {outcome: self.payoff_for(*outcome) for outcome in OUTCOMES}

    @property
    def min_value(self) -> int:
        return self.options.min_value

    @property
    def max_value(self) -> int:
        return self.options.max_value

    @property
    def choice_names(self) -> ChoiceNameOptions:
        return self.options.choice_names

    def __str__(self) -> str:
        return f"Game Grid with following options:\n{self.options}\n"
