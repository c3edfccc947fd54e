"""Choices, outcomes and their display names.

A round of the game is two simultaneous choices. The four (mine, theirs)
combinations are the outcome cells of the payoff grid, always visited in the
canonical order given by OUTCOMES.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from dilemma_tactix.errors import DuplicateChoiceName, EmptyChoiceName, UnknownChoice

if TYPE_CHECKING:
    from dilemma_tactix.models.randomness import RandomnessSource


class Choice(Enum):
    """One participant's action in a round."""

    COOPERATE = "cooperate"
    DEFECT = "defect"

    def other(self) -> Choice:
        return Choice.DEFECT if self is Choice.COOPERATE else Choice.COOPERATE

    @property
    def shortcut(self) -> str:
        """Single-letter key used by the terminal front ends."""
        return "A" if self is Choice.COOPERATE else "B"


Outcome = tuple[Choice, Choice]

OUTCOMES: tuple[Outcome, ...] = (
    (Choice.COOPERATE, Choice.COOPERATE),
    (Choice.COOPERATE, Choice.DEFECT),
    (Choice.DEFECT, Choice.COOPERATE),
    (Choice.DEFECT, Choice.DEFECT),
)

# Short cell keys used in configuration files: "cc", "cd", "dc", "dd"
OUTCOME_KEYS: dict[str, Outcome] = {
    f"{mine.value[0]}{theirs.value[0]}": (mine, theirs) for mine, theirs in OUTCOMES
}


# Label pairs for the two choices, index-aligned
CHOICE_NAME_PRESETS: tuple[tuple[str, str], ...] = (
    ("cooperate", "defect"),
    ("swerve", "straight"),
    ("macro", "micro"),
    ("fight", "back_down"),
    ("bet", "fold"),
    ("raise_price", "lower_price"),
    ("opera", "football"),
    ("go", "stay"),
    ("heads", "tails"),
    ("particle", "wave"),
    ("discrete", "continuous"),
    ("peace", "war"),
    ("search", "evaluate"),
    ("lead", "follow"),
    ("accept", "reject"),
    ("accept", "deny"),
    ("attack", "decay"),
)


@dataclass(frozen=True)
class ChoiceNameOptions:
    """Human-readable labels for the two choices.

    Display only; labels never affect scoring. Both labels must be non-empty
    and distinct so prompts and results are unambiguous.
    """

    cooperate: str = "Cooperate"
    defect: str = "Defect"

    def __post_init__(self) -> None:
        """Validate label constraints."""
        if not self.cooperate.strip():
            raise EmptyChoiceName("cooperate choice name must not be empty")
        if not self.defect.strip():
            raise EmptyChoiceName("defect choice name must not be empty")
        if self.cooperate.strip().casefold() == self.defect.strip().casefold():
            raise DuplicateChoiceName(
                f"choice names must be distinct, got {self.cooperate!r} and {self.defect!r}"
            )

    @classmethod
    def from_preset(cls, index: int) -> ChoiceNameOptions:
        """Build options from the preset table (0-based index)."""
        if not 0 <= index < len(CHOICE_NAME_PRESETS):
            raise IndexError(
                f"preset index must be in [0, {len(CHOICE_NAME_PRESETS) - 1}], got {index}"
            )
        cooperate, defect = CHOICE_NAME_PRESETS[index]
        return cls(cooperate=cooperate, defect=defect)

    @classmethod
    def random(cls, source: RandomnessSource) -> ChoiceNameOptions:
        """Pick a preset pair using a single draw from source."""
        return cls.from_preset(source.next_in_range(0, len(CHOICE_NAME_PRESETS) - 1))

    def name_for(self, choice: Choice) -> str:
        return self.cooperate if choice is Choice.COOPERATE else self.defect

    def choice_for(self, label: str) -> Choice:
        """Resolve a label back to its Choice.

        Accepts either display name (case-insensitive) or the A/B shortcut
        letters used by the terminal front ends. Display names take
        precedence, so a choice named "B" is never shadowed by a shortcut.

        Raises:
            UnknownChoice: If label names neither choice.
        """
        key = label.strip().casefold()
        for choice in Choice:
            if key == self.name_for(choice).strip().casefold():
                return choice
        for choice in Choice:
            if key == choice.shortcut.casefold():
                return choice
        raise UnknownChoice(
            f"{label!r} is not a valid choice; expected {self.cooperate!r}, "
            f"{self.defect!r}, 'A' or 'B'"
        )

    def as_tuple(self) -> tuple[str, str]:
        return (self.cooperate, self.defect)
