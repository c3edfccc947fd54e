"""Score pairs awarded for one outcome cell."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NumberPair:
    """Scores for one outcome: (own, other).

    `own` goes to the participant whose choice is listed first in the cell,
    `other` to their opponent.
    """

    own: int
    other: int

    def swapped(self) -> "NumberPair":
        """The same outcome seen from the opponent's side."""
        return NumberPair(self.other, self.own)

    def as_tuple(self) -> tuple[int, int]:
        return (self.own, self.other)

    def __str__(self) -> str:
        return f"({self.own}, {self.other})"
