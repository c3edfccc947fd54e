"""Error types raised while configuring a game.

Every builder failure is a configuration error detected before any grid
exists, so all of them derive from ValueError through BuilderError.
"""


class BuilderError(ValueError):
    """Base class for configuration errors raised by GameOptionsBuilder."""


class InvalidRange(BuilderError):
    """A lower bound exceeds its upper bound, or a payoff lies outside the bounds."""


class EmptyChoiceName(BuilderError):
    """A choice display name is empty or only whitespace."""


class DuplicateChoiceName(BuilderError):
    """Both choices were given the same display name."""


class IncompleteConfiguration(BuilderError):
    """A mandatory setting (the payoff bounds) was never supplied."""


class UnknownChoice(ValueError):
    """A label does not name either choice of a game."""
