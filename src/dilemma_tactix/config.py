"""Game configuration loading for Dilemma Tactix.

GameConfig describes a game in a file or the environment. Pydantic checks
the shape and types; the domain rules (bounds ordering, distinct names,
overrides within bounds) stay with GameOptionsBuilder, so a GameConfig that
parses can still fail at build time with a BuilderError.

Example config file:

    {
        "min_value": 1,
        "max_value": 5,
        "seed": 42,
        "cooperate_name": "swerve",
        "defect_name": "straight",
        "payoffs": {"dd": [1, 1]}
    }
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dilemma_tactix.models.choice import OUTCOME_KEYS, ChoiceNameOptions
from dilemma_tactix.models.game_options_builder import GameOptionsBuilder
from dilemma_tactix.models.number_pair import NumberPair

logger = logging.getLogger(__name__)


ENV_PREFIX = "TACTIX_"


class GameConfig(BaseModel):
    """Serializable description of a game.

    Attributes:
        min_value: Inclusive lower payoff bound
        max_value: Inclusive upper payoff bound
        seed: Seed for deterministic sampling; None samples from OS entropy
        cooperate_name: Display name of the cooperate choice
        defect_name: Display name of the defect choice
        classic: Start from the textbook grid instead of an empty builder
        payoffs: Explicit cells keyed by "cc", "cd", "dc" or "dd"
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_value: int | None = None
    max_value: int | None = None
    seed: int | None = None
    cooperate_name: str | None = None
    defect_name: str | None = None
    classic: bool = False
    payoffs: dict[str, tuple[int, int]] = Field(default_factory=dict)

    @field_validator("payoffs")
    @classmethod
    def validate_payoff_keys(cls, v: dict[str, tuple[int, int]]) -> dict[str, tuple[int, int]]:
        unknown = sorted(set(v) - set(OUTCOME_KEYS))
        if unknown:
            raise ValueError(
                f"unknown payoff cells {unknown}; expected some of {sorted(OUTCOME_KEYS)}"
            )
        return v

    def to_builder(self) -> GameOptionsBuilder:
        """Translate into a builder; call build() on it to get the grid."""
        builder = GameOptionsBuilder.classic() if self.classic else GameOptionsBuilder()
        if self.min_value is not None:
            builder.min_value(self.min_value)
        if self.max_value is not None:
            builder.max_value(self.max_value)
        if self.cooperate_name is not None or self.defect_name is not None:
            defaults = ChoiceNameOptions()
            builder.choice_names(
                self.cooperate_name if self.cooperate_name is not None else defaults.cooperate,
                self.defect_name if self.defect_name is not None else defaults.defect,
            )
        if self.seed is not None:
            builder.deterministic(self.seed)
        for key, (own, other) in self.payoffs.items():
            mine, theirs = OUTCOME_KEYS[key]
            builder.payoff(mine, theirs, NumberPair(own, other))
        return builder

    def merged(self, other: GameConfig) -> GameConfig:
        """Return a copy with every field explicitly set on `other` applied on top."""
        update = other.model_dump(exclude_unset=True)
        if "payoffs" in update:
            update["payoffs"] = {**self.payoffs, **other.payoffs}
        return self.model_copy(update=update)


def load_config(path: str | Path) -> GameConfig:
    """Load a GameConfig from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the contents are not JSON or do not match
            the schema.
    """
    path = Path(path)
    logger.info("Loading game config from %s", path)
    return GameConfig.model_validate_json(path.read_text())


def config_from_env(environ: dict[str, str] | None = None) -> GameConfig:
    """Build a GameConfig from TACTIX_* environment variables.

    Recognized: TACTIX_MIN_VALUE, TACTIX_MAX_VALUE, TACTIX_SEED,
    TACTIX_COOPERATE_NAME, TACTIX_DEFECT_NAME. Unset variables leave the
    field unset.
    """
    if environ is None:
        environ = dict(os.environ)
    data = {
        field_name: environ[f"{ENV_PREFIX}{field_name.upper()}"]
        for field_name in ("min_value", "max_value", "seed", "cooperate_name", "defect_name")
        if f"{ENV_PREFIX}{field_name.upper()}" in environ
    }
    return GameConfig.model_validate(data)
