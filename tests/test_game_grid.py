"""Tests for GameGrid lookup and immutability."""

import pytest

from dilemma_tactix.errors import UnknownChoice
from dilemma_tactix.models.choice import OUTCOMES, Choice
from dilemma_tactix.models.game_grid import GameGrid
from dilemma_tactix.models.game_options_builder import GameOptionsBuilder
from dilemma_tactix.models.number_pair import NumberPair

C = Choice.COOPERATE
D = Choice.DEFECT


class TestPayoffFor:
    """Tests for the payoff lookup."""

    def test_total(self, seeded_builder) -> None:
        grid = seeded_builder.build()
        for mine, theirs in OUTCOMES:
            assert isinstance(grid.payoff_for(mine, theirs), NumberPair)

    def test_idempotent(self, seeded_builder) -> None:
        grid = seeded_builder.build()
        first = [grid.payoff_for(*outcome) for outcome in OUTCOMES]
        for _ in range(5):
            for outcome in reversed(OUTCOMES):
                grid.payoff_for(*outcome)
        assert [grid.payoff_for(*outcome) for outcome in OUTCOMES] == first

    def test_cells_map_to_fields(self, classic_grid) -> None:
        assert classic_grid.cc == classic_grid.payoff_for(C, C)
        assert classic_grid.cd == classic_grid.payoff_for(C, D)
        assert classic_grid.dc == classic_grid.payoff_for(D, C)
        assert classic_grid.dd == classic_grid.payoff_for(D, D)

    def test_cells_is_a_copy(self, classic_grid) -> None:
        cells = classic_grid.cells()
        cells[(C, C)] = NumberPair(0, 0)
        assert classic_grid.payoff_for(C, C) == NumberPair(4, 4)

    def test_payoff_for_labels(self) -> None:
        grid = GameOptionsBuilder.classic().choice_names("swerve", "straight").build()
        assert grid.payoff_for_labels("swerve", "straight") == NumberPair(0, 5)
        assert grid.payoff_for_labels("B", "a") == NumberPair(5, 0)

    @pytest.mark.parametrize(
        "mine,theirs",
        [("cooperate", C), (C, "defect"), (None, D), (0, 1), ([C], D)],
    )
    def test_payoff_for_rejects_non_choices(self, classic_grid, mine, theirs) -> None:
        """Anything but a Choice fails instead of scoring as defect."""
        with pytest.raises(UnknownChoice):
            classic_grid.payoff_for(mine, theirs)

    def test_payoff_for_unknown_label(self, classic_grid) -> None:
        with pytest.raises(UnknownChoice):
            classic_grid.payoff_for_labels("Cooperate", "Betray")


class TestGridImmutability:
    """The grid never changes after construction."""

    def test_frozen(self, classic_grid) -> None:
        with pytest.raises(AttributeError):
            classic_grid.cc = NumberPair(0, 0)  # type: ignore[misc]

    def test_from_cells_requires_every_outcome(self, classic_grid) -> None:
        cells = classic_grid.cells()
        del cells[(D, D)]
        with pytest.raises(ValueError, match="missing"):
            GameGrid.from_cells(classic_grid.options, cells)


class TestGridDisplay:
    """Tests for read-only accessors and rendering."""

    def test_accessors(self) -> None:
        grid = GameOptionsBuilder().payoff_range(2, 7).choice_names("go", "stay").build()
        assert grid.min_value == 2
        assert grid.max_value == 7
        assert grid.choice_names.name_for(D) == "stay"

    def test_str(self, classic_grid) -> None:
        assert str(classic_grid) == (
            "Game Grid with following options:\n"
            "min_value: 0, max_value: 5, choice_cooperate: Cooperate, choice_defect: Defect\n"
        )
