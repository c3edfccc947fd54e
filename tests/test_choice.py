"""Tests for choices, outcome cells, choice names and score pairs."""

import pytest

from dilemma_tactix.errors import DuplicateChoiceName, EmptyChoiceName, UnknownChoice
from dilemma_tactix.models.choice import (
    CHOICE_NAME_PRESETS,
    OUTCOME_KEYS,
    OUTCOMES,
    Choice,
    ChoiceNameOptions,
)
from dilemma_tactix.models.number_pair import NumberPair
from dilemma_tactix.models.randomness import DeterministicSource


# =============================================================================
# Choice / Outcome Tests
# =============================================================================


class TestChoice:
    """Tests for the Choice enum and outcome ordering."""

    def test_two_variants(self) -> None:
        assert {c.name for c in Choice} == {"COOPERATE", "DEFECT"}

    def test_other(self) -> None:
        assert Choice.COOPERATE.other() is Choice.DEFECT
        assert Choice.DEFECT.other() is Choice.COOPERATE

    def test_shortcuts(self) -> None:
        assert Choice.COOPERATE.shortcut == "A"
        assert Choice.DEFECT.shortcut == "B"

    def test_outcomes_canonical_order(self) -> None:
        """Outcomes are cc, cd, dc, dd and cover every combination once."""
        assert OUTCOMES == (
            (Choice.COOPERATE, Choice.COOPERATE),
            (Choice.COOPERATE, Choice.DEFECT),
            (Choice.DEFECT, Choice.COOPERATE),
            (Choice.DEFECT, Choice.DEFECT),
        )
        assert len(set(OUTCOMES)) == 4

    def test_outcome_keys(self) -> None:
        assert list(OUTCOME_KEYS) == ["cc", "cd", "dc", "dd"]
        assert OUTCOME_KEYS["cd"] == (Choice.COOPERATE, Choice.DEFECT)


# =============================================================================
# ChoiceNameOptions Tests
# =============================================================================


class TestChoiceNameOptions:
    """Tests for display name validation and lookup."""

    def test_defaults(self) -> None:
        names = ChoiceNameOptions()
        assert names.as_tuple() == ("Cooperate", "Defect")

    @pytest.mark.parametrize("cooperate,defect", [("", "Defect"), ("Cooperate", ""), ("  ", "x")])
    def test_empty_name_rejected(self, cooperate: str, defect: str) -> None:
        with pytest.raises(EmptyChoiceName):
            ChoiceNameOptions(cooperate, defect)

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(DuplicateChoiceName):
            ChoiceNameOptions("Same", "Same")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            ChoiceNameOptions("Same", "Same")

    def test_name_for(self) -> None:
        names = ChoiceNameOptions("swerve", "straight")
        assert names.name_for(Choice.COOPERATE) == "swerve"
        assert names.name_for(Choice.DEFECT) == "straight"

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("swerve", Choice.COOPERATE),
            ("STRAIGHT", Choice.DEFECT),
            (" a ", Choice.COOPERATE),
            ("B", Choice.DEFECT),
        ],
    )
    def test_choice_for(self, label: str, expected: Choice) -> None:
        names = ChoiceNameOptions("swerve", "straight")
        assert names.choice_for(label) is expected

    @pytest.mark.parametrize("cooperate,defect", [("Yes", "yes"), ("War", " WAR ")])
    def test_duplicate_ignores_case_and_whitespace(self, cooperate: str, defect: str) -> None:
        """Names that lookup would treat as equal are rejected as duplicates."""
        with pytest.raises(DuplicateChoiceName):
            ChoiceNameOptions(cooperate, defect)

    def test_display_name_beats_shortcut(self) -> None:
        """A display name equal to the other choice's shortcut still resolves to its own choice."""
        names = ChoiceNameOptions("B", "A")
        assert names.choice_for("A") is Choice.DEFECT
        assert names.choice_for("b") is Choice.COOPERATE

    def test_every_name_reachable(self) -> None:
        for cooperate, defect in [("Yes", "No"), ("B", "A"), ("a", "Defect")]:
            names = ChoiceNameOptions(cooperate, defect)
            assert names.choice_for(cooperate) is Choice.COOPERATE
            assert names.choice_for(defect) is Choice.DEFECT

    def test_choice_for_unknown(self) -> None:
        with pytest.raises(UnknownChoice, match="not a valid choice"):
            ChoiceNameOptions().choice_for("maybe")

    def test_presets_are_valid(self) -> None:
        """Every preset pair satisfies the naming constraints."""
        assert len(CHOICE_NAME_PRESETS) == 17
        for i in range(len(CHOICE_NAME_PRESETS)):
            names = ChoiceNameOptions.from_preset(i)
            assert names.as_tuple() == CHOICE_NAME_PRESETS[i]

    def test_from_preset_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            ChoiceNameOptions.from_preset(len(CHOICE_NAME_PRESETS))

    def test_random_is_reproducible(self) -> None:
        first = ChoiceNameOptions.random(DeterministicSource(7))
        second = ChoiceNameOptions.random(DeterministicSource(7))
        assert first == second
        assert first.as_tuple() in CHOICE_NAME_PRESETS


# =============================================================================
# NumberPair Tests
# =============================================================================


class TestNumberPair:
    """Tests for the NumberPair value type."""

    def test_structural_equality(self) -> None:
        assert NumberPair(1, 2) == NumberPair(1, 2)
        assert NumberPair(1, 2) != NumberPair(2, 1)
        assert hash(NumberPair(1, 2)) == hash(NumberPair(1, 2))

    def test_immutable(self) -> None:
        pair = NumberPair(1, 2)
        with pytest.raises(AttributeError):
            pair.own = 5  # type: ignore[misc]

    def test_swapped(self) -> None:
        assert NumberPair(0, 5).swapped() == NumberPair(5, 0)

    def test_str(self) -> None:
        assert str(NumberPair(4, 4)) == "(4, 4)"
        assert NumberPair(3, 1).as_tuple() == (3, 1)
