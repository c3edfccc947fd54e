"""Shared pytest fixtures and markers for all tests."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "tui: marks tests that drive the Textual application"
    )


@pytest.fixture
def seeded_builder():
    """Builder on [1, 5] with deterministic seed 42."""
    from dilemma_tactix.models.game_options_builder import GameOptionsBuilder
    return GameOptionsBuilder().payoff_range(1, 5).deterministic(42)


@pytest.fixture
def classic_grid():
    """The textbook grid: (4,4) (0,5) (5,0) (3,3)."""
    from dilemma_tactix.models.game_options_builder import GameOptionsBuilder
    return GameOptionsBuilder.classic().build()
