"""Dilemma Tactix CLI module.

Provides the `tactix` command and a Textual-based interface for playing
rounds on a payoff grid.

Usage:
    uv run tactix --tui

Or directly:
    python -m dilemma_tactix.cli.main
"""

from dilemma_tactix.cli.app import TactixApp
from dilemma_tactix.cli.main import main

__all__ = ["TactixApp", "main"]
