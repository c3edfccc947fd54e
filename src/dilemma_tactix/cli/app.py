"""Dilemma Tactix terminal application.

A Textual-based interface that shows a payoff grid and lets a human pick the
choices of both players round by round:

- A / B chooses cooperate / defect for the player whose turn it is
- Player 1 picks first, then Player 2; the round is scored immediately
- ctrl+q quits
"""

from __future__ import annotations

from dataclasses import dataclass, field

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import DataTable, Footer, Header, Static

from dilemma_tactix.models.choice import Choice
from dilemma_tactix.models.game_grid import GameGrid
from dilemma_tactix.models.number_pair import NumberPair


@dataclass
class RoundRecord:
    """One scored round."""

    first: Choice
    second: Choice
    payoff: NumberPair


@dataclass
class Scoreboard:
    """Running totals for a sequence of rounds on one grid."""

    grid: GameGrid
    rounds: list[RoundRecord] = field(default_factory=list)

    def play(self, first: Choice, second: Choice) -> RoundRecord:
        record = RoundRecord(first, second, self.grid.payoff_for(first, second))
        self.rounds.append(record)
        return record

    @property
    def totals(self) -> tuple[int, int]:
        return (
            sum(r.payoff.own for r in self.rounds),
            sum(r.payoff.other for r in self.rounds),
        )


def describe_round(grid: GameGrid, record: RoundRecord) -> str:
    """One-line summary of a round using the grid's display names."""
    names = grid.choice_names
    first = names.name_for(record.first)
    second = names.name_for(record.second)
    if record.first is record.second:
        chosen = f"Both players chose {first}."
    else:
        chosen = f"Player 1 chose {first}, Player 2 chose {second}."
    return (
        f"{chosen} Player 1 scored {record.payoff.own}, "
        f"Player 2 scored {record.payoff.other}"
    )


CSS = """
Screen {
    align: center middle;
}

#game {
    width: auto;
    height: auto;
    padding: 1 2;
    border: round $accent;
}

#grid {
    width: auto;
    height: auto;
    margin-bottom: 1;
}

#prompt {
    text-style: bold;
}
"""


class TactixApp(App):
    """Interactive grid viewer and round scorer."""

    TITLE = "Dilemma Tactix"
    SUB_TITLE = "Iterated Prisoner's Dilemma"
    CSS = CSS

    BINDINGS = [
        Binding("a", "choose('cooperate')", "Choice A", show=True),
        Binding("b", "choose('defect')", "Choice B", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, grid: GameGrid) -> None:
        super().__init__()
        self.grid = grid
        self.scoreboard = Scoreboard(grid)
        self.pending: Choice | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="game"):
            yield DataTable(id="grid", show_cursor=False)
            yield Static(id="prompt")
            yield Static(id="last-round")
            yield Static(id="totals")
        yield Footer()

    def on_mount(self) -> None:
        names = self.grid.choice_names
        table = self.query_one("#grid", DataTable)
        table.add_columns("Player 1 / Player 2", f"A: {names.cooperate}", f"B: {names.defect}")
        for mine in Choice:
            table.add_row(
                f"{mine.shortcut}: {names.name_for(mine)}",
                *(str(self.grid.payoff_for(mine, theirs)) for theirs in Choice),
            )
        self._refresh_status()

    def action_choose(self, value: str) -> None:
        choice = Choice(value)
        if self.pending is None:
            self.pending = choice
        else:
            record = self.scoreboard.play(self.pending, choice)
            self.pending = None
            self.query_one("#last-round", Static).update(describe_round(self.grid, record))
        self._refresh_status()

    def _refresh_status(self) -> None:
        player = 1 if self.pending is None else 2
        self.query_one("#prompt", Static).update(f"Player {player}: choose A or B")
        first, second = self.scoreboard.totals
        self.query_one("#totals", Static).update(
            f"Round {len(self.scoreboard.rounds)} | Totals: Player 1 {first}, Player 2 {second}"
        )
