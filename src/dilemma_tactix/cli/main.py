"""Command line entry point for Dilemma Tactix.

Usage:
    tactix                             # random grid on [1, 10], printed
    tactix --min 1 --max 5 --seed 42   # reproducible grid
    tactix --classic --play A B        # score one round on the textbook grid
    tactix --config game.json --tui    # interactive rounds in the terminal

Settings are layered: TACTIX_* environment variables, then --config, then
explicit flags.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from dilemma_tactix.cli.app import RoundRecord, TactixApp, describe_round
from dilemma_tactix.config import GameConfig, config_from_env, load_config
from dilemma_tactix.errors import BuilderError, UnknownChoice
from dilemma_tactix.models.choice import Choice, ChoiceNameOptions
from dilemma_tactix.models.game_grid import GameGrid
from dilemma_tactix.models.randomness import DeterministicSource, EntropySource

logger = logging.getLogger(__name__)

DEFAULT_MIN_VALUE = 1
DEFAULT_MAX_VALUE = 10

EXIT_CONFIG_ERROR = 2


def format_grid(grid: GameGrid) -> str:
    """Render the grid as a plain-text table, Player 1 on rows."""
    names = grid.choice_names
    rows = [["", f"A: {names.cooperate}", f"B: {names.defect}"]]
    for mine in Choice:
        rows.append(
            [f"{mine.shortcut}: {names.name_for(mine)}"]
            + [str(grid.payoff_for(mine, theirs)) for theirs in Choice]
        )
    widths = [max(len(row[i]) for row in rows) for i in range(3)]
    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    title = "Player 1 \\ Player 2".center(len(separator) - 4)
    lines = [separator, f"| {title} |", separator]
    for row in rows:
        lines.append("| " + " | ".join(cell.ljust(w) for cell, w in zip(row, widths)) + " |")
        lines.append(separator)
    return "\n".join(lines)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tactix",
        description="Build a Prisoner's Dilemma payoff grid and play rounds on it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--min", dest="min_value", type=int, default=None, help="Lowest payoff")
    parser.add_argument("--max", dest="max_value", type=int, default=None, help="Highest payoff")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible grid (default: OS entropy)",
    )
    parser.add_argument(
        "--names",
        nargs=2,
        metavar=("COOPERATE", "DEFECT"),
        default=None,
        help="Display names for the two choices",
    )
    parser.add_argument(
        "--random-names",
        action="store_true",
        help="Pick the choice names from the preset list",
    )
    parser.add_argument(
        "--classic",
        action="store_true",
        help="Use the textbook grid (4,4) (0,5) (5,0) (3,3)",
    )
    parser.add_argument("--config", type=str, default=None, help="JSON game config file")
    parser.add_argument(
        "--play",
        nargs=2,
        metavar=("MINE", "THEIRS"),
        default=None,
        help="Score one round; choices by name or A/B",
    )
    parser.add_argument("--tui", action="store_true", help="Play rounds interactively")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Layer env, file and flag settings into one GameConfig."""
    config = config_from_env()
    if args.config:
        config = config.merged(load_config(args.config))

    flags = {}
    if args.min_value is not None:
        flags["min_value"] = args.min_value
    if args.max_value is not None:
        flags["max_value"] = args.max_value
    if args.seed is not None:
        flags["seed"] = args.seed
    if args.classic:
        flags["classic"] = True
    if args.names:
        flags["cooperate_name"], flags["defect_name"] = args.names
    config = config.merged(GameConfig(**flags))

    if args.random_names and not args.names:
        # Seeded from the resolved config so env and file seeds apply too
        source = DeterministicSource(config.seed) if config.seed is not None else EntropySource()
        cooperate, defect = ChoiceNameOptions.random(source).as_tuple()
        config = config.merged(GameConfig(cooperate_name=cooperate, defect_name=defect))

    if not config.classic and config.min_value is None and config.max_value is None:
        config = config.merged(
            GameConfig(min_value=DEFAULT_MIN_VALUE, max_value=DEFAULT_MAX_VALUE)
        )
    return config


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = resolve_config(args)
        grid = config.to_builder().build()
    except (BuilderError, ValidationError, OSError) as e:
        print(f"Invalid game configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    logger.debug("Resolved %r", config)

    if args.tui:
        TactixApp(grid).run()
        return 0

    print(format_grid(grid))
    if args.play:
        names = grid.choice_names
        try:
            mine, theirs = (names.choice_for(label) for label in args.play)
        except UnknownChoice as e:
            print(str(e), file=sys.stderr)
            return EXIT_CONFIG_ERROR
        record = RoundRecord(mine, theirs, grid.payoff_for(mine, theirs))
        print(describe_round(grid, record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
