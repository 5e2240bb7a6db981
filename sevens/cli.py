"""Command-line entry point for running Sevens games."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from .fym_quest import FYMQuest
from .game import GameMapper
from .strategy import GreedyStrategy, PlayerStrategy, RandomStrategy

_USAGE = """\
Usage: sevens [mode] [strategies...] [--cards PATH] [--seed N]
  Modes:
    internal - Run with default random strategies
    demo - Run with built-in strategies
    competition - Run with the named strategies (random, greedy, fym_quest)"""

_STRATEGIES: dict[str, type[PlayerStrategy]] = {
    "random": RandomStrategy,
    "randomstrategy": RandomStrategy,
    "greedy": GreedyStrategy,
    "greedystrategy": GreedyStrategy,
    "fym_quest": FYMQuest,
    "fymquest": FYMQuest,
}

_MODES = ("internal", "demo", "competition")
_INTERNAL_PLAYERS = 3


def build_strategy(name: str) -> PlayerStrategy:
    """Create a built-in strategy from its name, ignoring case."""
    try:
        factory = _STRATEGIES[name.lower()]
    except KeyError:
        raise ValueError(f"unknown strategy: {name!r}") from None
    return factory()


def _print_results(results: list[tuple[int, int]], names: dict[int, str] | None) -> None:
    print("\nResults:")
    for player_id, position in results:
        if names is None:
            print(f"Player {player_id} finished in position {position}")
        elif player_id in names:
            print(
                f"Player {player_id} ({names[player_id]}) "
                f"finished in position {position}"
            )


def _load_strategies(specs: Sequence[str]) -> list[PlayerStrategy]:
    strategies = []
    for spec in specs:
        try:
            strategy = build_strategy(spec)
        except ValueError as exc:
            print(f"Cannot load strategy {spec!r}: {exc}", file=sys.stderr)
            continue
        strategies.append(strategy)
        print(f"Loaded strategy: {strategy.name} from {spec}")
    return strategies


def main(argv: Sequence[str] | None = None) -> int:
    """Run a Sevens game in the chosen mode; return the exit status."""
    parser = argparse.ArgumentParser(prog="sevens")
    parser.add_argument("mode", nargs="?")
    parser.add_argument("strategies", nargs="*")
    parser.add_argument("--cards", default="cards.txt", help="card list file")
    parser.add_argument("--seed", type=int, default=None, help="seed for dealing")
    args = parser.parse_intermixed_args(argv)

    if args.mode is None:
        print(_USAGE)
        return 1
    if args.mode not in _MODES:
        print(f"Unknown mode: {args.mode}", file=sys.stderr)
        return 1
    if args.mode == "competition" and not args.strategies:
        print("No strategies provided for competition mode")
        print("Usage: sevens competition strategy1 [strategy2 ...]")
        return 1

    game = GameMapper(seed=args.seed)
    try:
        game.read_cards(args.cards)
    except OSError as exc:
        print(f"Error: cannot open file {args.cards}: {exc}", file=sys.stderr)
        return 1
    print(f"Parsed {len(game.cards)} cards from {args.cards}")
    game.read_game()
    print("Game initialized with 7 of Diamonds on the table")

    try:
        if args.mode == "internal":
            print("Running in internal mode with default random strategies")
            seeds = random.Random(args.seed)
            for player_id in range(_INTERNAL_PLAYERS):
                game.register_strategy(player_id, RandomStrategy(seeds.randrange(2**32)))
            results = game.compute_and_display_game(_INTERNAL_PLAYERS)
            _print_results(results, None)
        elif args.mode == "demo":
            print("Running in demo mode with built-in strategies")
            players: list[PlayerStrategy] = [RandomStrategy(), GreedyStrategy()]
            for player_id, strategy in enumerate(players):
                game.register_strategy(player_id, strategy)
            results = game.compute_and_display_game(len(players))
            _print_results(results, {i: s.name for i, s in enumerate(players)})
        else:
            print("Running in competition mode with named strategies")
            strategies = _load_strategies(args.strategies)
            if not strategies:
                print("No valid strategies loaded")
                return 1
            for player_id, strategy in enumerate(strategies):
                game.register_strategy(player_id, strategy)
            results = game.compute_and_display_game(len(strategies))
            _print_results(results, {i: s.name for i, s in enumerate(strategies)})
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())