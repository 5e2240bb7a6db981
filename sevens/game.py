"""Multi-round Sevens games played between registered strategies."""

from __future__ import annotations

import logging
import random
import sys
from os import PathLike
from typing import TextIO

from .cards import Card, read_cards
from .strategy import PlayerStrategy, RandomStrategy
from .table import Table

logger = logging.getLogger(__name__)

MAX_ACCUMULATED_CARDS = 100
_STARTING_CARD = Card(1, 7)


class GameMapper:
    """Deals cards, runs rounds until a player collects too many cards, and ranks players.

    A round ends when a player empties their hand, or when no card in any hand
    can be played. Cards left in each hand are added to that player's total;
    the game ends once any total reaches MAX_ACCUMULATED_CARDS. Fewer cards rank higher.
    """

    def __init__(self, seed: int | None = None, out: TextIO | None = None) -> None:
        self._rng = random.Random(seed)
        self._out = out
        self.cards: dict[int, Card] = {}
        self.table = Table()
        self.strategies: dict[int, PlayerStrategy] = {}
        self.hands: dict[int, list[Card]] = {}
        self.total_cards: dict[int, int] = {}
        self.rounds_won: dict[int, int] = {}
        self.total_rounds = 0

    def read_cards(self, path: str | PathLike[str]) -> None:
        """Load the deck from a card list file."""
        self.cards = read_cards(path)

    def read_game(self, path: str | PathLike[str] | None = None) -> None:
        """Set up the table with the 7 of Diamonds; the path is not read."""
        self.table.reset()
        logger.info("Game initialized with 7 of Diamonds on the table")

    def register_strategy(self, player_id: int, strategy: PlayerStrategy) -> None:
        """Seat a strategy as the given player."""
        self.strategies[player_id] = strategy
        strategy.initialize(player_id)
        self.total_cards.setdefault(player_id, 0)
        self.rounds_won.setdefault(player_id, 0)

    def has_registered_strategies(self) -> bool:
        return bool(self.strategies)

    def compute_game_progress(self, num_players: int) -> list[tuple[int, int]]:
        """Play a full game silently and return (player id, rank) pairs."""
        self._ensure_strategies(num_players)
        return self._run_rounds(display=False)

    def compute_and_display_game(self, num_players: int) -> list[tuple[int, int]]:
        """Play a full game, reporting every move, and return (player id, rank) pairs."""
        self._ensure_strategies(num_players)
        return self._run_rounds(display=True)

    def _emit(self, text: str = "") -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    def _ensure_strategies(self, num_players: int) -> None:
        for player_id in range(num_players):
            if player_id not in self.strategies:
                seed = self._rng.randrange(2**32)
                self.register_strategy(player_id, RandomStrategy(seed))

    def _deal(self) -> None:
        deck = [card for card in self.cards.values() if card != _STARTING_CARD]
        self._rng.shuffle(deck)
        seats = sorted(self.strategies)
        start = self.total_rounds % len(seats)
        self.hands = {}
        for offset, card in enumerate(deck):
            player_id = seats[(start + offset) % len(seats)]
            self.hands.setdefault(player_id, []).append(card)

    def _run_rounds(self, display: bool) -> list[tuple[int, int]]:
        if not self.strategies:
            raise ValueError("no players registered")
        if not any(card != _STARTING_CARD for card in self.cards.values()):
            raise ValueError("no cards to deal")

        self.total_rounds = 0
        for player_id in self.total_cards:
            self.total_cards[player_id] = 0
        for player_id in self.rounds_won:
            self.rounds_won[player_id] = 0

        game_over = False
        while not game_over:
            self.total_rounds += 1
            if display:
                self._emit(f"\n========== ROUND {self.total_rounds} ==========")

            self.table.reset()
            self._deal()
            winner = self._play_round(display)

            if winner is not None:
                self.rounds_won[winner] += 1
                if display:
                    self._emit(
                        f"\nRound {self.total_rounds} Winner: Player {winner} "
                        f"({self.strategies[winner].name})"
                    )

            if display:
                self._emit(f"\nRemaining cards at end of round {self.total_rounds}:")
            for player_id in sorted(self.hands):
                left = len(self.hands[player_id])
                self.total_cards[player_id] += left
                if display:
                    self._emit(
                        f"Player {player_id} ({self.strategies[player_id].name}): "
                        f"{left} cards (total: {self.total_cards[player_id]})"
                    )
                if self.total_cards[player_id] >= MAX_ACCUMULATED_CARDS:
                    game_over = True

            if display:
                self._emit(self.table.render().rstrip("\n"))

        if display:
            self._display_final_results()
        return self._final_standings()

    def _play_round(self, display: bool) -> int | None:
        """Play until someone empties their hand; None if the round is blocked."""
        order = sorted(self.hands)
        position = 0
        consecutive_passes = 0

        while True:
            player_id = order[position]
            position = (position + 1) % len(order)
            hand = self.hands[player_id]
            if not hand:
                continue

            if display:
                self._emit(f"Player {player_id}'s turn. Hand size: {len(hand)}")

            strategy = self.strategies[player_id]
            choice = strategy.select_card(hand, self.table)

            if choice is None or not 0 <= choice < len(hand):
                if display:
                    self._emit(f"Player {player_id} passes")
                self._announce_pass(player_id)
                consecutive_passes += 1
                if consecutive_passes >= len(order) and self._is_blocked():
                    if display:
                        self._emit("Round is blocked - no valid moves possible")
                    return None
                continue

            card = hand[choice]
            if not self.table.is_playable(card):
                if display:
                    self._emit(
                        f"Player {player_id} attempted to play an invalid card. "
                        "Treated as a pass."
                    )
                self._announce_pass(player_id)
                consecutive_passes += 1
                continue

            if display:
                self._emit(f"Player {player_id} plays {card}")
            self.table.place(card)
            for other_id, other in self.strategies.items():
                if other_id != player_id:
                    other.observe_move(player_id, card)
            del hand[choice]

            if not hand:
                if display:
                    self._emit(
                        f"Player {player_id} has emptied their hand and wins the round!"
                    )
                return player_id
            consecutive_passes = 0

    def _announce_pass(self, player_id: int) -> None:
        for other_id, other in self.strategies.items():
            if other_id != player_id:
                other.observe_pass(player_id)

    def _is_blocked(self) -> bool:
        return not any(
            self.table.is_playable(card) for hand in self.hands.values() for card in hand
        )

    def _final_standings(self) -> list[tuple[int, int]]:
        ranked = sorted(self.total_cards.items(), key=lambda item: item[1])
        return [(player_id, rank) for rank, (player_id, _) in enumerate(ranked, start=1)]

    def _display_final_results(self) -> None:
        self._emit("\n=================================")
        self._emit(f"FINAL RESULTS AFTER {self.total_rounds} ROUNDS")
        self._emit("=================================")
        for player_id, rank in self._final_standings():
            won = self.rounds_won[player_id]
            percentage = won / self.total_rounds * 100.0
            self._emit(f"Rank {rank}: Player {player_id} ({self.strategies[player_id].name})")
            self._emit(f"    Total Cards: {self.total_cards[player_id]}")
            self._emit(
                f"    Rounds Won: {won}/{self.total_rounds} ({percentage:.1f}%)"
            )