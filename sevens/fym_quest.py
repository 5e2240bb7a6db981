"""A scoring strategy that favours long runs of plays from its own hand.

It weighs sequences first, then sevens, suit balance, future options,
blocking, and extreme ranks, adapting to player count and game phase.
"""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Sequence

from .cards import Card
from .strategy import PlayerStrategy, playable_indices
from .table import Table

SEQUENCE_WEIGHT = 2.5
SEVEN_WEIGHT = 1.5
BALANCE_WEIGHT = 1.2
BLOCKING_WEIGHT = 0.8
EXTREMES_WEIGHT = 1.7

_SUIT_COUNT = 4


def estimate_player_count(hand_size: int) -> int:
    """Guess how many players are at the table from a starting hand size."""
    if hand_size >= 12:
        return 4
    if hand_size >= 9:
        return 5
    if hand_size >= 7:
        return 7
    return 10


def game_phase(hand_size: int) -> int:
    """Phase of the game: 0 early, 1 mid, 2 late, 3 end (two cards or fewer)."""
    if hand_size > 10:
        return 0
    if hand_size > 5:
        return 1
    if hand_size > 2:
        return 2
    return 3


def is_extreme(card: Card) -> bool:
    """True for A, 2, 3, J, Q and K."""
    return card.rank <= 3 or card.rank >= 11


def _table_with(table: Table, card: Card) -> Table:
    simulated = table.copy()
    simulated.place(card)
    return simulated


def sequence_length(index: int, hand: Sequence[Card], table: Table) -> int:
    """How many cards of the hand could be played in a row, starting with hand[index]."""
    simulated = _table_with(table, hand[index])
    played = {index}

    def newly_ready() -> set[int]:
        return {
            i
            for i, card in enumerate(hand)
            if i not in played and simulated.is_playable(card)
        }

    ready = newly_ready()
    length = 1
    while ready:
        chosen = min(ready)
        ready.discard(chosen)
        played.add(chosen)
        length += 1
        simulated.place(hand[chosen])
        ready |= newly_ready()
    return length


def count_future_plays(index: int, hand: Sequence[Card], table: Table) -> int:
    """How many other cards of the hand are playable once hand[index] is played."""
    simulated = _table_with(table, hand[index])
    return sum(
        1
        for i, card in enumerate(hand)
        if i != index and simulated.is_playable(card)
    )


def has_blocking_potential(index: int, hand: Sequence[Card], table: Table) -> bool:
    """True if playing hand[index] opens no new end that an opponent could use."""
    card = hand[index]
    suit, rank = card.suit, card.rank
    if rank == 7 or not 1 < rank < 13:
        return False
    lower_on_table = table.is_on_table(suit, rank - 1)
    higher_on_table = table.is_on_table(suit, rank + 1)
    lower_in_hand = Card(suit, rank - 1) in hand
    higher_in_hand = Card(suit, rank + 1) in hand
    creates_lower = not lower_on_table and not lower_in_hand
    creates_higher = not higher_on_table and not higher_in_hand
    return not creates_lower and not creates_higher


class FYMQuest(PlayerStrategy):
    """Scores every playable card and plays the best one."""

    name = "FYM_Quest"

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self.round_turn = 0
        self.player_count = 0
        self.consecutive_passes = 0
        self._reset_suit_tracking()

    def _reset_suit_tracking(self) -> None:
        # seven_status: 0 unknown, 1 in hand, -1 on the table
        self.seven_status = [0] * _SUIT_COUNT
        self.suit_counts = [0] * _SUIT_COUNT
        self.suit_imbalance = [0.0] * _SUIT_COUNT

    def initialize(self, player_id: int) -> None:
        super().initialize(player_id)
        self.round_turn = 0
        self.player_count = 0
        self._reset_suit_tracking()

    def select_card(self, hand: Sequence[Card], table: Table) -> int | None:
        self.round_turn += 1
        self._update_state(hand, table)

        choices = playable_indices(hand, table)
        if not choices:
            return None
        if len(choices) == 1:
            return choices[0]

        if self.player_count == 0:
            self.player_count = estimate_player_count(len(hand))

        phase = game_phase(len(hand))
        return max(choices, key=lambda i: self._score(i, hand, table, phase))

    def observe_move(self, player_id: int, card: Card) -> None:
        if card.rank == 7:
            self.seven_status[card.suit] = -1
        self.player_count = max(self.player_count, player_id + 1)
        self.consecutive_passes = 0

    def observe_pass(self, player_id: int) -> None:
        self.consecutive_passes += 1
        self.player_count = max(self.player_count, player_id + 1)

    def _update_state(self, hand: Sequence[Card], table: Table) -> None:
        for suit in range(_SUIT_COUNT):
            if table.is_on_table(suit, 7):
                self.seven_status[suit] = -1
            elif Card(suit, 7) in hand:
                self.seven_status[suit] = 1
            elif self.seven_status[suit] != -1:
                self.seven_status[suit] = 0

        counts = Counter(card.suit for card in hand)
        self.suit_counts = [counts[suit] for suit in range(_SUIT_COUNT)]

        if hand:
            ideal = len(hand) / _SUIT_COUNT
            self.suit_imbalance = [count - ideal for count in self.suit_counts]

    def _seven_score(self, card: Card) -> float:
        score = SEVEN_WEIGHT
        if self.player_count <= 2:
            score += 0.5
        elif self.player_count >= 7:
            score += 0.5 if self.suit_imbalance[card.suit] > 0 else -0.5
        elif self.suit_counts[card.suit] >= 3:
            score += 0.3
        elif self.suit_counts[card.suit] <= 1:
            score -= 0.3
        return score

    def _score(self, index: int, hand: Sequence[Card], table: Table, phase: int) -> float:
        card = hand[index]
        score = 1.0

        score += SEQUENCE_WEIGHT * (sequence_length(index, hand, table) - 1) * 0.5

        if card.rank == 7:
            score += self._seven_score(card)

        imbalance = self.suit_imbalance[card.suit]
        if self.player_count >= 4 and imbalance > 0:
            score += BALANCE_WEIGHT * imbalance * 0.4

        future = count_future_plays(index, hand, table)
        future_factor = 0.5 if phase >= 2 else 0.3
        score += (2.0 if phase == 3 else 1.0) * future * future_factor

        if self.player_count >= 4 and has_blocking_potential(index, hand, table):
            score += BLOCKING_WEIGHT

        if is_extreme(card):
            score += EXTREMES_WEIGHT * phase * 0.3

        if phase >= 2:
            if future == 0 and len(hand) > 1:
                score -= 4.0
            score += 0.3 * (4 - phase)

        score += self._rng.uniform(0.0, 0.08)
        return score