"""Player strategies: the interface and two simple built-in players."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .cards import Card
from .table import Table


def playable_indices(hand: Sequence[Card], table: Table) -> list[int]:
    """Positions in the hand of cards that may be played on the table."""
    return [index for index, card in enumerate(hand) if table.is_playable(card)]


class PlayerStrategy(ABC):
    """A player that chooses which card to play.

    select_card returns the index of the chosen card in the hand, or None to pass.
    """

    name = "PlayerStrategy"
    player_id: int | None = None

    def initialize(self, player_id: int) -> None:
        self.player_id = player_id

    @abstractmethod
    def select_card(self, hand: Sequence[Card], table: Table) -> int | None:
        """Choose a card from the hand, or None to pass."""

    def observe_move(self, player_id: int, card: Card) -> None:
        """Hear that another player played a card."""

    def observe_pass(self, player_id: int) -> None:
        """Hear that another player passed."""


class RandomStrategy(PlayerStrategy):
    """Plays a playable card chosen at random."""

    name = "RandomStrategy"

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def select_card(self, hand: Sequence[Card], table: Table) -> int | None:
        choices = playable_indices(hand, table)
        if not choices:
            return None
        return self._rng.choice(choices)


class GreedyStrategy(PlayerStrategy):
    """Plays the first playable card in the hand."""

    name = "GreedyStrategy"

    def select_card(self, hand: Sequence[Card], table: Table) -> int | None:
        return next(iter(playable_indices(hand, table)), None)