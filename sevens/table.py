"""The layout of cards played onto the Sevens table."""

from __future__ import annotations

from .cards import Card

_STARTING_CARD = Card(1, 7)
_SUIT_LABELS = ("CLUBS", "DIAMONDS", "HEARTS", "SPADES")
_RANK_LABELS = {1: "A", 7: "[7]", 11: "J", 12: "Q", 13: "K"}


class Table:
    """Which cards lie on the table. A new table is empty until reset."""

    def __init__(self) -> None:
        self._placed: set[tuple[int, int]] = set()

    def reset(self) -> None:
        """Clear the table and lay down the 7 of Diamonds."""
        self._placed.clear()
        self.place(_STARTING_CARD)

    def is_on_table(self, suit: int, rank: int) -> bool:
        return (suit, rank) in self._placed

    def place(self, card: Card) -> None:
        self._placed.add((card.suit, card.rank))

    def is_playable(self, card: Card) -> bool:
        """A 7 is playable if absent; other cards need a neighbour on the table."""
        if card.rank == 7:
            return not self.is_on_table(card.suit, 7)
        higher = card.rank < 13 and self.is_on_table(card.suit, card.rank + 1)
        lower = card.rank > 1 and self.is_on_table(card.suit, card.rank - 1)
        return higher or lower

    def copy(self) -> Table:
        other = Table()
        other._placed = set(self._placed)
        return other

    def render(self) -> str:
        """Return a text picture of the table, one suit per row."""
        rows = []
        for suit, label in enumerate(_SUIT_LABELS):
            cells = "".join(
                _RANK_LABELS.get(rank, str(rank)) + " "
                for rank in range(1, 14)
                if self.is_on_table(suit, rank)
            )
            rows.append(f"{label:<10}: {cells}\n")
        return "\n=== TABLE STATE ===\n" + "".join(rows) + "=================\n"