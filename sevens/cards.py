"""Playing cards for Sevens and a reader for card list files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from os import PathLike

logger = logging.getLogger(__name__)

_SUITS = {"Clubs": 0, "Diamonds": 1, "Hearts": 2, "Spades": 3}
_SUIT_NAMES = tuple(_SUITS)
_FACE_RANKS = {"Ace": 1, "Jack": 11, "Queen": 12, "King": 13}
_RANK_NAMES = {rank: name for name, rank in _FACE_RANKS.items()}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CardFormatError(ValueError):
    """A card line is malformed or names a card outside the deck."""


@dataclass(frozen=True)
class Card:
    """A playing card: suit 0..3 (Clubs, Diamonds, Hearts, Spades), rank 1..13."""

    suit: int
    rank: int

    def __str__(self) -> str:
        rank = _RANK_NAMES.get(self.rank, str(self.rank))
        return f"{rank} of {_SUIT_NAMES[self.suit]}"


def parse_rank(text: str) -> int:
    """Convert a rank word or number to its numeric rank.

    Numbers are read like a leading integer; trailing characters are ignored.
    """
    if text in _FACE_RANKS:
        return _FACE_RANKS[text]
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid rank: {text!r}")
    return int(match.group(1))


def parse_suit(text: str) -> int:
    """Convert a suit name to its number."""
    try:
        return _SUITS[text]
    except KeyError:
        raise ValueError(f"invalid suit: {text!r}") from None


def parse_card_line(line: str) -> Card:
    """Parse a line of the form '<rank> of <suit>'."""
    words = line.split()
    if len(words) < 3 or words[1] != "of":
        raise CardFormatError(f"invalid card format: {line}")
    rank = parse_rank(words[0])
    try:
        suit = parse_suit(words[2])
    except ValueError:
        raise CardFormatError(f"invalid card values: {line}") from None
    if not 1 <= rank <= 13:
        raise CardFormatError(f"invalid card values: {line}")
    return Card(suit, rank)


def read_cards(path: str | PathLike[str]) -> dict[int, Card]:
    """Read cards from a file, one per line, numbering them from 0.

    Empty lines are skipped; malformed lines are logged and skipped.
    """
    cards: dict[int, Card] = {}
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line:
                continue
            try:
                card = parse_card_line(line)
            except CardFormatError as exc:
                logger.warning("%s", exc)
                continue
            cards[len(cards)] = card
    logger.info("Parsed %d cards from %s", len(cards), path)
    return cards