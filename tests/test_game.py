import io

import pytest

from sevens.cards import Card
from sevens.game import MAX_ACCUMULATED_CARDS, GameMapper
from sevens.strategy import GreedyStrategy, PlayerStrategy

SUITS = ("Clubs", "Diamonds", "Hearts", "Spades")
RANKS = ("Ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "Jack", "Queen", "King")


def write_deck(tmp_path, lines):
    path = tmp_path / "cards.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def full_deck(tmp_path):
    return write_deck(tmp_path, [f"{r} of {s}" for s in SUITS for r in RANKS])


class RecordingStrategy(GreedyStrategy):
    def __init__(self):
        self.moves_seen = []
        self.passes_seen = []

    def observe_move(self, player_id, card):
        self.moves_seen.append(player_id)

    def observe_pass(self, player_id):
        self.passes_seen.append(player_id)


def test_read_game_places_seven_of_diamonds():
    game = GameMapper(seed=1)
    game.read_game("")
    assert game.table.is_on_table(1, 7)
    assert not game.table.is_on_table(0, 7)


def test_read_cards_loads_deck(full_deck):
    game = GameMapper(seed=1)
    game.read_cards(full_deck)
    assert len(game.cards) == 52
    assert game.cards[0] == Card(0, 1)


def test_read_cards_missing_file_raises(tmp_path):
    game = GameMapper(seed=1)
    with pytest.raises(FileNotFoundError):
        game.read_cards(tmp_path / "absent.txt")


def test_register_strategy_initializes_player():
    game = GameMapper(seed=1)
    assert game.has_registered_strategies() is False
    strategy = GreedyStrategy()
    game.register_strategy(3, strategy)
    assert game.has_registered_strategies() is True
    assert strategy.player_id == 3
    assert game.total_cards == {3: 0}
    assert game.rounds_won == {3: 0}


def test_full_game_standings_invariants(full_deck):
    game = GameMapper(seed=7)
    game.read_cards(full_deck)
    for player_id in range(3):
        game.register_strategy(player_id, GreedyStrategy())
    standings = game.compute_game_progress(3)
    assert sorted(pid for pid, _ in standings) == [0, 1, 2]
    assert [rank for _, rank in standings] == [1, 2, 3]
    totals = [game.total_cards[pid] for pid, _ in standings]
    assert totals == sorted(totals)
    assert max(totals) >= MAX_ACCUMULATED_CARDS
    assert sum(game.rounds_won.values()) <= game.total_rounds


def test_missing_players_get_random_strategies(full_deck):
    game = GameMapper(seed=3)
    game.read_cards(full_deck)
    game.compute_game_progress(2)
    assert sorted(game.strategies) == [0, 1]
    assert {s.name for s in game.strategies.values()} == {"RandomStrategy"}


def test_same_seed_gives_same_game(full_deck):
    results = []
    for _ in range(2):
        game = GameMapper(seed=42)
        game.read_cards(full_deck)
        standings = game.compute_game_progress(3)
        results.append((standings, dict(game.total_cards), game.total_rounds))
    assert results[0] == results[1]


def test_first_player_wins_every_round_with_two_playable_cards(tmp_path):
    deck = write_deck(tmp_path, ["6 of Diamonds", "8 of Diamonds"])
    game = GameMapper(seed=5)
    game.read_cards(deck)
    game.register_strategy(0, GreedyStrategy())
    game.register_strategy(1, GreedyStrategy())
    standings = game.compute_game_progress(2)
    assert standings == [(0, 1), (1, 2)]
    assert game.total_rounds == MAX_ACCUMULATED_CARDS
    assert game.rounds_won == {0: MAX_ACCUMULATED_CARDS, 1: 0}
    assert game.total_cards == {0: 0, 1: MAX_ACCUMULATED_CARDS}


def test_blocked_rounds_have_no_winner(tmp_path):
    deck = write_deck(tmp_path, ["2 of Clubs", "3 of Clubs"])
    out = io.StringIO()
    game = GameMapper(seed=5, out=out)
    game.read_cards(deck)
    game.register_strategy(0, GreedyStrategy())
    game.register_strategy(1, GreedyStrategy())
    game.compute_and_display_game(2)
    assert game.rounds_won == {0: 0, 1: 0}
    assert game.total_cards == {0: MAX_ACCUMULATED_CARDS, 1: MAX_ACCUMULATED_CARDS}
    assert "Round is blocked - no valid moves possible" in out.getvalue()


def test_display_reports_rounds_and_results(full_deck):
    out = io.StringIO()
    game = GameMapper(seed=11, out=out)
    game.read_cards(full_deck)
    game.compute_and_display_game(2)
    text = out.getvalue()
    assert "========== ROUND 1 ==========" in text
    assert f"FINAL RESULTS AFTER {game.total_rounds} ROUNDS" in text
    assert "=== TABLE STATE ===" in text


def test_strategies_never_observe_their_own_actions(full_deck):
    game = GameMapper(seed=9)
    game.read_cards(full_deck)
    players = [RecordingStrategy() for _ in range(3)]
    for player_id, strategy in enumerate(players):
        game.register_strategy(player_id, strategy)
    game.compute_game_progress(3)
    for player_id, strategy in enumerate(players):
        assert player_id not in strategy.moves_seen
        assert player_id not in strategy.passes_seen
    assert players[0].moves_seen


def test_no_players_raises(full_deck):
    game = GameMapper(seed=1)
    game.read_cards(full_deck)
    with pytest.raises(ValueError):
        game.compute_game_progress(0)


def test_empty_deck_raises():
    game = GameMapper(seed=1)
    with pytest.raises(ValueError):
        game.compute_game_progress(2)


def test_invalid_choice_is_treated_as_pass(tmp_path):
    class Reckless(PlayerStrategy):
        name = "Reckless"

        def select_card(self, hand, table):
            return 0

    deck = write_deck(tmp_path, ["6 of Diamonds", "2 of Clubs"])
    out = io.StringIO()
    game = GameMapper(seed=2, out=out)
    game.read_cards(deck)
    game.register_strategy(0, Reckless())
    game.register_strategy(1, GreedyStrategy())
    game.compute_and_display_game(2)
    assert game.total_cards[0] + game.total_cards[1] == game.total_rounds
    assert game.rounds_won[0] + game.rounds_won[1] == game.total_rounds