# sevens

This package simulates the card game Sevens.

Players take turns laying cards on the table. A seven may be laid if that
seven is not already on the table. Any other card may be laid next to a card
of the same suit that is one rank higher or one rank lower.

A round ends in one of two ways:

- a player empties their hand, and that player wins the round; or
- no card in any hand can be played, and the round has no winner.

At the end of each round, the cards left in each hand are added to that
player's running total. The game ends once any player's total reaches 100.
Players are then ranked, and the fewest accumulated cards ranks first.

At the start of every round the 7 of Diamonds is on the table. The other
cards are shuffled and dealt round-robin to the seated players in order of
player id. The first card goes to a different player each round.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The deck file

Cards are read from a plain text file, one card per line:

```
Ace of Clubs
2 of Clubs
10 of Hearts
Queen of Spades
```

- Ranks are `Ace`, `2` to `10`, `Jack`, `Queen` and `King`.
- Suits are `Clubs`, `Diamonds`, `Hearts` and `Spades`.
- Blank lines are ignored.
- Malformed lines and cards outside the deck are logged as warnings through
  the `logging` module and skipped.

`sevens.cards.read_cards(path)` returns the cards as a dict that numbers them
from 0. `sevens.cards.parse_card_line`, `parse_rank` and `parse_suit` parse
single lines and words. `parse_card_line` raises
`sevens.cards.CardFormatError`, a subclass of `ValueError`, for a bad line.

## Command line

```
sevens internal
sevens demo
sevens competition random greedy fym_quest
```

The modes are:

- `internal` plays three `RandomStrategy` players against each other.
- `demo` pits a `RandomStrategy` (player 0) against a `GreedyStrategy`
  (player 1).
- `competition` seats the named built-in strategies in the order given. The
  names are `random`, `greedy` and `fym_quest`, in any case.
  - `randomstrategy`, `greedystrategy` and `fymquest` are also accepted.
  - Unknown names are reported and skipped.

Every move, the table after each round, and a final summary are printed.

Options:

- `--cards PATH` is the deck file. It defaults to `cards.txt` in the current
  directory.
- `--seed N` seeds the shuffling, so that games can be repeated.

The command exits with status 1 in any of these cases:

- no mode is given;
- the mode is unknown;
- the deck file cannot be opened;
- no strategies can be loaded;
- the game cannot be played, for example because the deck has no cards to deal.

## Library use

```python
from sevens.game import GameMapper
from sevens.strategy import GreedyStrategy, RandomStrategy
from sevens.fym_quest import FYMQuest

game = GameMapper(seed=42)
game.read_cards("cards.txt")
game.read_game()

game.register_strategy(0, RandomStrategy(seed=1))
game.register_strategy(1, GreedyStrategy())
game.register_strategy(2, FYMQuest(seed=2))

standings = game.compute_game_progress(3)  # [(player_id, position), ...]
```

### Playing and reporting

`compute_and_display_game(num_players)` plays the same game as
`compute_game_progress`, but it also prints:

- each move;
- the table after every round;
- a final summary of total cards and rounds won.

By default the output goes to standard output. Pass a text stream as
`GameMapper(out=...)` to send it elsewhere.

### Seating and setup

Any player id below `num_players` that has no registered strategy is seated
with a `RandomStrategy`. Both methods raise `ValueError` if no players are
seated or if the deck holds no cards to deal.

`read_game()` only lays the 7 of Diamonds on the table. A path may be passed,
but it is not read.

### The table

`sevens.table.Table` records which cards have been laid. Its methods are:

- `reset()` clears the table and lays the 7 of Diamonds.
- `is_on_table(suit, rank)` tells whether a card has been laid.
- `place(card)` lays a card.
- `is_playable(card)` applies the laying rule above.
- `copy()` returns an independent copy.
- `render()` returns a text picture of the table, one suit per row.

A `Card` is a frozen dataclass with `suit` and `rank`:

- `suit` runs from 0 to 3, in the order Clubs, Diamonds, Hearts, Spades.
- `rank` runs from 1 to 13, Ace to King.
- `str(card)` gives a name such as `Queen of Spades`.

### Writing a strategy

Subclass `sevens.strategy.PlayerStrategy` and implement
`select_card(hand, table)`:

- `hand` is a list of `Card` objects.
- `table` is a `Table`.
- Return the index of the card to play, or `None` to pass.
- An index outside the hand counts as a pass. So does the index of a card
  that cannot legally be played.

The game calls these hooks:

- `initialize(player_id)` when the strategy is registered.
- `observe_move(player_id, card)` when another player lays a card.
- `observe_pass(player_id)` when another player passes.

Set the class attribute `name` to label the strategy in printed output.

`sevens.strategy.playable_indices(hand, table)` lists the legal moves.

### Built-in strategies

- `RandomStrategy(seed=None)` plays a random legal card.
- `GreedyStrategy()` plays the first legal card in its hand.
- `FYMQuest(seed=None)`, in `sevens.fym_quest`, scores each legal card and
  plays the best one. The score weighs:
  - how long a run of its own cards the play opens up;
  - sevens;
  - balance between suits;
  - the moves left after the play;
  - blocking;
  - extreme ranks.

  The weights adapt to the number of players and to how far the game has
  gone. Its scoring helpers are public functions in the same module:
  `sequence_length`, `count_future_plays`, `has_blocking_potential`,
  `estimate_player_count`, `game_phase` and `is_extreme`.

## What this package does not do

Strategies are Python classes chosen from the built-in names or registered
in code. The `competition` mode cannot load player code from separate files
or compiled libraries. Players are identified by number only; there is no
play by player name.