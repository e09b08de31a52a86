# consolechess

Building blocks for a chess game played in the terminal. There is a board
whose pieces know their own movement rules, including en passant for pawns.
Moves can be executed and undone, castling included. There are players that
pick moves, either a person typing at the console or a computer opponent that
moves at random. A text view draws the board and reads answers, and a game in
progress can be saved to a plain-text file.

## What is in the package

- `consolechess.piece`: `Color` (`WHITE`, `BLACK`, with `opposite()`),
  `PieceType` and the abstract base `Piece`. A `Piece` has `abbr`,
  `move_to()`, `capture()`, `restore()` and `can_move_to()`.
- `consolechess.pieces`: `Pawn`, `Rook`, `Knight`, `Bishop`, `Queen` and
  `King`, each with its own `can_move_to(to_square, game_data)`, and
  `create_piece(type, player, square)`, which raises `ValueError` for an
  unknown type.
- `consolechess.square`: `Square`, whose `str()` is its name, e.g. `E2`.
- `consolechess.board`: `Board`, with `add_square`, `square`, `add_piece`,
  `delete_piece`, `pieces`, `pieces_of_player` and `pieces_captured_by`.
- `consolechess.player`: `Player`, with `name`, `color`, `king`,
  `checking_piece`, `in_check` and `cancel_check()`.
- `consolechess.players`: `HumanPlayer`, which reads its move and promotion
  choice from a view, and `ComputerPlayer`, which takes an optional
  `random.Random` and moves one of its remaining pieces to a random other
  square.
- `consolechess.move`: `Move`. Build one from two squares, with
  `Move.parse("E2-E4", board, player)`, or with
  `Move.from_abbr("O-O", player)` for castling. `execute(game_data)` plays it
  and records it; `undo(game_data)` takes it back.
- `consolechess.game`: `GameData`, which holds the board, the two players,
  whose turn it is (`next_turn()`) and the move history (`moves_history`,
  `last_move()`, `moves_of_player()`).
- `consolechess.view`: `ConsoleView(stdin=None, stdout=None)`, the text
  interface. It draws the board, captured pieces, menus and messages. It reads
  moves (`E2-E4`, `O-O`, `O-O-O`, or `M` for the menu), colours, promotion
  choices and menu options word by word, and asks again after an `InputError`.
  When it writes to a real terminal it clears the screen after a wrong answer.
- `consolechess.writer`: `save_game(game_data, path)`. It raises
  `GameFileError` when the file cannot be written.

## Example

```python
from consolechess.board import Board
from consolechess.game import GameData
from consolechess.move import Move
from consolechess.piece import Color, PieceType
from consolechess.players import HumanPlayer

board = Board()
for row in range(8):
    for column in range(8):
        board.add_square(row, column)

white = HumanPlayer("Alice", Color.WHITE)
black = HumanPlayer("Bob", Color.BLACK)
game = GameData(board, white, black, white)

board.add_piece(PieceType.PAWN, white, 6, 4)
board.add_piece(PieceType.PAWN, black, 1, 3)

move = Move.parse("E2-E4", board, white)
move.execute(game)
print(board)
move.undo(game)
```

Rows are numbered from 0 (rank 8) to 7 (rank 1). Columns are numbered from
0 (file A) to 7 (file H). Printing a board gives one line per rank, from
rank 8 down to rank 1, each followed by a blank line. An empty square is
shown as `[.]`. An occupied square is shown as a colour letter, a piece
letter, and then `1` if the piece has not moved yet or `0` if it has. For
example, `WP0` is the pawn that has just moved.

## Save files

`save_game` writes the board in the format shown above, then:

- a `Save: <name>` line naming the player whose turn it is;
- one line per player with the name, the colour, and the square of the piece
  checking that player, if any;
- the move history, separated by spaces;
- the pieces captured by player 1, then those captured by player 2, one line
  each.

## What the package does not do

- It has no command and no game loop. There is nothing here that sets up the
  starting position or takes turns between players.
- It does not judge the game. `can_move_to` checks only a piece's own
  movement rule. Nothing detects check, checkmate or stalemate, and nothing
  checks whether a castling is allowed. Promotion is offered only as a choice
  read from the view or made at random; nothing replaces the pawn.
- It writes save files but cannot read them back.

## Tests

The test suite uses pytest. Install the package with the `test` extra to get
it.