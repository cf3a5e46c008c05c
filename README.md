# perftchess

`perftchess` reads a chess position in FEN notation, generates the moves
available to the side to play, and counts the leaf nodes of the move tree
down to a given depth (a *perft* count). It is meant for checking a move
generator against known node counts.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `perftchess` command takes one option at a time:

```
perftchess --help
perftchess --perft position.perft
```

`--help` (or `-h`) prints a short usage text.

`--perft` expects a file whose first line is a FEN string followed by one
extra field, the depth to search:

```
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 2
```

The command prints the number of nodes found at that depth. If the depth
field is missing, the depth is 0 and the count printed is 1.

Passing an unknown option, combining `--help` with `--perft`, giving more
than two arguments, naming a file that does not exist, or a file whose first
line is not a usable FEN is an error: a message starting with `error:` goes
to standard error and the exit status is 1. `--perft` without a file name
does nothing and exits with status 0.

## Library use

```python
from perftchess.board import Board
from perftchess.perft import perft

board = Board("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
print(perft(board, 2))
```

`perft` searches the board in place and leaves it as it found it.

The modules:

- `perftchess.pieces` — `Piece` (an immutable value with `kind`, `position`
  and `color`, plus `moved_to(x, y)` and `symbol()`), `PieceType` and
  `Color`.
- `perftchess.moves` — `Move` with `apply(board)` and `undo(board)`,
  `MoveType` (`BASIC`, `DOUBLE_PUSH`, `EN_PASSANT`, `CASTLE`, `PROMOTION`),
  `get_possible_moves(board, piece)` for the pseudo-legal moves of one piece,
  and the per-kind generators `move_pawn`, `pawn_attack`, `move_knight`,
  `move_bishop`, `move_rook`, `move_queen` and `move_king`.
- `perftchess.board` — `Board`, built from a FEN string with an optional
  seventh depth field. It holds `squares`, `player` (`"w"` or `"b"`),
  `castling` (rights in the order K, Q, k, q), `en_passant`, `halfmove`,
  `fullmove` and `depth`, generates moves along rows, columns, diagonals and
  knight jumps, and answers `is_in_check(castling)`.
- `perftchess.perft` — `perft(board, depth)`.
- `perftchess.tools` — `piece_from_fen_char`, `tokenize`, `read_file`,
  `parse_options` with its `Command` result, and `format_board`, which
  returns a text diagram of a board.
- `perftchess.cli` — `main(argv=None)`, the entry point of the command.

Squares are addressed as `(row, column)` pairs, with row 0 being rank 8 and
column 0 being file a.

## What it does not do

The package only counts moves. It does not pick or evaluate moves, play a
game, speak a chess engine protocol, or detect checkmate, stalemate or draws.