"""Command-line entry point: run perft on the position stored in a file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from perftchess.board import Board
from perftchess.perft import perft
from perftchess.tools import USAGE, Command, parse_options, read_file


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the requested action and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        command = parse_options(args)
        if command is Command.HELP:
            print(USAGE)
        elif command is Command.PERFT:
            board = Board(read_file(args[1]))
            print(perft(board, board.depth))
    except (ValueError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())