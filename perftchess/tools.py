"""FEN helpers, command-line option parsing and board display."""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum

from perftchess.pieces import Color, Piece, PieceType

USAGE = (
    "Allowed options:\n"
    "  -h [ --help ]   show usage\n"
    "  --perft arg     path to a perft file, outputs the number of\n"
    "                  legal move given a position and a depth"
)

HEADER_LINE = "     A    B    C    D    E    F    G    H   "
HORIZONTAL_LINE = "  +----+----+----+----+----+----+----+----+"
_VERTICAL = " | "

_FEN_PIECES = {
    "P": (PieceType.PAWN, Color.WHITE),
    "N": (PieceType.KNIGHT, Color.WHITE),
    "B": (PieceType.BISHOP, Color.WHITE),
    "R": (PieceType.ROOK, Color.WHITE),
    "Q": (PieceType.QUEEN, Color.WHITE),
    "K": (PieceType.KING, Color.WHITE),
    "p": (PieceType.PAWN, Color.BLACK),
    "n": (PieceType.KNIGHT, Color.BLACK),
    "b": (PieceType.BISHOP, Color.BLACK),
    "r": (PieceType.ROOK, Color.BLACK),
    "q": (PieceType.QUEEN, Color.BLACK),
    "k": (PieceType.KING, Color.BLACK),
}


class Command(Enum):
    """What the command line asks for."""

    HELP = 0
    PERFT = 1
    NONE = 2


def piece_from_fen_char(char: str) -> tuple[PieceType, Color]:
    """Kind and colour for a FEN piece letter; anything else is empty."""
    return _FEN_PIECES.get(char, (PieceType.EMPTY, Color.EMPTY))


def parse_options(argv: Sequence[str]) -> Command:
    """Decide what to do from the arguments (program name excluded).

    A perft run needs ``--perft`` followed by an existing file; the file is
    then the second argument.
    """
    if len(argv) > 2:
        raise ValueError("too many input parameters!")

    help_requested = False
    perft_requested = False
    file_given = False

    for arg in argv:
        if arg.startswith("-"):
            if arg in ("-h", "--help"):
                if perft_requested:
                    raise ValueError("cannot use two options")
                help_requested = True
            elif arg == "--perft":
                if help_requested:
                    raise ValueError("cannot use two options")
                perft_requested = True
            else:
                raise ValueError("Invalid args")
        elif perft_requested and not help_requested:
            if not os.path.exists(arg):
                raise FileNotFoundError(
                    "cannot open file or the file does not exist"
                )
            file_given = True

    if help_requested:
        return Command.HELP
    if perft_requested and file_given:
        return Command.PERFT
    return Command.NONE


def format_board(board: Sequence[Sequence[Piece | None]]) -> str:
    """Draw the first eight rows and columns of a board as a text grid."""
    lines = [HEADER_LINE, HORIZONTAL_LINE]
    for number, row in enumerate(board[:8], start=1):
        cells = "".join(
            f"{_VERTICAL}{piece.symbol() if piece is not None else ' '} "
            for piece in row[:8]
        )
        lines.append(f"{number}{cells}{_VERTICAL}")
        lines.append(HORIZONTAL_LINE)
    return "\n".join(lines) + "\n\n"


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the first line of a text file, without its line break."""
    with open(path, encoding="utf-8") as handle:
        return handle.readline().removesuffix("\n")


def tokenize(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter, dropping the single empty field after a trailing one."""
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts