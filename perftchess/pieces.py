"""Chess piece kinds, colours and the piece value type."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class PieceType(Enum):
    """Kind of a chess piece."""

    PAWN = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    KNIGHT = 6
    EMPTY = 7

    def __str__(self) -> str:
        return self.name.capitalize()


class Color(Enum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1
    EMPTY = 2

    @property
    def fen(self) -> str:
        """The side-to-move letter used in FEN ('w' or 'b')."""
        if self is Color.WHITE:
            return "w"
        if self is Color.BLACK:
            return "b"
        raise ValueError("the empty colour has no FEN letter")


_SYMBOLS = {
    PieceType.PAWN: "p",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
    PieceType.KNIGHT: "n",
}


@dataclass(frozen=True)
class Piece:
    """A piece of a given kind and colour standing on (row, column)."""

    kind: PieceType
    position: tuple[int, int]
    color: Color

    def moved_to(self, x: int, y: int) -> Piece:
        """Return the same piece standing on (x, y)."""
        return replace(self, position=(x, y))

    def symbol(self) -> str:
        """FEN letter of the piece: upper case for white, lower case for black."""
        if self.kind is PieceType.EMPTY:
            return "E"
        letter = _SYMBOLS[self.kind]
        return letter.upper() if self.color is Color.WHITE else letter

    def __str__(self) -> str:
        return str(self.kind)