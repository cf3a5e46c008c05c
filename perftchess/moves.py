"""Pseudo-legal move generation and reversible moves.

A board handed to these functions exposes ``squares`` (an 8x8 grid of
``Piece | None`` indexed by row then column), ``player`` ("w" or "b"),
``en_passant`` (a square name or "-"), ``castling`` (the four rights in the
order K, Q, k, q), ``set_castling(name, value)`` and the path generators
``row_path``, ``col_path``, ``diag_path``, ``square_path``, ``knight_path``,
``pawn_path``, ``pawn_attacks`` and ``castle``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from perftchess.pieces import Piece, PieceType


class MoveType(Enum):
    """How a move changes the board beyond moving one piece."""

    BASIC = 0
    DOUBLE_PUSH = 1
    EN_PASSANT = 2
    CASTLE = 3
    PROMOTION = 4


@dataclass(eq=False)
class Move:
    """A move of ``piece`` to ``end`` that can be applied and undone.

    ``extra`` is the rook for a castle, the original pawn for a promotion
    and, once applied, the captured pawn for an en-passant capture.
    """

    end: tuple[int, int]
    piece: Piece
    extra: Piece | None = None
    kind: MoveType = MoveType.BASIC
    start: tuple[int, int] = field(init=False)
    captured: Piece | None = field(default=None, init=False)
    _saved_en_passant: str = field(default="-", init=False, repr=False)
    _saved_castling: tuple[bool, bool, bool, bool] = field(
        default=(False, False, False, False), init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.start = self.piece.position

    def _behind(self, board: Any) -> int:
        row = self.end[0]
        return row + 1 if board.player == "w" else row - 1

    def apply(self, board: Any) -> None:
        """Play the move on ``board``, remembering what is needed to undo it."""
        squares = board.squares
        end_x, end_y = self.end
        start_x, start_y = self.start

        self.piece = self.piece.moved_to(end_x, end_y)
        self.captured = squares[end_x][end_y]
        squares[end_x][end_y] = self.piece
        squares[start_x][start_y] = None

        if self.kind is MoveType.CASTLE and self.extra is not None:
            new_y, old_y = (3, 0) if end_y == 2 else (5, 7)
            self.extra = self.extra.moved_to(end_x, new_y)
            squares[end_x][new_y] = self.extra
            squares[end_x][old_y] = None

        self._saved_en_passant = board.en_passant
        self._saved_castling = tuple(board.castling)
        board.en_passant = "-"

        kind = self.piece.kind
        if kind is PieceType.KING:
            board.set_castling("K", False)
            board.set_castling("Q", False)
        elif kind is PieceType.ROOK:
            white_k, white_q, black_k, black_q = board.castling
            white = self.piece.color.fen == "w"
            if white and white_k and self.start == (7, 7):
                board.set_castling("K", False)
            elif white and white_q and self.start == (7, 0):
                board.set_castling("Q", False)
            elif not white and black_k and self.start == (0, 7):
                board.set_castling("K", False)
            elif not white and black_q and self.start == (0, 0):
                board.set_castling("K", False)
        elif self.kind is MoveType.DOUBLE_PUSH:
            row = self._behind(board)
            board.en_passant = chr(ord("a") + end_y) + chr(ord("0") + 8 - row)
        elif self.kind is MoveType.EN_PASSANT:
            row = self._behind(board)
            self.extra = squares[row][end_y]
            squares[row][end_y] = None

    def undo(self, board: Any) -> None:
        """Take the move back, restoring pieces, castling rights and en passant."""
        squares = board.squares
        end_x, end_y = self.end
        start_x, start_y = self.start

        self.piece = self.piece.moved_to(start_x, start_y)
        squares[end_x][end_y] = self.captured
        if self.kind is MoveType.PROMOTION:
            squares[start_x][start_y] = Piece(
                PieceType.PAWN, self.start, self.piece.color
            )
        else:
            squares[start_x][start_y] = self.piece
        self.captured = None

        if self.kind is MoveType.CASTLE and self.extra is not None:
            home_y, moved_y = (0, 3) if end_y == 2 else (7, 5)
            self.extra = self.extra.moved_to(end_x, home_y)
            squares[end_x][home_y] = self.extra
            squares[end_x][moved_y] = None

        white_k, white_q, black_k, black_q = self._saved_castling
        if board.player == "w":
            board.set_castling("K", white_k)
            board.set_castling("Q", white_q)
        elif board.player == "b":
            board.set_castling("K", black_k)
            board.set_castling("Q", black_q)

        if self.kind is MoveType.EN_PASSANT and self.extra is not None:
            row, col = self.extra.position
            squares[row][col] = self.extra

        board.en_passant = self._saved_en_passant


def move_bishop(board: Any, piece: Piece) -> list[Move]:
    """Diagonal slides."""
    return list(board.diag_path(piece))


def move_rook(board: Any, piece: Piece) -> list[Move]:
    """Row slides followed by column slides."""
    return [*board.row_path(piece), *board.col_path(piece)]


def move_queen(board: Any, piece: Piece) -> list[Move]:
    """Row, column and diagonal slides, in that order."""
    return [*board.row_path(piece), *board.col_path(piece), *board.diag_path(piece)]


def move_pawn(board: Any, piece: Piece) -> list[Move]:
    """Forward pushes followed by captures."""
    return [*board.pawn_path(piece), *board.pawn_attacks(piece, False)]


def pawn_attack(board: Any, piece: Piece) -> list[Move]:
    """Pawn captures only."""
    return list(board.pawn_attacks(piece, False))


def move_king(board: Any, piece: Piece) -> list[Move]:
    """One-square steps followed by castles."""
    return [*board.square_path(piece), *board.castle(piece)]


def move_knight(board: Any, piece: Piece) -> list[Move]:
    """Knight jumps."""
    return list(board.knight_path(piece))


_GENERATORS = {
    PieceType.BISHOP: move_bishop,
    PieceType.KING: move_king,
    PieceType.KNIGHT: move_knight,
    PieceType.PAWN: move_pawn,
    PieceType.QUEEN: move_queen,
    PieceType.ROOK: move_rook,
}


def get_possible_moves(board: Any, piece: Piece) -> list[Move]:
    """Pseudo-legal moves of ``piece`` on ``board``."""
    generator = _GENERATORS.get(piece.kind)
    if generator is None:
        raise RuntimeError("empty piece")
    return generator(board, piece)