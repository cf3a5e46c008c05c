"""Perft: count the legal move sequences of a given length from a position."""

from __future__ import annotations

from perftchess.board import Board
from perftchess.moves import Move, MoveType, get_possible_moves


def _pseudo_legal_moves(board: Board) -> list[Move]:
    player = board.player
    return [
        move
        for piece in list(board.pieces())
        if piece.color.fen == player
        for move in get_possible_moves(board, piece)
    ]


def perft(board: Board, depth: int) -> int:
    """Number of leaf positions reached by legal moves ``depth`` plies deep.

    The board is searched in place and left as it was found.
    """
    if depth == 0:
        return 1

    nodes = 0
    for move in _pseudo_legal_moves(board):
        move.apply(board)
        board.change_side()
        if not board.is_in_check(move.kind is MoveType.CASTLE):
            nodes += perft(board, depth - 1)
        board.change_side()
        move.undo(board)
    return nodes