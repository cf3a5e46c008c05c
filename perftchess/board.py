"""Board state parsed from FEN, with square-path move generation and check detection."""

from __future__ import annotations

from collections.abc import Iterator

from perftchess.moves import Move, MoveType, get_possible_moves
from perftchess.pieces import Color, Piece, PieceType
from perftchess.tools import piece_from_fen_char, tokenize

_SIZE = 8
_PROMOTION_KINDS = (
    PieceType.QUEEN,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.KNIGHT,
)
_KNIGHT_OFFSETS = (
    (2, -1),
    (2, 1),
    (1, -2),
    (1, 2),
    (-1, -2),
    (-1, 2),
    (-2, -1),
    (-2, 1),
)


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < _SIZE and 0 <= y < _SIZE


class Board:
    """An 8x8 board indexed by (row, column), row 0 being rank 8.

    Built from a FEN string with an optional seventh field giving the perft
    depth.
    """

    def __init__(self, fen: str) -> None:
        fields = tokenize(fen, " ")
        if len(fields) < 6:
            raise ValueError("a FEN needs at least six fields")
        self.squares: list[list[Piece | None]] = []
        self.fill_board(fields[0])
        self.player = fields[1]
        rights = fields[2]
        self.castle_white_king = "K" in rights
        self.castle_white_queen = "Q" in rights
        self.castle_black_king = "k" in rights
        self.castle_black_queen = "q" in rights
        self.en_passant = fields[3]
        self.halfmove = int(fields[4])
        self.fullmove = int(fields[5])
        self.depth = int(fields[6]) if len(fields) > 6 else 0

    @property
    def castling(self) -> tuple[bool, bool, bool, bool]:
        """Castling rights in the order K, Q, k, q."""
        return (
            self.castle_white_king,
            self.castle_white_queen,
            self.castle_black_king,
            self.castle_black_queen,
        )

    def set_castling(self, name: str, value: bool) -> None:
        """Set the king-side ("K") or queen-side right of the side to move."""
        white = self.player == "w"
        if name == "K":
            if white:
                self.castle_white_king = value
            else:
                self.castle_black_king = value
        elif white:
            self.castle_white_queen = value
        else:
            self.castle_black_queen = value

    def pieces(self) -> Iterator[Piece]:
        """All pieces on the board, row by row."""
        for row in self.squares:
            yield from (piece for piece in row if piece is not None)

    def _slide(self, piece: Piece, steps: Iterator[tuple[int, int]]) -> list[Move]:
        moves = []
        for x, y in steps:
            target = self.squares[x][y]
            if target is None:
                moves.append(Move((x, y), piece))
                continue
            if target.color is not piece.color:
                moves.append(Move((x, y), piece))
            break
        return moves

    def _ray(self, piece: Piece, dx: int, dy: int) -> list[Move]:
        x, y = piece.position

        def steps() -> Iterator[tuple[int, int]]:
            i, j = x + dx, y + dy
            while _on_board(i, j):
                yield i, j
                i, j = i + dx, j + dy

        return self._slide(piece, steps())

    def row_path(self, piece: Piece) -> list[Move]:
        """Slides along the piece's row: left, then right."""
        return [*self._ray(piece, 0, -1), *self._ray(piece, 0, 1)]

    def col_path(self, piece: Piece) -> list[Move]:
        """Slides along the piece's column: up, then down."""
        return [*self._ray(piece, -1, 0), *self._ray(piece, 1, 0)]

    def diag_path(self, piece: Piece) -> list[Move]:
        """Slides along the diagonals: down-right, up-left, up-right, down-left."""
        return [
            *self._ray(piece, 1, 1),
            *self._ray(piece, -1, -1),
            *self._ray(piece, -1, 1),
            *self._ray(piece, 1, -1),
        ]

    def _jumps(self, piece: Piece, targets: Iterator[tuple[int, int]]) -> list[Move]:
        moves = []
        for x, y in targets:
            if not _on_board(x, y):
                continue
            target = self.squares[x][y]
            if target is None or target.color is not piece.color:
                moves.append(Move((x, y), piece))
        return moves

    def square_path(self, piece: Piece) -> list[Move]:
        """One-square steps to every neighbouring square not held by an ally."""
        x, y = piece.position
        neighbours = (
            (i, j)
            for i in range(x - 1, x + 2)
            for j in range(y - 1, y + 2)
            if (i, j) != (x, y)
        )
        return self._jumps(piece, neighbours)

    def knight_path(self, piece: Piece) -> list[Move]:
        """Knight jumps to squares not held by an ally."""
        x, y = piece.position
        return self._jumps(piece, ((x + dx, y + dy) for dx, dy in _KNIGHT_OFFSETS))

    def promotion_moves(self, new_x: int, new_y: int, piece: Piece) -> list[Move]:
        """A pawn move to (new_x, new_y), split into promotions on the last rank."""
        color = piece.color
        last_rank = (new_x == 7 and color is Color.BLACK) or (
            new_x == 0 and color is Color.WHITE
        )
        if not last_rank:
            return [Move((new_x, new_y), piece)]
        return [
            Move(
                (new_x, new_y),
                Piece(kind, piece.position, color),
                piece,
                MoveType.PROMOTION,
            )
            for kind in _PROMOTION_KINDS
        ]

    def pawn_path(self, piece: Piece) -> list[Move]:
        """Forward pushes: the double push from the start row, then the single push."""
        x, y = piece.position
        if piece.color is Color.BLACK:
            step, start_row, last_row = 1, 1, 7
        elif piece.color is Color.WHITE:
            step, start_row, last_row = -1, 6, 0
        else:
            return []
        ahead = x + step
        if not _on_board(ahead, y) or self.squares[ahead][y] is not None:
            return []
        moves = []
        if x == start_row and self.squares[x + 2 * step][y] is None:
            moves.append(Move((x + 2 * step, y), piece, None, MoveType.DOUBLE_PUSH))
        if ahead == last_row:
            moves.extend(self.promotion_moves(ahead, y, piece))
        else:
            moves.append(Move((ahead, y), piece))
        return moves

    def _en_passant_target(self) -> tuple[int, int] | None:
        if len(self.en_passant) < 2:
            return None
        file, rank = self.en_passant[0], self.en_passant[1]
        return 8 - (ord(rank) - ord("0")), ord(file) - ord("a")

    def pawn_attacks(self, piece: Piece, castling: bool) -> list[Move]:
        """Diagonal captures, en-passant captures and, if ``castling``, hits on e1/e8."""
        x, y = piece.position
        row = x + 1 if piece.color is Color.BLACK else x - 1
        en_passant = self._en_passant_target()
        moves = []
        for col in (y - 1, y + 1):
            if not _on_board(row, col):
                continue
            target = self.squares[row][col]
            if target is not None and target.color is not piece.color:
                if target.kind is PieceType.KING:
                    moves.append(Move((row, col), piece))
                else:
                    moves.extend(self.promotion_moves(row, col, piece))
            elif en_passant == (row, col):
                moves.append(Move((row, col), piece, None, MoveType.EN_PASSANT))
            elif castling and row in (0, 7) and col == 4:
                moves.append(Move((row, col), piece))
        return moves

    def _castle_rook(self, row: int, col: int, king: Piece) -> Piece | None:
        rook = self.squares[row][col]
        if rook is None or rook.color is not king.color:
            return None
        return rook if rook.kind is PieceType.ROOK else None

    def castle(self, piece: Piece) -> list[Move]:
        """Castling moves the king may make given the rights and empty squares."""
        white = piece.color is Color.WHITE
        black = piece.color is Color.BLACK
        queen_side = (self.castle_white_queen and white) or (
            self.castle_black_queen and black
        )
        king_side = (self.castle_white_king and white) or (
            self.castle_black_king and black
        )
        moves = []
        if queen_side:
            row = 7 if self.castle_white_queen and white else 0
            if all(self.squares[row][col] is None for col in (1, 2, 3)):
                rook = self._castle_rook(row, 0, piece)
                if rook is not None:
                    moves.append(Move((row, 2), piece, rook, MoveType.CASTLE))
        if king_side:
            row = 7 if self.castle_white_king and white else 0
            if all(self.squares[row][col] is None for col in (5, 6)):
                rook = self._castle_rook(row, 7, piece)
                if rook is not None:
                    moves.append(Move((row, 6), piece, rook, MoveType.CASTLE))
        return moves

    def move_piece(self, piece: Piece, x: int, y: int) -> Piece | None:
        """Move ``piece`` to (x, y) and return whatever stood there before."""
        old_x, old_y = piece.position
        self.squares[old_x][old_y] = None
        previous = self.squares[x][y]
        self.squares[x][y] = piece.moved_to(x, y)
        return previous

    def change_side(self) -> None:
        """Hand the move to the other player."""
        self.player = "w" if self.player == "b" else "b"

    def fill_board(self, placement: str) -> None:
        """Set the squares from the piece-placement field of a FEN."""
        rows = tokenize(placement, "/")
        if len(rows) < _SIZE:
            raise ValueError("piece placement needs eight rows")
        squares: list[list[Piece | None]] = []
        for x, text in enumerate(rows[:_SIZE]):
            row: list[Piece | None] = []
            for char in text:
                kind, color = piece_from_fen_char(char)
                if kind is not PieceType.EMPTY:
                    row.append(Piece(kind, (x, len(row)), color))
                elif char.isdigit():
                    row.extend([None] * int(char))
                else:
                    raise ValueError(f"invalid character in placement: {char!r}")
            if len(row) != _SIZE:
                raise ValueError(f"row {x + 1} does not hold eight squares")
            squares.append(row)
        self.squares = squares

    def is_in_check(self, castling: bool) -> bool:
        """Whether the side to move attacks the other side's king.

        With ``castling`` set, attacks on the squares the king crossed while
        castling count as well.
        """
        moves: list[Move] = []
        king: Piece | None = None
        for piece in self.pieces():
            if piece.color.fen == self.player:
                if piece.kind is PieceType.PAWN:
                    moves.extend(self.pawn_attacks(piece, True))
                else:
                    moves.extend(get_possible_moves(self, piece))
            elif piece.kind is PieceType.KING:
                king = piece
        if king is None:
            raise ValueError("the side that just moved has no king")

        position = king.position
        row = position[0]
        for move in moves:
            end = move.end
            if end == position:
                return True
            if castling and (
                (end == (row, 3) and position == (row, 2))
                or (end == (row, 5) and position == (row, 6))
                or end == (row, 4)
            ):
                return True
        return False