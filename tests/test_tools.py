import pytest

from perftchess.pieces import Color, Piece, PieceType
from perftchess.tools import (
    HEADER_LINE,
    HORIZONTAL_LINE,
    Command,
    format_board,
    parse_options,
    piece_from_fen_char,
    read_file,
    tokenize,
)


@pytest.mark.parametrize("char", list("PNBRQKpnbrqk"))
def test_fen_char_round_trip(char):
    kind, color = piece_from_fen_char(char)
    assert Piece(kind, (0, 0), color).symbol() == char


def test_fen_char_values():
    assert piece_from_fen_char("K") == (PieceType.KING, Color.WHITE)
    assert piece_from_fen_char("n") == (PieceType.KNIGHT, Color.BLACK)


@pytest.mark.parametrize("char", ["8", "1", "x", "/"])
def test_fen_char_unknown_is_empty(char):
    assert piece_from_fen_char(char) == (PieceType.EMPTY, Color.EMPTY)


def test_parse_perft_with_file(tmp_path):
    path = tmp_path / "pos.perft"
    path.write_text("8/8/8/8/8/8/8/8 w - - 0 1 1\n")
    assert parse_options(["--perft", str(path)]) is Command.PERFT


def test_parse_help():
    assert parse_options(["-h"]) is Command.HELP
    assert parse_options(["--help"]) is Command.HELP


def test_parse_nothing():
    assert parse_options([]) is Command.NONE


def test_parse_perft_without_file():
    assert parse_options(["--perft"]) is Command.NONE


def test_parse_file_before_flag_is_ignored(tmp_path):
    path = tmp_path / "pos.perft"
    path.write_text("x")
    assert parse_options([str(path), "--perft"]) is Command.NONE


def test_parse_too_many():
    with pytest.raises(ValueError, match="too many"):
        parse_options(["--perft", "a", "b"])


def test_parse_two_options():
    with pytest.raises(ValueError, match="two options"):
        parse_options(["--perft", "-h"])
    with pytest.raises(ValueError, match="two options"):
        parse_options(["--help", "--perft"])


def test_parse_invalid_flag():
    with pytest.raises(ValueError, match="Invalid args"):
        parse_options(["--bogus"])


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_options(["--perft", str(tmp_path / "missing")])


def test_read_file_first_line(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("first line\nsecond line\n")
    assert read_file(path) == "first line"


def test_read_file_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert read_file(path) == ""


def test_read_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_file(tmp_path / "nope.txt")


def test_tokenize_fields():
    assert tokenize("rnbqkbnr w KQkq - 0 1", " ") == [
        "rnbqkbnr", "w", "KQkq", "-", "0", "1",
    ]


def test_tokenize_empty_fields_and_trailing():
    assert tokenize("a//b/", "/") == ["a", "", "b"]
    assert tokenize("", "/") == []
    assert tokenize("/a", "/") == ["", "a"]


def test_tokenize_join_round_trip():
    text = "8/pppppppp/8/8/8/8/PPPPPPPP/8"
    assert "/".join(tokenize(text, "/")) == text


def _empty_board():
    return [[None] * 8 for _ in range(8)]


def test_format_board_layout():
    text = format_board(_empty_board())
    lines = text.split("\n")
    assert lines[0] == HEADER_LINE
    assert lines[1] == HORIZONTAL_LINE
    assert text.endswith("\n\n")
    assert lines.count(HORIZONTAL_LINE) == 9
    row_lines = lines[2:18:2]
    assert [line[0] for line in row_lines] == list("12345678")


def test_format_board_shows_pieces():
    board = _empty_board()
    board[0][0] = Piece(PieceType.ROOK, (0, 0), Color.BLACK)
    board[7][4] = Piece(PieceType.KING, (7, 4), Color.WHITE)
    lines = format_board(board).split("\n")
    assert lines[2].startswith("1 | r ")
    assert " | K " in lines[16]
    assert lines[16].startswith("8")
    assert "r" not in lines[4]