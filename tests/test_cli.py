from perftchess.cli import main
from perftchess.tools import USAGE

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def _write(tmp_path, text):
    path = tmp_path / "position.perft"
    path.write_text(text + "\n", encoding="utf-8")
    return str(path)


def test_perft_prints_node_count(tmp_path, capsys):
    path = _write(tmp_path, START + " 1")
    assert main(["--perft", path]) == 0
    assert capsys.readouterr().out == "20\n"


def test_perft_without_depth_field_counts_root(tmp_path, capsys):
    path = _write(tmp_path, START)
    assert main(["--perft", path]) == 0
    assert capsys.readouterr().out == "1\n"


def test_help_prints_usage(capsys):
    assert main(["--help"]) == 0
    assert capsys.readouterr().out == USAGE + "\n"


def test_short_help_prints_usage(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == USAGE + "\n"


def test_no_arguments_does_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_unknown_option_fails(capsys):
    assert main(["--bogus"]) == 1
    assert "Invalid args" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    assert main(["--perft", str(tmp_path / "absent.perft")]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_too_many_arguments_fail(capsys):
    assert main(["--perft", "a", "b"]) == 1
    assert "too many input parameters" in capsys.readouterr().err


def test_two_options_fail(capsys):
    assert main(["--perft", "--help"]) == 1
    assert "cannot use two options" in capsys.readouterr().err


def test_bad_fen_fails(tmp_path, capsys):
    path = _write(tmp_path, "8/8/8 w - -")
    assert main(["--perft", path]) == 1
    assert capsys.readouterr().out == ""