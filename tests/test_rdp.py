import io

import pytest

from compilerlab.rdp import ListParser, is_valid, main


@pytest.mark.parametrize("text", ["a", "(a)", "(a,a)", "((a),a,(a,a))", "(((a)))"])
def test_valid(text):
    assert is_valid(text)


@pytest.mark.parametrize("text", ["", "()", "(a", "a,a", "(a,)", "b", "a)", "(a a)"])
def test_invalid(text):
    assert not is_valid(text)


def test_wrapping_preserves_validity():
    for inner in ["a", "(a,a)", "((a),a)"]:
        assert is_valid(f"({inner})")
        assert is_valid(f"({inner},{inner})")


def test_long_list():
    assert is_valid("(" + ",".join(["a"] * 5000) + ")")


def test_parse_is_repeatable():
    parser = ListParser("(a,(a))")
    assert parser.parse()
    assert parser.parse()
    assert parser.pos == len(parser.text)


def test_main_argument(capsys):
    main(["(a,a)"])
    assert capsys.readouterr().out.strip() == "Valid string"


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(a,\n"))
    main([])
    assert capsys.readouterr().out.strip().endswith("Invalid string")