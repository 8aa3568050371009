import io
from itertools import product

import pytest

from compilerlab.patterns import (
    BOTH,
    INVALID,
    STAR_ONLY,
    classify,
    main,
    matches_a_plus_bb,
    matches_a_star_bb,
)


@pytest.mark.parametrize("text", ["aaabb", "abb", "aaaaabb", "bb"])
def test_star_accepts(text):
    assert matches_a_star_bb(text)


@pytest.mark.parametrize(
    "text", ["Abab", "", "bbbb", "aaa", "baaabb", "aaabbb", "aaaab"]
)
def test_star_rejects(text):
    assert not matches_a_star_bb(text)


@pytest.mark.parametrize("text", ["aaabb", "abb", "aaaaabb"])
def test_plus_accepts(text):
    assert matches_a_plus_bb(text)


@pytest.mark.parametrize("text", ["bb", "Abab", "", "baaabb", "aaabbb", "aaaab"])
def test_plus_rejects(text):
    assert not matches_a_plus_bb(text)


def test_plus_implies_star():
    for length in range(7):
        for chars in product("ab", repeat=length):
            text = "".join(chars)
            if matches_a_plus_bb(text):
                assert matches_a_star_bb(text)
            if matches_a_star_bb(text) and text.startswith("a"):
                assert matches_a_plus_bb(text)


def test_classify_messages():
    assert classify("aaabb") == BOTH
    assert classify("bb") == STAR_ONLY
    assert classify("Abab") == INVALID


def test_main_with_argument(capsys):
    assert main(["aaabb"]) == 0
    assert capsys.readouterr().out.strip() == "Valid for both a*bb and a+bb"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bb\n"))
    main([])
    out = capsys.readouterr().out
    assert out.startswith("Enter string: ")
    assert out.strip().endswith("Valid for a*bb")


def test_main_truncates_long_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a" * 60 + "bb\n"))
    main([])
    assert capsys.readouterr().out.strip().endswith(INVALID)