"""Recognisers for the regular languages ``a*bb`` and ``a+bb``."""

from __future__ import annotations

import argparse
import re
import sys

MAX_LENGTH = 49

_A_STAR_BB = re.compile(r"a*bb")
_A_PLUS_BB = re.compile(r"a+bb")

BOTH = "Valid for both a*bb and a+bb"
STAR_ONLY = "Valid for a*bb"
PLUS_ONLY = "Valid for a+bb"
INVALID = "Invalid input"


def matches_a_star_bb(text: str) -> bool:
    """Return True if the whole of ``text`` is zero or more 'a' followed by 'bb'."""
    return _A_STAR_BB.fullmatch(text) is not None


def matches_a_plus_bb(text: str) -> bool:
    """Return True if the whole of ``text`` is one or more 'a' followed by 'bb'."""
    return _A_PLUS_BB.fullmatch(text) is not None


def classify(text: str) -> str:
    """Describe which of the two languages ``text`` belongs to."""
    star = matches_a_star_bb(text)
    plus = matches_a_plus_bb(text)
    if star and plus:
        return BOTH
    if star:
        return STAR_ONLY
    if plus:
        return PLUS_ONLY
    return INVALID


def _read_line(stream) -> str:
    line = stream.readline()
    return line.split("\n", 1)[0][:MAX_LENGTH]


def main(argv: list[str] | None = None) -> int:
    """Classify a string given on the command line or read from standard input."""
    parser = argparse.ArgumentParser(description="Check a string against a*bb and a+bb.")
    parser.add_argument("string", nargs="?", help="string to check (read from stdin if absent)")
    args = parser.parse_args(argv)

    if args.string is None:
        print("Enter string: ", end="", flush=True)
        text = _read_line(sys.stdin)
    else:
        text = args.string[:MAX_LENGTH]

    print(classify(text))
    return 0