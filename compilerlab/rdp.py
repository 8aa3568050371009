"""Recursive-descent recogniser for nested lists: S -> ( L ) | a, L -> S (, S)*."""

from __future__ import annotations

import argparse
import sys


class ListParser:
    """Backtracking recogniser for the list grammar over the given text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def parse(self) -> bool:
        """Return True if the whole text derives from S."""
        self.pos = 0
        return self._s() and self.pos == len(self.text)

    def _match(self, expected: str) -> bool:
        if self.pos < len(self.text) and self.text[self.pos] == expected:
            self.pos += 1
            return True
        return False

    def _s(self) -> bool:
        start = self.pos
        if self._match("("):
            if self._l() and self._match(")"):
                return True
            self.pos = start
        return self._match("a")

    def _l(self) -> bool:
        if not self._s():
            return False
        # L' -> , S L' | epsilon
        while True:
            start = self.pos
            if self._match(",") and self._s():
                continue
            self.pos = start
            return True


def is_valid(text: str) -> bool:
    """Return True if ``text`` is a well-formed list."""
    return ListParser(text).parse()


def main(argv: list[str] | None = None) -> int:
    """Check a string given on the command line or read from standard input."""
    parser = argparse.ArgumentParser(description="Check a nested list such as (a,(a)).")
    parser.add_argument("string", nargs="?", help="string to check (read from stdin if absent)")
    args = parser.parse_args(argv)

    if args.string is None:
        print("Enter a string: ", end="", flush=True)
        words = sys.stdin.read().split()
        text = words[0] if words else ""
    else:
        text = args.string

    print("Valid string" if is_valid(text) else "Invalid string")
    return 0