"""A handful of small deterministic automata over short strings."""

from __future__ import annotations

import re
import string
import sys
from collections.abc import Callable, Iterator

# Rows are states 0..4; columns are the symbol class ('a' -> 0, anything else -> 1).
_TRANSITIONS = ((0, 0), (2, 3), (1, 4), (4, 1), (3, 2))
_START_STATE = 1
_ACCEPT_STATE = 2

_ZERO_THEN_11 = re.compile(r"(?:011|[^0])*", re.DOTALL)
_ABC = frozenset("abc")
_LOWER_OR_DIGIT = frozenset(string.ascii_lowercase + string.digits)


def accepts_table_dfa(text: str) -> bool:
    """Run the four-state table automaton and report whether it ends in state 2."""
    state = _START_STATE
    for ch in text:
        state = _TRANSITIONS[state][0 if ch == "a" else 1]
    return state == _ACCEPT_STATE


def every_zero_followed_by_11(text: str) -> bool:
    """Return True if every '0' in ``text`` is immediately followed by '11'."""
    return _ZERO_THEN_11.fullmatch(text) is not None


def starts_and_ends_same(text: str) -> bool:
    """Return True for a non-empty string over 'abc' whose first and last letters agree."""
    return bool(text) and text[0] == text[-1] and set(text) <= _ABC


def lowercase_and_digits(text: str) -> bool:
    """Return True if ``text`` holds only ASCII lowercase letters and digits."""
    return set(text) <= _LOWER_OR_DIGIT


CHECKS: dict[int, Callable[[str], bool]] = {
    1: accepts_table_dfa,
    2: every_zero_followed_by_11,
    3: starts_and_ends_same,
    4: lowercase_and_digits,
}

MENU = (
    "Choose Test Case:\n"
    "1. DFA for string 'abbabab'\n"
    "2. DFA for strings where every '0' is followed by '11'\n"
    "3. DFA for strings over 'a', 'b', 'c' starting and ending with the same letter\n"
    "4. DFA for strings over lowercase alphabets and digits, starting with an alphabet\n"
)


def check(choice: int, text: str) -> bool:
    """Run automaton number ``choice`` (1-4) on ``text``."""
    try:
        recogniser = CHECKS[choice]
    except KeyError:
        raise ValueError("Invalid choice") from None
    return recogniser(text)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Ask for an automaton and a string on standard input and report the verdict."""
    tokens = _tokens(sys.stdin)
    print(MENU + "Enter your choice (1-4): ", end="", flush=True)
    raw_choice = next(tokens, "")
    try:
        choice = int(raw_choice)
    except ValueError:
        choice = 0
    print("Enter string: ", end="", flush=True)
    text = next(tokens, "") if choice else ""

    try:
        valid = check(choice, text)
    except ValueError as exc:
        print(exc)
        return 1
    print("Valid" if valid else "Invalid")
    return 0