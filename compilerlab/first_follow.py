"""FIRST and FOLLOW sets for grammars with single-character symbols.

Upper-case letters are non-terminals, lower-case letters and parentheses are
terminals, and ``e`` stands for the empty string.
"""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence

EPSILON = "e"
END_MARKER = "$"

Grammar = Mapping[str, Sequence[str]]

SAMPLE_GRAMMAR: dict[str, list[str]] = {
    "S": ["ABC", "D"],
    "A": ["a", "e"],
    "B": ["b", "e"],
    "C": ["(S)", "c"],
    "D": ["AC"],
}


def _is_terminal(ch: str) -> bool:
    return (ch.isascii() and ch.islower()) or ch in "()"


def _is_nonterminal(ch: str) -> bool:
    return ch.isascii() and ch.isupper()


def compute_first(grammar: Grammar) -> dict[str, set[str]]:
    """Return the FIRST set of every non-terminal reached from the grammar.

    Raises KeyError for a non-terminal without productions and ValueError for
    left recursion.
    """
    first: dict[str, set[str]] = {}
    active: set[str] = set()

    def visit(symbol: str) -> None:
        current = first.setdefault(symbol, set())
        if current:
            return
        if symbol in active:
            raise ValueError(f"left recursion through {symbol!r}")
        productions = grammar[symbol]
        active.add(symbol)
        for production in productions:
            for ch in production:
                if _is_terminal(ch):
                    current.add(ch)
                    break
                if _is_nonterminal(ch):
                    visit(ch)
                    current.update(first[ch] - {EPSILON})
                    if EPSILON not in first[ch]:
                        break
        active.discard(symbol)

    for non_terminal in sorted(grammar):
        visit(non_terminal)
    return {symbol: first[symbol] for symbol in sorted(first)}


def compute_follow(
    grammar: Grammar, first: Mapping[str, set[str]], start: str = "S"
) -> dict[str, set[str]]:
    """Return FOLLOW sets from one pass over the non-terminals in order."""
    follow: dict[str, set[str]] = {start: {END_MARKER}}

    for symbol in sorted(grammar):
        for non_terminal in sorted(grammar):
            for production in grammar[non_terminal]:
                for pos, ch in enumerate(production):
                    if ch != symbol:
                        continue
                    add_follow = True
                    if pos + 1 < len(production):
                        following = production[pos + 1]
                        if _is_terminal(following):
                            follow.setdefault(symbol, set()).add(following)
                            add_follow = False
                        elif _is_nonterminal(following):
                            following_first = first.get(following, set())
                            extra = following_first - {EPSILON}
                            if extra:
                                follow.setdefault(symbol, set()).update(extra)
                            add_follow = EPSILON in following_first
                    if add_follow:
                        inherited = set(follow.setdefault(non_terminal, set()))
                        if inherited:
                            follow.setdefault(symbol, set()).update(inherited)

    return {symbol: follow[symbol] for symbol in sorted(follow)}


def format_sets(name: str, sets: Mapping[str, set[str]]) -> str:
    """Render sets as lines like ``FIRST(A) = { a e }``."""
    return "\n".join(
        f"{name}({symbol}) = {{ " + "".join(f"{item} " for item in sorted(items)) + "}"
        for symbol, items in sorted(sets.items())
    )


def main(argv: list[str] | None = None) -> int:
    """Print FIRST and FOLLOW sets of the sample grammar."""
    parser = argparse.ArgumentParser(description="FIRST and FOLLOW sets of a sample grammar.")
    parser.parse_args(argv)
    first = compute_first(SAMPLE_GRAMMAR)
    follow = compute_follow(SAMPLE_GRAMMAR, first, "S")
    print("FIRST Sets:")
    print(format_sets("FIRST", first))
    print()
    print("FOLLOW Sets:")
    print(format_sets("FOLLOW", follow))
    return 0