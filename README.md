# compilerlab

This package holds small, separate exercises from the front end of a compiler:

- `compilerlab.patterns` recognises strings that match `a*bb` and `a+bb` in full.
- `compilerlab.dfa` has four small recognisers:
  1. a four-state table-driven automaton. It starts in state 1, reads `a` as one symbol and any other character as the second symbol, and accepts when it ends in state 2.
  2. strings in which every `0` is immediately followed by `11`.
  3. non-empty strings over `a`, `b` and `c` whose first and last letters are the same.
  4. strings made only of ASCII lowercase letters and digits. The first character is not checked.
- `compilerlab.lexer` removes comments and splits C-like source into tokens. It sorts the tokens into keywords, identifiers, constants, operators, punctuation and lexical errors.
- `compilerlab.rdp` is a backtracking recursive-descent recogniser for the grammar `S → ( L ) | a`, `L → S L'`, `L' → , S L' | ε`.
- `compilerlab.first_follow` computes FIRST and FOLLOW sets for a grammar whose symbols are single characters.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Command-line use

```
compilerlab-patterns [STRING]   # prints which of a*bb / a+bb the string matches
compilerlab-dfa                 # reads a choice (1-4) and a string from stdin
compilerlab-lexer [PATH]        # analyses PATH, or a built-in C snippet
compilerlab-rdp [STRING]        # prints "Valid string" or "Invalid string"
compilerlab-first-follow        # prints FIRST and FOLLOW sets of the built-in sample grammar
```

`compilerlab-patterns` and `compilerlab-rdp` read the string from standard input when no argument is given. `compilerlab-patterns` uses only the first line and at most 49 characters of it. `compilerlab-dfa` prints `Invalid choice` and exits with status 1 when the choice is not between 1 and 4.

## Library use

```python
from compilerlab.patterns import classify, matches_a_star_bb, matches_a_plus_bb
from compilerlab.dfa import check
from compilerlab.lexer import analyze, tokenize
from compilerlab.rdp import ListParser, is_valid
from compilerlab.first_follow import compute_first, compute_follow, format_sets

matches_a_star_bb("bb")        # True
matches_a_plus_bb("bb")        # False
classify("abb")                # "Valid for both a*bb and a+bb"
check(1, "abbabab")            # True; check(5, ...) raises ValueError
is_valid("(a,(a,a))")          # True
ListParser("(a").parse()       # False

report = analyze("int x = 5; // note")
report.keywords                # ["int"]
report.identifiers             # ["x"]
report.constants               # ["5"]
print(report.format())

grammar = {
    "S": ["ABC", "D"],
    "A": ["a", "e"],
    "B": ["b", "e"],
    "C": ["(S)", "c"],
    "D": ["AC"],
}
first = compute_first(grammar)
follow = compute_follow(grammar, first, "S")
print(format_sets("FIRST", first))
print(format_sets("FOLLOW", follow))
```

In grammars an ASCII uppercase letter is a non-terminal. An ASCII lowercase letter or a parenthesis is a terminal, and `e` stands for the empty string. `compute_first` raises `KeyError` when a non-terminal has no productions, and `ValueError` on left recursion.

## Limitations

- The lexer removes `/* ... */` comments only when they open and close on the same line. A block comment that spans several lines is tokenised as code.
- The lexer knows only a fixed set of keywords: `int`, `char`, `return`, `using`, `namespace`, `std` and `main`.
- `compute_follow` makes a single pass over the non-terminals in sorted order and does not repeat until nothing changes. For some grammars the FOLLOW sets it returns are therefore incomplete.
- `compilerlab-lexer` and `compilerlab-first-follow` take no grammar or keyword configuration. Other grammars are available only through the library functions.