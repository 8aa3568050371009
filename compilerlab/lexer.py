"""A small lexical analyser that sorts C-like tokens into categories."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from pathlib import Path

KEYWORDS = frozenset({"int", "char", "return", "using", "namespace", "std", "main"})
OPERATORS = frozenset("+-*/=<>!%")
PUNCTUATION = frozenset(";,()[]{}")
_WHITESPACE = frozenset(" \t\n\v\f\r")

_LINE_COMMENT = re.compile("//[^\n\r\u2028\u2029]*")
_BLOCK_COMMENT = re.compile("/\\*[^\n\r\u2028\u2029]*?\\*/")
_NUMBER = re.compile(r"\d+", re.ASCII)
_CHAR_LITERAL = re.compile(r"'\w'", re.ASCII)
_IDENTIFIER = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

SAMPLE_PROGRAM = """
#include<iostream>
using namespace std;

int main(){
    int a = 5,7H;
    //assign value
    char b='x';
    /* return 
    value*/
    return a+b;
}
"""


@dataclass
class LexicalReport:
    """Tokens of a program grouped by category, in order of appearance."""

    keywords: list[str] = field(default_factory=list)
    identifiers: list[str] = field(default_factory=list)
    constants: list[str] = field(default_factory=list)
    operators: list[str] = field(default_factory=list)
    punctuation: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def format(self) -> str:
        """Render the report as one labelled line per category."""
        sections = (
            ("Keywords", self.keywords),
            ("Identifiers", self.identifiers),
            ("Constants", self.constants),
            ("Operators", self.operators),
            ("Punctuation", self.punctuation),
            ("Lexical Errors", self.errors),
        )
        return "\n".join(
            f"{label}: " + "".join(f"{token} " for token in tokens)
            for label, tokens in sections
        )


def remove_comments(code: str) -> str:
    """Strip '//' comments and single-line '/* */' comments."""
    return _BLOCK_COMMENT.sub("", _LINE_COMMENT.sub("", code))


def tokenize(code: str) -> list[str]:
    """Split ``code`` on whitespace, operators and punctuation, keeping the latter."""
    tokens: list[str] = []
    current: list[str] = []
    for ch in code:
        if ch in _WHITESPACE or ch in OPERATORS or ch in PUNCTUATION:
            if current:
                tokens.append("".join(current))
                current.clear()
            if ch not in _WHITESPACE:
                tokens.append(ch)
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def is_constant(token: str) -> bool:
    """Return True for a decimal number or a one-character quoted literal."""
    return bool(_NUMBER.fullmatch(token) or _CHAR_LITERAL.fullmatch(token))


def is_identifier(token: str) -> bool:
    """Return True if ``token`` is a valid identifier."""
    return _IDENTIFIER.fullmatch(token) is not None


def analyze(code: str) -> LexicalReport:
    """Remove comments from ``code``, tokenise it and sort the tokens."""
    report = LexicalReport()
    for token in tokenize(remove_comments(code)):
        if token in KEYWORDS:
            report.keywords.append(token)
        elif token in OPERATORS:
            report.operators.append(token)
        elif token in PUNCTUATION:
            report.punctuation.append(token)
        elif is_constant(token):
            report.constants.append(token)
        elif is_identifier(token):
            report.identifiers.append(token)
        else:
            report.errors.append(token)
    return report


def main(argv: list[str] | None = None) -> int:
    """Analyse a source file, or the built-in sample program, and print the report."""
    parser = argparse.ArgumentParser(description="Sort the tokens of a C-like program.")
    parser.add_argument("path", nargs="?", type=Path, help="file to analyse")
    args = parser.parse_args(argv)
    code = args.path.read_text() if args.path else SAMPLE_PROGRAM
    print(analyze(code).format())
    return 0