"""Compiler-construction exercises: pattern recognisers, small DFAs, a lexer, a recursive-descent recogniser and FIRST/FOLLOW sets."""

__version__ = "0.1.0"