"""A small lexical analyser that classifies the words of C-like source text."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

KEYWORDS = frozenset({"int", "char", "float", "if", "else", "for"})

_TOKEN_PATTERN = re.compile(
    r"(?P<number>[0-9]+)"
    r"|(?P<word>[A-Za-z][A-Za-z0-9_$]*)"
    r"|(?P<space>[ \t])"
    r"|(?P<newline>\n)"
    r"|(?P<special>.)",
    re.DOTALL,
)


class TokenKind(Enum):
    """The categories a lexeme can fall into."""

    NUMBER = "number"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    SPACE = "space"
    SPECIAL = "special character"


@dataclass(frozen=True)
class Token:
    """One lexeme together with its category."""

    kind: TokenKind
    text: str


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text``; line breaks are not reported as tokens."""
    for match in _TOKEN_PATTERN.finditer(text):
        group = match.lastgroup
        lexeme = match.group()
        if group == "number":
            yield Token(TokenKind.NUMBER, lexeme)
        elif group == "word":
            kind = TokenKind.KEYWORD if lexeme in KEYWORDS else TokenKind.IDENTIFIER
            yield Token(kind, lexeme)
        elif group == "space":
            yield Token(TokenKind.SPACE, lexeme)
        elif group == "special":
            yield Token(TokenKind.SPECIAL, lexeme)


def count_lines(text: str) -> int:
    """Return the number of line breaks in ``text``."""
    return text.count("\n")


def _describe(token: Token) -> str:
    if token.kind is TokenKind.NUMBER:
        return f"{int(token.text)} is a number"
    if token.kind is TokenKind.KEYWORD:
        return f"{token.text} is a keyword"
    if token.kind is TokenKind.IDENTIFIER:
        return f"{token.text} is an identifier"
    if token.kind is TokenKind.SPECIAL:
        return f"{token.text} is a special character"
    return ""


def main(argv: list[str] | None = None) -> int:
    """Classify the tokens of a program read from a file or standard input."""
    parser = argparse.ArgumentParser(description="Classify the tokens of a C program.")
    parser.add_argument("path", nargs="?", help="source file (default: standard input)")
    args = parser.parse_args(argv)

    if args.path is None:
        print("Enter c program:")
        text = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()

    for token in tokenize(text):
        print(_describe(token))
    print(f"Number of lines: {count_lines(text)}")
    return 0