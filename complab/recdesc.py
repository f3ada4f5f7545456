"""Recursive descent recogniser for a small expression grammar.

    E  -> T E'
    E' -> + T E' | epsilon
    T  -> F T'
    T' -> * F T' | epsilon
    F  -> ( E ) | a
"""

from __future__ import annotations

import argparse
import sys

EPSILON = "\u03b5"


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.ok = True

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expression(self) -> None:
        self.term()
        while self._peek() == "+":
            self.pos += 1
            self.term()

    def term(self) -> None:
        self.factor()
        while self._peek() == "*":
            self.pos += 1
            self.factor()

    def factor(self) -> None:
        current = self._peek()
        if current == "(":
            self.pos += 1
            self.expression()
            if self._peek() == ")":
                self.pos += 1
            else:
                self.ok = False
        elif current == "a":
            self.pos += 1
        else:
            self.ok = False


def is_valid(text: str) -> bool:
    """Return True when the whole of ``text`` derives from ``E``."""
    parser = _Parser(text)
    parser.expression()
    return parser.ok and parser.pos == len(text)


def main(argv: list[str] | None = None) -> int:
    """Read a string from standard input and report whether it is valid."""
    parser = argparse.ArgumentParser(description="Recursive descent recogniser.")
    parser.parse_args(argv)

    print(
        f"E -> TE' \nE' -> +TE'/{EPSILON} \nT -> FT' \n"
        f"T' -> *FT'/{EPSILON} \nF -> (E)/a"
    )
    print("Enter the string: ")
    words = sys.stdin.read().split()
    text = words[0] if words else ""
    verdict = "Valid" if is_valid(text) else "Invalid"
    print(f"\nEntered string is {verdict}")
    return 0