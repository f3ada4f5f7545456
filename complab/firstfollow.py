"""FIRST and FOLLOW sets for grammars with single-character symbols."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

END_MARKER = "$"

_DEFAULT_RULES = ("E->TX", "X->+TX", "X->i", "T->FY", "Y->*FY", "Y->i", "F->(E)", "F->i")
_DEFAULT_TERMINALS = frozenset("+*()i")


def _add(result: list[str], symbol: str) -> None:
    if symbol not in result:
        result.append(symbol)


@dataclass(frozen=True)
class Grammar:
    """A context-free grammar whose productions are ``(lhs, rhs)`` pairs."""

    productions: tuple[tuple[str, str], ...]
    terminals: frozenset[str]
    start: str
    epsilon: str = "!"

    @property
    def nonterminals(self) -> tuple[str, ...]:
        """Left-hand sides in order of first appearance."""
        return tuple(dict.fromkeys(lhs for lhs, _ in self.productions))

    def first(self, symbol: str) -> tuple[str, ...]:
        """Return the FIRST set of ``symbol`` in order of discovery."""
        result: list[str] = []
        self._collect_first(symbol, result, set())
        return tuple(result)

    def _collect_first(self, symbol: str, result: list[str], visiting: set[str]) -> None:
        if symbol in self.terminals or symbol == self.epsilon:
            _add(result, symbol)
            return
        if symbol in visiting:
            return
        visiting.add(symbol)
        for lhs, rhs in self.productions:
            if lhs == symbol and rhs:
                self._collect_first(rhs[0], result, visiting)

    def follow(self, symbol: str) -> tuple[str, ...]:
        """Return the FOLLOW set of ``symbol`` in order of discovery."""
        result: list[str] = []
        self._collect_follow(symbol, result, set())
        return tuple(result)

    def _collect_follow(self, symbol: str, result: list[str], visiting: set[str]) -> None:
        if symbol in visiting:
            return
        visiting.add(symbol)
        if symbol == self.start:
            _add(result, END_MARKER)
        for lhs, rhs in self.productions:
            for index, current in enumerate(rhs):
                if current != symbol:
                    continue
                following = rhs[index + 1 : index + 2]
                if following:
                    for terminal in self.first(following):
                        if terminal == self.epsilon:
                            self._collect_follow(lhs, result, visiting)
                        else:
                            _add(result, terminal)
                elif lhs != symbol:
                    self._collect_follow(lhs, result, visiting)


def default_grammar() -> Grammar:
    """The expression grammar E->TX, X->+TX|i, T->FY, Y->*FY|i, F->(E)|i."""
    productions = tuple(tuple(rule.split("->", 1)) for rule in _DEFAULT_RULES)
    return Grammar(productions, _DEFAULT_TERMINALS, "E")  # type: ignore[arg-type]


def main(argv: list[str] | None = None) -> int:
    """Print the default grammar with its FIRST and FOLLOW sets."""
    parser = argparse.ArgumentParser(description="FIRST and FOLLOW sets.")
    parser.parse_args(argv)

    grammar = default_grammar()
    print("\n\t\t\tGRAMMAR\n\t\t\t-------")
    for lhs, rhs in grammar.productions:
        print(f"\t\t\t{lhs}->{rhs}")
    print("\n\t\t\tFIRST\n\t\t\t-----")
    for symbol in grammar.nonterminals:
        print(f"\t\t\tFIRST({symbol})={{{','.join(grammar.first(symbol))}}}")
    print("\n\t\t\tFOLLOW\n\t\t\t------")
    for symbol in grammar.nonterminals:
        print(f"\t\t\tFOLLOW({symbol})={{{','.join(grammar.follow(symbol))}}}")
    return 0