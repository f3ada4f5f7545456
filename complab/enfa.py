"""Removal of epsilon moves from a nondeterministic finite automaton."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field

EPSILON = "e"


@dataclass(frozen=True)
class NFA:
    """An automaton without epsilon moves whose states are epsilon closures.

    ``closures`` maps each original state to its closure; ``transitions`` maps
    an original state and a symbol to the sorted set of reachable states.
    """

    start: tuple[int, ...]
    alphabet: tuple[str, ...]
    closures: dict[int, tuple[int, ...]]
    transitions: dict[tuple[int, str], tuple[int, ...]]
    finals: tuple[tuple[int, ...], ...]


@dataclass
class EpsilonNFA:
    """An NFA over states ``1..num_states``; ``e`` in the alphabet marks epsilon."""

    alphabet: tuple[str, ...]
    num_states: int
    start: int
    finals: tuple[int, ...]
    _moves: dict[tuple[int, str], list[int]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.alphabet = tuple(self.alphabet)
        self.finals = tuple(self.finals)
        if self.num_states < 1:
            raise ValueError("an automaton needs at least one state")
        self._check_state(self.start)
        for state in self.finals:
            self._check_state(state)

    def _check_state(self, state: int) -> None:
        if not 1 <= state <= self.num_states:
            raise ValueError(f"state {state} is outside 1..{self.num_states}")

    @property
    def has_epsilon(self) -> bool:
        return EPSILON in self.alphabet

    @property
    def symbols(self) -> tuple[str, ...]:
        """The input symbols other than epsilon."""
        return tuple(symbol for symbol in self.alphabet if symbol != EPSILON)

    def add_transition(self, source: int, symbol: str, target: int) -> None:
        """Add a move; moves added later are followed first."""
        if symbol not in self.alphabet:
            raise ValueError(f"symbol {symbol!r} is not in the alphabet")
        self._check_state(source)
        self._check_state(target)
        self._moves.setdefault((source, symbol), []).insert(0, target)

    def _targets(self, state: int, symbol: str) -> list[int]:
        return self._moves.get((state, symbol), [])

    def closure(self, state: int) -> tuple[int, ...]:
        """Return the epsilon closure of ``state`` in depth-first discovery order."""
        self._check_state(state)
        seen: dict[int, None] = {}

        def visit(current: int) -> None:
            if current in seen:
                return
            seen[current] = None
            if self.has_epsilon:
                for target in self._targets(current, EPSILON):
                    visit(target)

        visit(state)
        return tuple(seen)

    def _states(self) -> Iterator[int]:
        return iter(range(1, self.num_states + 1))

    def remove_epsilon(self) -> NFA:
        """Build the equivalent automaton without epsilon moves."""
        closures = {state: self.closure(state) for state in self._states()}
        transitions: dict[tuple[int, str], tuple[int, ...]] = {}
        for state, closure in closures.items():
            for symbol in self.symbols:
                reached: set[int] = set()
                for member in closure:
                    for target in self._targets(member, symbol):
                        reached.update(closures[target])
                transitions[(state, symbol)] = tuple(sorted(reached))

        finals: list[tuple[int, ...]] = []
        for final in self.finals:
            for state, closure in closures.items():
                if final in closure and closure not in finals:
                    finals.append(closure)
        return NFA(
            start=closures[self.start],
            alphabet=self.symbols,
            closures=closures,
            transitions=transitions,
            finals=tuple(finals),
        )


def _format_set(states: tuple[int, ...]) -> str:
    return "{" + "".join(f"q{state}," for state in states) + "}"


def main(argv: list[str] | None = None) -> int:
    """Read an epsilon-NFA from standard input and print the equivalent NFA."""
    parser = argparse.ArgumentParser(description="Convert an epsilon-NFA to an NFA.")
    parser.parse_args(argv)

    print("NOTE:- [ use letter e as epsilon]")
    words = iter(sys.stdin.read().split())
    try:
        alphabet = tuple(next(words) for _ in range(int(next(words))))
        num_states = int(next(words))
        start = int(next(words))
        finals = tuple(int(next(words)) for _ in range(int(next(words))))
        automaton = EpsilonNFA(alphabet, num_states, start, finals)
        for _ in range(int(next(words))):
            source, symbol, target = next(words), next(words), next(words)
            automaton.add_transition(int(source), symbol, int(target))
    except StopIteration:
        print("incomplete automaton description", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    result = automaton.remove_epsilon()
    print("Equivalent NFA without epsilon")
    print("-----------------------------------")
    print(f"start state:{_format_set(result.start)}\t")
    print("Alphabets:" + "".join(f"{symbol} " for symbol in result.alphabet))
    print(" States :" + "".join(f"{_format_set(c)}\t" for c in result.closures.values()))
    print("Transitions are...:")
    for (state, symbol), targets in result.transitions.items():
        print(f"{_format_set(result.closures[state])}\t{symbol}\t{_format_set(targets)}")
    print(" Final states:" + "".join(f"{_format_set(c)}\t" for c in result.finals))
    return 0