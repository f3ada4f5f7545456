"""Subset construction of a DFA from an NFA over the alphabet ``{0, 1}``.

NFA states are numbered from 0; a DFA state is the bit mask of the NFA
states it contains, so NFA state ``k`` alone is the mask ``1 << k``.
"""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

Rule = tuple[int, int, int]


@dataclass(frozen=True)
class SubsetDFA:
    """A DFA whose ``transitions`` map a state mask to its targets on 0 and 1."""

    num_states: int
    transitions: dict[int, tuple[int, int]]
    start: int = 1
    finals: frozenset[int] = field(default_factory=frozenset)

    @property
    def states(self) -> tuple[int, ...]:
        return tuple(sorted(self.transitions))

    def _step(self, mask: int, symbol: int) -> int:
        if mask in self.transitions:
            return self.transitions[mask][symbol]
        result = 0
        for bit in range(self.num_states):
            if mask & (1 << bit):
                result |= self.transitions[1 << bit][symbol]
        return result

    def run(self, string: str) -> list[int]:
        """Return the states visited while reading ``string``, start included."""
        path = [self.start]
        for char in string:
            if char not in "01":
                raise ValueError(f"symbol {char!r} is not 0 or 1")
            path.append(self._step(path[-1], int(char)))
        return path

    def accepts(self, string: str) -> bool:
        """True when the state reached contains a final NFA state."""
        last = self.run(string)[-1]
        return any(last & (1 << final) for final in self.finals)


def build_dfa(num_states: int, rules: Iterable[Rule]) -> SubsetDFA:
    """Build the DFA for an NFA given as ``(source, symbol, target)`` rules.

    A symbol of 0 means input 0; any other value means input 1.
    """
    if num_states < 1:
        raise ValueError("an automaton needs at least one state")
    moves = {1 << state: [0, 0] for state in range(num_states)}
    for source, symbol, target in rules:
        for state in (source, target):
            if not 0 <= state < num_states:
                raise ValueError(f"state {state} is outside 0..{num_states - 1}")
        moves[1 << source][0 if symbol == 0 else 1] |= 1 << target

    transitions: dict[int, tuple[int, int]] = {
        mask: (zero, one) for mask, (zero, one) in moves.items()
    }
    pending: deque[int] = deque()
    for targets in list(transitions.values()):
        for target in targets:
            if target not in transitions and target not in pending:
                pending.append(target)

    while pending:
        mask = pending.popleft()
        if mask in transitions:
            continue
        zero = one = 0
        for bit in range(num_states):
            if mask & (1 << bit):
                zero |= transitions[1 << bit][0]
                one |= transitions[1 << bit][1]
        transitions[mask] = (zero, one)
        for target in (zero, one):
            if target not in transitions:
                pending.append(target)
    return SubsetDFA(num_states, transitions)


def _state_name(mask: int, num_states: int) -> str:
    if mask == 0:
        return "q0 "
    return "".join(f"q{bit} " for bit in range(num_states) if mask & (1 << bit))


def main(argv: list[str] | None = None) -> int:
    """Read an NFA and three strings from standard input and run the DFA."""
    parser = argparse.ArgumentParser(description="Convert an NFA to a DFA.")
    parser.parse_args(argv)

    words = iter(sys.stdin.read().split())
    try:
        num_states = int(next(words))
        finals = frozenset(int(next(words)) for _ in range(int(next(words))))
        rules = [
            (int(next(words)), int(next(words)), int(next(words)))
            for _ in range(int(next(words)))
        ]
        initial = int(next(words))
    except StopIteration:
        print("incomplete automaton description", file=sys.stderr)
        return 1
    try:
        dfa = build_dfa(num_states, rules)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    dfa = replace(dfa, start=1 << initial, finals=finals)

    print("\nSolving according to DFA")
    for state in range(num_states):
        mask = 1 << state
        for symbol in (0, 1):
            print(f"{mask}-{symbol}-->{dfa.transitions[mask][symbol]}")
    print("\nThe total number of distinct states are::")
    print("STATE     0   1")
    for mask in dfa.states:
        zero, one = dfa.transitions[mask]
        print(f"{_state_name(mask, num_states)}       {zero}   {one}")

    for string in list(words)[:3]:
        print("\nString takes the following path-->")
        try:
            path = dfa.run(string)
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        print("".join(f"{state}-" for state in path))
        print(f"\nFinal state - {path[-1]}")
        print("\nString Accepted" if dfa.accepts(string) else "\nString Rejected")
    return 0