"""Epsilon closures read from a table of ``state symbol state`` transitions."""

from __future__ import annotations

import argparse
import sys

EPSILON = "e"

Transition = tuple[str, str, str]


def parse_transitions(text: str) -> list[Transition]:
    """Split ``text`` into ``(source, symbol, target)`` triples."""
    words = text.split()
    if len(words) % 3:
        raise ValueError("transition table must hold triples of source, symbol and target")
    fields = iter(words)
    return list(zip(fields, fields, fields))


def chain_closure(transitions: list[Transition], state: str) -> list[str]:
    """Follow epsilon moves from ``state`` in a single pass over ``transitions``.

    Each epsilon move out of the most recently reached state is taken, so the
    result depends on the order of the table.
    """
    result = [state]
    current = state
    for source, symbol, target in transitions:
        if source == current and symbol == EPSILON:
            result.append(target)
            current = target
    return result


def _format(state: str, closure: list[str]) -> str:
    members = "".join(f"\t{member}\t" for member in closure)
    return f"epsilon closure of {state} => {{{members}}}"


def main(argv: list[str] | None = None) -> int:
    """Read states from standard input and print their epsilon closures."""
    parser = argparse.ArgumentParser(description="Epsilon closures of NFA states.")
    parser.add_argument(
        "transitions",
        nargs="?",
        default="input.dat",
        help="file of 'state symbol state' lines (default: input.dat)",
    )
    args = parser.parse_args(argv)

    with open(args.transitions, encoding="utf-8") as handle:
        transitions = parse_transitions(handle.read())

    print("Enter no of states: ")
    words = sys.stdin.read().split()
    if not words:
        print("no states given", file=sys.stderr)
        return 1
    count = int(words[0])
    states = words[1 : 1 + count]
    if len(states) < count:
        print(f"expected {count} states", file=sys.stderr)
        return 1
    print("Enter the states: ")
    for state in states:
        print(_format(state, chain_closure(transitions, state)))
    return 0