"""Shift-reduce parser for E -> E+E | E/E | E*E | a | b."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

ACCEPT = "ACCEPT"
REJECT = "reject"

_TERMINALS = frozenset("ab")
_HANDLE = re.compile(r"E([+/*])E")


@dataclass(frozen=True)
class Step:
    """One row of the parse table: stack, unread input and the action taken."""

    stack: str
    remaining: str
    action: str


def _reduce(stack: str, remaining: str, at_end: bool, steps: list[Step]) -> tuple[str, bool]:
    """Apply every possible reduction; return the new stack and whether parsing ended."""
    reduced = False
    for index, symbol in enumerate(stack):
        if symbol in _TERMINALS:
            stack = stack[:index] + "E" + stack[index + 1 :]
            steps.append(Step(stack, remaining, f"E->{symbol}"))
            reduced = True

    while (match := _HANDLE.search(stack)) is not None:
        start = match.start()
        stack = stack[:start] + "E" + stack[start + 3 :]
        steps.append(Step(stack, remaining, f"E->E{match.group(1)}E"))
        reduced = True

    if at_end and stack == "E":
        steps.append(Step(stack, remaining, ACCEPT))
        return stack, True
    if at_end and not reduced:
        steps.append(Step(stack, remaining, REJECT))
        return stack, True
    return stack, False


def parse(text: str) -> list[Step]:
    """Parse ``text`` and return every step; the last action is ACCEPT or reject."""
    steps = [Step("", text, "--")]
    stack = ""
    for consumed, symbol in enumerate(text, start=1):
        stack += symbol
        remaining = " " * consumed + text[consumed:]
        steps.append(Step(stack, remaining, f"shift {symbol}"))
        stack, finished = _reduce(stack, remaining, consumed == len(text), steps)
        if finished:
            return steps
    _reduce(stack, " " * len(text), True, steps)
    return steps


def main(argv: list[str] | None = None) -> int:
    """Read an input string and print the shift-reduce parse table."""
    parser = argparse.ArgumentParser(description="Shift-reduce parser.")
    parser.parse_args(argv)

    print("\n\t\tSHIFT REDUCE PARSER")
    print("\nGRAMMAR")
    print("\n E-> E+E\n E-> E/E\n E-> E*E\n E-> a/b")
    print("Enter the input symbol:\t")
    words = sys.stdin.read().split()
    text = words[0] if words else ""

    steps = parse(text)
    print("\n\tStack Implementation Table")
    print("Stack\t\tInput Symbol\t\tAction")
    first, *rest = steps
    print(f"$ \t\t{first.remaining}$\t\t\t{first.action}")
    for step in rest:
        final = step.action in (ACCEPT, REJECT)
        marker = "" if final else "$"
        print(f"${step.stack}\t\t{step.remaining}{marker}\t\t\t{step.action}")
    return 0 if steps[-1].action == ACCEPT else 1