"""Target code generation from simple three-address statements."""

from __future__ import annotations

import argparse
import itertools
import sys

_OPCODES = {"+": "ADD", "-": "SUB", "*": "MUL", "/": "DIV"}


def generate(instructions: list[str]) -> list[str]:
    """Translate statements of the form ``a=b+c`` into register machine code.

    Each statement uses its own register, numbered by its position.
    """
    code: list[str] = []
    for register, instruction in enumerate(instructions):
        if len(instruction) < 5:
            raise ValueError(f"malformed statement: {instruction!r}")
        target, _, left, operator, right = instruction[:5]
        try:
            opcode = _OPCODES[operator]
        except KeyError:
            raise ValueError(f"unsupported operator {operator!r} in {instruction!r}") from None
        code.extend(
            [
                f"Mov {left},R{register}",
                f"{opcode}{right},R{register}",
                f"Mov R{register},{target}",
            ]
        )
    return code


def main(argv: list[str] | None = None) -> int:
    """Read statements up to ``exit`` from standard input and print target code."""
    parser = argparse.ArgumentParser(description="Generate target code from intermediate code.")
    parser.parse_args(argv)

    print("\n Enter the set of intermediate code (terminated by exit):")
    words = sys.stdin.read().split()
    statements = list(itertools.takewhile(lambda word: word != "exit", words))
    code = generate(statements)
    print("\n target code generation")
    print("************************")
    for line in code:
        print(f"\t{line}")
    return 0