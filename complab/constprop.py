"""Constant folding and propagation over quadruples."""

from __future__ import annotations

import argparse
import operator
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, replace

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
    "=": lambda left, _right: left,
}


@dataclass(frozen=True)
class Quad:
    """A quadruple ``op op1 op2 res``."""

    op: str
    op1: str
    op2: str
    res: str


def parse_quads(text: str) -> list[Quad]:
    """Parse a count followed by that many whitespace-separated quadruples."""
    words = text.split()
    if not words:
        raise ValueError("missing number of expressions")
    count = int(words[0])
    if count < 0:
        raise ValueError("number of expressions must not be negative")
    body = words[1 : 1 + 4 * count]
    if len(body) < 4 * count:
        raise ValueError(f"expected {count} quadruples")
    fields = iter(body)
    return [Quad(*group) for group in zip(fields, fields, fields, fields)]


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _is_digit_start(text: str) -> bool:
    return text[:1] in "0123456789" and text != ""


def _fold(quad: Quad) -> int | None:
    """Return the constant value of ``quad`` or None when it cannot be folded."""
    constant_operands = _is_digit_start(quad.op1) and _is_digit_start(quad.op2)
    if not (constant_operands or quad.op == "="):
        return None
    left = _leading_int(quad.op1)
    if left is None:
        return None
    operation = _OPERATIONS.get(quad.op[:1])
    if operation is None:
        raise ValueError(f"unsupported operator {quad.op!r}")
    right = _leading_int(quad.op2) if quad.op[:1] != "=" else 0
    return operation(left, right if right is not None else 0)


def _substitute(quad: Quad, name: str, value: str) -> Quad:
    if quad.op1 == name:
        return replace(quad, op1=value)
    if quad.op2 == name:
        return replace(quad, op2=value)
    return quad


def propagate(quads: list[Quad]) -> list[Quad]:
    """Fold constant quadruples and substitute their values into later ones.

    Returns the quadruples that remain after optimisation.
    """
    pending = list(quads)
    remaining: list[Quad] = []
    while pending:
        quad = pending.pop(0)
        value = _fold(quad)
        if value is None:
            remaining.append(quad)
            continue
        pending = [_substitute(later, quad.res, str(value)) for later in pending]
    return remaining


def main(argv: list[str] | None = None) -> int:
    """Read quadruples from standard input and print the optimised code."""
    parser = argparse.ArgumentParser(description="Constant propagation over quadruples.")
    parser.parse_args(argv)

    print("\n\nEnter the maximum number of expression:")
    print("Enter the input:")
    quads = parse_quads(sys.stdin.read())
    print("\nOptimized code is:")
    for quad in propagate(quads):
        print(f" {quad.op} {quad.op1} {quad.op2} {quad.res}")
    return 0