"""Infix to postfix conversion and three-address code generation."""

from __future__ import annotations

import argparse
import sys

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3, "(": 0, ")": 0}
_OPERATORS = frozenset("+-*/^")


def to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    All operators are left associative. An unclosed ``(`` is dropped.
    """
    output: list[str] = []
    stack: list[str] = []
    for symbol in expression:
        if symbol not in _PRECEDENCE:
            output.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError(f"unmatched ')' in {expression!r}")
            stack.pop()
        else:
            precedence = _PRECEDENCE[symbol]
            while stack and _PRECEDENCE[stack[-1]] >= precedence:
                output.append(stack.pop())
            stack.append(symbol)
    output.extend(symbol for symbol in reversed(stack) if symbol != "(")
    return "".join(output)


def three_address(postfix: str) -> tuple[list[str], str]:
    """Generate three-address code for a postfix expression.

    Returns the code lines and the name that holds the result.
    """
    operands: list[str] = []
    code: list[str] = []
    for symbol in postfix:
        if symbol not in _OPERATORS:
            operands.append(symbol)
            continue
        if len(operands) < 2:
            raise ValueError(f"operator {symbol!r} lacks operands in {postfix!r}")
        right = operands.pop()
        left = operands.pop()
        temporary = f"t{len(code)}"
        code.append(f"{temporary}={left}{symbol}{right}")
        operands.append(temporary)
    return code, operands[0] if operands else ""


def translate(statement: str) -> tuple[str, list[str]]:
    """Translate an assignment such as ``a=b+c*d``.

    Returns the postfix form of the right-hand side and the three-address
    code, ending with the assignment to the target.
    """
    if len(statement) < 2:
        raise ValueError(f"not an assignment: {statement!r}")
    postfix = to_postfix(statement[2:])
    code, result = three_address(postfix)
    return postfix, [*code, f"{statement[0]}={result}"]


def main(argv: list[str] | None = None) -> int:
    """Read an assignment from standard input and print its intermediate code."""
    parser = argparse.ArgumentParser(description="Generate three-address code.")
    parser.parse_args(argv)

    print("\t\tOUTPUT")
    print("****************************************")
    print("Enter the expression:")
    words = sys.stdin.read().split()
    if not words:
        print("no expression given", file=sys.stderr)
        return 1
    postfix, code = translate(words[0])
    print("\n\nThe postfix notation for the given expression:\n")
    print(postfix)
    print("\n\nThree address code\n")
    for line in code:
        print(line)
    return 0