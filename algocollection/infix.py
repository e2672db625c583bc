"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

import argparse
import sys

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "%": 2, "^": 3}
_SPACES = frozenset(" \t")


class ExpressionError(ValueError):
    """Raised when an expression has an unmatched closing parenthesis."""


def precedence(symbol: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(symbol, 0)


def infix_to_postfix(expression: str) -> str:
    """Convert ``expression`` to postfix; each operand is one character.

    Operators of equal precedence, ``^`` included, group to the left.
    Spaces and tabs are ignored. An unmatched ``(`` is carried to the
    output as it is.
    """
    output: list[str] = []
    stack: list[str] = []
    for symbol in expression:
        if symbol in _SPACES:
            continue
        if symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while True:
                if not stack:
                    raise ExpressionError("unmatched ')'")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif symbol in _PRECEDENCE:
            while stack and precedence(stack[-1]) >= precedence(symbol):
                output.append(stack.pop())
            stack.append(symbol)
        else:
            output.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    """Print the postfix form of an expression given or read from stdin."""
    parser = argparse.ArgumentParser(description="Convert infix to postfix.")
    parser.add_argument("expression", nargs="?", help="read from stdin if omitted")
    args = parser.parse_args(argv)
    expression = args.expression
    if expression is None:
        words = sys.stdin.read().split()
        expression = words[0] if words else ""
    try:
        print(infix_to_postfix(expression))
    except ExpressionError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0