"""Dijkstra's two-stack evaluation of fully parenthesised expressions."""

from __future__ import annotations

from collections.abc import Iterable

from fanalgo.stacks import ArrayStack


def evaluate(tokens: Iterable[str]) -> float:
    """Evaluate a fully parenthesised expression given as tokens.

    Supported operators are ``+`` and ``*``; every other token that is not a
    parenthesis must be a number. Raises ``ValueError`` for a token that is
    not a number and ``IndexError`` for a malformed expression.
    """
    values: ArrayStack[float] = ArrayStack()
    operators: ArrayStack[str] = ArrayStack()

    for token in tokens:
        if token == "(":
            continue
        if token in ("*", "+"):
            operators.push(token)
        elif token == ")":
            operator = operators.pop()
            if operator == "*":
                values.push(values.pop() * values.pop())
            else:
                values.push(values.pop() + values.pop())
        else:
            try:
                values.push(float(token))
            except ValueError as exc:
                raise ValueError(f"invalid number: {token!r}") from exc

    return values.pop()