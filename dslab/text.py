"""Letter counting and infix-to-postfix conversion."""

from __future__ import annotations

__all__ = ["count_letters", "precedence", "infix_to_postfix"]

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def count_letters(sentence: str) -> int:
    """Count the characters in sentence that are not spaces."""
    return sum(1 for ch in sentence if ch != " ")


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    return _PRECEDENCE.get(symbol, -1)


def _is_operand(ch: str) -> bool:
    return "A" <= ch <= "Z"


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single letters A-Z to postfix.

    Operators of equal precedence, ``^`` included, associate to the left.
    Raises ValueError on unknown symbols or unbalanced parentheses.
    """
    stack = ["("]
    output: list[str] = []
    for ch in expression + ")":
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        elif ch in _PRECEDENCE:
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ValueError(f"unexpected symbol {ch!r}")
    if stack:
        raise ValueError("unbalanced parentheses")
    return "".join(output)