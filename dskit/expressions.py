"""Conversion of infix expressions to postfix and prefix notation."""

from __future__ import annotations


def precedence(op: str) -> int:
    """Return 2 for * and /, 1 for + and -, and 0 for anything else."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of one-character operands to postfix.

    Operators of equal precedence associate to the left. Any character that
    is neither an operand nor a parenthesis is treated as an operator.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


_SWAP_PARENS = str.maketrans("()", ")(")


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix by reversing it, converting, and reversing back."""
    mirrored = infix[::-1].translate(_SWAP_PARENS)
    return infix_to_postfix(mirrored)[::-1]