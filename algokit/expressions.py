"""Bracket checking, infix evaluation and infix-to-postfix conversion."""

from __future__ import annotations

_OPENERS = {")": "(", "}": "{", "]": "["}
_ARITHMETIC_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_POSTFIX_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def are_brackets_balanced(expression: str) -> bool:
    """Return True when every bracket in ``expression`` is closed in order.

    Any character other than an opening bracket met while no bracket is open
    makes the expression unbalanced. Other characters met while a bracket is
    open are skipped.
    """
    stack: list[str] = []
    for char in expression:
        if char in "([{":
            stack.append(char)
            continue
        if not stack:
            return False
        if char in _OPENERS and stack.pop() != _OPENERS[char]:
            return False
    return not stack


def is_valid_parentheses(text: str) -> bool:
    """Return True when the brackets in ``text`` match; other characters are ignored."""
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif char in _OPENERS:
            if not stack or stack[-1] != _OPENERS[char]:
                return False
            stack.pop()
    return not stack


def _truncating_divide(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(values: list[int], op: str) -> None:
    if op not in _ARITHMETIC_PRECEDENCE:
        raise ValueError(f"unbalanced or unknown operator {op!r}")
    if len(values) < 2:
        raise ValueError(f"operator {op!r} is missing an operand")
    right = values.pop()
    left = values.pop()
    if op == "+":
        values.append(left + right)
    elif op == "-":
        values.append(left - right)
    elif op == "*":
        values.append(left * right)
    else:
        values.append(_truncating_divide(left, right))


def evaluate(expression: str) -> int:
    """Evaluate an integer expression with + - * / and parentheses.

    Division truncates towards zero. Operators of equal precedence group
    from the left.
    """
    values: list[int] = []
    ops: list[str] = []
    i = 0
    length = len(expression)
    while i < length:
        char = expression[i]
        if char == " ":
            i += 1
            continue
        if char == "(":
            ops.append(char)
        elif char.isdigit():
            start = i
            while i < length and expression[i].isdigit():
                i += 1
            values.append(int(expression[start:i]))
            continue
        elif char == ")":
            while ops and ops[-1] != "(":
                _apply(values, ops.pop())
            if ops:
                ops.pop()
        elif char in _ARITHMETIC_PRECEDENCE:
            precedence = _ARITHMETIC_PRECEDENCE[char]
            while ops and _ARITHMETIC_PRECEDENCE.get(ops[-1], 0) >= precedence:
                _apply(values, ops.pop())
            ops.append(char)
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
        i += 1
    while ops:
        _apply(values, ops.pop())
    if not values:
        raise ValueError("expression holds no value")
    return values[-1]


def _postfix_precedence(char: str) -> int:
    return _POSTFIX_PRECEDENCE.get(char, -1)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are ASCII letters and digits; operators are ^ * / + -, all
    grouping from the left.
    """
    stack: list[str] = []
    result: list[str] = []
    for char in expression:
        if _is_operand(char):
            result.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            precedence = _postfix_precedence(char)
            while stack and precedence <= _postfix_precedence(stack[-1]):
                result.append(stack.pop())
            stack.append(char)
    result.extend(reversed(stack))
    return "".join(result)