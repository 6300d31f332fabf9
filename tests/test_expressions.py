import pytest

from algokit.expressions import (
    are_brackets_balanced,
    evaluate,
    infix_to_postfix,
    is_valid_parentheses,
)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("[()]{}{[()()]()}", True),
        ("[(])", False),
        ("((", False),
        ("())", False),
        ("", True),
        ("{[]}", True),
    ],
)
def test_are_brackets_balanced(expression, expected):
    assert are_brackets_balanced(expression) is expected


def test_are_brackets_balanced_rejects_stray_character_outside_brackets():
    assert are_brackets_balanced("a") is False
    assert are_brackets_balanced("(a)") is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("(]", False),
        ("([)]", False),
        ("{[]}", True),
        ("(", False),
        ("]", False),
        ("a(b)c", True),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("10 + 2 * 6", 10 + 2 * 6),
        ("100 * 2 + 12", 100 * 2 + 12),
        ("100 * ( 2 + 12 )", 100 * (2 + 12)),
        ("100 * ( 2 + 12 ) / 14", 100 * (2 + 12) // 14),
        ("10 - 4 - 3", 10 - 4 - 3),
        ("42", 42),
    ],
)
def test_evaluate(expression, expected):
    assert evaluate(expression) == expected


def test_evaluate_without_spaces_matches_spaced():
    assert evaluate("3*(4+5)-6/2") == evaluate("3 * ( 4 + 5 ) - 6 / 2")


def test_evaluate_truncates_towards_zero():
    assert evaluate("( 0 - 7 ) / 2") == int(-7 / 2)


def test_evaluate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("1 / 0")


@pytest.mark.parametrize("expression", ["", "1 +", "2 $ 3"])
def test_evaluate_rejects_malformed(expression):
    with pytest.raises(ValueError):
        evaluate(expression)


def test_infix_to_postfix_worked_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


def test_infix_to_postfix_keeps_operands_in_order():
    expression = "a+b*c-(d/e)"
    postfix = infix_to_postfix(expression)
    operands = [c for c in expression if c.isalnum()]
    assert [c for c in postfix if c.isalnum()] == operands
    assert "(" not in postfix and ")" not in postfix
    assert len(postfix) == len(expression) - 2


def _evaluate_postfix_digits(postfix):
    stack = []
    for char in postfix:
        if char.isdigit():
            stack.append(int(char))
        else:
            right, left = stack.pop(), stack.pop()
            stack.append({"+": left + right, "-": left - right, "*": left * right}[char])
    return stack.pop()


@pytest.mark.parametrize("expression", ["1+2*3", "(1+2)*3", "9-4-2", "2*(3+4)-5*6"])
def test_infix_to_postfix_agrees_with_evaluate(expression):
    assert _evaluate_postfix_digits(infix_to_postfix(expression)) == evaluate(expression)


def test_infix_to_postfix_unmatched_closing():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")