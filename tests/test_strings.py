import itertools
import math
from fractions import Fraction

import pytest

from algokit.strings import (
    camel_case_words,
    common_child_length,
    infix_to_postfix,
    permutations,
    precedence,
)


def _evaluate_postfix(postfix):
    values = []
    for char in postfix:
        if char.isdigit():
            values.append(Fraction(int(char)))
            continue
        right = values.pop()
        left = values.pop()
        if char == "+":
            values.append(left + right)
        elif char == "-":
            values.append(left - right)
        elif char == "*":
            values.append(left * right)
        elif char == "/":
            values.append(left / right)
        else:
            values.append(left ** int(right))
    assert len(values) == 1
    return values[0]


def test_camel_case_word_count():
    assert camel_case_words("saveChangesInTheEditor") == 5


def test_camel_case_single_word():
    assert camel_case_words("lowercase") == 1


def test_common_child_worked_example():
    assert common_child_length("HARRY", "SALLY") == 2


def test_common_child_of_string_with_itself_is_its_length():
    text = "SHINCHAN"
    assert common_child_length(text, text) == len(text)


def test_common_child_is_symmetric():
    first, second = "ABCDEFG", "GFEDCBA"
    assert common_child_length(first, second) == common_child_length(second, first)


def test_common_child_with_empty_string():
    assert common_child_length("", "ABC") == 0


def test_permutations_cover_every_arrangement_once():
    text = "abcd"
    produced = list(permutations(text))
    assert len(produced) == math.factorial(len(text))
    assert set(produced) == {"".join(p) for p in itertools.permutations(text)}


def test_permutations_start_with_input():
    assert next(permutations("abc")) == "abc"


def test_permutations_of_empty_string():
    assert list(permutations("")) == [""]


def test_precedence_ordering():
    assert precedence("+") == precedence("-")
    assert precedence("*") == precedence("/")
    assert precedence("+") < precedence("*") < precedence("$")


def test_precedence_of_non_operator():
    assert precedence("x") == -1


def test_infix_to_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("1+2*3", 1 + 2 * 3),
        ("(1+2)*3", (1 + 2) * 3),
        ("8-3-2", 8 - 3 - 2),
        ("8/4/2", Fraction(8, 4) / 2),
        ("2$3$2", 2**3**2),
        ("(9-2)*(4+1)/7", Fraction((9 - 2) * (4 + 1), 7)),
    ],
)
def test_postfix_evaluates_like_infix(expression, expected):
    assert _evaluate_postfix(infix_to_postfix(expression)) == expected


def test_spaces_and_commas_are_skipped():
    assert infix_to_postfix("a + b, * c") == infix_to_postfix("a+b*c")


def test_operands_keep_their_order():
    expression = "(a+b)*(c-d)/e$f"
    postfix = infix_to_postfix(expression)
    assert [c for c in postfix if c.isalnum()] == [c for c in expression if c.isalnum()]


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", "a#b"])
def test_malformed_expressions_raise(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)