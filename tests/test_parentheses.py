import pytest

from algosolve.parentheses import (
    check_valid_string,
    is_valid,
    max_depth,
    remove_outer_parentheses,
)


def test_remove_outer_worked_example():
    assert remove_outer_parentheses("(()())(())") == "()()()"


@pytest.mark.parametrize("inner", ["", "()", "(())", "()()", "(()())()"])
def test_remove_outer_primitive_gives_inside(inner):
    assert remove_outer_parentheses("(" + inner + ")") == inner


def test_remove_outer_concatenation_joins_insides():
    insides = ["()", "", "(())()", "()"]
    s = "".join("(" + part + ")" for part in insides)
    assert remove_outer_parentheses(s) == "".join(insides)


def test_remove_outer_empty():
    assert not remove_outer_parentheses("")


def test_max_depth_worked_example():
    assert max_depth("(1+(2*3)+((8)/4))+1") == 3


@pytest.mark.parametrize("n", [0, 1, 4, 9])
def test_max_depth_nested(n):
    assert max_depth("(" * n + ")" * n) == n


def test_max_depth_of_concatenation_is_max_of_parts():
    a = "((x))(y)"
    b = "(((z)))"
    assert max_depth(a + b) == max(max_depth(a), max_depth(b))
    assert max_depth(b + a) == max_depth(b)


def test_max_depth_no_parentheses():
    assert not max_depth("abc+1")


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[]}", "([{}])"])
def test_is_valid_true(s):
    assert is_valid(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "]", "(()"])
def test_is_valid_false(s):
    assert not is_valid(s)


@pytest.mark.parametrize("s", ["", "()", "(*)", "(*))", "*", "(**", "((*)"])
def test_check_valid_string_true(s):
    assert check_valid_string(s)


@pytest.mark.parametrize("s", [")(", "(((*)", ")", "(", "())*"])
def test_check_valid_string_false(s):
    assert not check_valid_string(s)


@pytest.mark.parametrize("s", ["()", "(())", "()()", "{[]}"])
def test_balanced_round_strings_agree(s):
    if set(s) <= set("()"):
        assert check_valid_string(s) == is_valid(s)
    assert is_valid(s)