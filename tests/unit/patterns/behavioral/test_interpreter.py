"""Tests for the expression interpreter."""

import pytest

from patternkit.behavioral.interpreter import (
    BinaryOp,
    Literal,
    Operator,
    add,
    divide,
    multiply,
    subtract,
)


def test_literal():
    assert Literal(7).interpret() == 7


def test_nested_tree():
    # (2 + 3) * (10 - 4) = 30
    tree = multiply(add(Literal(2), Literal(3)), subtract(Literal(10), Literal(4)))

    assert tree.interpret() == 30
    assert str(tree) == "((2 + 3) * (10 - 4))"


def test_tree_structure_decides_evaluation_order():
    # 2 + (3 * 4) vs (2 + 3) * 4
    assert add(Literal(2), multiply(Literal(3), Literal(4))).interpret() == 14
    assert multiply(add(Literal(2), Literal(3)), Literal(4)).interpret() == 20


def test_operator_from_symbol():
    assert BinaryOp("/", Literal(9), Literal(2)).interpret() == 4.5
    assert BinaryOp("-", Literal(1), Literal(2)).op is Operator.SUBTRACT


def test_unknown_operator_symbol():
    with pytest.raises(ValueError):
        BinaryOp("%", Literal(1), Literal(2))


def test_division_by_zero_follows_arithmetic():
    with pytest.raises(ZeroDivisionError):
        divide(Literal(1), Literal(0)).interpret()
