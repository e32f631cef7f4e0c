"""Interpreter - evaluate directly constructed arithmetic expression trees."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Union
import operator

Number = Union[int, float]


class Operator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


_OPERATIONS: Dict[Operator, Callable[[Number, Number], Number]] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


class Expression(ABC):
    """Node of an expression tree."""

    @abstractmethod
    def interpret(self) -> Number:
        pass


class Literal(Expression):
    def __init__(self, value: Number):
        self.value = value

    def interpret(self) -> Number:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class BinaryOp(Expression):
    """
    Applies an operator to two sub-expressions.

    Division by zero raises ZeroDivisionError, as in plain arithmetic.
    """

    def __init__(self, op: Union[Operator, str], left: Expression, right: Expression):
        self.op = Operator(op)
        self.left = left
        self.right = right

    def interpret(self) -> Number:
        return _OPERATIONS[self.op](self.left.interpret(), self.right.interpret())

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


def add(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(Operator.ADD, left, right)


def subtract(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(Operator.SUBTRACT, left, right)


def multiply(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(Operator.MULTIPLY, left, right)


def divide(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(Operator.DIVIDE, left, right)
