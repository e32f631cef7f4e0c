"""Tests for the beverage decorators."""

import pytest

from patternkit.domain.core.exceptions import ValidationError
from patternkit.structural.decorator import (
    AddOnDecorator,
    BeverageDecorator,
    Coffee,
    DiscountDecorator,
    MilkDecorator,
    SugarDecorator,
)


def test_base_cost():
    assert Coffee().cost() == 5


def test_plain_decorator_forwards():
    coffee = Coffee()
    wrapped = BeverageDecorator(coffee)

    assert wrapped.cost() == coffee.cost()
    assert wrapped.description() == coffee.description()
    assert wrapped.wrapped is coffee


def test_additive_decorators_stack_regardless_of_order():
    assert SugarDecorator(MilkDecorator(Coffee())).cost() == 10
    assert MilkDecorator(SugarDecorator(Coffee())).cost() == 10


def test_description_reflects_wrap_order():
    beverage = SugarDecorator(MilkDecorator(Coffee()))
    assert beverage.description() == "coffee, milk, sugar"


def test_same_decorator_twice():
    assert MilkDecorator(MilkDecorator(Coffee())).cost() == 9


def test_custom_add_on():
    assert AddOnDecorator(Coffee(), "vanilla", 1.5).cost() == 6.5


def test_discount_is_order_sensitive():
    # Discount then milk: 5 * 0.5 + 2
    assert MilkDecorator(DiscountDecorator(Coffee(), 50)).cost() == 4.5
    # Milk then discount: (5 + 2) * 0.5
    assert DiscountDecorator(MilkDecorator(Coffee()), 50).cost() == 3.5


def test_discount_percent_validated():
    with pytest.raises(ValidationError):
        DiscountDecorator(Coffee(), 150)
