"""Tests for the adapters."""

import pytest

from patternkit.domain.core.exceptions import UnknownVariantError
from patternkit.structural.adapter import (
    AdvancedCalculator,
    CalculatorAdapter,
    CelsiusSensorAdapter,
    FahrenheitSensor,
)


@pytest.mark.parametrize(
    "symbol,expected",
    [("add", 12), ("+", 12), ("sub", 8), ("-", 8), ("mul", 20), ("*", 20), ("div", 5), ("/", 5)],
)
def test_calculator_adapter_forwards_to_adaptee(symbol, expected):
    adapter = CalculatorAdapter(AdvancedCalculator())
    assert adapter.operation(10, 2, symbol) == expected


def test_calculator_adapter_unknown_operator():
    adapter = CalculatorAdapter(AdvancedCalculator())
    with pytest.raises(UnknownVariantError):
        adapter.operation(1, 2, "%")


def test_sensor_adapter_translates_result():
    assert CelsiusSensorAdapter(FahrenheitSensor(212)).read_celsius() == 100.0
    assert CelsiusSensorAdapter(FahrenheitSensor(32)).read_celsius() == 0.0
