"""Adapter - expose a target interface over an incompatible adaptee."""

from typing import Callable, Dict

from patternkit.domain.core.exceptions import UnknownVariantError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AdvancedCalculator:
    """Adaptee: one method per arithmetic operation."""

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def mul(self, a: float, b: float) -> float:
        return a * b

    def div(self, a: float, b: float) -> float:
        return a / b


class CalculatorAdapter:
    """Target interface: a single ``operation(a, b, symbol)`` entry point."""

    def __init__(self, calculator: AdvancedCalculator):
        self._calculator = calculator
        self._operations: Dict[str, Callable[[float, float], float]] = {
            "add": calculator.add,
            "+": calculator.add,
            "sub": calculator.sub,
            "-": calculator.sub,
            "mul": calculator.mul,
            "*": calculator.mul,
            "div": calculator.div,
            "/": calculator.div,
        }

    def operation(self, a: float, b: float, operator_symbol: str) -> float:
        """
        Forward to the adaptee method matching ``operator_symbol``.

        Raises:
            UnknownVariantError: If the operator is not supported
        """
        method = self._operations.get(operator_symbol)
        if method is None:
            raise UnknownVariantError(operator_symbol, self._operations.keys())
        logger.debug(f"Adapting operation '{operator_symbol}' to {method.__name__}")
        return method(a, b)


class FahrenheitSensor:
    """Adaptee reporting temperatures in Fahrenheit."""

    def __init__(self, reading_f: float):
        self.reading_f = reading_f

    def read_fahrenheit(self) -> float:
        return self.reading_f


class CelsiusSensorAdapter:
    """Target interface reporting Celsius, translating the adaptee's result."""

    def __init__(self, sensor: FahrenheitSensor):
        self._sensor = sensor

    def read_celsius(self) -> float:
        return round((self._sensor.read_fahrenheit() - 32.0) * 5.0 / 9.0, 2)
