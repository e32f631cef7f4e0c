"""Strategy - interchangeable pricing algorithms."""

from abc import ABC, abstractmethod

from patternkit.domain.core.exceptions import ValidationError


class PricingStrategy(ABC):
    """Stateless pricing algorithm."""

    @abstractmethod
    def apply(self, amount: float) -> float:
        pass


class NoDiscount(PricingStrategy):
    def apply(self, amount: float) -> float:
        return amount


class PercentageDiscount(PricingStrategy):
    def __init__(self, percent: float):
        if not 0 <= percent <= 100:
            raise ValidationError(
                f"Discount percent must be within 0..100, got {percent}", {"percent": percent}
            )
        self.percent = percent

    def apply(self, amount: float) -> float:
        return amount * (100 - self.percent) / 100


class FixedDiscount(PricingStrategy):
    """Subtracts a fixed amount, never going below zero."""

    def __init__(self, discount: float):
        if discount < 0:
            raise ValidationError("Discount cannot be negative", {"discount": discount})
        self.discount = discount

    def apply(self, amount: float) -> float:
        return max(0.0, amount - self.discount)


class PricingContext:
    """Holds the active strategy and delegates to it."""

    def __init__(self, strategy: PricingStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> PricingStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: PricingStrategy) -> None:
        self._strategy = strategy

    def execute(self, amount: float) -> float:
        return self._strategy.apply(amount)
