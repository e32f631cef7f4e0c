"""Decorator - stackable wrappers that augment a beverage's cost and description."""

from abc import ABC, abstractmethod

from patternkit.domain.core.exceptions import ValidationError


class Beverage(ABC):
    """Interface shared by the base component and every decorator."""

    @abstractmethod
    def cost(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class Coffee(Beverage):
    """Base component."""

    def __init__(self, base_cost: float = 5):
        self._base_cost = base_cost

    def cost(self) -> float:
        return self._base_cost

    def description(self) -> str:
        return "coffee"


class BeverageDecorator(Beverage):
    """Forwards every call to the wrapped beverage unchanged."""

    def __init__(self, wrapped: Beverage):
        self._wrapped = wrapped

    @property
    def wrapped(self) -> Beverage:
        return self._wrapped

    def cost(self) -> float:
        return self._wrapped.cost()

    def description(self) -> str:
        return self._wrapped.description()


class AddOnDecorator(BeverageDecorator):
    """Additive decorator: adds a fixed price and names the add-on."""

    def __init__(self, wrapped: Beverage, name: str, price: float):
        super().__init__(wrapped)
        self.name = name
        self.price = price

    def cost(self) -> float:
        return self._wrapped.cost() + self.price

    def description(self) -> str:
        return f"{self._wrapped.description()}, {self.name}"


class MilkDecorator(AddOnDecorator):
    def __init__(self, wrapped: Beverage):
        super().__init__(wrapped, "milk", 2)


class SugarDecorator(AddOnDecorator):
    def __init__(self, wrapped: Beverage):
        super().__init__(wrapped, "sugar", 3)


class DiscountDecorator(BeverageDecorator):
    """
    Multiplicative decorator; the result depends on where it sits in the stack.

    It discounts only what it wraps, so add-ons applied on top are charged in full.
    """

    def __init__(self, wrapped: Beverage, percent: float):
        if not 0 <= percent <= 100:
            raise ValidationError(
                f"Discount percent must be within 0..100, got {percent}", {"percent": percent}
            )
        super().__init__(wrapped)
        self.percent = percent

    def cost(self) -> float:
        return self._wrapped.cost() * (100 - self.percent) / 100

    def description(self) -> str:
        return f"{self._wrapped.description()}, {self.percent:g}% off"
