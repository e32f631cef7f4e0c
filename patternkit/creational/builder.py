"""Builder - chainable, step-by-step assembly of a car.

Builders are reusable. ``build()`` copies the accumulated state into a new
frozen product; later setter calls change only future products. ``reset()``
returns the builder to its initial state.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from patternkit.domain.core.exceptions import ValidationError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AssembledCar(BaseModel):
    """Finished, immutable product of a CarBuilder."""
    model_config = ConfigDict(frozen=True)

    engine: Optional[str] = None
    wheels: int = Field(0, ge=0)
    seats: int = Field(0, ge=0)
    color: Optional[str] = None
    gps: bool = False


class CarBuilder:
    """Mutable accumulator whose setters return the builder itself."""

    def __init__(self) -> None:
        self._parts: Dict[str, Any] = {}

    def add_engine(self, engine: str) -> CarBuilder:
        self._parts["engine"] = engine
        return self

    def add_wheels(self, wheels: int) -> CarBuilder:
        self._parts["wheels"] = wheels
        return self

    def add_seats(self, seats: int) -> CarBuilder:
        self._parts["seats"] = seats
        return self

    def paint(self, color: str) -> CarBuilder:
        self._parts["color"] = color
        return self

    def add_gps(self, enabled: bool = True) -> CarBuilder:
        self._parts["gps"] = enabled
        return self

    def reset(self) -> CarBuilder:
        self._parts = {}
        return self

    def build(self) -> AssembledCar:
        """
        Produce a finished car from the parts added so far.

        Raises:
            ValidationError: If a part value is invalid (e.g. negative wheels)
        """
        try:
            car = AssembledCar(**self._parts)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e, "Invalid car parts") from e
        logger.debug(f"Built car: {car}")
        return car


class CarDirector:
    """Knows the step sequences for common car configurations."""

    def __init__(self, builder: Optional[CarBuilder] = None):
        self.builder = builder or CarBuilder()

    def sports_car(self) -> AssembledCar:
        return (
            self.builder.reset()
            .add_engine("V8")
            .add_wheels(4)
            .add_seats(2)
            .paint("red")
            .add_gps()
            .build()
        )

    def family_car(self) -> AssembledCar:
        return (
            self.builder.reset()
            .add_engine("I4")
            .add_wheels(4)
            .add_seats(5)
            .paint("blue")
            .build()
        )
