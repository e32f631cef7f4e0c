"""Core value types used by several pattern modules."""
from __future__ import annotations
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from patternkit.domain.core.exceptions import ValidationError
from patternkit.domain.core.results import InsufficientResource, Result, Success


class ElementKind(str, Enum):
    """Closed set of element variants a visitor can dispatch on."""
    FILE = "file"
    FOLDER = "folder"
    CAR = "car"
    TRUCK = "truck"


class VehicleKind(str, Enum):
    """Vehicle variants produced by the vehicle factories."""
    CAR = "car"
    TRUCK = "truck"


class Vehicle(BaseModel):
    """Base class for vehicles."""
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
    )

    kind: ClassVar[ElementKind]

    model: str = Field(..., min_length=1)
    color: str = "white"
    trim: str = "standard"

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e, f"Invalid {type(self).__name__}") from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e, f"Invalid {type(self).__name__}.{name}") from e

    def accept(self, visitor: Any) -> Any:
        """Double dispatch into ``visitor``."""
        return visitor.visit(self)

    def describe(self) -> str:
        return f"{self.color} {self.model} {self.kind.value} ({self.trim})"


class Car(Vehicle):
    """Passenger car."""
    kind: ClassVar[ElementKind] = ElementKind.CAR

    doors: int = Field(4, ge=1)


class Truck(Vehicle):
    """Cargo truck."""
    kind: ClassVar[ElementKind] = ElementKind.TRUCK

    payload_tons: float = Field(10.0, gt=0)


class BankAccount:
    """Account holding a balance; the real subject behind an account proxy."""

    def __init__(self, owner: str, balance: float = 0.0):
        if balance < 0:
            raise ValidationError("Opening balance cannot be negative", {"balance": balance})
        self.owner = owner
        self._balance = balance

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> float:
        """Add ``amount`` and return the new balance."""
        self._check_amount(amount)
        self._balance += amount
        return self._balance

    def withdraw(self, amount: float) -> Result:
        """
        Withdraw ``amount``.

        Returns:
            Success carrying the new balance, or InsufficientResource when the
            balance does not cover the amount (the balance is left untouched).
        """
        self._check_amount(amount)
        if amount > self._balance:
            return InsufficientResource(requested=amount, available=self._balance)
        self._balance -= amount
        return Success(self._balance)

    @staticmethod
    def _check_amount(amount: float) -> None:
        if amount <= 0:
            raise ValidationError("Amount must be positive", {"amount": amount})

    def __repr__(self) -> str:
        return f"BankAccount(owner='{self.owner}', balance={self._balance})"
