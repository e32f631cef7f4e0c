"""Core domain types - value objects, results and exceptions."""

from .common_types import BankAccount, Car, ElementKind, Truck, Vehicle, VehicleKind
from .exceptions import (
    ConfigurationError,
    DomainException,
    PatternNotFoundError,
    RegistrationError,
    UnknownFamilyError,
    UnknownVariantError,
    ValidationError,
)
from .results import AccessDenied, InsufficientResource, Result, Success

__all__ = [
    # Value types
    "ElementKind",
    "VehicleKind",
    "Vehicle",
    "Car",
    "Truck",
    "BankAccount",
    # Results
    "Result",
    "Success",
    "InsufficientResource",
    "AccessDenied",
    # Exceptions
    "DomainException",
    "ValidationError",
    "UnknownVariantError",
    "UnknownFamilyError",
    "RegistrationError",
    "PatternNotFoundError",
    "ConfigurationError",
]
