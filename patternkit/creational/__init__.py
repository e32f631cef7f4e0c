"""Creational patterns."""

from .abstract_factory import (
    AbstractFactory,
    EconomyVehicleFactory,
    LuxuryVehicleFactory,
    VehicleFamilyFactory,
)
from .builder import AssembledCar, CarBuilder, CarDirector
from .factory import Factory, VehicleFactory
from .prototype import PrototypeRegistry, clone
from .singleton import SharedState, SingletonRegistry, get_singleton

__all__ = [
    "SharedState",
    "SingletonRegistry",
    "get_singleton",
    "Factory",
    "VehicleFactory",
    "AbstractFactory",
    "VehicleFamilyFactory",
    "EconomyVehicleFactory",
    "LuxuryVehicleFactory",
    "AssembledCar",
    "CarBuilder",
    "CarDirector",
    "PrototypeRegistry",
    "clone",
]
