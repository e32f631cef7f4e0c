"""Abstract Factory - families of related vehicle products."""

from abc import ABC, abstractmethod
from typing import Dict, List, Type
import threading

from patternkit.domain.core.common_types import Car, Truck
from patternkit.domain.core.exceptions import RegistrationError, UnknownFamilyError
from patternkit.infrastructure.logging.logger import get_logger


class VehicleFamilyFactory(ABC):
    """Interface for factories producing one consistent family of vehicles."""

    family: str = ""

    @abstractmethod
    def create_car(self, model: str) -> Car:
        """Create a car belonging to this family."""

    @abstractmethod
    def create_truck(self, model: str) -> Truck:
        """Create a truck belonging to this family."""


class EconomyVehicleFactory(VehicleFamilyFactory):
    """Basic trims, fewer doors, lighter payloads."""

    family = "economy"

    def create_car(self, model: str) -> Car:
        return Car(model=model, trim="economy", doors=2)

    def create_truck(self, model: str) -> Truck:
        return Truck(model=model, trim="economy", payload_tons=5.0)


class LuxuryVehicleFactory(VehicleFamilyFactory):
    """Premium trims and finishes."""

    family = "luxury"

    def create_car(self, model: str) -> Car:
        return Car(model=model, trim="luxury", color="black", doors=4)

    def create_truck(self, model: str) -> Truck:
        return Truck(model=model, trim="luxury", color="black", payload_tons=20.0)


class AbstractFactory:
    """Hands out the factory bound to a vehicle family."""

    def __init__(self, register_defaults: bool = True) -> None:
        self._families: Dict[str, Type[VehicleFamilyFactory]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)
        if register_defaults:
            self.register_family(EconomyVehicleFactory.family, EconomyVehicleFactory)
            self.register_family(LuxuryVehicleFactory.family, LuxuryVehicleFactory)

    def register_family(self, family: str, factory_class: Type[VehicleFamilyFactory]) -> None:
        """
        Register a factory class for a family.

        Raises:
            RegistrationError: If the family is already registered
        """
        with self._lock:
            if family in self._families:
                raise RegistrationError(f"Family '{family}' is already registered")
            self._families[family] = factory_class
        self.logger.debug(f"Registered vehicle family: {family}")

    def get_factory(self, family: str) -> VehicleFamilyFactory:
        """
        Get a factory bound to ``family``.

        Raises:
            UnknownFamilyError: If ``family`` is not registered
        """
        factory_class = self._families.get(family)
        if factory_class is None:
            raise UnknownFamilyError(family, self._families.keys())
        return factory_class()

    def families(self) -> List[str]:
        return sorted(self._families)
