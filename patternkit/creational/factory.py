"""Factory - polymorphic creation over a registered set of variants."""

from typing import Any, Callable, Dict, List
import threading

from pydantic import ValidationError as PydanticValidationError

from patternkit.domain.core.common_types import Car, Truck, VehicleKind
from patternkit.domain.core.exceptions import RegistrationError, UnknownVariantError, ValidationError
from patternkit.infrastructure.logging.logger import get_logger


class Factory:
    """
    Registry of product constructors keyed by variant name.

    Adding a variant is a registration, not a code change to ``create``.
    """

    def __init__(self) -> None:
        self._variants: Dict[str, Callable[..., Any]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, kind: str, constructor: Callable[..., Any]) -> None:
        """
        Register a product variant.

        Raises:
            RegistrationError: If the variant is already registered
        """
        with self._lock:
            if kind in self._variants:
                raise RegistrationError(f"Variant '{kind}' is already registered")
            self._variants[kind] = constructor
        self.logger.debug(f"Registered variant: {kind}")

    def unregister(self, kind: str) -> bool:
        """Remove a variant. Returns False if it was not registered."""
        with self._lock:
            return self._variants.pop(kind, None) is not None

    def create(self, kind: str, *args: Any, **kwargs: Any) -> Any:
        """
        Create a product of variant ``kind``.

        Raises:
            UnknownVariantError: If ``kind`` is not registered
            ValidationError: If a pydantic constructor rejects the arguments
        """
        constructor = self._variants.get(kind)
        if constructor is None:
            raise UnknownVariantError(kind, self._variants.keys())
        try:
            return constructor(*args, **kwargs)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e, f"Invalid arguments for variant '{kind}'") from e

    def variants(self) -> List[str]:
        return sorted(str(kind) for kind in self._variants)

    def is_registered(self, kind: str) -> bool:
        return kind in self._variants


class VehicleFactory(Factory):
    """Factory preloaded with the car and truck variants."""

    def __init__(self) -> None:
        super().__init__()
        self.register(VehicleKind.CAR.value, Car)
        self.register(VehicleKind.TRUCK.value, Truck)

    def create(self, kind: str, *args: Any, **kwargs: Any) -> Any:
        # Accept VehicleKind members as well as plain strings
        if isinstance(kind, VehicleKind):
            kind = kind.value
        return super().create(kind, *args, **kwargs)
