"""Flyweight - share intrinsic state between many objects.

Pools are safe for concurrent use: creation on first request for a key is
serialised so a key never maps to two instances.
"""

from typing import Callable, Dict, Generic, Hashable, List, TypeVar
import threading

from pydantic import BaseModel, ConfigDict

from patternkit.infrastructure.logging.logger import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class FlyweightPool(Generic[K, V]):
    """Cache mapping a discriminator to one shared instance."""

    def __init__(self, factory: Callable[[K], V]):
        self._factory = factory
        self._pool: Dict[K, V] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def get_shared(self, key: K) -> V:
        """Return the cached instance for ``key``, creating it if absent."""
        if key in self._pool:
            return self._pool[key]
        with self._lock:
            if key not in self._pool:
                self._pool[key] = self._factory(key)
                self.logger.debug(f"Created flyweight for {key!r}")
            return self._pool[key]

    def count(self) -> int:
        return len(self._pool)

    def keys(self) -> List[K]:
        with self._lock:
            return list(self._pool)

    def clear(self) -> None:
        with self._lock:
            self._pool.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._pool


class CarModel(BaseModel):
    """Intrinsic state shared by every car of the same model."""
    model_config = ConfigDict(frozen=True)

    name: str
    manufacturer: str = "generic"


class CarModelPool(FlyweightPool[str, CarModel]):
    """Pool of car models keyed by model name."""

    def __init__(self, manufacturer: str = "generic"):
        super().__init__(lambda name: CarModel(name=name, manufacturer=manufacturer))


class ParkedCar:
    """Extrinsic state: one per car, referencing a shared model."""

    def __init__(self, plate: str, spot: int, model: CarModel):
        self.plate = plate
        self.spot = spot
        self.model = model

    def describe(self) -> str:
        return f"{self.plate} ({self.model.name}) in spot {self.spot}"
