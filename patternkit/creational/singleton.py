"""Singleton registry - at most one instance per key.

Construction is an explicit factory call (``get_singleton``) rather than a
constructor that hands back a stored instance. Creation on first use is
atomic per registry, so concurrent first access never yields two instances.
"""

from typing import Any, Callable, Dict, Hashable, List, Optional, TypeVar
import threading

from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SharedState:
    """Default singleton product: a holder for one mutable value."""

    def __init__(self, key: Hashable):
        self.key = key
        self._data: Any = None

    def get_data(self) -> Any:
        return self._data

    def set_data(self, data: Any) -> None:
        self._data = data

    def __repr__(self) -> str:
        return f"SharedState(key={self.key!r})"


class SingletonRegistry:
    """
    Registry holding the sole instance for each key.

    The registry itself is a process-wide singleton obtained through
    ``get_instance()``.
    """

    _instance: Optional['SingletonRegistry'] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Hashable, Any] = {}
        # Re-entrant so a factory may acquire another singleton
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> 'SingletonRegistry':
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, key: Hashable, factory: Optional[Callable[[], T]] = None) -> T:
        """
        Get the instance for ``key``, creating it on first call.

        Args:
            key: Registry key
            factory: Zero-argument callable used only on first creation.
                Defaults to ``SharedState(key)``.

        Returns:
            The same object for every call with an equal key
        """
        instance = self._instances.get(key)
        if instance is not None:
            return instance
        with self._registry_lock:
            if key not in self._instances:
                self._instances[key] = factory() if factory is not None else SharedState(key)
                self.logger.debug(f"Created singleton instance for key {key!r}")
            return self._instances[key]

    def contains(self, key: Hashable) -> bool:
        return key in self._instances

    def keys(self) -> List[Hashable]:
        with self._registry_lock:
            return list(self._instances)

    def reset(self, key: Optional[Hashable] = None) -> None:
        """Forget one key, or every key when ``key`` is None."""
        with self._registry_lock:
            if key is None:
                self._instances.clear()
                self.logger.debug("Cleared all singleton instances")
            else:
                self._instances.pop(key, None)
                self.logger.debug(f"Cleared singleton instance for key {key!r}")


def get_singleton(key: Hashable, factory: Optional[Callable[[], T]] = None) -> T:
    """
    Standard way to get singleton instances.

    Args:
        key: Key identifying the singleton
        factory: Optional zero-argument constructor for first creation

    Returns:
        The singleton instance for ``key``
    """
    return SingletonRegistry.get_instance().get(key, factory)
