"""Pattern Catalog - Registry mapping pattern names to their entry points.

Thread-safe singleton implementation. Pattern modules never depend on the
catalog; it only refers to them.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional
import threading

from patternkit.domain.core.exceptions import PatternNotFoundError, RegistrationError
from patternkit.infrastructure.logging.logger import get_logger


class PatternCategory(str, Enum):
    """Pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternRegistration:
    """Container for pattern registration information."""

    def __init__(self,
                 name: str,
                 category: PatternCategory,
                 entry_point: Callable[..., Any],
                 description: str = ""):
        """
        Initialize pattern registration.

        Args:
            name: Kebab-case pattern name (e.g., 'chain-of-responsibility')
            category: Pattern family
            entry_point: Constructor or factory function for the pattern
            description: One-line summary
        """
        self.name = name
        self.category = PatternCategory(category)
        self.entry_point = entry_point
        self.description = description

    def __repr__(self) -> str:
        return f"PatternRegistration(name='{self.name}', category='{self.category.value}')"


class PatternCatalog:
    """
    Registry of pattern implementations.

    Thread-safe singleton implementation.
    """

    _instance: Optional['PatternCatalog'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'PatternCatalog':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize pattern catalog."""
        if hasattr(self, '_initialized'):
            return

        self._registrations: Dict[str, PatternRegistration] = {}
        self._registry_lock = threading.Lock()
        self.allow_overrides = False
        # Set by create_catalog once the catalog has been configured
        self.config: Optional[Any] = None
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Pattern catalog initialized")

    def register_pattern(self,
                         name: str,
                         category: PatternCategory,
                         entry_point: Callable[..., Any],
                         description: str = "") -> PatternRegistration:
        """
        Register a pattern under ``name``.

        Raises:
            RegistrationError: If the name is already registered and overrides
                are not allowed
        """
        with self._registry_lock:
            if name in self._registrations and not self.allow_overrides:
                raise RegistrationError(f"Pattern '{name}' is already registered")

            registration = PatternRegistration(
                name=name,
                category=category,
                entry_point=entry_point,
                description=description,
            )
            self._registrations[name] = registration

        self.logger.debug(f"Registered pattern: {registration}")
        return registration

    def get_registration(self, name: str) -> PatternRegistration:
        """
        Get the registration for ``name``.

        Raises:
            PatternNotFoundError: If no pattern is registered under ``name``
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise PatternNotFoundError(name, self._registrations.keys())
        return registration

    def create(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call the entry point registered under ``name`` with the given arguments."""
        return self.get_registration(name).entry_point(*args, **kwargs)

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[str]:
        """Registered pattern names, sorted, optionally filtered by category."""
        with self._registry_lock:
            registrations = list(self._registrations.values())
        if category is not None:
            category = PatternCategory(category)
            registrations = [r for r in registrations if r.category is category]
        return sorted(r.name for r in registrations)

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for testing)."""
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Cleared all pattern registrations")

    def reset(self) -> None:
        """Clear registrations and forget the applied configuration (mainly for testing)."""
        self.clear_registrations()
        self.allow_overrides = False
        self.config = None
