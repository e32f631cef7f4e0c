"""Domain exceptions shared by every pattern module."""
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all pattern catalog errors."""
    pass


class ValidationError(DomainException):
    """Raised when an input falls outside a documented domain."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

    @classmethod
    def from_pydantic(cls, error: Any, message: str) -> "ValidationError":
        """Wrap a pydantic validation error, keeping its error list as details."""
        return cls(f"{message}: {error}", error.errors())


class UnknownVariantError(DomainException):
    """Raised when a factory is asked for a variant it does not know."""
    def __init__(self, kind: Any, available: Optional[Iterable[Any]] = None):
        self.kind = kind
        self.available: List[str] = sorted(str(a) for a in (available or []))
        super().__init__(
            f"Unknown variant '{kind}'. Available variants: {self.available}"
        )


class UnknownFamilyError(DomainException):
    """Raised when an abstract factory is asked for an unregistered family."""
    def __init__(self, family: Any, available: Optional[Iterable[Any]] = None):
        self.family = family
        self.available: List[str] = sorted(str(a) for a in (available or []))
        super().__init__(
            f"Unknown family '{family}'. Available families: {self.available}"
        )


class RegistrationError(DomainException):
    """Raised when a key is registered twice in a registry."""
    pass


class PatternNotFoundError(UnknownVariantError):
    """Raised when the catalog has no pattern under the requested name."""
    def __init__(self, name: str, available: Optional[Iterable[Any]] = None):
        super().__init__(name, available)
        self.name = name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details
