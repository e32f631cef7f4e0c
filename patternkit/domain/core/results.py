"""Typed operation results.

Expected-but-exceptional outcomes (not enough balance, no permission) are
returned as values so callers can branch on them without exception
handling. Every result exposes ``ok``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """Operation completed; ``value`` holds its outcome."""
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class InsufficientResource:
    """Operation refused because more was requested than is available."""
    requested: float
    available: float

    @property
    def ok(self) -> bool:
        return False

    @property
    def shortfall(self) -> float:
        return self.requested - self.available

    def __str__(self) -> str:
        return f"Insufficient funds: requested {self.requested}, available {self.available}"


@dataclass(frozen=True)
class AccessDenied:
    """Operation refused because the principal is not authorized."""
    principal: str
    operation: str

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"Access denied: '{self.principal}' may not {self.operation}"


Result = Union[Success, InsufficientResource, AccessDenied]
