"""Chain of Responsibility - pass a request along until a handler resolves it.

A request nobody resolves yields the ``UNHANDLED`` sentinel; it is a normal
return value, not an error.
"""
from __future__ import annotations
from abc import ABC
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from patternkit.domain.core.exceptions import ValidationError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ChainOutcome(Enum):
    """Outcome markers for a chain."""
    UNHANDLED = "Chain is over"

    def __str__(self) -> str:
        return self.value


UNHANDLED = ChainOutcome.UNHANDLED


class Handler(ABC):
    """A link holding at most one next handler."""

    def __init__(self) -> None:
        self._next: Optional[Handler] = None

    @property
    def next_handler(self) -> Optional[Handler]:
        return self._next

    def set_next(self, handler: Handler) -> Handler:
        """
        Link ``handler`` after this one.

        Returns:
            ``handler``, so links can be chained: ``a.set_next(b).set_next(c)``

        Raises:
            ValidationError: If the link would close a cycle
        """
        if any(link is self for link in handler.links()):
            raise ValidationError("Linking this handler would create a cycle in the chain")
        self._next = handler
        return handler

    def links(self) -> Iterator[Handler]:
        """Iterate this handler and every handler after it."""
        link: Optional[Handler] = self
        while link is not None:
            yield link
            link = link._next

    def handle(self, request: Any) -> Any:
        """
        Resolve ``request`` here or delegate it down the chain.

        Links are walked iteratively, so chain length is not bounded by the
        recursion limit. Subclasses customize ``process``, not ``handle``.
        """
        for link in self.links():
            result = link.process(request)
            if result is not UNHANDLED:
                return result
            logger.debug(f"{type(link).__name__} passed request {request!r} on")
        return UNHANDLED

    def process(self, request: Any) -> Any:
        """Resolve ``request`` locally; return UNHANDLED to pass it on."""
        return UNHANDLED


class ApprovalHandler(Handler):
    """Approves purchase amounts up to a spending limit."""

    def __init__(self, name: str, limit: float):
        super().__init__()
        self.name = name
        self.limit = limit

    def process(self, request: Any) -> Any:
        if request <= self.limit:
            return f"{self.name} approved {request}"
        return UNHANDLED


class FunctionHandler(Handler):
    """Handler built from a predicate and a responder."""

    def __init__(self, predicate: Callable[[Any], bool], responder: Callable[[Any], Any]):
        super().__init__()
        self._predicate = predicate
        self._responder = responder

    def process(self, request: Any) -> Any:
        if self._predicate(request):
            return self._responder(request)
        return UNHANDLED


def build_chain(*handlers: Handler) -> Handler:
    """
    Link ``handlers`` in the given order and return the head.

    Raises:
        ValidationError: If no handlers are given
    """
    if not handlers:
        raise ValidationError("A chain needs at least one handler")
    for current, following in zip(handlers, handlers[1:]):
        current.set_next(following)
    return handlers[0]
