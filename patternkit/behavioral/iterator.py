"""Iterator - a one-shot cursor over a fixed sequence."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class IteratorResult(Generic[T]):
    """One step of iteration; ``value`` is None once ``done``."""
    value: Optional[T] = None
    done: bool = False


class SequenceIterator(Generic[T]):
    """
    Cursor over a snapshot of ``items``.

    Exhaustion is permanent: once past the end, ``next()`` keeps returning
    ``IteratorResult(done=True)``.
    """

    def __init__(self, items: Iterable[T]):
        self._items = tuple(items)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._items)

    def next(self) -> IteratorResult[T]:
        if not self.has_next():
            return IteratorResult(done=True)
        value = self._items[self._position]
        self._position += 1
        return IteratorResult(value=value, done=False)

    def __iter__(self) -> SequenceIterator[T]:
        return self

    def __next__(self) -> T:
        step = self.next()
        if step.done:
            raise StopIteration
        return step.value  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"SequenceIterator(position={self._position}, size={len(self._items)})"
