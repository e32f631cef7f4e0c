"""Observer - ordered subscriber callbacks notified with the same payload."""

from typing import Any, Callable, List
import threading

from patternkit.infrastructure.logging.logger import get_logger

Subscriber = Callable[[Any], None]


class Subject:
    """
    Maintains subscribers in subscription order.

    ``notify`` works on a snapshot of the subscriber list taken when it
    starts, so subscribers added during a pass wait for the next one.
    """

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    def subscribe(self, callback: Subscriber) -> Callable[[], bool]:
        """
        Add ``callback``; subscribing the same callback twice is a no-op.

        Duplicate subscriptions share one entry, so the functions returned for
        them are interchangeable: the first one called removes the callback and
        the rest return False.

        Returns:
            A zero-argument function that unsubscribes ``callback``
        """
        with self._lock:
            if callback not in self._subscribers:
                self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> bool:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)
                return True
        return False

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify(self, data: Any) -> int:
        """
        Call every subscriber with ``data`` in subscription order.

        A subscriber that raises is logged and skipped; the others still run.

        Returns:
            Number of subscribers that completed without raising
        """
        with self._lock:
            snapshot = list(self._subscribers)

        delivered = 0
        for callback in snapshot:
            try:
                callback(data)
                delivered += 1
            except Exception as e:
                self._logger.error(f"Subscriber {callback!r} failed: {e}")
        return delivered
