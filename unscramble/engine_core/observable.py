"""
Snapshot Store - A hot, multi-observer state slot.

Semantics:
- Always holds a value, readable synchronously via `value`
- New subscribers receive the current value immediately
- Every later change is delivered to all subscribers, in subscription order
- Publishing a value equal to the current one is a no-op
"""

from __future__ import annotations
from typing import Callable, Generic, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SnapshotStore(Generic[T]):
    """Observable holder of the latest state value."""

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """
        Register a callback and immediately deliver the current value.

        Returns a function that removes the subscription. Calling it
        more than once is harmless.
        """
        logger.debug("Subscribing %s", callback)
        self._subscribers.append(callback)
        self._deliver(callback, self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> bool:
        """
        Replace the current value and notify subscribers.

        Returns True if subscribers were notified, False if the value
        was equal to the current one.
        """
        if value == self._value:
            return False
        self._value = value
        logger.debug("Publishing to %d subscriber(s)", len(self._subscribers))
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._subscribers):
            self._deliver(callback, value)
        return True

    def _deliver(self, callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception as exc:
            logger.exception("Error in snapshot subscriber %s: %s", callback, exc)
