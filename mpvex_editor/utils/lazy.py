"""Lazily-initialized, memoized values.

A :class:`Lazy` wraps a zero-argument factory. The first call to :meth:`Lazy.get`
runs the factory under a lock; every later call returns the stored value
without locking.
"""

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """A value computed once on first access and shared by all callers."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._value = _UNSET

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        """Return the value, constructing it on first access.

        Returns:
            The memoized value
        """
        value = self._value
        if value is not _UNSET:
            return value

        with self._lock:
            # Another thread may have finished construction while we waited
            if self._value is _UNSET:
                self._value = self._factory()
            return self._value

    __call__ = get

    def __repr__(self) -> str:
        state = "initialized" if self.initialized else "pending"
        return f"<Lazy {getattr(self._factory, '__name__', 'factory')} ({state})>"
