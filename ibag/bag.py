"""A thread-safe shared container guarded by a readers-writer lock."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class Slot(Generic[T]):
    """A mutable holder handed out while the write lock is held."""

    value: T


class _RWLock:
    """Many readers or one writer; waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def reading(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def writing(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class _Shared(Generic[T]):
    def __init__(self, value: T) -> None:
        self.lock = _RWLock()
        self.value = value


class Bag(Generic[T]):
    """A thread-safe bag holding one value; clones share the same value."""

    def __init__(self, value: T) -> None:
        self._shared: _Shared[T] = _Shared(value)

    @contextmanager
    def load(self) -> Iterator[T]:
        """Hold a read lock and yield the contained value."""
        with self._shared.lock.reading():
            yield self._shared.value

    @contextmanager
    def write(self) -> Iterator[Slot[T]]:
        """Hold the write lock and yield a slot; its value is stored on clean exit."""
        with self._shared.lock.writing():
            slot = Slot(self._shared.value)
            yield slot
            self._shared.value = slot.value

    def get(self) -> T:
        """Return the contained value, read under the lock."""
        with self.load() as value:
            return value

    def modify(self, func: Callable[[Slot[T]], R]) -> R:
        """Call ``func`` with exclusive access to a slot and return its result."""
        with self.write() as slot:
            return func(slot)

    def inspect(self, func: Callable[[T], R]) -> R:
        """Call ``func`` with shared read access to the value and return its result."""
        with self.load() as value:
            return func(value)

    def clone(self) -> Bag[T]:
        """Return another handle to the same shared value."""
        other: Bag[T] = Bag.__new__(Bag)
        other._shared = self._shared
        return other

    def __copy__(self) -> Bag[T]:
        return self.clone()

    def __repr__(self) -> str:
        value: Any = self.get()
        return f"Bag({value!r})"