"""A cell whose contents may only be touched by the thread that owns it."""

from __future__ import annotations

import copy
import functools
import threading
from typing import Any, Generic, TypeVar

from ibag.errors import FailTakeOwnership, IBagError, InvalidThreadAccess

T = TypeVar("T")


@functools.total_ordering
class ThreadCell(Generic[T]):
    """Wraps a value and confines access to its owning thread.

    A new cell is owned by the thread that creates it. Another thread may
    claim it once with ``take_ownership`` unless the cell is frozen.
    """

    def __init__(self, value: T, freeze: bool = False) -> None:
        self._value = value
        self._taken = False
        self._lock = threading.Lock()
        self._frozen = freeze
        self._owner = threading.get_ident()

    def take_ownership(self) -> bool:
        """Make the calling thread the owner and freeze the cell."""
        with self._lock:
            if self._frozen:
                raise FailTakeOwnership()
            self._frozen = True
            self._owner = threading.get_ident()
        return True

    def is_valid(self) -> bool:
        """Return whether the calling thread owns the cell."""
        with self._lock:
            owner = self._owner
        return owner == threading.get_ident()

    def _check(self) -> None:
        if not self.is_valid():
            raise InvalidThreadAccess()
        if self._taken:
            raise IBagError("value already taken out of the cell")

    def get(self) -> T:
        """Return the value; raises InvalidThreadAccess off the owning thread."""
        self._check()
        return self._value

    def set(self, value: T) -> None:
        """Replace the value; raises InvalidThreadAccess off the owning thread."""
        self._check()
        self._value = value

    def into_inner(self) -> T:
        """Take the value out of the cell, leaving it empty."""
        self._check()
        value = self._value
        self._taken = True
        del self._value
        return value

    def clone(self) -> ThreadCell[T]:
        """Return an unfrozen cell holding a copy of the value, owned by the caller."""
        return ThreadCell(copy.copy(self.get()), False)

    def __copy__(self) -> ThreadCell[T]:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThreadCell):
            return NotImplemented
        return self.get() == other.get()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ThreadCell):
            return NotImplemented
        return self.get() < other.get()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        try:
            value: Any = self.get()
        except InvalidThreadAccess:
            return "ThreadCell(value=<invalid thread>)"
        except IBagError:
            return "ThreadCell(value=<taken>)"
        return f"ThreadCell(value={value!r})"