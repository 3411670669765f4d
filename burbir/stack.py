"""Fixed-capacity stack of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MAX_ELEMENTS = 100


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when taking an element from an empty stack."""


class Stack:
    """A stack holding at most ``capacity`` integers."""

    def __init__(self, items: Iterable[int] = (), capacity: int = MAX_ELEMENTS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []
        for item in items:
            self.push(item)

    def push(self, item: int) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError(f"stack is full ({self.capacity} elements)")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("pop from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def render(self) -> str:
        """Return the elements from bottom to top, e.g. ``[10, 20]``."""
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from bottom to top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity})"