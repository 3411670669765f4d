"""Unbounded stack of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .stack import StackEmptyError


class LinkedStack:
    """A stack without a capacity limit."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = list(items)

    def push(self, item: int) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def render(self) -> str:
        """Return the elements from top to bottom separated by commas."""
        return ",".join(str(item) for item in self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"LinkedStack({self._items!r})"