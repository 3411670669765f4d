"""FIFO queue of single characters, used for phone numbers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class CharQueue:
    """A queue whose elements are one-character strings."""

    def __init__(self) -> None:
        self._chars: deque[str] = deque()

    @classmethod
    def from_text(cls, text: str) -> CharQueue:
        """Build a queue holding each character of ``text`` in order."""
        queue = cls()
        for char in text:
            queue.enqueue(char)
        return queue

    def enqueue(self, char: str) -> None:
        """Add ``char`` at the tail."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._chars.append(char)

    def dequeue(self) -> str:
        """Remove and return the character at the head."""
        if not self._chars:
            raise IndexError("dequeue from empty queue")
        return self._chars.popleft()

    def is_empty(self) -> bool:
        return not self._chars

    def render(self) -> str:
        """Return the characters head to tail, with no separators."""
        return "".join(self._chars)

    def to_text(self) -> str:
        """Return the queue's contents as a string."""
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharQueue):
            return NotImplemented
        return self._chars == other._chars

    def __repr__(self) -> str:
        return f"CharQueue.from_text({self.to_text()!r})"