"""Threads: follow-up entries attached to a tweet."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


@dataclass
class ThreadEntry:
    """One entry of a thread; two entries are equal when text and time match."""

    text: str
    created: datetime = field(default_factory=_now)


def entry_from_text(text: str) -> ThreadEntry:
    """Create an entry holding ``text`` stamped with the current time."""
    return ThreadEntry(text=text, created=_now())


class Thread:
    """An ordered sequence of thread entries."""

    def __init__(self, entries: Iterable[ThreadEntry] = ()) -> None:
        self._entries: list[ThreadEntry] = list(entries)

    def insert_first(self, entry: ThreadEntry) -> None:
        self._entries.insert(0, entry)

    def insert_last(self, entry: ThreadEntry) -> None:
        self._entries.append(entry)

    def insert_at(self, entry: ThreadEntry, index: int) -> None:
        """Insert ``entry`` so that it ends up at position ``index``."""
        if not 0 <= index <= len(self._entries):
            raise IndexError(f"index {index} out of range")
        self._entries.insert(index, entry)

    def delete_first(self) -> ThreadEntry:
        if not self._entries:
            raise IndexError("delete from empty thread")
        return self._entries.pop(0)

    def delete_last(self) -> ThreadEntry:
        if not self._entries:
            raise IndexError("delete from empty thread")
        return self._entries.pop()

    def delete_at(self, index: int) -> ThreadEntry:
        """Remove and return the entry at position ``index``."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"index {index} out of range")
        return self._entries.pop(index)

    def is_empty(self) -> bool:
        return not self._entries

    def render(self) -> str:
        """Return the entry texts as ``[a, b, c]``."""
        return "[" + ", ".join(entry.text for entry in self._entries) + "]"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ThreadEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Thread({self._entries!r})"