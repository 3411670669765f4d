"""Tweet drafts and the per-account draft stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime

from .stack import StackEmptyError


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


@dataclass
class Draft:
    """An unpublished tweet."""

    id: int = 1
    text: str = ""
    name: str = ""
    created: datetime = field(default_factory=_now)


class DraftStack:
    """Drafts with the most recent one on top."""

    def __init__(self, drafts: Iterable[Draft] = ()) -> None:
        """Create a stack; ``drafts`` are given from bottom to top."""
        self._drafts: list[Draft] = list(drafts)

    def push(self, draft: Draft) -> None:
        self._drafts.append(draft)

    def pop(self) -> Draft:
        """Remove and return the most recent draft."""
        if not self._drafts:
            raise StackEmptyError("no drafts")
        return self._drafts.pop()

    def peek(self) -> Draft:
        """Return the most recent draft without removing it."""
        if not self._drafts:
            raise StackEmptyError("no drafts")
        return self._drafts[-1]

    def is_empty(self) -> bool:
        return not self._drafts

    def render(self) -> str:
        """Describe the stack's contents from top to bottom."""
        lines = ["Stack Berkait Draft:\n"]
        if not self._drafts:
            lines.append("Stack Berkait Draft kosong.\n")
        else:
            lines.append(
                "\n---\n".join(f"| {draft.text}| {draft.name}\n" for draft in self)
            )
        return "".join(lines)

    def __len__(self) -> int:
        return len(self._drafts)

    def __iter__(self) -> Iterator[Draft]:
        """Iterate from the most recent draft to the oldest."""
        return reversed(self._drafts)

    def __repr__(self) -> str:
        return f"DraftStack({self._drafts!r})"