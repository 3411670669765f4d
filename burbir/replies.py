"""Replies to a tweet, kept as a tree of nested replies."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

DATETIME_FORMAT = "%d/%m/%Y %H:%M:%S"
INDENT = "   "
ROOT_PARENT_ID = -1
PRIVATE_MARK = "PRIVAT"


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


@dataclass(eq=False)
class Reply:
    """One reply; ``children`` are the replies made to it, oldest first."""

    id: int
    author: Any
    text: str = ""
    created: datetime = field(default_factory=_now)
    parent_id: int = ROOT_PARENT_ID
    children: list[Reply] = field(default_factory=list)


def render_reply(reply: Reply, depth: int = 0) -> str:
    """Describe one reply, indented ``depth`` levels; private authors are hidden."""
    margin = INDENT * depth
    if reply.author.is_public:
        details = [
            reply.author.username,
            reply.created.strftime(DATETIME_FORMAT),
            reply.text,
        ]
    else:
        details = [PRIVATE_MARK] * 3
    lines = [f"ID = {reply.id}", *details]
    return "".join(f"{margin}| {line}\n" for line in lines) + "\n"


def _locate(siblings: list[Reply], reply_id: int) -> tuple[list[Reply], int] | None:
    """Find ``reply_id`` depth first; return the list holding it and its position."""
    for index, reply in enumerate(siblings):
        if reply.id == reply_id:
            return siblings, index
        found = _locate(reply.children, reply_id)
        if found is not None:
            return found
    return None


def _walk(siblings: list[Reply], depth: int) -> Iterator[tuple[Reply, int]]:
    for reply in siblings:
        yield reply, depth
        yield from _walk(reply.children, depth + 1)


class ReplyThread:
    """All replies to one tweet; iteration yields the top-level replies."""

    def __init__(self, replies: Iterable[Reply] = ()) -> None:
        self._roots: list[Reply] = list(replies)

    def add(self, reply: Reply) -> None:
        """Append ``reply`` as a direct reply to the tweet."""
        reply.parent_id = ROOT_PARENT_ID
        self._roots.append(reply)

    def reply_to(self, parent_id: int, reply: Reply) -> None:
        """Append ``reply`` as the newest answer to the reply ``parent_id``."""
        parent = self.find(parent_id)
        if parent is None:
            raise KeyError(f"no reply with id {parent_id}")
        reply.parent_id = parent.id
        parent.children.append(reply)

    def find(self, reply_id: int) -> Reply | None:
        """Return the first reply with ``reply_id`` in depth-first order."""
        found = _locate(self._roots, reply_id)
        if found is None:
            return None
        siblings, index = found
        return siblings[index]

    def delete(self, reply_id: int) -> Reply:
        """Remove the reply ``reply_id`` together with all replies below it."""
        found = _locate(self._roots, reply_id)
        if found is None:
            raise KeyError(f"no reply with id {reply_id}")
        siblings, index = found
        return siblings.pop(index)

    def render(self) -> str:
        """Describe every reply, each nested level indented further."""
        return "".join(render_reply(reply, depth) for reply, depth in _walk(self._roots, 0))

    def __len__(self) -> int:
        return len(self._roots)

    def __iter__(self) -> Iterator[Reply]:
        return iter(self._roots)

    def __repr__(self) -> str:
        return f"ReplyThread({self._roots!r})"