"""Accounts, tweets, the friendship graph and the application state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .char_queue import CharQueue
from .drafts import DraftStack
from .replies import ReplyThread
from .threads import Thread

_NO_PASSWORD = ""


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


@dataclass(eq=False)
class Account:
    """A registered user."""

    username: str = ""
    password: str = _NO_PASSWORD
    id: int = 0
    bio: str = ""
    phone: CharQueue = field(default_factory=CharQueue)
    weton: str = ""
    is_public: bool = True
    photo: list[list[tuple[str, str]]] = field(default_factory=list)
    drafts: DraftStack = field(default_factory=DraftStack)


@dataclass(eq=False)
class Tweet:
    """A published tweet with its replies and thread."""

    text: str
    author: Account | None = None
    id: int = 0
    likes: int = 0
    tag: str = ""
    created: datetime = field(default_factory=_now)
    replies: ReplyThread = field(default_factory=ReplyThread)
    thread: Thread = field(default_factory=Thread)


class FriendGraph:
    """Directed friendship matrix indexed by account id."""

    def __init__(self, size: int = 0) -> None:
        self._matrix: list[list[bool]] = [[False] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._matrix)

    def resize(self, size: int) -> None:
        """Change the number of accounts, keeping existing entries that still fit."""
        if size < 0:
            raise ValueError("size must not be negative")
        self._matrix = [
            [self._matrix[i][j] if i < self.size and j < self.size else False for j in range(size)]
            for i in range(size)
        ]

    def _check(self, src: int, dst: int) -> None:
        if not (0 <= src < self.size and 0 <= dst < self.size):
            raise IndexError(f"account id out of range: ({src}, {dst})")

    def set(self, src: int, dst: int, value: bool) -> None:
        self._check(src, dst)
        self._matrix[src][dst] = bool(value)

    def get(self, src: int, dst: int) -> bool:
        self._check(src, dst)
        return self._matrix[src][dst]

    def are_friends(self, a: int, b: int) -> bool:
        """True when both accounts list each other; an account is its own friend."""
        self._check(a, b)
        return a == b or (self._matrix[a][b] and self._matrix[b][a])

    def count_friends(self, a: int) -> int:
        """Number of other accounts that are mutual friends of ``a``."""
        self._check(a, a)
        return sum(1 for other in range(self.size) if other != a and self.are_friends(a, other))


@dataclass
class AppState:
    """Everything the running application keeps in memory."""

    running: bool = True
    logged_in: bool = False
    current: Account | None = None
    accounts: list[Account] = field(default_factory=list)
    tweets: list[Tweet] = field(default_factory=list)
    graph: FriendGraph = field(default_factory=FriendGraph)
    tags: dict[str, list[Tweet]] = field(default_factory=dict)
    tweets_with_replies: int = 0
    tweets_with_threads: int = 0
    last_reply_id: int = 0
    users_with_drafts: int = 0
    friend_request_count: int = 0

    def find_account(self, name: str) -> Account | None:
        return next((account for account in self.accounts if account.username == name), None)

    def has_tweet(self, tweet_id: int) -> bool:
        return 1 <= tweet_id <= len(self.tweets)

    def tweet(self, tweet_id: int) -> Tweet:
        if not self.has_tweet(tweet_id):
            raise KeyError(f"no tweet with id {tweet_id}")
        return self.tweets[tweet_id - 1]

    def add_tweet(self, tweet: Tweet) -> Tweet:
        """Give ``tweet`` the next id, store it and index its tag."""
        tweet.id = len(self.tweets) + 1
        self.tweets.append(tweet)
        if tweet.tag:
            self.tags.setdefault(tweet.tag, []).append(tweet)
        return tweet

    def reset(self) -> None:
        """Drop all accounts, tweets and counters."""
        self.logged_in = False
        self.current = None
        self.accounts = []
        self.tweets = []
        self.graph = FriendGraph()
        self.tags = {}
        self.tweets_with_replies = 0
        self.tweets_with_threads = 0
        self.last_reply_id = 0
        self.users_with_drafts = 0
        self.friend_request_count = 0