"""Searching tweets by hashtag."""

from __future__ import annotations

from collections.abc import Iterable

from .console import Console
from .replies import DATETIME_FORMAT
from .state import AppState, Tweet


def render_tagged(tweets: Iterable[Tweet]) -> str:
    """Describe each tweet found for a hashtag."""
    return "".join(
        f"| {tweet.author.username}\n"
        f"| {tweet.created.strftime(DATETIME_FORMAT)}\n"
        f"| {tweet.text}\n"
        f"| #{tweet.tag}\n"
        f"| Disukai : {tweet.likes}\n\n"
        for tweet in tweets
    )


def find_by_tag(state: AppState, console: Console, tag: str) -> list[Tweet]:
    """Show and return the tweets carrying ``tag``."""
    tweets = state.tags.get(tag, [])
    if not tweets:
        console.write(f"Tidak ditemukan kicauan dengan tagar {tag}\n\n")
        return []
    console.write(render_tagged(tweets))
    return list(tweets)