"""Posting, listing, liking and editing tweets."""

from __future__ import annotations

from .console import Console
from .replies import DATETIME_FORMAT
from .state import AppState, Tweet

MAX_TWEET_LENGTH = 280


def render_tweet(tweet: Tweet) -> str:
    """Describe a tweet, without a trailing newline."""
    author = tweet.author.username if tweet.author is not None else ""
    return (
        f"| ID = {tweet.id}\n"
        f"| {author}\n"
        f"| {tweet.created.strftime(DATETIME_FORMAT)}\n"
        f"| {tweet.text}\n"
        f"| Disukai: {tweet.likes}"
    )


def _can_view(state: AppState, tweet: Tweet) -> bool:
    author = tweet.author
    return author.is_public or state.graph.are_friends(author.id, state.current.id)


def post_tweet(state: AppState, console: Console) -> Tweet | None:
    """Ask for a text and a tag and publish them as the current user."""
    console.write("Masukkan kicauan:\n")
    text = console.read_input()[:MAX_TWEET_LENGTH].strip()
    console.write("\n")
    if not text:
        console.write("Kicauan tidak boleh kosong!\n")
        return None
    console.write("Masukkan tagar:\n")
    tag = console.read_input().strip()
    console.write("\n")
    tweet = state.add_tweet(Tweet(text=text, tag=tag, author=state.current))
    console.write("Selamat! kicauan telah diterbitkan!\nDetil kicauan:\n")
    console.write(render_tweet(tweet) + "\n\n")
    return tweet


def list_tweets(state: AppState, console: Console) -> None:
    """Show the newest-first tweets of the current user and their friends."""
    if not state.tweets:
        console.write("Masih belum ada kicauan\n")
        return
    for tweet in reversed(state.tweets):
        if state.graph.are_friends(tweet.author.id, state.current.id):
            console.write(render_tweet(tweet) + "\n\n")


def like_tweet(state: AppState, console: Console, tweet_id: int) -> Tweet | None:
    """Add a like to tweet ``tweet_id`` if the current user may see it."""
    console.write("\n")
    liked = None
    if not state.has_tweet(tweet_id):
        console.write(f"Tidak ditemukan kicauan dengan ID = {tweet_id}")
    else:
        tweet = state.tweet(tweet_id)
        if not _can_view(state, tweet):
            console.write(
                "Wah, kicauan tersebut dibuat oleh akun privat! "
                "Berteman dengan akun itu dulu ya!"
            )
        else:
            tweet.likes += 1
            console.write("Selamat! kicauan telah disukai!\nDetil kicauan:\n")
            console.write(render_tweet(tweet))
            liked = tweet
    console.write("\n\n")
    return liked


def edit_tweet(state: AppState, console: Console, tweet_id: int) -> Tweet | None:
    """Replace the text of one of the current user's tweets."""
    if not state.has_tweet(tweet_id):
        console.write(f"Tidak ditemukan kicauan dengan ID = {tweet_id}!\n\n")
        return None
    tweet = state.tweet(tweet_id)
    if tweet.author.username != state.current.username:
        console.write(f"Kicauan dengan ID = {tweet_id} bukan milikmu!\n\n")
        return None
    console.write("Masukkan kicauan baru:\n")
    text = console.read_input()[:MAX_TWEET_LENGTH]
    console.write("\n")
    if not text:
        console.write("Kicauan tidak boleh kosong!\n\n")
        return None
    tweet.text = text
    console.write("Selamat! kicauan telah diterbitkan!\nDetil kicauan:\n")
    console.write(render_tweet(tweet) + "\n\n")
    return tweet