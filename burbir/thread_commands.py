"""Commands for building, extending and printing tweet threads."""

from __future__ import annotations

from .console import Console
from .replies import DATETIME_FORMAT
from .state import AppState, Tweet
from .threads import ThreadEntry, entry_from_text

YES = "YA"
NO = "TIDAK"


def _owned_by_other(state: AppState, tweet: Tweet) -> bool:
    return tweet.author.username != state.current.username


def _threaded_tweet(state: AppState, thread_id: int) -> Tweet | None:
    if not state.has_tweet(thread_id):
        return None
    tweet = state.tweet(thread_id)
    return None if tweet.thread.is_empty() else tweet


def start_thread(state: AppState, console: Console, tweet_id: int) -> list[ThreadEntry]:
    """Append entries to the thread of one of the current user's tweets."""
    if not state.has_tweet(tweet_id):
        console.write("Kicauan tidak ditemukan\n")
        return []
    tweet = state.tweet(tweet_id)
    if _owned_by_other(state, tweet):
        console.write("Utas ini bukan milik anda!\n")
        return []

    console.write("Utas berhasil dibuat!")
    added = []
    while True:
        console.write("\n\nMasukkan kicauan:\n")
        entry = entry_from_text(console.read_input())
        if tweet.thread.is_empty():
            state.tweets_with_threads += 1
        tweet.thread.insert_last(entry)
        added.append(entry)

        answer = ""
        while answer not in (YES, NO):
            console.write("Apakah Anda ingin melanjutkan utas ini? (YA/TIDAK) ")
            answer = console.read_input()
        if answer == NO:
            return added


def extend_thread(
    state: AppState, console: Console, thread_id: int, index: int
) -> ThreadEntry | None:
    """Insert a new entry so that it becomes entry number ``index``."""
    tweet = _threaded_tweet(state, thread_id)
    if tweet is None:
        console.write("Utas tidak ditemukan!\n")
        return None
    if _owned_by_other(state, tweet):
        console.write("Anda tidak bisa menyambung utas ini!\n")
        return None
    if index - 1 > len(tweet.thread):
        console.write("Index terlalu tinggi!\n")
        return None
    if index < 1:
        console.write("Index terlalu rendah!\n")
        return None
    console.write("Masukkan kicauan:\n")
    entry = entry_from_text(console.read_input())
    tweet.thread.insert_at(entry, index - 1)
    return entry


def delete_from_thread(
    state: AppState, console: Console, thread_id: int, index: int
) -> ThreadEntry | None:
    """Remove entry number ``index`` from a thread."""
    tweet = _threaded_tweet(state, thread_id)
    if tweet is None:
        console.write("Utas tidak ditemukan!\n")
        return None
    if _owned_by_other(state, tweet):
        console.write("Anda tidak bisa menghapus kicauan dalam utas ini!\n")
        return None
    if index == 0:
        console.write("Anda tidak bisa menghapus kicauan utama!\n")
        return None
    if index < 0 or index > len(tweet.thread):
        console.write(
            f"Kicauan sambungan dengan index {index} tidak ditemukan pada utas!\n"
        )
        return None
    removed = tweet.thread.delete_at(index - 1)
    console.write("Kicauan sambungan berhasil dihapus!\n")
    return removed


def print_thread(state: AppState, console: Console, thread_id: int) -> None:
    """Show a tweet followed by every entry of its thread."""
    tweet = _threaded_tweet(state, thread_id)
    if tweet is None:
        console.write("Utas tidak ditemukan!\n")
        return
    author = tweet.author
    if not author.is_public and not state.graph.are_friends(author.id, state.current.id):
        console.write(
            "Akun yang membuat utas ini adalah akun privat! "
            "Ikuti dahulu akun ini untuk melihat utasnya!"
        )
        return
    stamp = tweet.created.strftime(DATETIME_FORMAT)
    console.write(f"| ID = {tweet.id}\n| {author.username}\n| {stamp}\n| {tweet.text}\n\n")
    for number, entry in enumerate(tweet.thread, start=1):
        console.write(
            f"   | INDEX = {number}\n"
            f"   | {author.username}\n"
            f"   | {stamp}\n"
            f"   | {entry.text}\n\n"
        )