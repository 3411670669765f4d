import io
from datetime import datetime

from burbir.console import Console
from burbir.hashtags import find_by_tag, render_tagged
from burbir.state import Account, AppState, Tweet

WHEN = datetime(2023, 10, 14, 11, 9, 18)


def _console():
    return Console(io.StringIO(), io.StringIO())


def _state():
    state = AppState()
    author = Account(username="Tuan Bus")
    state.accounts = [author]
    state.add_tweet(Tweet(text="satu", tag="kuliah", author=author, likes=3, created=WHEN))
    state.add_tweet(Tweet(text="dua", author=author, created=WHEN))
    state.add_tweet(Tweet(text="tiga", tag="kuliah", author=author, created=WHEN))
    return state


def test_render_tagged_format():
    tweet = Tweet(text="Halooo", tag="kuliah", author=Account(username="Tuan Bus"), likes=3, created=WHEN)
    assert render_tagged([tweet]) == (
        "| Tuan Bus\n| 14/10/2023 11:09:18\n| Halooo\n| #kuliah\n| Disukai : 3\n\n"
    )


def test_render_tagged_empty():
    assert render_tagged([]) == ""


def test_find_by_tag():
    state = _state()
    console = _console()
    found = find_by_tag(state, console, "kuliah")
    assert [t.text for t in found] == ["satu", "tiga"]
    assert console.stdout.getvalue() == render_tagged(found)


def test_find_by_missing_tag():
    state = _state()
    console = _console()
    assert find_by_tag(state, console, "libur") == []
    assert console.stdout.getvalue() == "Tidak ditemukan kicauan dengan tagar libur\n\n"