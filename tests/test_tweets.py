import io
from datetime import datetime

import pytest

from burbir.console import Console
from burbir.state import Account, AppState, Tweet
from burbir.tweets import (
    MAX_TWEET_LENGTH,
    edit_tweet,
    like_tweet,
    list_tweets,
    post_tweet,
    render_tweet,
)


@pytest.fixture
def state():
    st = AppState()
    st.accounts = [Account(username=name, id=i) for i, name in enumerate(["alice", "bob", "carol"])]
    st.graph.resize(3)
    st.graph.set(0, 1, True)
    st.graph.set(1, 0, True)
    st.accounts[2].is_public = False
    st.current = st.accounts[0]
    st.logged_in = True
    return st


def _console(text=""):
    return Console(io.StringIO(text), io.StringIO())


def test_render_tweet():
    tweet = Tweet(
        text="Halooo",
        author=Account(username="Tuan Bus"),
        id=1,
        likes=12,
        created=datetime(2023, 10, 14, 11, 9, 18),
    )
    rendered = render_tweet(tweet)
    assert rendered.splitlines() == [
        "| ID = 1",
        "| Tuan Bus",
        "| 14/10/2023 11:09:18",
        "| Halooo",
        "| Disukai: 12",
    ]


def test_post_tweet(state):
    console = _console("Halo semua;kuliah;")
    tweet = post_tweet(state, console)
    assert tweet is state.tweet(1)
    assert tweet.text == "Halo semua"
    assert tweet.author is state.current
    assert state.tags["kuliah"] == [tweet]
    output = console.stdout.getvalue()
    assert "Selamat! kicauan telah diterbitkan!" in output
    assert render_tweet(tweet) in output


def test_post_empty_tweet(state):
    console = _console("   ;")
    assert post_tweet(state, console) is None
    assert state.tweets == []
    assert "Kicauan tidak boleh kosong!" in console.stdout.getvalue()


def test_post_tweet_is_capped(state):
    console = _console("x" * (MAX_TWEET_LENGTH + 20) + ";;")
    tweet = post_tweet(state, console)
    assert len(tweet.text) == MAX_TWEET_LENGTH
    assert tweet.tag == ""
    assert state.tags == {}


def test_list_tweets_newest_first_friends_only(state):
    own = state.add_tweet(Tweet(text="punya alice", author=state.accounts[0]))
    friend = state.add_tweet(Tweet(text="punya bob", author=state.accounts[1]))
    stranger = state.add_tweet(Tweet(text="punya carol", author=state.accounts[2]))
    console = _console()
    list_tweets(state, console)
    output = console.stdout.getvalue()
    assert output.index(render_tweet(friend)) < output.index(render_tweet(own))
    assert render_tweet(stranger) not in output


def test_list_tweets_empty(state):
    console = _console()
    list_tweets(state, console)
    assert console.stdout.getvalue() == "Masih belum ada kicauan\n"


def test_like_tweet(state):
    tweet = state.add_tweet(Tweet(text="punya bob", author=state.accounts[1]))
    before = tweet.likes
    assert like_tweet(state, _console(), tweet.id) is tweet
    assert tweet.likes == before + 1


def test_like_private_stranger(state):
    tweet = state.add_tweet(Tweet(text="punya carol", author=state.accounts[2]))
    before = tweet.likes
    console = _console()
    assert like_tweet(state, console, tweet.id) is None
    assert tweet.likes == before
    assert "akun privat" in console.stdout.getvalue()


def test_like_missing(state):
    console = _console()
    assert like_tweet(state, console, 5) is None
    assert "Tidak ditemukan kicauan dengan ID = 5" in console.stdout.getvalue()


def test_edit_own_tweet(state):
    tweet = state.add_tweet(Tweet(text="lama", author=state.accounts[0]))
    assert edit_tweet(state, _console("baru sekali;"), tweet.id) is tweet
    assert tweet.text == "baru sekali"


def test_edit_others_tweet(state):
    tweet = state.add_tweet(Tweet(text="lama", author=state.accounts[1]))
    console = _console("baru;")
    assert edit_tweet(state, console, tweet.id) is None
    assert tweet.text == "lama"
    assert f"Kicauan dengan ID = {tweet.id} bukan milikmu!" in console.stdout.getvalue()


def test_edit_empty_keeps_text(state):
    tweet = state.add_tweet(Tweet(text="lama", author=state.accounts[0]))
    console = _console(";")
    assert edit_tweet(state, console, tweet.id) is None
    assert tweet.text == "lama"
    assert "Kicauan tidak boleh kosong!" in console.stdout.getvalue()