"""Commands for replying to tweets and managing replies."""

from __future__ import annotations

from .console import Console
from .replies import ROOT_PARENT_ID, Reply, render_reply
from .state import Account, AppState


def _may_reply(state: AppState, author: Account) -> bool:
    return author.is_public or state.graph.are_friends(author.id, state.current.id)


def reply(state: AppState, console: Console, tweet_id: int, reply_id: int) -> Reply | None:
    """Reply to tweet ``tweet_id``, or to its reply ``reply_id`` unless that is -1."""
    if not state.has_tweet(tweet_id):
        console.write("Wah, tidak terdapat kicauan yang ingin Anda balas!\n\n")
        return None
    tweet = state.tweet(tweet_id)
    if not _may_reply(state, tweet.author):
        console.write(
            "Wah, akun tersebut merupakan akun privat dan anda belum berteman akun tersebut!\n\n"
        )
        return None

    state.last_reply_id += 1
    new_reply = Reply(id=state.last_reply_id, author=state.current)

    if reply_id == ROOT_PARENT_ID:
        console.write("\nMasukkan balasan:\n")
        new_reply.text = console.read_input()
        if len(tweet.replies) == 0:
            state.tweets_with_replies += 1
        tweet.replies.add(new_reply)
    else:
        if tweet.replies.find(reply_id) is None:
            console.write("Wah, tidak terdapat balasan yang ingin Anda balas!\n")
            return None
        console.write("\nMasukkan balasan:\n")
        new_reply.text = console.read_input()
        tweet.replies.reply_to(reply_id, new_reply)

    console.write("\n\nSelamat! balasan telah diterbitkan!\n")
    console.write("Detil balasan:\n")
    console.write(render_reply(new_reply, 0))
    return new_reply


def show_replies(state: AppState, console: Console, tweet_id: int) -> None:
    """Show every reply made to tweet ``tweet_id``."""
    if not state.has_tweet(tweet_id):
        console.write("Tidak terdapat kicauan dengan id tersebut!\n\n")
        return
    tweet = state.tweet(tweet_id)
    if not tweet.author.is_public:
        console.write("Wah, kicauan tersebut dibuat oleh pengguna dengan akun privat!\n\n")
        return
    if len(tweet.replies) == 0:
        console.write(
            "Belum terdapat balasan apapun pada kicauan tersebut. Yuk balas kicauan tersebut!\n\n"
        )
        return
    console.write(tweet.replies.render())


def delete_reply(state: AppState, console: Console, tweet_id: int, reply_id: int) -> bool:
    """Delete the current user's reply ``reply_id`` and all replies below it."""
    if not state.has_tweet(tweet_id):
        console.write("Balasan tidak ditemukan.\n\n")
        return False
    replies = state.tweet(tweet_id).replies
    target = replies.find(reply_id)
    if target is None:
        console.write("Balasan tidak ditemukan.\n\n")
        return False
    if target.author.id != state.current.id:
        console.write("Hei, ini balasan punya siapa? Jangan dihapus ya!.\n\n")
        return False
    replies.delete(reply_id)
    console.write("Balasan berhasil dihapus.\n\n")
    return True