"""Commands for creating, viewing, editing and publishing drafts."""

from __future__ import annotations

from .console import Console
from .drafts import Draft, _now
from .replies import DATETIME_FORMAT
from .state import AppState, Tweet
from .tweets import MAX_TWEET_LENGTH, render_tweet

DELETE = "HAPUS"
SAVE = "SIMPAN"
PUBLISH = "TERBIT"
BACK = "KEMBALI"
EDIT = "UBAH"

_INVALID = "Pilihan tidak valid. Silakan coba lagi.\n"


def delete_draft(state: AppState, console: Console) -> Draft | None:
    """Discard the current user's latest draft."""
    drafts = state.current.drafts
    if drafts.is_empty():
        console.write("Anda tidak memiliki draf untuk dihapus.\n")
        return None
    removed = drafts.pop()
    console.write("Draf telah berhasil dihapus!\n")
    return removed


def save_draft(state: AppState, console: Console) -> bool:
    """Keep the latest draft as it is."""
    if state.current.drafts.is_empty():
        console.write("Anda tidak memiliki draf untuk disimpan.\n")
        return False
    console.write("Draf telah berhasil disimpan!\n")
    return True


def publish_draft(state: AppState, console: Console) -> Tweet | None:
    """Turn the latest draft into a published tweet without a tag."""
    drafts = state.current.drafts
    if drafts.is_empty():
        console.write("Tidak ada draf yang dapat diterbitkan.\n")
        return None
    draft = drafts.pop()
    console.write("Selamat! Draf kicauan telah diterbitkan!\n")
    console.write("Detil kicauan:\n")
    tweet = state.add_tweet(Tweet(text=draft.text, tag="", author=state.current))
    console.write(render_tweet(tweet) + "\n\n")
    return tweet


def _decide(state: AppState, console: Console) -> None:
    while True:
        console.write("Apakah anda ingin menghapus, menyimpan, atau menerbitkan draf ini? \n")
        choice = console.read_input()
        actions = {DELETE: delete_draft, SAVE: save_draft, PUBLISH: publish_draft}
        action = actions.get(choice)
        if action is None:
            console.write(_INVALID)
            console.write("\n")
            continue
        action(state, console)
        console.write("\n")
        return


def edit_draft(state: AppState, console: Console) -> Draft | None:
    """Rewrite the latest draft, then ask what to do with it."""
    drafts = state.current.drafts
    if drafts.is_empty():
        console.write("Anda tidak memiliki draf untuk diubah.\n")
        return None
    draft = drafts.pop()
    console.write("Masukkan draf yang baru: \n")
    draft.text = console.read_input()[:MAX_TWEET_LENGTH]
    draft.created = _now()
    drafts.push(draft)
    _decide(state, console)
    return draft


def create_draft(state: AppState, console: Console) -> Draft:
    """Write a new draft, then ask what to do with it."""
    console.write("Masukkan draf: \n")
    draft = Draft(text=console.read_input()[:MAX_TWEET_LENGTH], created=_now())
    state.current.drafts.push(draft)
    _decide(state, console)
    return draft


def view_draft(state: AppState, console: Console) -> None:
    """Show the latest draft and offer to edit, delete or publish it."""
    drafts = state.current.drafts
    if not drafts.is_empty():
        draft = drafts.peek()
        console.write("Ini draf terakhir anda:\n")
        console.write(f"| {draft.created.strftime(DATETIME_FORMAT)}\n| {draft.text}\n\n")
    else:
        console.write("Yah, anda belum memiliki draf apapun! Buat dulu ya :D\n")

    actions = {EDIT: edit_draft, DELETE: delete_draft, PUBLISH: publish_draft}
    while True:
        console.write(
            "Apakah anda ingin mengubah, menghapus, atau menerbitkan draf ini? "
            "(KEMBALI jika ingin kembali)\n"
        )
        choice = console.read_input()
        if choice == BACK:
            console.write("\n")
            return
        action = actions.get(choice)
        if action is None:
            console.write(_INVALID)
            console.write("\n")
            continue
        action(state, console)
        console.write("\n")
        return