"""Command dispatch and the interactive main loop."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_ROOT, ConfigError, banner, initial_load, load_command, save_command
from .console import Console
from .draft_commands import create_draft, view_draft
from .friends import friend_group, list_friends, remove_friend
from .hashtags import find_by_tag
from .reply_commands import delete_reply, reply, show_replies
from .state import AppState
from .thread_commands import delete_from_thread, extend_thread, print_thread, start_thread
from .tweets import edit_tweet, like_tweet, list_tweets, post_tweet

MAX_ARGUMENTS = 3
BLANK = " "

NOT_LOGGED_IN = "Anda belum masuk! Masuk terlebih dahulu untuk menikmati layanan BurBir.\n"
UNKNOWN_COMMAND = (
    "Perintah tidak dikenali. Gunakan 'LIST_PERINTAH' untuk melihat list perintah "
    "yang bisa dilakukan.\n\n"
)
LOGOUT_BEFORE_LOAD = "Anda harus keluar terlebih dahulu untuk melakukan pemuatan.\n\n"

_COMMAND_SECTIONS = (
    ("DAFTAR", "MASUK", "KELUAR", "TUTUP_PROGRAM"),
    ("GANTI_PROFIL", "LIHAT_PROFIL <nama pengguna>", "ATUR_JENIS_AKUN", "UBAH_FOTO_PROFIL"),
    ("DAFTAR_TEMAN", "HAPUS_TEMAN"),
    ("TAMBAH_TEMAN", "DAFTAR_PERMINTAAN_PERTEMANAN", "SETUJUI_PERTEMANAN"),
    ("KICAU", "KICAUAN", "SUKA_KICAUAN <id kicauan>", "UBAH_KICAUAN <id kicauan>"),
    (
        "BALAS <id kicauan> <id balasan>",
        "BALASAN <id kicauan>",
        "HAPUS_BALASAN <id kicauan> <id balasan>",
    ),
    ("BUAT_DRAF", "LIHAT_DRAF"),
    ("UBAH_DRAF", "KEMBALI_DRAF"),
    ("HAPUS_DRAF", "SIMPAN_DRAF", "TERBIT_DRAF"),
    (
        "UTAS <id kicauan>",
        "SAMBUNG_UTAS <id utas> <index>",
        "HAPUS_UTAS <id utas> <index>",
        "CETAK_UTAS <id utas>",
    ),
    ("KELOMPOK_TEMAN",),
    ("SIMPAN", "MUAT"),
    ("LIST_PERINTAH",),
)

_NUMBER = re.compile(r"-?\d+")


def split_command(text: str) -> list[str]:
    """Split ``text`` on blanks into exactly three words, padding with empty strings."""
    words = [word for word in text.split(BLANK) if word][:MAX_ARGUMENTS]
    return words + [""] * (MAX_ARGUMENTS - len(words))


def command_list() -> str:
    """Return the text listing every command."""
    body = "".join(
        "".join(f"| {entry}\n" for entry in section) + "\n" for section in _COMMAND_SECTIONS
    )
    return "[LIST PERINTAH]\n" + body


def _number(word: str) -> int:
    match = _NUMBER.match(word)
    return int(match.group()) if match else 0


def _rest_after_first_space(text: str) -> str:
    return text.strip().partition(BLANK)[2].strip()


Action = Callable[[AppState, Console, list[str], str, "str | Path"], object]


@dataclass(frozen=True)
class _Command:
    needs_login: bool
    action: Action


def _muat(state: AppState, console: Console, args: list[str], text: str, root: str | Path) -> object:
    if state.logged_in:
        console.write(LOGOUT_BEFORE_LOAD)
        return None
    return load_command(state, console, root)


_COMMANDS: dict[str, _Command] = {
    "DAFTAR_TEMAN": _Command(True, lambda s, c, a, t, r: list_friends(s, c)),
    "HAPUS_TEMAN": _Command(True, lambda s, c, a, t, r: remove_friend(s, c)),
    "KICAU": _Command(True, lambda s, c, a, t, r: post_tweet(s, c)),
    "KICAUAN": _Command(True, lambda s, c, a, t, r: list_tweets(s, c)),
    "SUKA_KICAUAN": _Command(True, lambda s, c, a, t, r: like_tweet(s, c, _number(a[1]))),
    "UBAH_KICAUAN": _Command(True, lambda s, c, a, t, r: edit_tweet(s, c, _number(a[1]))),
    "CARI_KICAUAN": _Command(
        True, lambda s, c, a, t, r: find_by_tag(s, c, _rest_after_first_space(t))
    ),
    "BALAS": _Command(
        True, lambda s, c, a, t, r: reply(s, c, _number(a[1]), _number(a[2]))
    ),
    "BALASAN": _Command(True, lambda s, c, a, t, r: show_replies(s, c, _number(a[1]))),
    "HAPUS_BALASAN": _Command(
        True, lambda s, c, a, t, r: delete_reply(s, c, _number(a[1]), _number(a[2]))
    ),
    "BUAT_DRAF": _Command(True, lambda s, c, a, t, r: create_draft(s, c)),
    "LIHAT_DRAF": _Command(True, lambda s, c, a, t, r: view_draft(s, c)),
    "UTAS": _Command(True, lambda s, c, a, t, r: start_thread(s, c, _number(a[1]))),
    "SAMBUNG_UTAS": _Command(
        True, lambda s, c, a, t, r: extend_thread(s, c, _number(a[1]), _number(a[2]))
    ),
    "HAPUS_UTAS": _Command(
        True, lambda s, c, a, t, r: delete_from_thread(s, c, _number(a[1]), _number(a[2]))
    ),
    "CETAK_UTAS": _Command(True, lambda s, c, a, t, r: print_thread(s, c, _number(a[1]))),
    "KELOMPOK_TEMAN": _Command(True, lambda s, c, a, t, r: friend_group(s, c)),
    "SIMPAN": _Command(False, lambda s, c, a, t, r: save_command(s, c, r)),
    "MUAT": _Command(False, _muat),
    "LIST_PERINTAH": _Command(False, lambda s, c, a, t, r: c.write(command_list())),
}


def handle_command(
    state: AppState, console: Console, root: str | Path = DEFAULT_ROOT
) -> str:
    """Prompt for one command, run it and return the command word that was read."""
    console.write(">> ")
    text = console.read_input()
    args = split_command(text)
    command = _COMMANDS.get(args[0])
    if command is None:
        console.write(UNKNOWN_COMMAND)
    elif command.needs_login and not state.logged_in:
        console.write(NOT_LOGGED_IN)
    else:
        command.action(state, console, args, text, root)
    return args[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive application until input ends."""
    parser = argparse.ArgumentParser(prog="burbir", description="BurBir social network.")
    parser.add_argument(
        "--root", default=str(DEFAULT_ROOT), help="directory holding configuration folders"
    )
    options = parser.parse_args(argv)

    state = AppState()
    console = Console()
    console.write(banner())
    try:
        initial_load(state, console, options.root)
        while state.running:
            handle_command(state, console, options.root)
    except EOFError:
        console.write("\n")
    except ConfigError as exc:
        print(f"burbir: {exc}", file=sys.stderr)
        return 1
    return 0