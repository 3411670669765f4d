import io
import sys

import pytest

from burbir.commands import (
    NOT_LOGGED_IN,
    UNKNOWN_COMMAND,
    command_list,
    handle_command,
    main,
    split_command,
)
from burbir.config import save_config
from burbir.console import Console
from burbir.state import Account, AppState, FriendGraph, Tweet


def _console(text):
    return Console(stdin=io.StringIO(text), stdout=io.StringIO())


def _state(logged_in=True):
    alice = Account(username="Alice", id=0)
    bob = Account(username="Bob", id=1)
    graph = FriendGraph(2)
    return AppState(
        logged_in=logged_in,
        current=alice if logged_in else None,
        accounts=[alice, bob],
        graph=graph,
    )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("BALAS 1 2", ["BALAS", "1", "2"]),
        ("KICAUAN", ["KICAUAN", "", ""]),
        ("SUKA_KICAUAN   3", ["SUKA_KICAUAN", "3", ""]),
        ("BALAS 1 -1", ["BALAS", "1", "-1"]),
    ],
)
def test_split_command(text, expected):
    assert split_command(text) == expected


def test_split_command_always_three_words():
    assert len(split_command("A B C D E")) == 3


def test_command_list_format():
    text = command_list()
    assert text.startswith("[LIST PERINTAH]\n| DAFTAR\n")
    assert "| BALAS <id kicauan> <id balasan>\n" in text
    assert text.endswith("| LIST_PERINTAH\n\n")


def test_list_perintah_writes_list():
    console = _console("LIST_PERINTAH;")
    assert handle_command(_state(logged_in=False), console) == "LIST_PERINTAH"
    assert console.stdout.getvalue() == ">> " + command_list()


def test_unknown_command():
    console = _console("TERBANG;")
    handle_command(_state(), console)
    assert console.stdout.getvalue() == ">> " + UNKNOWN_COMMAND


def test_login_required():
    state = _state(logged_in=False)
    console = _console("KICAU;halo;;")
    handle_command(state, console)
    assert console.stdout.getvalue() == ">> " + NOT_LOGGED_IN
    assert state.tweets == []


def test_kicau_posts_tweet():
    state = _state()
    console = _console("KICAU;Halo dunia;sapa;")
    handle_command(state, console)
    assert [tweet.text for tweet in state.tweets] == ["Halo dunia"]
    assert state.tags["sapa"] == state.tweets


def test_suka_kicauan_uses_argument():
    state = _state()
    state.add_tweet(Tweet(text="satu", author=state.accounts[0]))
    state.add_tweet(Tweet(text="dua", author=state.accounts[0]))
    handle_command(state, _console("SUKA_KICAUAN 2;"))
    assert [tweet.likes for tweet in state.tweets] == [0, 1]


def test_cari_kicauan_uses_rest_of_line():
    state = _state()
    state.add_tweet(Tweet(text="satu", author=state.accounts[0], tag="berita"))
    console = _console("CARI_KICAUAN berita;")
    handle_command(state, console)
    assert "| #berita\n" in console.stdout.getvalue()


def test_muat_requires_logout(tmp_path):
    state = _state()
    console = _console("MUAT;")
    handle_command(state, console, tmp_path)
    assert "Anda harus keluar terlebih dahulu" in console.stdout.getvalue()


def test_simpan_then_muat_round_trip(tmp_path):
    state = _state()
    state.add_tweet(Tweet(text="halo", author=state.accounts[1]))
    handle_command(state, _console("SIMPAN;data;"), tmp_path)
    assert (tmp_path / "data").is_dir()

    fresh = AppState()
    handle_command(fresh, _console("MUAT;data;"), tmp_path)
    assert [account.username for account in fresh.accounts] == ["Alice", "Bob"]
    assert [(t.text, t.author.username) for t in fresh.tweets] == [("halo", "Bob")]


def test_handle_command_raises_at_end_of_input():
    with pytest.raises(EOFError):
        handle_command(_state(), _console(""))


def test_main_runs_session(tmp_path, monkeypatch, capsys):
    save_config(_state(), "awal", tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("awal;LIST_PERINTAH;"))
    assert main(["--root", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "File konfigurasi berhasil dimuat! Selamat berkicau!\n" in out
    assert command_list() in out


def test_main_reports_bad_config(tmp_path, monkeypatch, capsys):
    (tmp_path / "rusak").mkdir()
    monkeypatch.setattr(sys, "stdin", io.StringIO("rusak;"))
    assert main(["--root", str(tmp_path)]) == 1
    assert "burbir:" in capsys.readouterr().err