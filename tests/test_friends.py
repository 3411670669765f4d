import io

from burbir.console import Console
from burbir.friends import friend_group, list_friends, remove_friend
from burbir.state import Account, AppState, FriendGraph


def make_state(*names):
    state = AppState()
    state.accounts = [Account(username=name, id=i) for i, name in enumerate(names)]
    state.graph = FriendGraph(len(names))
    state.current = state.accounts[0]
    state.logged_in = True
    return state


def befriend(state, a, b):
    state.graph.set(a, b, True)
    state.graph.set(b, a, True)


def make_console(text=""):
    return Console(io.StringIO(text), io.StringIO())


def output(console):
    return console.stdout.getvalue()


def test_list_friends_without_friends():
    state = make_state("Alice", "Bob")
    state.graph.set(0, 1, True)
    console = make_console()
    assert list_friends(state, console) == []
    assert output(console) == "\nAlice belum mempunyai teman\n"


def test_list_friends_shows_mutual_only():
    state = make_state("Alice", "Bob", "Carol", "Dave")
    befriend(state, 0, 1)
    befriend(state, 0, 3)
    state.graph.set(0, 2, True)
    console = make_console()
    names = list_friends(state, console)
    assert names == ["Bob", "Dave"]
    assert f"Alice memiliki {len(names)} teman" in output(console)
    assert "| Carol" not in output(console)


def test_remove_friend_unknown_name():
    state = make_state("Alice")
    console = make_console("Zed;")
    assert remove_friend(state, console) is False
    assert "Zed bukan teman Anda." in output(console)


def test_remove_friend_not_a_friend():
    state = make_state("Alice", "Bob")
    console = make_console("Bob;")
    assert remove_friend(state, console) is False
    assert "Bob bukan teman Anda." in output(console)


def test_remove_friend_confirmed():
    state = make_state("Alice", "Bob")
    befriend(state, 0, 1)
    console = make_console("Bob;YA;")
    assert remove_friend(state, console) is True
    assert state.graph.get(0, 1) is False
    assert not state.graph.are_friends(0, 1)
    assert "berhasil dihapus dari daftar teman Anda." in output(console)


def test_remove_friend_cancelled_after_invalid_answer():
    state = make_state("Alice", "Bob")
    befriend(state, 0, 1)
    console = make_console("Bob;entah;TIDAK;")
    assert remove_friend(state, console) is False
    assert state.graph.are_friends(0, 1)
    assert "(YA/TIDAK)\n" in output(console)
    assert "Penghapusan teman dibatalkan." in output(console)


def test_friend_group_follows_chains():
    state = make_state("Alice", "Bob", "Carol", "Dave")
    befriend(state, 0, 1)
    befriend(state, 1, 2)
    state.graph.set(2, 3, True)
    console = make_console()
    names = friend_group(state, console)
    assert names == ["Alice", "Bob", "Carol"]
    assert "Terdapat 3 orang dalam Kelompok Teman Alice :" in output(console)


def test_friend_group_alone_contains_self():
    state = make_state("Alice", "Bob")
    state.current = state.accounts[1]
    names = friend_group(state, make_console())
    assert names == ["Bob"]