"""Friend list, friend removal and friend groups."""

from __future__ import annotations

from itertools import combinations

from .console import Console
from .state import AppState

YES = "YA"
NO = "TIDAK"


def list_friends(state: AppState, console: Console) -> list[str]:
    """Show and return the names of the current user's mutual friends."""
    me = state.current
    count = state.graph.count_friends(me.id)
    if count == 0:
        console.write(f"\n{me.username} belum mempunyai teman\n")
        return []
    console.write(f"\n{me.username} memiliki {count} teman\n")
    names = [
        state.accounts[other].username
        for other in range(state.graph.size)
        if other != me.id and state.graph.are_friends(me.id, other)
    ]
    console.write("".join(f"| {name}\n" for name in names))
    return names


def remove_friend(state: AppState, console: Console) -> bool:
    """Ask for a friend's name and, once confirmed, drop the friendship."""
    me = state.current
    console.write("Masukkan nama pengguna: \n")
    name = console.read_input()
    friend = state.find_account(name)
    if friend is None or not state.graph.are_friends(me.id, friend.id):
        console.write(f"{name} bukan teman Anda.\n")
        return False

    console.write(
        f"Apakah anda yakin ingin menghapus {friend.username} "
        "dari daftar teman anda?(YA/TIDAK) \n"
    )
    answer = console.read_input()
    while answer not in (YES, NO):
        console.write("(YA/TIDAK)\n")
        answer = console.read_input()
    if answer == NO:
        console.write("Penghapusan teman dibatalkan.\n")
        return False
    state.graph.set(me.id, friend.id, False)
    console.write(f"{friend.username} berhasil dihapus dari daftar teman Anda.\n")
    return True


def _root(parent: dict[int, int], node: int) -> int:
    while parent[node] != node:
        parent[node] = parent[parent[node]]
        node = parent[node]
    return node


def friend_group(state: AppState, console: Console) -> list[str]:
    """Show and return everyone connected to the current user through friendships."""
    me = state.current
    parent = {account.id: account.id for account in state.accounts}
    for a, b in combinations(state.accounts, 2):
        if state.graph.are_friends(a.id, b.id):
            parent[_root(parent, a.id)] = _root(parent, b.id)

    my_root = _root(parent, me.id)
    names = [
        account.username for account in state.accounts if _root(parent, account.id) == my_root
    ]
    console.write(f"\nTerdapat {len(names)} orang dalam Kelompok Teman {me.username} :\n")
    console.write("".join(f"{name}\n" for name in names))
    console.write("\n")
    return names