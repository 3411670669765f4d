# burbir

BurBir is a small social network that runs in the terminal. Its data is a set
of accounts, short posts (*kicauan*) with an optional hashtag, nested replies,
per-account drafts, threads (*utas*) attached to posts, and a friendship
graph. Accounts are public or private. Content from private accounts is shown
only to friends.

The data lives in plain-text configuration folders, so a session can be saved
and loaded again.

## Installation

```
pip install .
```

## Running

```
burbir [--root DIR]
```

`--root` names the directory that holds the configuration folders. It defaults
to `Config`. At startup the program prints a welcome banner and asks for a
folder name. It keeps asking until the folder exists in the root directory,
then loads it.

Every input ends with a semicolon (`;`) and leading blanks are skipped. For
example, type `LIST_PERINTAH;` at the `>>` prompt. The program reads commands
until input ends.

These commands are handled:

| Command | Purpose |
| --- | --- |
| `KICAU` | publish a post (at most 280 characters) and an optional hashtag |
| `KICAUAN` | list posts by yourself and your friends, newest first |
| `SUKA_KICAUAN <id>` | like a post |
| `UBAH_KICAUAN <id>` | edit one of your own posts |
| `CARI_KICAUAN <tagar>` | list posts carrying a hashtag |
| `BALAS <id kicauan> <id balasan>` | reply to a post (`-1` as reply id) or to a reply |
| `BALASAN <id kicauan>` | show all replies to a post, indented by depth |
| `HAPUS_BALASAN <id kicauan> <id balasan>` | delete one of your replies and everything below it |
| `BUAT_DRAF` | write a draft, then answer `HAPUS`, `SIMPAN` or `TERBIT` |
| `LIHAT_DRAF` | show the latest draft, then answer `UBAH`, `HAPUS`, `TERBIT` or `KEMBALI` |
| `UTAS <id kicauan>` | add entries to a thread on your post, answering `YA`/`TIDAK` to continue |
| `SAMBUNG_UTAS <id utas> <index>` | insert a thread entry at a 1-based position |
| `HAPUS_UTAS <id utas> <index>` | remove a thread entry |
| `CETAK_UTAS <id utas>` | print a post with its thread |
| `DAFTAR_TEMAN` | list your mutual friends |
| `HAPUS_TEMAN` | remove a friend after a `YA`/`TIDAK` confirmation |
| `KELOMPOK_TEMAN` | list everyone connected to you through friendships |
| `SIMPAN` | save everything to a folder, creating it if needed |
| `MUAT` | load a folder (only while logged out) |
| `LIST_PERINTAH` | print the command list |

Any other word is reported as an unknown command.

## What it does not do

The command loop has no registration, login, logout or quit command, and no
profile editing, account-type switching, profile-photo editing or friend
requests. `LIST_PERINTAH` prints some of these names, such as `DAFTAR`,
`MASUK`, `KELUAR`, `TUTUP_PROGRAM`, `GANTI_PROFIL` and `TAMBAH_TEMAN`, but
typing them gives the unknown-command message. Since nobody can log in at the
prompt, every command in the table above except `SIMPAN`, `MUAT` and
`LIST_PERINTAH` only answers that you are not logged in. To use those
commands, drive the package from Python as shown below. Hashtags are not
written to the configuration files, so they are lost on save and load.

## Configuration folders

A folder holds five files:

- `pengguna.config`: accounts (username, password, bio, phone, weton,
  `Publik`/`Privat`, and a 5×5 photo of colour/symbol pairs), followed by the
  0/1 friendship matrix.
- `kicauan.config`: posts (id, text, likes, author, `dd/mm/YYYY HH:MM:SS`).
- `balasan.config`: replies per post, each with its parent id (`-1` for a
  direct reply) and its own id.
- `draf.config`: each account's drafts, newest first.
- `utas.config`: thread entries per post.

`burbir.config.load_config(state, folder, root)` and
`burbir.config.save_config(state, folder, root)` read and write a folder
without prompting. A missing or malformed folder raises
`burbir.config.ConfigError`.

## Using it as a library

`burbir.state.AppState` holds all the data: `accounts`, `tweets`, the
`FriendGraph` in `graph`, `tags`, `current` and `logged_in`.
`burbir.console.Console` reads semicolon-terminated input from a stream and
writes output to another. The command functions take both:

```python
import io
from burbir.console import Console
from burbir.config import load_config
from burbir.state import AppState
from burbir.tweets import post_tweet

state = AppState()
load_config(state, "Config-1", root="Config")
state.current = state.accounts[0]
state.logged_in = True

console = Console(stdin=io.StringIO("Halo semua;halo;"), stdout=io.StringIO())
tweet = post_tweet(state, console)
```

Other entry points:

- `burbir.tweets`: `post_tweet`, `list_tweets`, `like_tweet`, `edit_tweet`, `render_tweet`
- `burbir.hashtags`: `find_by_tag`, `render_tagged`
- `burbir.reply_commands`: `reply`, `show_replies`, `delete_reply`
- `burbir.draft_commands`: `create_draft`, `view_draft`, `edit_draft`,
  `delete_draft`, `save_draft`, `publish_draft`
- `burbir.thread_commands`: `start_thread`, `extend_thread`, `delete_from_thread`, `print_thread`
- `burbir.friends`: `list_friends`, `remove_friend`, `friend_group`
- `burbir.commands`: `handle_command(state, console, root)` reads and runs one command,
  `split_command`, `command_list` and `main`

The data structures also work on their own: `burbir.stack.Stack` (a
fixed-capacity integer stack that raises `StackFullError` and
`StackEmptyError`), `burbir.linked_stack.LinkedStack`,
`burbir.char_queue.CharQueue`, `burbir.drafts.DraftStack`,
`burbir.replies.ReplyThread` and `burbir.threads.Thread`.

## Tests

```
pip install .[test]
pytest
```