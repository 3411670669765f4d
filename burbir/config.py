"""Loading and saving the application state as a folder of configuration files."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from .char_queue import CharQueue
from .console import Console
from .drafts import Draft, DraftStack
from .replies import DATETIME_FORMAT, ROOT_PARENT_ID, Reply
from .state import Account, AppState, FriendGraph, Tweet
from .threads import ThreadEntry

DEFAULT_ROOT = Path("Config")

USERS_FILE = "pengguna.config"
TWEETS_FILE = "kicauan.config"
REPLIES_FILE = "balasan.config"
DRAFTS_FILE = "draf.config"
THREADS_FILE = "utas.config"

PHOTO_ROWS = 5
PHOTO_COLS = 5
DEFAULT_PIXEL = ("R", "*")

PUBLIC = "Publik"
PRIVATE = "Privat"

FOLDER_PROMPT = "Silahkan masukan folder konfigurasi untuk dimuat: "
_WAIT = "\n\nMohon tunggu...\n1...\n2...\n3..."


class ConfigError(Exception):
    """Raised when a configuration folder is missing or malformed."""


def banner() -> str:
    """Return the welcome text shown when the program starts."""
    return (
        ".______    __    __  .______      .______    __  .______ \n"
        "|   _  \\  |  |  |  | |   _  \\     |   _  \\  |  | |   _  \\ \n"
        "|  |_)  | |  |  |  | |  |_)  |    |  |_)  | |  | |  |_)  | \n"
        "|   _  <  |  |  |  | |      /     |   _  <  |  | |      / \n"
        "|  |_)  | |  `--'  | |  |\\  \\----.|  |_)  | |  | |  |\\  \\----. \n"
        "|______/   \\______/  | _| `._____||______/  |__| | _| `._____| \n\n"
        "Selamat datang di BurBir. \n\n"
        "Aplikasi untuk studi kualitatif mengenai perilaku manusia dengan menggunakan metode \n"
        "(pengambilan data berupa) Focused Group Discussion kedua di zamannya. \n\n"
        + FOLDER_PROMPT
    )


class _Reader:
    """Reads a configuration file word by word or line by line."""

    def __init__(self, path: Path) -> None:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"cannot read {path}: {exc}") from exc
        self._name = path.name
        self._lines = text.splitlines()
        self._row = 0
        self._col = 0

    def _end(self) -> ConfigError:
        return ConfigError(f"{self._name}: unexpected end of file")

    def word(self) -> str:
        """Return the next blank-separated word, moving across lines as needed."""
        while True:
            if self._row >= len(self._lines):
                raise self._end()
            line = self._lines[self._row]
            while self._col < len(line) and line[self._col].isspace():
                self._col += 1
            if self._col < len(line):
                break
            self._row += 1
            self._col = 0
        start = self._col
        while self._col < len(line) and not line[self._col].isspace():
            self._col += 1
        return line[start:self._col]

    def line(self) -> str:
        """Skip the rest of the current line and return the whole next one."""
        self._row += 1
        if self._row >= len(self._lines):
            raise self._end()
        line = self._lines[self._row]
        self._col = len(line)
        return line.strip()

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError as exc:
            raise ConfigError(f"{self._name}: expected a number, got {word!r}") from exc

    def timestamp(self) -> datetime:
        text = f"{self.word()} {self.word()}"
        try:
            return datetime.strptime(text, DATETIME_FORMAT)
        except ValueError as exc:
            raise ConfigError(f"{self._name}: bad date and time {text!r}") from exc


def _folder(root: str | Path, folder: str) -> Path:
    return Path(root) / folder


def _author(state: AppState, name: str, source: str) -> Account:
    account = state.find_account(name)
    if account is None:
        raise ConfigError(f"{source}: unknown user {name!r}")
    return account


def _tweet(state: AppState, tweet_id: int, source: str) -> Tweet:
    if not state.has_tweet(tweet_id):
        raise ConfigError(f"{source}: unknown tweet {tweet_id}")
    return state.tweet(tweet_id)


def _load_accounts(state: AppState, path: Path) -> None:
    reader = _Reader(path)
    count = reader.integer()
    for index in range(count):
        account = Account(id=index)
        account.username = reader.line()
        account.password = reader.line()
        account.bio = reader.line()
        account.phone = CharQueue.from_text(reader.line())
        account.weton = reader.line()
        account.is_public = reader.line().lower() == PUBLIC.lower()
        photo = []
        for _ in range(PHOTO_ROWS):
            row = []
            for _ in range(PHOTO_COLS):
                colour = reader.word()[0]
                symbol = reader.word()[0]
                row.append((colour, symbol))
            photo.append(row)
        account.photo = photo
        state.accounts.append(account)

    state.graph = FriendGraph(count)
    for src in range(count):
        for dst in range(count):
            state.graph.set(src, dst, reader.word().startswith("1"))


def _load_tweets(state: AppState, path: Path) -> None:
    reader = _Reader(path)
    tweets = []
    for _ in range(reader.integer()):
        tweet_id = reader.integer()
        text = reader.line()
        likes = reader.integer()
        author = _author(state, reader.line(), path.name)
        created = reader.timestamp()
        tweets.append(Tweet(text=text, author=author, id=tweet_id, likes=likes, created=created))
    tweets.sort(key=lambda tweet: tweet.id)
    if [tweet.id for tweet in tweets] != list(range(1, len(tweets) + 1)):
        raise ConfigError(f"{path.name}: tweet ids must run from 1 to {len(tweets)}")
    state.tweets = tweets


def _load_replies(state: AppState, path: Path) -> None:
    reader = _Reader(path)
    state.tweets_with_replies = reader.integer()
    for _ in range(state.tweets_with_replies):
        tweet = _tweet(state, reader.integer(), path.name)
        for _ in range(reader.integer()):
            parent_id = reader.integer()
            reply_id = reader.integer()
            text = reader.line()
            author = _author(state, reader.line(), path.name)
            created = reader.timestamp()
            reply = Reply(id=reply_id, author=author, text=text, created=created)
            if parent_id == ROOT_PARENT_ID:
                tweet.replies.add(reply)
            else:
                try:
                    tweet.replies.reply_to(parent_id, reply)
                except KeyError as exc:
                    raise ConfigError(f"{path.name}: unknown parent reply {parent_id}") from exc
            state.last_reply_id = max(state.last_reply_id, reply_id)


def _load_drafts(state: AppState, path: Path) -> None:
    reader = _Reader(path)
    state.users_with_drafts = reader.integer()
    for _ in range(state.users_with_drafts):
        header = reader.line()
        name, _, count_text = header.rpartition(" ")
        try:
            count = int(count_text)
        except ValueError as exc:
            raise ConfigError(f"{path.name}: bad draft header {header!r}") from exc
        account = _author(state, name.strip(), path.name)
        drafts = []
        for _ in range(count):
            text = reader.line()
            created = reader.timestamp()
            drafts.append(Draft(text=text, created=created))
        # The file lists the most recent draft first.
        account.drafts = DraftStack(reversed(drafts))


def _load_threads(state: AppState, path: Path) -> None:
    reader = _Reader(path)
    state.tweets_with_threads = reader.integer()
    for _ in range(state.tweets_with_threads):
        tweet = _tweet(state, reader.integer(), path.name)
        for _ in range(reader.integer()):
            text = reader.line()
            reader.line()  # author name, always the tweet's author
            created = reader.timestamp()
            tweet.thread.insert_last(ThreadEntry(text=text, created=created))


def load_config(state: AppState, folder: str, root: str | Path = DEFAULT_ROOT) -> None:
    """Replace the contents of ``state`` with the configuration in ``root/folder``."""
    directory = _folder(root, folder)
    if not folder or not directory.is_dir():
        raise ConfigError(f"no configuration folder {directory}")
    loaded = AppState()
    _load_accounts(loaded, directory / USERS_FILE)
    _load_tweets(loaded, directory / TWEETS_FILE)
    _load_replies(loaded, directory / REPLIES_FILE)
    _load_drafts(loaded, directory / DRAFTS_FILE)
    _load_threads(loaded, directory / THREADS_FILE)

    state.reset()
    state.accounts = loaded.accounts
    state.tweets = loaded.tweets
    state.graph = loaded.graph
    state.tags = {}
    state.tweets_with_replies = loaded.tweets_with_replies
    state.tweets_with_threads = loaded.tweets_with_threads
    state.last_reply_id = loaded.last_reply_id
    state.users_with_drafts = loaded.users_with_drafts


def _stamp(moment: datetime) -> str:
    return moment.strftime(DATETIME_FORMAT)


def _photo_rows(account: Account) -> Iterator[str]:
    photo = account.photo or [[DEFAULT_PIXEL] * PHOTO_COLS for _ in range(PHOTO_ROWS)]
    for row in photo:
        yield " ".join(f"{colour} {symbol}" for colour, symbol in row)


def _edge(graph: FriendGraph, src: int, dst: int) -> bool:
    return src < graph.size and dst < graph.size and graph.get(src, dst)


def _walk_replies(replies: list[Reply]) -> Iterator[Reply]:
    for reply in replies:
        yield reply
        yield from _walk_replies(reply.children)


def _write(path: Path, lines: list[str]) -> None:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _user_lines(state: AppState) -> list[str]:
    lines = [str(len(state.accounts))]
    for account in state.accounts:
        lines += [
            account.username,
            account.password,
            account.bio,
            account.phone.to_text(),
            account.weton,
            PUBLIC if account.is_public else PRIVATE,
            *_photo_rows(account),
        ]
    count = len(state.accounts)
    lines += [
        " ".join("1" if _edge(state.graph, src, dst) else "0" for dst in range(count))
        for src in range(count)
    ]
    return lines


def _tweet_lines(state: AppState) -> list[str]:
    lines = [str(len(state.tweets))]
    for tweet in state.tweets:
        author = tweet.author.username if tweet.author is not None else ""
        lines += [str(tweet.id), tweet.text, str(tweet.likes), author, _stamp(tweet.created)]
    return lines


def _reply_lines(state: AppState) -> list[str]:
    replied = [tweet for tweet in state.tweets if len(tweet.replies) > 0]
    lines = [str(len(replied))]
    for tweet in replied:
        replies = list(_walk_replies(list(tweet.replies)))
        lines += [str(tweet.id), str(len(replies))]
        for reply in replies:
            lines += [
                f"{reply.parent_id} {reply.id}",
                reply.text,
                reply.author.username,
                _stamp(reply.created),
            ]
    return lines


def _draft_lines(state: AppState) -> list[str]:
    writers = [account for account in state.accounts if not account.drafts.is_empty()]
    lines = [str(len(writers))]
    for account in writers:
        lines.append(f"{account.username} {len(account.drafts)}")
        for draft in account.drafts:
            lines += [draft.text, _stamp(draft.created)]
    return lines


def _thread_lines(state: AppState) -> list[str]:
    threaded = [tweet for tweet in state.tweets if not tweet.thread.is_empty()]
    lines = [str(len(threaded))]
    for tweet in threaded:
        author = tweet.author.username if tweet.author is not None else ""
        lines += [str(tweet.id), str(len(tweet.thread))]
        for entry in tweet.thread:
            lines += [entry.text, author, _stamp(entry.created)]
    return lines


def save_config(state: AppState, folder: str, root: str | Path = DEFAULT_ROOT) -> Path:
    """Write ``state`` into the folder ``root/folder``, creating it if needed."""
    if not folder:
        raise ConfigError("folder name must not be empty")
    directory = _folder(root, folder)
    directory.mkdir(parents=True, exist_ok=True)
    _write(directory / USERS_FILE, _user_lines(state))
    _write(directory / TWEETS_FILE, _tweet_lines(state))
    _write(directory / REPLIES_FILE, _reply_lines(state))
    _write(directory / DRAFTS_FILE, _draft_lines(state))
    _write(directory / THREADS_FILE, _thread_lines(state))
    return directory


def initial_load(state: AppState, console: Console, root: str | Path = DEFAULT_ROOT) -> str:
    """Ask for a configuration folder until an existing one is named, then load it."""
    folder = console.read_input()
    while not folder or not _folder(root, folder).is_dir():
        console.write("Tidak ada folder yang dimaksud!\n\n")
        console.write(FOLDER_PROMPT)
        folder = console.read_input()
    load_config(state, folder, root)
    console.write("File konfigurasi berhasil dimuat! Selamat berkicau!\n")
    return folder


def save_command(state: AppState, console: Console, root: str | Path = DEFAULT_ROOT) -> Path:
    """Ask for a folder name and save the state there."""
    console.write("\nMasukkan nama folder penyimpanan.\n")
    folder = console.read_input()
    directory = _folder(root, folder)
    if not directory.is_dir():
        console.write(
            f"Belum terdapat {folder}. Akan dilakukan pembuatan {folder} terlebih dahulu."
            + _WAIT
        )
        directory.mkdir(parents=True, exist_ok=True)
        console.write(f"\n\n{folder} sudah berhasil dibuat.\n\n")
    console.write(f"Anda akan melakukan penyimpanan di {folder}." + _WAIT)
    save_config(state, folder, root)
    console.write("\n\nPenyimpanan telah berhasil dilakukan!\n\n")
    return directory


def load_command(state: AppState, console: Console, root: str | Path = DEFAULT_ROOT) -> bool:
    """Ask for a folder name and load the state from it if it exists."""
    console.write("Masukkan nama folder yang hendak dimuat.\n")
    folder = console.read_input()
    if not folder or not _folder(root, folder).is_dir():
        console.write("Tidak ada folder yang dimaksud!\n\n")
        return False
    console.write(f"Anda akan melakukan pemuatan dari {folder}." + _WAIT)
    load_config(state, folder, root)
    console.write("\n\nPemuatan selesai!\n\n")
    return True