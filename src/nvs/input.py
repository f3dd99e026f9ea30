"""Prompt session for interactive mode: search history and code completion."""

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings

from .config import HISTORY_FILE, PROMPT
from .models import Navaid
from .search import normalize_term

QUIT_ALIASES = frozenset(("quit", "exit", "q"))
HELP_COMMAND = "help"

MAX_COMPLETIONS = 20


def is_command(line: str) -> bool:
    """Check whether an input line is an interactive command, not a search."""
    return line.strip().lower() in QUIT_ALIASES | {HELP_COMMAND}


def normalize_search(line: str) -> str:
    """Canonical form of a search line: upper-cased terms, single-spaced."""
    return " ".join(normalize_term(term) for term in line.split())


class SearchHistory(FileHistory):
    """File-backed history of searches, most recent first.

    Searches are case-insensitive, so entries are stored in their canonical
    form and repeating a search moves it to the front instead of adding a
    second entry. Commands and blank lines are never recorded.
    """

    def load_history_strings(self) -> Iterable[str]:
        seen: set[str] = set()
        for string in super().load_history_strings():
            entry = normalize_search(string)
            if entry and entry not in seen:
                seen.add(entry)
                yield entry

    def append_string(self, string: str) -> None:
        if is_command(string):
            return
        entry = normalize_search(string)
        if not entry:
            return

        self._loaded_strings = [s for s in self._loaded_strings if s != entry]
        super().append_string(entry)


class NavaidCompleter(Completer):
    """Completes the word being typed with navaid and airport codes."""

    def __init__(self, cache: Sequence[Navaid]):
        codes = {navaid.code for navaid in cache}
        codes.update(navaid.icao for navaid in cache if navaid.icao)
        self.codes = sorted(codes)

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterator[Completion]:
        word = document.get_word_before_cursor(WORD=True)
        if not word:
            return

        prefix = normalize_term(word)
        count = 0
        for code in self.codes:
            if count >= MAX_COMPLETIONS:
                break
            if code.startswith(prefix):
                count += 1
                yield Completion(code, start_position=-len(word))


def create_key_bindings() -> KeyBindings:
    bindings = KeyBindings()

    @bindings.add("escape", "escape")
    def clear_search(event):
        """Double escape discards the search being typed."""
        event.current_buffer.reset()

    return bindings


def create_prompt_session(
    cache: Sequence[Navaid] = (), history_file: Path = HISTORY_FILE
) -> PromptSession:
    """Create a prompt session for entering searches.

    Up/Down recall earlier searches, Ctrl+R searches them and Tab completes
    codes present in the loaded cache.
    """
    history_file.parent.mkdir(parents=True, exist_ok=True)

    return PromptSession(
        history=SearchHistory(str(history_file)),
        completer=NavaidCompleter(cache),
        complete_while_typing=False,
        key_bindings=create_key_bindings(),
        enable_history_search=True,
    )


def prompt_with_history(session: PromptSession, prompt_text: str = PROMPT) -> str | None:
    """Read one line of input, or None once the user leaves with Ctrl+C or Ctrl+D."""
    try:
        return session.prompt(prompt_text)
    except (EOFError, KeyboardInterrupt):
        return None
