"""Tests for interactive mode and its input handling."""

from prompt_toolkit.document import Document

from nvs.input import NavaidCompleter, SearchHistory, is_command, prompt_with_history
from nvs.interactive import interactive_mode
from nvs.options import SearchOptions


class FakeSession:
    """Prompt session replaying scripted input, then Ctrl+D."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def prompt(self, text):
        self.prompts.append(text)
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


class TestInteractiveMode:
    """Test the interactive search loop."""

    def test_searches_until_quit(self, full_cache, all_types, capsys):
        session = FakeSession("okj", "", "egll nope", "quit", "sy")
        interactive_mode(full_cache, all_types, session=session)

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Loaded 7 navaids. Type 'help' for commands."
        assert lines[1].startswith("NDB OKJ")
        assert lines[2].startswith("ILS ILL")
        assert lines[3].startswith("DME ILL")
        assert lines[4] == "nope not found"
        assert len(lines) == 5
        assert session.prompts == ["nvs> "] * 4

    def test_help(self, full_cache, all_types, capsys):
        interactive_mode(full_cache, all_types, session=FakeSession("help"))
        assert "quit|exit|q" in capsys.readouterr().out

    def test_ctrl_c_leaves(self, full_cache, capsys):
        options = SearchOptions(quiet=True).with_all_restrictions()
        interactive_mode(full_cache, options, session=FakeSession(KeyboardInterrupt(), "okj"))
        assert capsys.readouterr().out == ""


class TestPromptWithHistory:
    """Test prompting."""

    def test_returns_input(self):
        assert prompt_with_history(FakeSession("OKJ")) == "OKJ"

    def test_eof_returns_none(self):
        assert prompt_with_history(FakeSession()) is None


class TestSearchHistory:
    """Test search history storage."""

    def test_keeps_most_recent_duplicate(self, tmp_path):
        history = SearchHistory(str(tmp_path / "history"))
        for entry in ("OKJ", "BNN", "OKJ"):
            history.append_string(entry)

        assert history.get_strings() == ["BNN", "OKJ"]

    def test_duplicates_ignore_case(self, tmp_path):
        history = SearchHistory(str(tmp_path / "history"))
        for entry in ("okj", "BNN", "OKJ", "  okj "):
            history.append_string(entry)

        assert history.get_strings() == ["BNN", "OKJ"]

    def test_terms_stored_upper_cased(self, tmp_path):
        history = SearchHistory(str(tmp_path / "history"))
        history.append_string("egll   okj")

        assert history.get_strings() == ["EGLL OKJ"]

    def test_commands_not_stored(self, tmp_path):
        history = SearchHistory(str(tmp_path / "history"))
        for entry in ("OKJ", "quit", "Help", "  ", "EXIT"):
            history.append_string(entry)

        assert history.get_strings() == ["OKJ"]
        text = (tmp_path / "history").read_text()
        assert "quit" not in text
        assert "Help" not in text

    def test_reload_drops_duplicates(self, tmp_path):
        path = str(tmp_path / "history")
        first = SearchHistory(path)
        for entry in ("okj", "BNN"):
            first.append_string(entry)
        SearchHistory(path).append_string("OKJ")

        assert list(SearchHistory(path).load_history_strings()) == ["OKJ", "BNN"]


class TestIsCommand:
    """Test telling commands from searches."""

    def test_commands(self):
        assert is_command("help")
        assert is_command(" Q ")
        assert is_command("EXIT")

    def test_searches(self):
        assert not is_command("OKJ")
        assert not is_command("help me")


class TestNavaidCompleter:
    """Test completion of navaid and airport codes."""

    def complete(self, cache, text):
        completer = NavaidCompleter(cache)
        return [c.text for c in completer.get_completions(Document(text), None)]

    def test_codes_and_airports(self, full_cache):
        assert self.complete(full_cache, "o") == ["OCK", "OKJ"]
        assert self.complete(full_cache, "EG") == ["EGLL"]

    def test_completes_last_word(self, full_cache):
        assert self.complete(full_cache, "OKJ li") == ["LIMF"]

    def test_nothing_after_space(self, full_cache):
        assert self.complete(full_cache, "OKJ ") == []

    def test_replaces_typed_word(self, full_cache):
        completion = next(NavaidCompleter(full_cache).get_completions(Document("sy"), None))
        assert completion.start_position == -2
