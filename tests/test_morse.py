"""Tests for Morse code transliteration."""

from nvs.morse import to_morse


def test_letters():
    assert to_morse("SOS") == "... --- ..."


def test_digits():
    assert to_morse("A1") == ".- .----"


def test_lower_case():
    assert to_morse("okj") == to_morse("OKJ") == "--- -.- .---"


def test_delimiter():
    assert to_morse("ET", delim="/") == "./-"


def test_empty():
    assert to_morse("") == ""


def test_untranslatable_character():
    assert to_morse("A-B") is None


def test_returns_new_string_each_call():
    first = to_morse("ABC")
    second = to_morse("XYZ")
    assert first == ".- -... -.-."
    assert second == "-..- -.-- --.."
