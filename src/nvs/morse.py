"""Morse code transliteration of navaid identifiers."""

import logging

logger = logging.getLogger(__name__)

MORSE_CODES = {
    "A": ".-",
    "B": "-...",
    "C": "-.-.",
    "D": "-..",
    "E": ".",
    "F": "..-.",
    "G": "--.",
    "H": "....",
    "I": "..",
    "J": ".---",
    "K": "-.-",
    "L": ".-..",
    "M": "--",
    "N": "-.",
    "O": "---",
    "P": ".--.",
    "Q": "--.-",
    "R": ".-.",
    "S": "...",
    "T": "-",
    "U": "..-",
    "V": "...-",
    "W": ".--",
    "X": "-..-",
    "Y": "-.--",
    "Z": "--..",
    "0": "-----",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
}


def to_morse(text: str, delim: str = " ") -> str | None:
    """
    Translate letters and digits into Morse code.

    Args:
        text: Text to translate (e.g., "OKJ")
        delim: Separator between translated characters

    Returns:
        Morse translation (e.g., "--- -.- .---"), or None if a character
        has no Morse equivalent.
    """
    codes = []
    for c in text:
        code = MORSE_CODES.get(c.upper())
        if code is None:
            logger.warning("No morse translation for %s in %s", c, text)
            return None
        codes.append(code)
    return delim.join(codes)
