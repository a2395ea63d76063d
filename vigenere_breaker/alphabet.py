"""
Alphabet — the fixed 26-letter uppercase Latin alphabet
========================================================
Every shift in the package is index arithmetic over this sequence.
A = 0, B = 1, ... Z = 25.
"""

from .errors import EmptyInputError, InvalidCharacterError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE     = len(ALPHABET)

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def index_of(letter: str) -> int:
    """Position of `letter` in the alphabet."""
    try:
        return _INDEX[letter]
    except KeyError:
        raise InvalidCharacterError(letter) from None


def letter_at(index: int) -> str:
    return ALPHABET[index % SIZE]


def require_letters(text: str, what: str = "ciphertext") -> str:
    """
    Check that `text` is non-empty and made only of A–Z.
    Returns the text unchanged so callers can validate inline.
    """
    if not text:
        raise EmptyInputError(what)
    for i, ch in enumerate(text):
        if ch not in _INDEX:
            raise InvalidCharacterError(ch, i, what)
    return text


def clean_text(text: str) -> str:
    """Drop whitespace and upper-case. Anything else is left for validation."""
    return "".join(text.split()).upper()
