"""
Stage 4 — DECODER: repeating-key Caesar shift
==============================================
Classic Vigenère with a repeating key. The key position advances once
per character and wraps after the last key letter.

    decode: P = (C - K) mod 26
    encode: C = (P + K) mod 26

Each letter is shifted with one modulo, wrapping past 'A' to 'Z'.
"""

from ..alphabet import index_of, letter_at, require_letters


def _shift(text: str, key: str, direction: int) -> str:
    shifts = [index_of(k) for k in key]
    period = len(shifts)
    out = []
    for i, ch in enumerate(text):
        out.append(letter_at(index_of(ch) + direction * shifts[i % period]))
    return "".join(out)


def decode(ciphertext: str, key: str) -> str:
    """Decrypt ciphertext with the repeating key. Output length == input length."""
    require_letters(ciphertext, "ciphertext")
    require_letters(key, "key")
    return _shift(ciphertext, key, -1)


def encode(plaintext: str, key: str) -> str:
    """Encrypt plaintext with the repeating key (forward shift)."""
    require_letters(plaintext, "plaintext")
    require_letters(key, "key")
    return _shift(plaintext, key, +1)
