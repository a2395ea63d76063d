"""
Stage 1 — SEGMENTER: split the ciphertext by key position
==========================================================
A Vigenère key of length k turns the ciphertext into k interleaved
Caesar ciphers. Segment i holds every k-th letter starting at i, so all
of its letters were shifted by the same key letter.

    ciphertext  W I E V H S M Y R S ...
    key pos     0 1 2 3 0 1 2 3 0 1 ...
    segment 0   W H R ...

The k segments partition the ciphertext; interleave() puts them back.
"""

from typing import List

from ..alphabet import require_letters
from ..errors import InvalidArgumentError


def _check_key_length(key_length: int) -> None:
    if key_length <= 0:
        raise InvalidArgumentError(f"key_length must be positive, got {key_length}.")


def slice_segment(ciphertext: str, key_length: int, position: int) -> str:
    """segment() without the ciphertext scan, for text already validated."""
    _check_key_length(key_length)
    if not 0 <= position < key_length:
        raise InvalidArgumentError(
            f"position must be in [0, {key_length}), got {position}.")
    return ciphertext[position::key_length]


def segment(ciphertext: str, key_length: int, position: int) -> str:
    """
    Return ciphertext[position], ciphertext[position + key_length], ...

    Empty when the ciphertext is shorter than position + 1.
    """
    require_letters(ciphertext, "ciphertext")
    return slice_segment(ciphertext, key_length, position)


def split_segments(ciphertext: str, key_length: int) -> List[str]:
    """All key_length segments, in key-position order."""
    require_letters(ciphertext, "ciphertext")
    return [slice_segment(ciphertext, key_length, i) for i in range(key_length)]


def interleave(segments: List[str]) -> str:
    """Inverse of split_segments()."""
    if not segments:
        return ""
    out = []
    for row in range(len(segments[0])):
        for seg in segments:
            if row < len(seg):
                out.append(seg[row])
    return "".join(out)
