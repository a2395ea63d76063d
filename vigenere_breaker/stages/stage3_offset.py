"""
Stage 3 — OFFSET INFERRER: guess the key letter from a frequent letter
=======================================================================
Assumes the dominant letter of every segment is an enciphered 'E'.

Default rule:

    key letter = ALPHABET[ |index('E') - index(observed)| ]

    observed G -> |4 - 6| = 2 -> C
    observed I -> |4 - 8| = 4 -> E

This equals the real shift only when the observed letter sits at or
after 'E'. For observed A-D it mirrors instead of wrapping; pass
modular=True for (index(observed) - index('E')) mod 26.
"""

from ..alphabet import index_of, letter_at

REFERENCE_LETTER = "E"


def infer_key_letter(letter: str, *, modular: bool = False) -> str:
    observed = index_of(letter)
    reference = index_of(REFERENCE_LETTER)
    if modular:
        return letter_at(observed - reference)
    return letter_at(abs(reference - observed))
