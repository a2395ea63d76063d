"""
Stage 2 — FREQUENCY RANKER: most common letters in a segment
=============================================================
Within one segment every plaintext letter was shifted by the same
amount, so the segment keeps the shape of English letter frequencies,
just rotated. The top letters are the candidates for shifted 'E'.

Ranking: descending count, ties broken alphabetically so the same
segment always ranks the same way.

Legacy counting (count_first_occurrence=False) starts each newly seen
letter at 0 instead of 1, so every count comes out one lower.
"""

from collections import Counter
from typing import List, Tuple

from ..alphabet import require_letters
from ..errors import InvalidArgumentError


def letter_frequencies(segment: str, count_first_occurrence: bool = True) -> Counter:
    """Letter -> occurrence count. Letters not in the segment are absent."""
    if not segment:
        return Counter()
    require_letters(segment, "segment")
    counts = Counter(segment)
    if not count_first_occurrence:
        # keep letters seen once, at 0
        for letter in counts:
            counts[letter] -= 1
    return counts


def top_frequent_letters(segment: str, n: int = 3, *,
                         count_first_occurrence: bool = True) -> List[Tuple[str, int]]:
    """
    The n most frequent (letter, count) pairs, most frequent first.

    Returns every distinct letter when there are fewer than n, and an
    empty list for an empty segment.
    """
    if n <= 0:
        raise InvalidArgumentError(f"n must be positive, got {n}.")
    counts = letter_frequencies(segment, count_first_occurrence)
    ranked = sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))
    return ranked[:n]
