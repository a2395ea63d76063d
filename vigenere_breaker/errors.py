"""
Errors raised by the analysis stages.

All of them are ValueError subclasses: every failure here is a caller
handing in bad input, never a transient condition worth retrying.
"""

from typing import Optional


class AnalysisError(ValueError):
    """Base class for all vigenere_breaker input errors."""


class InvalidArgumentError(AnalysisError):
    """Key length, segment position or top-N count out of range."""


class EmptyInputError(AnalysisError):
    """Ciphertext or key is empty where text is required."""

    def __init__(self, what: str = "input"):
        self.what = what
        super().__init__(f"{what} must not be empty.")


class InvalidCharacterError(AnalysisError):
    """A character outside the uppercase A–Z alphabet."""

    def __init__(self, character: str, index: Optional[int] = None,
                 what: str = "input"):
        self.character = character
        self.index     = index
        self.what      = what
        where = f" at position {index}" if index is not None else ""
        super().__init__(
            f"{what} contains {character!r}{where}; only uppercase A-Z is supported."
        )
