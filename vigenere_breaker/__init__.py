"""
vigenere_breaker — The Christman AI Project
============================================
Frequency-analysis attack on the Vigenère cipher when the key length
is known. Four stages, one pipeline.

Stages:
    1  SEGMENTER   — split ciphertext into key-length interleaved segments
    2  FREQUENCY   — rank letters by count within each segment
    3  OFFSET      — infer a key letter assuming 'E' dominates
    4  DECODER     — repeating-key Caesar shift with the candidate key

Author : Everett Christman  |  The Christman AI Project
License: Apache 2.0
"""

__version__  = "1.0.0"
__author__   = "Everett Christman"
__project__  = "The Christman AI Project"

from .alphabet                 import ALPHABET
from .errors                   import (AnalysisError, InvalidArgumentError,
                                       InvalidCharacterError, EmptyInputError)
from .config                   import BreakerConfig, SAMPLE_CIPHERTEXT
from .stages.stage1_segment    import segment, split_segments, interleave
from .stages.stage2_frequency  import top_frequent_letters, letter_frequencies
from .stages.stage3_offset     import infer_key_letter
from .stages.stage4_decode     import decode, encode
from .pipeline                 import VigenereBreaker, BreakResult, SegmentReport, break_vigenere
from .report                   import format_report

__all__ = [
    "ALPHABET",
    "AnalysisError",
    "InvalidArgumentError",
    "InvalidCharacterError",
    "EmptyInputError",
    "BreakerConfig",
    "SAMPLE_CIPHERTEXT",
    "segment",
    "split_segments",
    "interleave",
    "top_frequent_letters",
    "letter_frequencies",
    "infer_key_letter",
    "decode",
    "encode",
    "VigenereBreaker",
    "BreakResult",
    "SegmentReport",
    "break_vigenere",
    "format_report",
]
