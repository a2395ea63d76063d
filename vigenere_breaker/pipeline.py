"""
FREQUENCY ATTACK PIPELINE  |  The Christman AI Project

Known key length, unknown key:

    for each key position
        segment -> rank letters -> infer key letter from the top letter
    join the key letters -> decode the whole ciphertext

Nothing is kept between runs; the candidate key is built locally and
returned inside a BreakResult.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import BreakerConfig, DEFAULT_TOP_N
from .stages.stage1_segment import slice_segment
from .stages.stage2_frequency import top_frequent_letters
from .stages.stage3_offset import infer_key_letter
from .stages.stage4_decode import decode

logger = logging.getLogger(__name__)


@dataclass
class SegmentReport:
    """Analysis of one key position."""
    position:    int
    segment:     str
    ranked:      List[Tuple[str, int]]
    suggestions: List[str]

    @property
    def key_letter(self) -> str:
        return self.suggestions[0]


@dataclass
class BreakResult:
    ciphertext:    str
    key_length:    int
    segments:      List[SegmentReport] = field(default_factory=list)
    candidate_key: str = ""
    decoded:       str = ""
    count_first_occurrence: bool = True


class VigenereBreaker:
    """Runs the four stages over one ciphertext."""

    def __init__(self, config: BreakerConfig):
        self.config = config.validate()
        logger.info(f"VigenereBreaker key_length={config.key_length} "
                    f"top_n={config.top_n} | {len(config.ciphertext)} letters")

    def analyse_position(self, position: int) -> SegmentReport:
        cfg = self.config
        seg = slice_segment(cfg.ciphertext, cfg.key_length, position)
        ranked = top_frequent_letters(
            seg, cfg.top_n, count_first_occurrence=cfg.count_first_occurrence)
        suggestions = [infer_key_letter(letter, modular=cfg.modular_offset)
                       for letter, _ in ranked]
        logger.debug(f"Segment {position}: {len(seg)} letters, ranked={ranked} "
                     f"suggestions={suggestions}")
        return SegmentReport(position, seg, ranked, suggestions)

    def run(self) -> BreakResult:
        cfg = self.config
        result = BreakResult(cfg.ciphertext, cfg.key_length,
                             count_first_occurrence=cfg.count_first_occurrence)
        key_letters = []
        for position in range(cfg.key_length):
            report = self.analyse_position(position)
            result.segments.append(report)
            key_letters.append(report.key_letter)
        result.candidate_key = "".join(key_letters)
        result.decoded = decode(cfg.ciphertext, result.candidate_key)
        logger.info(f"Most likely key: {result.candidate_key}")
        return result

    def __repr__(self):
        return f"VigenereBreaker(key_length={self.config.key_length}, top_n={self.config.top_n})"


def break_vigenere(ciphertext: str, key_length: int, top_n: int = DEFAULT_TOP_N,
                   *, count_first_occurrence: bool = True,
                   modular_offset: bool = False) -> BreakResult:
    """One-call form of VigenereBreaker(BreakerConfig(...)).run()."""
    config = BreakerConfig(ciphertext=ciphertext, key_length=key_length, top_n=top_n,
                           count_first_occurrence=count_first_occurrence,
                           modular_offset=modular_offset)
    return VigenereBreaker(config).run()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    from .report import format_report
    print(format_report(VigenereBreaker(BreakerConfig()).run()))
