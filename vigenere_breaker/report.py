"""
Plain-text report of a BreakResult, one block per segment followed by
the key guess and decryption attempt:

    Segment 0: WHRV...
    Top 3 frequent letters:
    1. Letter: G | Frequency: 31 | Offset (Suggested letter for key index 0): C
    ...
    Most likely key: CODE
    Decryption attempt using most likely key: ...
"""

from .pipeline import BreakResult, SegmentReport


def format_segment(report: SegmentReport) -> str:
    lines = [f"Segment {report.position}: {report.segment}",
             f"Top {len(report.ranked)} frequent letters:"]
    for rank, ((letter, count), offset) in enumerate(
            zip(report.ranked, report.suggestions), start=1):
        lines.append(f"{rank}. Letter: {letter} | Frequency: {count} | "
                     f"Offset (Suggested letter for key index {report.position}): {offset}")
    return "\n".join(lines)


def format_report(result: BreakResult) -> str:
    blocks = [format_segment(s) + "\n" for s in result.segments]
    blocks.append(f"Most likely key: {result.candidate_key}")
    blocks.append(f"Decryption attempt using most likely key: {result.decoded}")
    return "\n".join(blocks)
