"""
Frequency chart — per-segment letter histograms as a PNG
=========================================================
One panel per key position, 26 bars (A..Z) in each. The letter the
key guess came from is drawn in the highlight colour, other ranked
letters in the accent colour, everything else in grey.

Output: PNG bytes (lossless, so the image can be embedded or saved).

Dependencies: Pillow >= 10.0
"""

import io
from typing import Union
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .alphabet import ALPHABET
from .pipeline import BreakResult
from .stages.stage2_frequency import letter_frequencies


class FrequencyChart:
    """Render BreakResult letter frequencies with Pillow."""

    BAR_WIDTH    = 14
    BAR_GAP      = 4
    PANEL_HEIGHT = 160
    MARGIN       = 24
    LABEL_HEIGHT = 14

    BACKGROUND = (255, 255, 255)
    BAR        = (190, 190, 190)
    ACCENT     = (90, 140, 210)    # other ranked letters
    HIGHLIGHT  = (210, 60, 60)     # letter used for the key guess
    TEXT       = (20, 20, 20)

    def size(self, result: BreakResult) -> tuple:
        width = 2 * self.MARGIN + len(ALPHABET) * (self.BAR_WIDTH + self.BAR_GAP)
        panel = self.PANEL_HEIGHT + 2 * self.LABEL_HEIGHT + self.MARGIN
        return width, self.MARGIN + panel * len(result.segments)

    def draw(self, result: BreakResult) -> Image.Image:
        img  = Image.new("RGB", self.size(result), self.BACKGROUND)
        pen  = ImageDraw.Draw(img)
        font = ImageFont.load_default()

        top = self.MARGIN
        for report in result.segments:
            counts  = letter_frequencies(report.segment, result.count_first_occurrence)
            peak    = max(counts.values(), default=0) or 1
            ranked  = {letter for letter, _ in report.ranked}
            leader  = report.ranked[0][0] if report.ranked else None

            pen.text((self.MARGIN, top),
                     f"Segment {report.position}  key guess: {report.key_letter}",
                     fill=self.TEXT, font=font)
            base = top + self.LABEL_HEIGHT + self.PANEL_HEIGHT

            for i, letter in enumerate(ALPHABET):
                x0 = self.MARGIN + i * (self.BAR_WIDTH + self.BAR_GAP)
                h  = round(self.PANEL_HEIGHT * counts.get(letter, 0) / peak)
                if letter == leader:
                    colour = self.HIGHLIGHT
                elif letter in ranked:
                    colour = self.ACCENT
                else:
                    colour = self.BAR
                if h:
                    pen.rectangle([x0, base - h, x0 + self.BAR_WIDTH - 1, base - 1],
                                  fill=colour)
                pen.text((x0 + 3, base + 1), letter, fill=self.TEXT, font=font)

            top = base + self.LABEL_HEIGHT + self.MARGIN
        return img

    def render(self, result: BreakResult) -> bytes:
        """PNG bytes of the chart."""
        buf = io.BytesIO()
        self.draw(result).save(buf, format="PNG")
        return buf.getvalue()

    def save(self, result: BreakResult, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_bytes(self.render(result))
        return path
