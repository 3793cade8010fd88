from __future__ import annotations

from typing import List, Optional, Sequence

from . import page_format
from .pagination import PageCursor
from .styles import Segment, StyleState


class LineWrapper:
    """Word-level wrapping on top of the cursor.

    ``wrap_segments`` draws word by word so that styles may change mid-line;
    ``split_to_size`` only computes lines for callers that draw whole lines.
    A word drawn by ``wrap_segments`` carries a leading space only when the
    source text had one before it, so ``**bold**,`` keeps the comma attached.
    Neither breaks inside a word: a word wider than the line sits alone on its
    line and overflows the right edge.
    """

    def __init__(self, canvas, metrics, cursor: PageCursor, styles: StyleState) -> None:
        self.canvas = canvas
        self.metrics = metrics
        self.cursor = cursor
        self.styles = styles

    def measure(self, text: str) -> float:
        return self.metrics.measure(text, self.styles.current)

    def wrap_segments(self, segments: Sequence[Segment], width: Optional[float] = None, offset: float = 0.0) -> None:
        if not segments:
            return
        cursor = self.cursor
        if width is None:
            width = cursor.content_width - offset
        line_start = cursor.margin + offset
        line_end = line_start + width
        cursor.carriage_return(offset)
        first_word = True
        line_has_words = False
        # Set when a space separates the next word from the previous one,
        # including a space that ends one segment or starts the next.
        spaced = False

        for segment in segments:
            self.styles.apply(segment.style)
            for index, word in enumerate(segment.text.split(" ")):
                if index > 0:
                    spaced = True
                if not word:
                    continue
                piece = f" {word}" if spaced and not first_word else word
                first_word = False
                spaced = False
                word_width = self.measure(piece)
                if line_has_words and cursor.x + word_width > line_end:
                    cursor.advance(page_format.LINE_STEP)
                    cursor.ensure_space(page_format.LINE_STEP)
                    cursor.carriage_return(offset)
                self.canvas.draw_text(piece, cursor.x, cursor.y)
                cursor.x += word_width
                line_has_words = True

        self.styles.update(bold=False, italic=False, color=page_format.BLACK)
        cursor.carriage_return()
        cursor.advance(page_format.LINE_STEP)

    def split_to_size(self, text: str, width: float) -> List[str]:
        if not text:
            return []
        lines: List[str] = []
        for paragraph in text.split("\n"):
            words = [word for word in paragraph.split(" ") if word]
            if not words:
                lines.append("")
                continue
            current = words[0]
            for word in words[1:]:
                candidate = f"{current} {word}"
                if self.measure(candidate) <= width:
                    current = candidate
                else:
                    lines.append(current)
                    current = word
            lines.append(current)
        return lines
