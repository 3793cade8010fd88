from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, NamedTuple, Tuple

from . import page_format
from .model import Code, Emphasis, InlineSpan, Strong, span_text

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class TextStyle:
    size: float = page_format.BODY_FONT_SIZE
    bold: bool = False
    italic: bool = False
    color: Color = page_format.BLACK


class Segment(NamedTuple):
    text: str
    style: TextStyle


class StyleState:
    """Single current style record mirrored onto the canvas.

    Blocks reset the record at fixed points instead of restoring earlier
    frames, so nothing set by one block leaks into the next.
    """

    def __init__(self, canvas) -> None:
        self._canvas = canvas
        self.current = TextStyle()

    def apply(self, style: TextStyle) -> TextStyle:
        self.current = style
        self._canvas.set_style(style.size, style.bold, style.italic)
        self._canvas.set_color(*style.color)
        return style

    def update(self, **changes) -> TextStyle:
        return self.apply(replace(self.current, **changes))

    def reset(self, size: float = page_format.BODY_FONT_SIZE) -> TextStyle:
        return self.apply(TextStyle(size=size))


def span_style(span: InlineSpan, size: float = page_format.BODY_FONT_SIZE) -> TextStyle:
    if isinstance(span, Strong):
        return TextStyle(size=size, bold=True)
    if isinstance(span, Emphasis):
        return TextStyle(size=size, italic=True)
    if isinstance(span, Code):
        return TextStyle(size=size, color=page_format.CODE_SPAN_COLOR)
    # Plain, Link and any unknown span kind render as plain text.
    return TextStyle(size=size)


def span_segments(spans: Iterable[InlineSpan], size: float = page_format.BODY_FONT_SIZE) -> List[Segment]:
    segments: List[Segment] = []
    for span in spans:
        text = span_text(span)
        if text:
            segments.append(Segment(text, span_style(span, size)))
    return segments
