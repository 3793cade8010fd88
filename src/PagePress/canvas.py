from __future__ import annotations

from pathlib import Path
from typing import Protocol, Tuple

from fpdf import FPDF

from . import page_format
from .styles import TextStyle

CORE_FONT_ENCODING = "windows-1252"

_TEXT_REPLACEMENTS = {
    "\u00a0": " ",
    "\u200b": "",
    "\u2010": "-",
    "\u2011": "-",
    "\u2212": "-",
    "\u2190": "<-",
    "\u2192": "->",
    "\u21d2": "=>",
}


class TextMetrics(Protocol):
    def measure(self, text: str, style: TextStyle) -> float:
        ...


class PageCanvas(Protocol):
    def draw_text(self, text: str, x: float, y: float) -> None:
        ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        ...

    def new_page(self) -> None:
        ...

    def set_style(self, size: float, bold: bool, italic: bool) -> None:
        ...

    def set_color(self, r: int, g: int, b: int) -> None:
        ...

    def set_draw_color(self, r: int, g: int, b: int) -> None:
        ...

    def get_page_size(self) -> Tuple[float, float]:
        ...


def sanitize_text(text: str) -> str:
    """Map text onto what the built-in PDF fonts can encode."""
    for source, target in _TEXT_REPLACEMENTS.items():
        text = text.replace(source, target)
    return text.encode(CORE_FONT_ENCODING, "replace").decode(CORE_FONT_ENCODING)


def _font_style(bold: bool, italic: bool) -> str:
    style = ""
    if bold:
        style += "B"
    if italic:
        style += "I"
    return style


class FpdfCanvas:
    """Page canvas and text metrics backed by an fpdf2 document.

    The document starts with one page. Automatic page breaks are off: the
    layout cursor decides where pages end.
    """

    def __init__(self, paper_format: str = page_format.PAGE_FORMAT, font_family: str = page_format.FONT_FAMILY) -> None:
        self.font_family = font_family
        self._pdf = FPDF(unit="mm", format=paper_format)
        self._pdf.core_fonts_encoding = CORE_FONT_ENCODING
        self._pdf.set_auto_page_break(False)
        self._pdf.add_page()
        self.set_style(page_format.BODY_FONT_SIZE, False, False)

    @property
    def page_count(self) -> int:
        return self._pdf.page

    def get_page_size(self) -> Tuple[float, float]:
        return self._pdf.w, self._pdf.h

    def new_page(self) -> None:
        self._pdf.add_page()

    def set_style(self, size: float, bold: bool, italic: bool) -> None:
        self._pdf.set_font(self.font_family, _font_style(bold, italic), size)

    def set_color(self, r: int, g: int, b: int) -> None:
        self._pdf.set_text_color(r, g, b)

    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self._pdf.set_draw_color(r, g, b)

    def draw_text(self, text: str, x: float, y: float) -> None:
        self._pdf.text(x, y, sanitize_text(text))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._pdf.line(x1, y1, x2, y2)

    def measure(self, text: str, style: TextStyle) -> float:
        self.set_style(style.size, style.bold, style.italic)
        return self._pdf.get_string_width(sanitize_text(text))

    def save(self, output_path: str | Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self._pdf.output(str(output_path))
        return output_path
