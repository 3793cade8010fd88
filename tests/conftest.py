from dataclasses import dataclass

import pytest

from PagePress.renderer import RenderState


@dataclass
class DrawnText:
    text: str
    x: float
    y: float
    page: int
    size: float
    bold: bool
    italic: bool
    color: tuple


@dataclass
class DrawnLine:
    x1: float
    y1: float
    x2: float
    y2: float
    page: int
    color: tuple


class RecordingCanvas:
    """Canvas and metrics double: records draws, measures every character as ``char_width``."""

    def __init__(self, width: float = 210.0, height: float = 297.0, char_width: float = 2.0):
        self.width = width
        self.height = height
        self.char_width = char_width
        self.page = 1
        self.texts: list[DrawnText] = []
        self.lines: list[DrawnLine] = []
        self.size = 11
        self.bold = False
        self.italic = False
        self.color = (0, 0, 0)
        self.draw_color = (0, 0, 0)

    def get_page_size(self):
        return self.width, self.height

    def new_page(self):
        self.page += 1

    def set_style(self, size, bold, italic):
        self.size = size
        self.bold = bold
        self.italic = italic

    def set_color(self, r, g, b):
        self.color = (r, g, b)

    def set_draw_color(self, r, g, b):
        self.draw_color = (r, g, b)

    def draw_text(self, text, x, y):
        self.texts.append(DrawnText(text, x, y, self.page, self.size, self.bold, self.italic, self.color))

    def draw_line(self, x1, y1, x2, y2):
        self.lines.append(DrawnLine(x1, y1, x2, y2, self.page, self.draw_color))

    def measure(self, text, style):
        return len(text) * self.char_width

    def text_values(self):
        return [drawn.text for drawn in self.texts]


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def narrow_canvas():
    # 140 wide with 20 margins leaves a content width of 100.
    return RecordingCanvas(width=140.0)


@pytest.fixture
def state(canvas):
    return RenderState.create(canvas)


@pytest.fixture
def narrow_state(narrow_canvas):
    return RenderState.create(narrow_canvas)


@pytest.fixture
def make_canvas():
    return RecordingCanvas
