from __future__ import annotations

# Units follow the canvas: millimetres for positions, points for font sizes.

PAGE_FORMAT = "A4"
FONT_FAMILY = "Helvetica"
MARGIN = 20.0

BODY_FONT_SIZE = 11
TITLE_FONT_SIZE = 16
ATTRIBUTION_FONT_SIZE = 10
FOOTER_FONT_SIZE = 8
HEADING_BASE_SIZE = 14
HEADING_MIN_SIZE = 10
HEADING_LINE_FACTOR = 0.5

LINE_STEP = 5.0
BLOCK_LOOKAHEAD = 5.0
LIST_ITEM_LOOKAHEAD = 6.0

BLOCK_GAP = 3.0
LIST_ITEM_GAP = 2.0
HEADER_STEP = 10.0
RULE_STEP = 10.0
FOOTER_OFFSET = 10.0

LIST_TEXT_OFFSET = 10.0
LIST_WIDTH_REDUCTION = 15.0
CODE_OFFSET = 5.0
QUOTE_OFFSET = 10.0
QUOTE_WIDTH_REDUCTION = 10.0
QUOTE_BAR_ABOVE = 2.0
QUOTE_BAR_BELOW = 10.0

BLACK = (0, 0, 0)
CODE_SPAN_COLOR = (100, 100, 100)
CODE_BLOCK_COLOR = (50, 50, 50)
FOOTER_COLOR = (150, 150, 150)
RULE_COLOR = (200, 200, 200)
SEPARATOR_COLOR = (200, 230, 200)

ORDERED_MARKER = "{index}. "
BULLET_MARKER = "• "


def heading_font_size(depth: int) -> int:
    """Headings shrink one point per level and bottom out at the minimum size."""
    return max(HEADING_BASE_SIZE - depth, HEADING_MIN_SIZE)


def heading_line_step(size: float) -> float:
    return size * HEADING_LINE_FACTOR


def list_marker(index: int, ordered: bool) -> str:
    return ORDERED_MARKER.format(index=index) if ordered else BULLET_MARKER
