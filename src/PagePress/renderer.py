from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from . import page_format
from .canvas import PageCanvas, TextMetrics
from .line_wrapper import LineWrapper
from .model import (
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    HorizontalRule,
    ListBlock,
    Paragraph,
    RawText,
    flatten_spans,
)
from .pagination import PageCursor
from .styles import StyleState, TextStyle, span_segments

logger = logging.getLogger(__name__)


@dataclass
class RenderState:
    canvas: PageCanvas
    metrics: TextMetrics
    cursor: PageCursor
    styles: StyleState
    wrapper: LineWrapper = field(init=False)

    def __post_init__(self) -> None:
        self.wrapper = LineWrapper(self.canvas, self.metrics, self.cursor, self.styles)

    @classmethod
    def create(cls, canvas, metrics=None, margin: float = page_format.MARGIN) -> "RenderState":
        """One state per document; ``metrics`` defaults to the canvas itself."""
        return cls(
            canvas=canvas,
            metrics=metrics if metrics is not None else canvas,
            cursor=PageCursor(canvas, margin=margin),
            styles=StyleState(canvas),
        )


def render_blocks(blocks: Iterable[Block], state: RenderState) -> None:
    for block in blocks:
        state.cursor.ensure_space(page_format.BLOCK_LOOKAHEAD)
        _dispatch_block(block, state)


def _dispatch_block(block: Block, state: RenderState) -> None:
    if isinstance(block, Heading):
        _render_heading(block, state)
    elif isinstance(block, Paragraph):
        _render_paragraph(block, state)
    elif isinstance(block, ListBlock):
        _render_list(block, state)
    elif isinstance(block, CodeBlock):
        _render_code_block(block, state)
    elif isinstance(block, BlockQuote):
        _render_block_quote(block, state)
    elif isinstance(block, HorizontalRule):
        _render_horizontal_rule(state)
    elif isinstance(block, RawText):
        _render_raw_text(block.text, state)
    else:
        logger.debug("No rule for %s; rendering its text as plain", type(block).__name__)
        _render_raw_text(getattr(block, "text", "") or "", state)


def _draw_lines(lines: Sequence[str], state: RenderState, offset: float = 0.0, step: float = page_format.LINE_STEP) -> None:
    cursor = state.cursor
    for line in lines:
        cursor.ensure_space(step)
        state.canvas.draw_text(line, cursor.margin + offset, cursor.y)
        cursor.advance(step)


def _render_heading(heading: Heading, state: RenderState) -> None:
    size = page_format.heading_font_size(heading.depth)
    state.styles.apply(TextStyle(size=size, bold=True))
    lines = state.wrapper.split_to_size(flatten_spans(heading.spans), state.cursor.content_width)
    _draw_lines(lines, state, step=page_format.heading_line_step(size))
    state.cursor.advance(page_format.BLOCK_GAP)
    state.styles.reset()


def _render_paragraph(paragraph: Paragraph, state: RenderState) -> None:
    if paragraph.spans:
        state.wrapper.wrap_segments(span_segments(paragraph.spans), offset=0.0)
    else:
        state.styles.reset()
        lines = state.wrapper.split_to_size(paragraph.text, state.cursor.content_width)
        _draw_lines(lines, state)
    state.cursor.advance(page_format.BLOCK_GAP)


def _render_list(block: ListBlock, state: RenderState) -> None:
    cursor = state.cursor
    width = cursor.content_width - page_format.LIST_WIDTH_REDUCTION
    for idx, item in enumerate(block.items, start=1):
        cursor.ensure_space(page_format.LIST_ITEM_LOOKAHEAD)
        state.styles.update(bold=False, italic=False)
        state.canvas.draw_text(page_format.list_marker(idx, block.ordered), cursor.margin, cursor.y)

        lines = state.wrapper.split_to_size(flatten_spans(item), width)
        if not lines:
            cursor.advance(page_format.LINE_STEP)
        for line_idx, line in enumerate(lines):
            # The first line shares the marker's baseline, which was already checked.
            if line_idx > 0:
                cursor.ensure_space(page_format.LINE_STEP)
            state.canvas.draw_text(line, cursor.margin + page_format.LIST_TEXT_OFFSET, cursor.y)
            cursor.advance(page_format.LINE_STEP)
        cursor.advance(page_format.LIST_ITEM_GAP)
    cursor.advance(page_format.BLOCK_GAP)


def _render_code_block(block: CodeBlock, state: RenderState) -> None:
    state.styles.update(bold=False, italic=False, color=page_format.CODE_BLOCK_COLOR)
    _draw_lines(block.lines, state, offset=page_format.CODE_OFFSET)
    state.styles.update(color=page_format.BLACK)
    state.cursor.advance(page_format.BLOCK_GAP)


def _render_block_quote(block: BlockQuote, state: RenderState) -> None:
    cursor = state.cursor
    state.canvas.set_draw_color(*page_format.RULE_COLOR)
    state.canvas.draw_line(
        cursor.margin,
        cursor.y - page_format.QUOTE_BAR_ABOVE,
        cursor.margin,
        cursor.y + page_format.QUOTE_BAR_BELOW,
    )
    state.styles.update(italic=True)
    width = cursor.content_width - page_format.QUOTE_WIDTH_REDUCTION
    lines = state.wrapper.split_to_size(flatten_spans(block.spans), width)
    _draw_lines(lines, state, offset=page_format.QUOTE_OFFSET)
    state.styles.update(bold=False, italic=False)
    cursor.advance(page_format.BLOCK_GAP)


def _render_horizontal_rule(state: RenderState) -> None:
    cursor = state.cursor
    cursor.ensure_space(page_format.BLOCK_LOOKAHEAD)
    state.canvas.set_draw_color(*page_format.RULE_COLOR)
    state.canvas.draw_line(cursor.left, cursor.y, cursor.right, cursor.y)
    cursor.advance(page_format.RULE_STEP)


def _render_raw_text(text: str, state: RenderState) -> None:
    if not text:
        return
    lines = state.wrapper.split_to_size(text, state.cursor.content_width)
    _draw_lines(lines, state)
