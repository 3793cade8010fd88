from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from . import page_format
from .canvas import FpdfCanvas
from .config import FooterPlacement, RenderConfig
from .model import Document
from .renderer import RenderState, render_blocks
from .styles import TextStyle
from .utils import format_timestamp

logger = logging.getLogger(__name__)

FOOTER_TEMPLATE = "Generated on {timestamp}"


def attribution(identifier: str) -> str:
    """Text after the first ``/`` of ``identifier``, or the whole identifier."""
    _, sep, rest = identifier.partition("/")
    return rest if sep and rest else identifier


def render_document(
    document: Document,
    canvas,
    identifier: str,
    metrics=None,
    config: Optional[RenderConfig] = None,
    timestamp: Optional[str] = None,
) -> RenderState:
    """Lay out ``document`` on ``canvas``: header, body blocks, footer.

    ``canvas`` must already hold a first page. ``metrics`` defaults to the
    canvas. ``timestamp`` is the footer text's time string; the current local
    time is used when omitted. Errors raised by the canvas or the metrics
    provider are not caught.
    """
    config = config or RenderConfig()
    if timestamp is None:
        timestamp = format_timestamp(datetime.now())
    footer_text = FOOTER_TEMPLATE.format(timestamp=timestamp)

    state = RenderState.create(canvas, metrics, margin=config.margin)
    if config.footer is FooterPlacement.EVERY_PAGE:
        state.cursor.on_page_end(lambda _page: _draw_footer(state, footer_text))

    _draw_header(state, config.title, config.attribution_label + attribution(identifier))
    render_blocks(document.blocks, state)
    _draw_footer(state, footer_text)

    logger.debug("Rendered %d block(s) on %d page(s)", len(document.blocks), state.cursor.page_count)
    return state


def export_pdf(
    document: Document,
    output_path: str | Path,
    identifier: str,
    config: Optional[RenderConfig] = None,
    now: Optional[datetime] = None,
) -> Path:
    config = config or RenderConfig()
    now = now or datetime.now()
    canvas = FpdfCanvas(config.page_format, config.font_family)
    state = render_document(document, canvas, identifier, config=config, timestamp=format_timestamp(now))
    logger.info("Writing %d page(s) to %s", state.cursor.page_count, output_path)
    return canvas.save(output_path)


def _draw_header(state: RenderState, title: str, attribution_line: str) -> None:
    cursor = state.cursor
    state.styles.apply(TextStyle(size=page_format.TITLE_FONT_SIZE, bold=True))
    state.canvas.draw_text(title, cursor.margin, cursor.y)
    cursor.advance(page_format.HEADER_STEP)

    state.styles.apply(TextStyle(size=page_format.ATTRIBUTION_FONT_SIZE))
    state.canvas.draw_text(attribution_line, cursor.margin, cursor.y)
    cursor.advance(page_format.HEADER_STEP)

    state.canvas.set_draw_color(*page_format.SEPARATOR_COLOR)
    state.canvas.draw_line(cursor.left, cursor.y, cursor.right, cursor.y)
    cursor.advance(page_format.HEADER_STEP)

    state.styles.reset()


def _draw_footer(state: RenderState, text: str) -> None:
    # Stamped at a fixed spot below the bottom margin, independent of the cursor.
    previous = state.styles.current
    state.styles.apply(TextStyle(size=page_format.FOOTER_FONT_SIZE, color=page_format.FOOTER_COLOR))
    state.canvas.draw_text(text, state.cursor.margin, state.cursor.page_height - page_format.FOOTER_OFFSET)
    state.styles.apply(previous)
