from __future__ import annotations

import logging
from typing import Callable, List

from . import page_format

logger = logging.getLogger(__name__)

PageEndHook = Callable[[int], None]


class PageCursor:
    """Write position on the current page plus the greedy page-break rule.

    ``y`` grows downwards from the top edge. Pages are only ever appended, and
    content already placed is never moved.
    """

    def __init__(self, canvas, margin: float = page_format.MARGIN) -> None:
        self._canvas = canvas
        self.page_width, self.page_height = canvas.get_page_size()
        self.margin = margin
        self.x = margin
        self.y = margin
        self.page_count = 1
        self._page_end_hooks: List[PageEndHook] = []

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def left(self) -> float:
        return self.margin

    @property
    def right(self) -> float:
        return self.page_width - self.margin

    @property
    def bottom(self) -> float:
        return self.page_height - self.margin

    def on_page_end(self, hook: PageEndHook) -> None:
        self._page_end_hooks.append(hook)

    def ensure_space(self, required_height: float = page_format.BLOCK_LOOKAHEAD) -> bool:
        """Start a new page if ``required_height`` does not fit below the cursor.

        Returns True when a page break happened.
        """
        if self.y + required_height <= self.bottom:
            return False
        for hook in self._page_end_hooks:
            hook(self.page_count)
        logger.debug("Page %d full at y=%.1f (needs %.1f); starting a new page", self.page_count, self.y, required_height)
        self._canvas.new_page()
        self.page_count += 1
        self.x = self.margin
        self.y = self.margin
        return True

    def advance(self, dy: float) -> None:
        self.y += dy

    def carriage_return(self, offset: float = 0.0) -> None:
        self.x = self.margin + offset
