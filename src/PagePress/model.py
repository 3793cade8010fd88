from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Document:
    blocks: List[Block] = field(default_factory=list)


@dataclass(frozen=True)
class InlineSpan:
    """Base class for inline runs. A span carries exactly one style."""

    text: str


@dataclass(frozen=True)
class Plain(InlineSpan):
    pass


@dataclass(frozen=True)
class Strong(InlineSpan):
    pass


@dataclass(frozen=True)
class Emphasis(InlineSpan):
    pass


@dataclass(frozen=True)
class Code(InlineSpan):
    pass


@dataclass(frozen=True)
class Link(InlineSpan):
    url: str = ""

    @property
    def display_text(self) -> str:
        return self.text or self.url


@dataclass(frozen=True)
class Heading(Block):
    depth: int
    spans: List[InlineSpan] = field(default_factory=list)


@dataclass(frozen=True)
class Paragraph(Block):
    spans: List[InlineSpan] = field(default_factory=list)
    text: str = ""


@dataclass(frozen=True)
class ListBlock(Block):
    ordered: bool
    items: List[List[InlineSpan]] = field(default_factory=list)


@dataclass(frozen=True)
class CodeBlock(Block):
    lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BlockQuote(Block):
    spans: List[InlineSpan] = field(default_factory=list)


@dataclass(frozen=True)
class HorizontalRule(Block):
    """Horizontal rule / thematic break."""


@dataclass(frozen=True)
class RawText(Block):
    """Fallback for block kinds the renderer has no rule for."""

    text: str = ""


def span_text(span: InlineSpan) -> str:
    if isinstance(span, Link):
        return span.display_text
    return span.text or ""


def flatten_spans(spans: List[InlineSpan]) -> str:
    return "".join(span_text(span) for span in spans)
