from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from markdown_it import MarkdownIt
from mdit_py_plugins.texmath import texmath_plugin

from .model import (
    Block,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HorizontalRule,
    InlineSpan,
    Link,
    ListBlock,
    Paragraph,
    Plain,
    RawText,
    Strong,
)

logger = logging.getLogger(__name__)

# Blocks whose body is literal text rather than inline markup.
LITERAL_BLOCKS = {"fence", "code_block", "math_block", "math_block_eqno", "html_block"}


def parse_markdown(text: str) -> Document:
    """Parse markdown into a Document whose spans carry one style each.

    Nested inline formatting is flattened: bold wins over italic, and inline
    code and links keep their own kinds regardless of the surrounding style.
    """
    md = MarkdownIt("commonmark").use(texmath_plugin).enable(["table"])
    tokens = md.parse(text)
    blocks, _ = _parse_blocks(tokens, 0, text.splitlines())
    return Document(blocks=blocks)


def _parse_blocks(tokens, index: int, source_lines: Sequence[str]) -> tuple[list, int]:
    blocks: List[Block] = []
    i = index
    while i < len(tokens):
        tok = tokens[i]
        if tok.type == "heading_open":
            inline = tokens[i + 1]
            blocks.append(Heading(depth=int(tok.tag[1]), spans=_parse_inline(inline.children or [])))
            i += 3
        elif tok.type == "paragraph_open":
            inline = tokens[i + 1]
            blocks.append(Paragraph(spans=_parse_inline(inline.children or []), text=inline.content or ""))
            i += 3
        elif tok.type in ("bullet_list_open", "ordered_list_open"):
            close = _find_close(tokens, i)
            items = _parse_list_items(tokens[i + 1 : close], item_level=tok.level + 1)
            blocks.append(ListBlock(ordered=tok.type == "ordered_list_open", items=items))
            i = close + 1
        elif tok.type in ("fence", "code_block"):
            blocks.append(CodeBlock(lines=_code_lines(tok.content)))
            i += 1
        elif tok.type == "blockquote_open":
            close = _find_close(tokens, i)
            blocks.append(BlockQuote(spans=_joined_inline(tokens[i + 1 : close])))
            i = close + 1
        elif tok.type == "hr":
            blocks.append(HorizontalRule())
            i += 1
        elif tok.type in ("math_block", "math_block_eqno", "html_block"):
            blocks.append(RawText(text=tok.content.strip()))
            i += 1
        elif tok.nesting == 1:
            close = _find_close(tokens, i)
            logger.debug("Unrecognized block %s; keeping its source text", tok.type)
            blocks.append(RawText(text=_source_text(tok, source_lines)))
            i = close + 1
        else:
            i += 1
    return blocks, i


def _find_close(tokens, index: int) -> int:
    level = tokens[index].level
    i = index + 1
    while i < len(tokens):
        tok = tokens[i]
        if tok.nesting == -1 and tok.level == level:
            return i
        i += 1
    return len(tokens) - 1


def _parse_list_items(tokens, item_level: int) -> list[list[InlineSpan]]:
    items: list[list[InlineSpan]] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.type == "list_item_open" and tok.level == item_level:
            close = i + _find_close(tokens[i:], 0)
            # Nested blocks, nested lists included, collapse into the item's text.
            items.append(_joined_inline(tokens[i + 1 : close]))
            i = close + 1
        else:
            i += 1
    return items


def _joined_inline(tokens: Iterable) -> list[InlineSpan]:
    spans: list[InlineSpan] = []
    for tok in tokens:
        if tok.type == "inline":
            parsed = _parse_inline(tok.children or [])
        elif tok.type in LITERAL_BLOCKS:
            content = tok.content.strip()
            parsed = [Plain(content)] if content else []
        else:
            continue
        if not parsed:
            continue
        if spans:
            spans.append(Plain(" "))
        spans.extend(parsed)
    return spans


def _parse_inline(children: Iterable) -> List[InlineSpan]:
    result: List[InlineSpan] = []
    bold = False
    italic = False
    i = 0
    children_list = list(children)
    while i < len(children_list):
        tok = children_list[i]
        if tok.type == "text":
            result.append(_styled(tok.content, bold=bold, italic=italic))
            i += 1
        elif tok.type in {"softbreak", "hardbreak"}:
            result.append(_styled(" ", bold=bold, italic=italic))
            i += 1
        elif tok.type == "strong_open":
            bold = True
            i += 1
        elif tok.type == "strong_close":
            bold = False
            i += 1
        elif tok.type == "em_open":
            italic = True
            i += 1
        elif tok.type == "em_close":
            italic = False
            i += 1
        elif tok.type == "code_inline":
            result.append(Code(tok.content))
            i += 1
        elif tok.type == "link_open":
            href = tok.attrGet("href") or ""
            link_text, consumed = _collect_text(children_list, i + 1, "link_close")
            result.append(Link(text=link_text, url=str(href)))
            i = consumed + 1
        else:
            raw = _raw_inline(tok)
            if raw:
                logger.debug("Unrecognized inline %s; keeping its literal text", tok.type)
                result.append(Plain(raw))
            i += 1
    return result


def _styled(text: str, bold: bool, italic: bool) -> InlineSpan:
    if bold:
        return Strong(text)
    if italic:
        return Emphasis(text)
    return Plain(text)


def _collect_text(tokens: Sequence, index: int, closing_type: str) -> tuple[str, int]:
    texts: list[str] = []
    i = index
    while i < len(tokens):
        tok = tokens[i]
        if tok.type == closing_type:
            break
        if tok.type in {"text", "code_inline"}:
            texts.append(tok.content)
        elif tok.type in {"softbreak", "hardbreak"}:
            texts.append(" ")
        i += 1
    return "".join(texts), i


def _raw_inline(tok) -> str:
    if not tok.content:
        return ""
    markup = tok.markup or ""
    return f"{markup}{tok.content}{markup}"


def _code_lines(content: str) -> list[str]:
    if content.endswith("\n"):
        content = content[:-1]
    return content.split("\n")


def _source_text(tok, source_lines: Sequence[str]) -> str:
    if tok.map:
        start, end = tok.map
        return "\n".join(line.strip() for line in source_lines[start:end] if line.strip())
    return tok.content or ""
