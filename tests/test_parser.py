import textwrap

from PagePress import markdown_parser
from PagePress.model import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    HorizontalRule,
    Link,
    ListBlock,
    Paragraph,
    Plain,
    RawText,
    Strong,
    flatten_spans,
)


def test_parse_blocks_in_document_order():
    md_text = textwrap.dedent(
        """
        # Council answer

        Text with *italic*, **bold** and `code`.

        1. First point
        2. Second point

        - bullet

        > quoted line

        ```python
        foo

        bar
        ```

        ---
        """
    )
    document = markdown_parser.parse_markdown(md_text)
    kinds = [type(block) for block in document.blocks]
    assert kinds == [Heading, Paragraph, ListBlock, ListBlock, BlockQuote, CodeBlock, HorizontalRule]

    heading = document.blocks[0]
    assert heading.depth == 1
    assert flatten_spans(heading.spans) == "Council answer"
    assert document.blocks[2].ordered and not document.blocks[3].ordered
    assert document.blocks[5].lines == ["foo", "", "bar"]


def test_inline_spans_are_flattened_to_one_style():
    document = markdown_parser.parse_markdown("Plain **bold *both* bold** _it_ `x` end")
    spans = document.blocks[0].spans
    assert spans == [
        Plain("Plain "),
        Strong("bold "),
        Strong("both"),
        Strong(" bold"),
        Plain(" "),
        Emphasis("it"),
        Plain(" "),
        Code("x"),
        Plain(" end"),
    ]


def test_links_keep_text_and_url():
    document = markdown_parser.parse_markdown("[docs](https://example.org) and <https://example.com>")
    spans = document.blocks[0].spans
    assert spans[0] == Link(text="docs", url="https://example.org")
    assert spans[-1].url == "https://example.com"
    assert spans[-1].display_text == "https://example.com"


def test_soft_breaks_become_spaces():
    document = markdown_parser.parse_markdown("first line\nsecond line")
    assert flatten_spans(document.blocks[0].spans) == "first line second line"


def test_list_items_flatten_nested_content():
    md_text = textwrap.dedent(
        """
        - outer **item**
          - nested item
        - second
        """
    )
    (block,) = markdown_parser.parse_markdown(md_text).blocks
    assert isinstance(block, ListBlock)
    assert [flatten_spans(item) for item in block.items] == ["outer item nested item", "second"]


def test_unrecognized_inline_and_block_kinds_fall_back_to_text():
    md_text = textwrap.dedent(
        """
        Energy $E=mc^2$ here.

        $$
        S = \\pi r^2
        $$

        | a | b |
        |---|---|
        | 1 | 2 |
        """
    )
    document = markdown_parser.parse_markdown(md_text)
    paragraph, math, table = document.blocks
    assert Plain("$E=mc^2$") in paragraph.spans
    assert isinstance(math, RawText) and math.text == "S = \\pi r^2"
    assert isinstance(table, RawText)
    assert "| a | b |" in table.text


def test_empty_markdown_has_no_blocks():
    assert markdown_parser.parse_markdown("").blocks == []


def test_code_inside_list_items_and_quotes_is_kept_as_text():
    md_text = textwrap.dedent(
        """
        - run this:

          ```
          make build
          ```
        - done

        > note
        >
        > ```
        > x = 1
        > ```
        """
    )
    items, quote = markdown_parser.parse_markdown(md_text).blocks
    assert [flatten_spans(item) for item in items.items] == ["run this: make build", "done"]
    assert isinstance(quote, BlockQuote)
    assert flatten_spans(quote.spans) == "note x = 1"


def test_empty_fence_still_takes_one_line():
    (block,) = markdown_parser.parse_markdown("```\n```\n").blocks
    assert isinstance(block, CodeBlock)
    assert block.lines == [""]
