import pytest

from akari_editor.formats import SyntaxMode
from akari_editor.preview import markdown_to_html, render_inline, render_preview


def test_heading_renders_inline_emphasis() -> None:
    assert markdown_to_html("# Title **bold**") == "<h1>Title <strong>bold</strong></h1>"


def test_inline_rule_order() -> None:
    assert render_inline("***x***") == "<strong><em>x</em></strong>"
    assert render_inline("**a** and *b*") == "<strong>a</strong> and <em>b</em>"
    assert render_inline("~~gone~~") == "<del>gone</del>"


def test_image_matched_before_link() -> None:
    assert render_inline("![a](u.png)") == '<img src="u.png" alt="a">'
    assert render_inline("[t](http://x)") == '<a href="http://x">t</a>'


def test_inline_code_is_literal() -> None:
    assert render_inline("`**x**` and **y**") == "<code>**x**</code> and <strong>y</strong>"


def test_typed_control_characters_are_not_code_spans() -> None:
    assert render_inline("\x000\x00 `x`") == "\x000\x00 <code>x</code>"
    assert render_inline("a `b` c `d`") == "a <code>b</code> c <code>d</code>"


def test_document_with_heading_paragraph_and_list() -> None:
    source = "# Title\n\n**bold** and *italic*\n\n- item1\n- item2"

    assert markdown_to_html(source) == (
        "<h1>Title</h1>\n"
        "<p><strong>bold</strong> and <em>italic</em></p>\n"
        "<ul>\n<li>item1</li>\n<li>item2</li>\n</ul>"
    )


def test_fenced_code_block_with_language() -> None:
    html = markdown_to_html("```python\nprint(1)\n```")

    assert html == '<pre><code class="language-python">print(1)</code></pre>'


def test_fenced_code_block_without_language() -> None:
    html = markdown_to_html("```\n**raw**\n```\nafter")

    assert html == '<pre><code class="language-plaintext">**raw**</code></pre>\n<p>after</p>'


def test_unterminated_fence_is_plain_text() -> None:
    html = markdown_to_html("```\ncode")

    assert "code" in html
    assert "<pre>" not in html


def test_lists_group_consecutive_items() -> None:
    html = markdown_to_html("- a\n- b\n1. c\n2. d")

    assert html == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n<ol>\n<li>c</li>\n<li>d</li>\n</ol>"


def test_task_items_render_checkboxes() -> None:
    html = markdown_to_html("- [x] done\n- [ ] todo")

    assert '<li><input type="checkbox" checked disabled> done</li>' in html
    assert '<li><input type="checkbox" disabled> todo</li>' in html


def test_quote_rule_and_paragraphs() -> None:
    html = markdown_to_html("> wise\n\n---\n\nfirst\nsecond\n\nthird")

    assert html == (
        "<blockquote>wise</blockquote>\n<hr>\n<p>first\nsecond</p>\n<p>third</p>"
    )


def test_unbalanced_markers_are_left_as_typed() -> None:
    assert markdown_to_html("**bold") == "<p>**bold</p>"


@pytest.mark.parametrize(
    "text",
    ["", "\n\n", "```", "***", "[", "![](", "- [ ]", "#", "> ", "1.", "\r\n# x\r\n"],
)
def test_render_never_raises(text: str) -> None:
    assert isinstance(markdown_to_html(text), str)


def test_html_mode_passes_buffer_through() -> None:
    source = "<b>raw</b> **not markdown**"

    assert render_preview(source, SyntaxMode.HTML) == source
    assert render_preview("**x**", "markdown") == "<p><strong>x</strong></p>"
