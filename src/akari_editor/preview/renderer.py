"""Markdown to HTML conversion for the live preview pane.

Not a CommonMark parser. Block constructs are recognised line by line
(fenced code, headings, quotes, rules, list items, paragraphs) and the text
inside them goes through an ordered chain of inline rules:

    ***x***  ->  **x**  ->  *x*  ->  ~~x~~  ->  ![a](u)  ->  [t](u)

Text is split around inline code and the rules only run outside it, so code
stays literal. Images are matched ahead of links so the leading ``!`` is never
left dangling. Every input renders; unmatched markers are emitted as typed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from akari_editor.formats.models import SyntaxMode

_FENCE = re.compile(r"^```(\w*)\s*$")
_FENCE_CLOSE = re.compile(r"^```")
_HEADING = re.compile(r"^(#{1,6}) (.+)$")
_QUOTE = re.compile(r"^> (.+)$")
_RULE = re.compile(r"^---$")
_TASK = re.compile(r"^- \[([ x])\] (.+)$")
_BULLET = re.compile(r"^[-*] (.+)$")
_NUMBERED = re.compile(r"^\d+\. (.+)$")

_CODE_SPAN = re.compile(r"`([^`]+)`")

InlineRule = Tuple["re.Pattern[str]", str]

INLINE_RULES: Tuple[InlineRule, ...] = (
    (re.compile(r"\*\*\*(.+?)\*\*\*"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"~~(.+?)~~"), r"<del>\1</del>"),
    (re.compile(r"!\[([^\]]*)\]\(([^)]+)\)"), r'<img src="\2" alt="\1">'),
    (re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), r'<a href="\2">\1</a>'),
)


def render_inline(text: str) -> str:
    # Odd indices of the split are code span bodies.
    parts = _CODE_SPAN.split(text)
    for index in range(0, len(parts), 2):
        for pattern, replacement in INLINE_RULES:
            parts[index] = pattern.sub(replacement, parts[index])
    for index in range(1, len(parts), 2):
        parts[index] = f"<code>{parts[index]}</code>"
    return "".join(parts)


@dataclass
class _Blocks:
    """Accumulates emitted blocks plus the open paragraph and list."""

    out: List[str] = field(default_factory=list)
    paragraph: List[str] = field(default_factory=list)
    list_tag: Optional[str] = None
    items: List[str] = field(default_factory=list)

    def flush_paragraph(self) -> None:
        if self.paragraph:
            body = render_inline("\n".join(self.paragraph))
            self.out.append(f"<p>{body}</p>")
            self.paragraph = []

    def flush_list(self) -> None:
        if self.list_tag and self.items:
            inner = "\n".join(self.items)
            self.out.append(f"<{self.list_tag}>\n{inner}\n</{self.list_tag}>")
        self.list_tag = None
        self.items = []

    def flush(self) -> None:
        self.flush_paragraph()
        self.flush_list()

    def block(self, html: str) -> None:
        self.flush()
        self.out.append(html)

    def item(self, tag: str, html: str) -> None:
        self.flush_paragraph()
        if self.list_tag != tag:
            self.flush_list()
            self.list_tag = tag
        self.items.append(f"<li>{html}</li>")


class MarkdownRenderer:
    """Stateless converter; ``render`` never raises for any string input."""

    def render(self, text: str) -> str:
        lines = text.replace("\r\n", "\n").split("\n")
        blocks = _Blocks()
        index = 0
        while index < len(lines):
            line = lines[index]
            fence = _FENCE.match(line)
            if fence:
                closing = self._find_fence_end(lines, index + 1)
                if closing is not None:
                    body = "\n".join(lines[index + 1 : closing]).strip()
                    language = fence.group(1) or "plaintext"
                    blocks.block(
                        f'<pre><code class="language-{language}">{body}</code></pre>'
                    )
                    index = closing + 1
                    continue
            self._scan_line(line, blocks)
            index += 1
        blocks.flush()
        return "\n".join(blocks.out)

    @staticmethod
    def _find_fence_end(lines: List[str], start: int) -> Optional[int]:
        for index in range(start, len(lines)):
            if _FENCE_CLOSE.match(lines[index]):
                return index
        return None

    def _scan_line(self, line: str, blocks: _Blocks) -> None:
        if not line.strip():
            blocks.flush()
            return

        heading = _HEADING.match(line)
        if heading:
            level = len(heading.group(1))
            blocks.block(f"<h{level}>{render_inline(heading.group(2))}</h{level}>")
            return

        quote = _QUOTE.match(line)
        if quote:
            blocks.block(f"<blockquote>{render_inline(quote.group(1))}</blockquote>")
            return

        if _RULE.match(line):
            blocks.block("<hr>")
            return

        task = _TASK.match(line)
        if task:
            checked = " checked" if task.group(1) == "x" else ""
            body = render_inline(task.group(2))
            blocks.item("ul", f'<input type="checkbox"{checked} disabled> {body}')
            return

        bullet = _BULLET.match(line)
        if bullet:
            blocks.item("ul", render_inline(bullet.group(1)))
            return

        numbered = _NUMBERED.match(line)
        if numbered:
            blocks.item("ol", render_inline(numbered.group(1)))
            return

        blocks.flush_list()
        blocks.paragraph.append(line)


_DEFAULT_RENDERER = MarkdownRenderer()


def markdown_to_html(text: str) -> str:
    return _DEFAULT_RENDERER.render(text)


def render_preview(buffer: str, mode: SyntaxMode | str) -> str:
    """Markdown is converted; HTML mode previews the buffer as-is."""

    if SyntaxMode(mode) is SyntaxMode.HTML:
        return buffer
    return markdown_to_html(buffer)


__all__ = [
    "INLINE_RULES",
    "MarkdownRenderer",
    "markdown_to_html",
    "render_inline",
    "render_preview",
]
