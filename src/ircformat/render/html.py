"""Render Blocks as HTML: b/i/u tags plus span classes for reverse and colors."""

from __future__ import annotations

import html
from collections.abc import Sequence

from ircformat.block import Block
from ircformat.core import constants as c
from ircformat.parser import parse


def render_html(blocks: str | Sequence[Block], *, escape: bool = False) -> str:
    """Render blocks (or raw IRC text, parsed first) to HTML.

    Each block is rendered on its own; nothing is diffed against neighbours.
    Text is inserted verbatim unless ``escape`` is set.
    """
    if isinstance(blocks, str):
        blocks = parse(blocks)

    return "".join(_render_block(block, escape) for block in blocks)


def _render_block(block: Block, escape: bool) -> str:
    body = html.escape(block.text) if escape else block.text

    # Later tags wrap earlier ones: bold outermost, underline innermost.
    tags: list[str] = []
    if block.underline:
        tags.append(c.TAG_UNDERLINE)
    if block.italic:
        tags.append(c.TAG_ITALIC)
    if block.bold:
        tags.append(c.TAG_BOLD)

    classes: list[str] = []
    if block.reverse:
        classes.append(c.CLASS_REVERSE)
        if block.color == c.NO_COLOR:
            classes.append(c.CLASS_NOCOLOR)

    if block.color != c.NO_COLOR:
        classes.append(f"{c.CLASS_COLOR_PREFIX}{block.color}")
        if block.highlight != c.NO_COLOR:
            classes.append(f"{c.CLASS_HIGHLIGHT_PREFIX}{block.highlight}")

    for tag in tags:
        body = wrap_tag(tag, body)

    if classes:
        return wrap_tag(c.TAG_BLOCK, body, classes)
    return body


def wrap_tag(tag: str, text: str, classes: Sequence[str] | None = None) -> str:
    """``<tag class="...">text</tag>``; the class attribute only when given."""
    if classes:
        return f'<{tag} class="{" ".join(classes)}">{text}</{tag}>'
    return f"<{tag}>{text}</{tag}>"
