"""Multi-line HTML rendering: one paragraph per input line."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from ircformat.block import Block
from ircformat.core.constants import CLASS_LINE, TAG_LINE
from ircformat.parser import parse
from ircformat.render.html import render_html, wrap_tag

BlockTransform = Callable[[list[Block]], list[Block]]


def render_lines(
    text: str,
    inline: bool = False,
    *,
    escape: bool = False,
    transform: BlockTransform | None = None,
) -> str:
    """Render each ``\\n``-separated line separately.

    Formatting never carries from one line to the next. Lines are wrapped in
    ``<p class="ircf-line">`` unless ``inline`` is set. ``transform`` is
    applied to each line's blocks before rendering.
    """
    lines = text.split("\n")
    logger.debug("Rendering {} line(s) to HTML (inline={})", len(lines), inline)

    parts: list[str] = []
    for line in lines:
        blocks = parse(line)
        if transform is not None:
            blocks = transform(blocks)
        markup = render_html(blocks, escape=escape)
        if inline:
            parts.append(markup)
        else:
            parts.append(wrap_tag(TAG_LINE, markup, [CLASS_LINE]))
    return "".join(parts)


def render_inline(text: str, *, escape: bool = False) -> str:
    return render_lines(text, inline=True, escape=escape)
