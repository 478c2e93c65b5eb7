"""Split IRC-formatted text into styled Blocks.

Single left-to-right scan. Every control character closes the open run and
opens a new one derived from it; runs that end up empty are dropped. A
trailing reset is appended so the final run is flushed like any other.
Malformed sequences never raise: a color control without digits directly
after it resets the color.
"""

from __future__ import annotations

from ircformat.block import Block
from ircformat.core.constants import COLOR_PATTERN, CONTROL_CHARS, NO_COLOR, Control


def parse(text: str) -> list[Block]:
    """Parse ``text`` into an ordered list of non-empty Blocks."""
    result: list[Block] = []
    current = Block()
    start = 0

    text += Control.RESET.value

    for i, ch in enumerate(text):
        if ch not in CONTROL_CHARS:
            continue

        control = Control(ch)
        current.text = text[start:i]
        if current.text:
            result.append(current)

        start = i + 1
        if control is Control.BOLD:
            current = current.derive()
            current.bold = not current.bold
        elif control is Control.ITALIC:
            current = current.derive()
            current.italic = not current.italic
        elif control is Control.UNDERLINE:
            current = current.derive()
            current.underline = not current.underline
        elif control is Control.COLOR:
            current, start = _apply_color(current, text, i)
        elif control is Control.REVERSE:
            current = current.reversed()
        elif control is Control.RESET:
            current = Block()

    return result


def _apply_color(prev: Block, text: str, index: int) -> tuple[Block, int]:
    """Derive the block after the color control at ``index``.

    Returns the new block and the offset where its text starts (past any
    digits consumed as the color code).
    """
    block = prev.derive()
    match = COLOR_PATTERN.match(text, index)
    if match is None:
        block.color = NO_COLOR
        block.highlight = NO_COLOR
        return block, index + 1

    fg, bg = match.groups()
    block.color = int(fg)
    # An explicit ",00" sets highlight 0; only an absent group inherits.
    if bg is not None:
        block.highlight = int(bg)
    return block, match.end()
