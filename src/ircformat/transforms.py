"""Block-list transforms.

``remove_style``, ``remove_color`` and ``compress`` mutate the list (and its
blocks) in place and return the same list object; callers should not keep
other references to it expecting the old contents. ``strip`` is pure.
"""

from __future__ import annotations

from collections.abc import Sequence

from ircformat.block import Block
from ircformat.core.constants import NO_COLOR
from ircformat.parser import parse


def strip(blocks: str | Sequence[Block]) -> str:
    """Plain text with all formatting removed."""
    if isinstance(blocks, str):
        blocks = parse(blocks)
    return "".join(block.text for block in blocks)


def remove_style(blocks: list[Block]) -> list[Block]:
    """Clear bold/italic/underline on every block. Reverse and colors stay."""
    for block in blocks:
        block.bold = block.italic = block.underline = False
    return blocks


def remove_color(blocks: list[Block]) -> list[Block]:
    """Clear color and highlight on every block."""
    for block in blocks:
        block.color = block.highlight = NO_COLOR
    return blocks


def compress(blocks: list[Block]) -> list[Block]:
    """Merge each block into its predecessor when their styles match."""
    if len(blocks) <= 1:
        return blocks

    merged: list[Block] = [blocks[0]]
    for block in blocks[1:]:
        last = merged[-1]
        if last.same_style(block):
            last.text += block.text
        else:
            merged.append(block)

    blocks[:] = merged
    return blocks
