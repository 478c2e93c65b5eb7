"""Block: a run of text plus the IRC style state active over all of it."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ircformat.core.constants import NO_COLOR


@dataclass
class Block:
    """Styled text run.

    ``color`` and ``highlight`` are mIRC color indices or ``NO_COLOR``.
    A highlight is only meaningful while ``color`` is set. Equality (``==``)
    includes ``text``; use :meth:`same_style` to compare style alone.
    """

    text: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    reverse: bool = False
    color: int = NO_COLOR
    highlight: int = NO_COLOR

    def derive(self) -> Block:
        """New empty block carrying this block's style."""
        return replace(self, text="")

    def reversed(self) -> Block:
        """Style after a reverse toggle: flip ``reverse`` and swap colors.

        Colors only swap when a foreground is set; a swapped-in foreground
        that would be unset becomes 0.
        """
        block = replace(self, text="", reverse=not self.reverse)
        if self.color != NO_COLOR:
            block.color = self.highlight if self.highlight != NO_COLOR else 0
            block.highlight = self.color
        return block

    def same_style(self, other: Block) -> bool:
        return (
            self.bold == other.bold
            and self.italic == other.italic
            and self.underline == other.underline
            and self.reverse == other.reverse
            and self.color == other.color
            and self.highlight == other.highlight
        )

    def has_same_color(self, other: Block) -> bool:
        """Same foreground; highlights only compared when a foreground is set."""
        if self.color != other.color:
            return False
        return self.color == NO_COLOR or self.highlight == other.highlight

    def is_plain(self) -> bool:
        """No flags and no color."""
        return not (self.bold or self.italic or self.underline or self.reverse) and (
            self.color == NO_COLOR
        )

    def color_string(self) -> str:
        """Two-digit ``fg`` or ``fg,bg`` as written after a color control."""
        if self.highlight != NO_COLOR:
            return f"{self.color:02d},{self.highlight:02d}"
        return f"{self.color:02d}"


# Canonical "no style" block for comparisons. Never placed in a parse result;
# do not hand it to the in-place transforms.
EMPTY = Block()
