"""Re-encode Blocks as IRC control-character text.

Only the controls needed to move from one block's style to the next are
emitted. Re-parsing the output yields the same style for every character.
"""

from __future__ import annotations

from collections.abc import Sequence

from ircformat.block import Block
from ircformat.core.constants import NO_COLOR, Control

B = Control.BOLD.value
I = Control.ITALIC.value  # noqa: E741
U = Control.UNDERLINE.value
C = Control.COLOR.value
R = Control.REVERSE.value
O = Control.RESET.value  # noqa: E741

_DIGITS = frozenset("0123456789")


def render_irc(blocks: Sequence[Block]) -> str:
    """Render blocks back to IRC formatting, shortest transitions first."""
    # Local baselines, not the shared module-level EMPTY.
    prev = Block()
    result: list[str] = []

    for block in [*blocks, Block()]:
        carets = _transition(prev, block)
        result.append(carets + block.text)
        prev = block

    return "".join(result)


def _transition(prev: Block, block: Block) -> str:
    """Control sequence that turns ``prev``'s style into ``block``'s."""
    carets = ""

    if block.bold != prev.bold:
        carets += B
    if block.italic != prev.italic:
        carets += I
    if block.underline != prev.underline:
        carets += U

    # A reverse toggle swaps colors on re-parse; compare against that state.
    state = prev
    if block.reverse != prev.reverse:
        carets += R
        state = prev.reversed()

    if not block.has_same_color(state):
        if block.color == NO_COLOR:
            carets += C
        else:
            if block.highlight == NO_COLOR and state.highlight != NO_COLOR:
                # a bare fg code would inherit the old highlight
                carets += C
            carets += C + block.color_string()

    # Reset if it serves the same purpose, but saves space. A lone bare color
    # control before a digit would swallow it, so reset there too.
    if block.is_plain() and (
        len(carets) > 1 or (carets == C and _starts_with_digit(block.text))
    ):
        return O

    if _extends_color_code(carets, block):
        carets += B + B

    return carets


def _extends_color_code(carets: str, block: Block) -> bool:
    """Whether ``block.text`` would be read as part of a trailing color code."""
    if not carets or not block.text:
        return False
    if carets.endswith(C):
        return _starts_with_digit(block.text)
    if block.color != NO_COLOR and block.highlight == NO_COLOR:
        if carets.endswith(C + block.color_string()):
            # A later block may supply the digits after the comma.
            return block.text.startswith(",")
    return False


def _starts_with_digit(text: str) -> bool:
    return text[:1] in _DIGITS
