"""Parse mIRC-style formatted text into styled blocks and render it back."""

from ircformat.block import EMPTY, Block
from ircformat.core.constants import NO_COLOR, Control
from ircformat.parser import parse
from ircformat.render import render_html, render_inline, render_irc, render_lines
from ircformat.transforms import compress, remove_color, remove_style, strip

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "NO_COLOR",
    "Block",
    "Control",
    "__version__",
    "compress",
    "parse",
    "remove_color",
    "remove_style",
    "render_html",
    "render_inline",
    "render_irc",
    "render_lines",
    "strip",
]
