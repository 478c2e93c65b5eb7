"""IRC control characters and HTML naming constants."""

from __future__ import annotations

import re
from enum import Enum


class Control(Enum):
    """The closed set of inline IRC formatting controls."""

    BOLD = "\x02"
    ITALIC = "\x1d"
    UNDERLINE = "\x1f"
    COLOR = "\x03"
    REVERSE = "\x16"
    RESET = "\x0f"


CONTROL_CHARS: frozenset[str] = frozenset(c.value for c in Control)

# \x03 followed by fg (1-2 digits), optionally ",bg" (1-2 digits)
COLOR_PATTERN = re.compile(r"\x03(\d\d?)(?:,(\d\d?))?", re.ASCII)

# Sentinel for "no color" / "no highlight"
NO_COLOR = -1

TAG_BOLD = "b"
TAG_ITALIC = "i"
TAG_UNDERLINE = "u"
TAG_BLOCK = "span"
TAG_LINE = "p"

CLASS_REVERSE = "ircf-reverse"
CLASS_NOCOLOR = "ircf-no-color"
CLASS_COLOR_PREFIX = "ircf-fg-"
CLASS_HIGHLIGHT_PREFIX = "ircf-bg-"
CLASS_LINE = "ircf-line"
