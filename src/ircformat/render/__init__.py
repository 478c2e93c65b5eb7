"""Encoders: IRC control codes and HTML."""

from ircformat.render.html import render_html, wrap_tag
from ircformat.render.irc import render_irc
from ircformat.render.lines import render_inline, render_lines

__all__ = ["render_html", "render_inline", "render_irc", "render_lines", "wrap_tag"]
