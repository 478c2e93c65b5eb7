"""ircformat entrypoint. Converts IRC-formatted text from a file or stdin."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from ircformat import __version__
from ircformat.block import Block
from ircformat.config import OUTPUT_FORMATS, Config, cfg, load_config_with_env
from ircformat.core.errors import IrcFormatConfigurationError
from ircformat.parser import parse
from ircformat.render import render_irc, render_lines
from ircformat.transforms import compress as compress_blocks
from ircformat.transforms import remove_color, remove_style, strip


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru. Replace default logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | {message}"
        ),
    )


def reload_config(config_path: Path) -> Config:
    """Load config from path and update global cfg."""
    data = load_config_with_env(config_path)
    cfg.reload(data)
    return cfg


def convert(
    text: str,
    output_format: str = "html",
    *,
    inline: bool = False,
    escape: bool = False,
    strip_colors: bool = False,
    strip_styles: bool = False,
    compress: bool = True,
) -> str:
    """Convert IRC-formatted ``text`` to ``html``, ``irc`` or plain ``text``."""

    def transform(blocks: list[Block]) -> list[Block]:
        if strip_colors:
            remove_color(blocks)
        if strip_styles:
            remove_style(blocks)
        if compress:
            compress_blocks(blocks)
        return blocks

    if output_format == "html":
        return render_lines(text, inline, escape=escape, transform=transform)
    if output_format == "irc":
        return render_irc(transform(parse(text)))
    if output_format == "text":
        return strip(text)
    raise IrcFormatConfigurationError(
        f"Unknown output format: {output_format}",
        code="invalid_output_format",
        details={"value": output_format},
    )


def _pick(flag: bool | None, default: bool) -> bool:
    return default if flag is None else flag


def main(argv: list[str] | None = None) -> None:
    """Main entrypoint."""
    parser = argparse.ArgumentParser(
        description="Convert mIRC-formatted text to HTML, IRC or plain text"
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File to convert (default: stdin)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--format",
        "-f",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: config value, else html)",
    )
    parser.add_argument(
        "--inline",
        action="store_const",
        const=True,
        default=None,
        help="Do not wrap HTML lines in paragraphs",
    )
    parser.add_argument(
        "--escape",
        action="store_const",
        const=True,
        default=None,
        help="HTML-escape text content",
    )
    parser.add_argument(
        "--strip-colors",
        action="store_const",
        const=True,
        default=None,
        help="Drop colors before rendering",
    )
    parser.add_argument(
        "--strip-styles",
        action="store_const",
        const=True,
        default=None,
        help="Drop bold/italic/underline before rendering",
    )
    parser.add_argument(
        "--no-compress",
        dest="compress",
        action="store_const",
        const=False,
        default=None,
        help="Keep adjacent blocks with identical style separate",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.config is not None and not args.config.exists():
        logger.error("Config file not found: {}", args.config)
        sys.exit(1)

    try:
        if args.config is not None:
            config = reload_config(args.config)
            logger.info("Config loaded from {}", args.config)
        else:
            cfg.reload({})
            config = cfg
    except IrcFormatConfigurationError as exc:
        logger.error("Invalid configuration: {}", exc)
        sys.exit(1)

    if args.input is not None:
        text = args.input.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    output_format = args.output_format or config.output_format
    logger.debug("Converting {} chars to {}", len(text), output_format)

    result = convert(
        text,
        output_format,
        inline=_pick(args.inline, config.inline),
        escape=_pick(args.escape, config.escape_html),
        strip_colors=_pick(args.strip_colors, config.strip_colors),
        strip_styles=_pick(args.strip_styles, config.strip_styles),
        compress=_pick(args.compress, config.compress),
    )
    sys.stdout.write(result)


if __name__ == "__main__":
    main()
