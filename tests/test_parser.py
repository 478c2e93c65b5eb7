"""Tests for splitting IRC-formatted text into blocks."""

from __future__ import annotations

import pytest

from ircformat import NO_COLOR, Block, parse


class TestParsePlain:
    def test_empty_string(self):
        assert parse("") == []

    def test_plain_text_single_block(self):
        # Arrange
        text = "hello world"

        # Act
        blocks = parse(text)

        # Assert
        assert blocks == [Block("hello world")]
        assert blocks[0].is_plain()

    def test_only_controls_yields_nothing(self):
        assert parse("\x02\x1d\x1f\x16\x0f") == []


class TestParseToggles:
    def test_bold_on_off(self):
        assert parse("\x02bold\x02 plain") == [
            Block("bold", bold=True),
            Block(" plain"),
        ]

    @pytest.mark.parametrize(
        "control,field",
        [
            ("\x02", "bold"),
            ("\x1d", "italic"),
            ("\x1f", "underline"),
        ],
    )
    def test_toggle_flag(self, control, field):
        blocks = parse(f"a{control}b{control}c")

        assert [b.text for b in blocks] == ["a", "b", "c"]
        assert getattr(blocks[0], field) is False
        assert getattr(blocks[1], field) is True
        assert getattr(blocks[2], field) is False

    def test_flags_accumulate(self):
        blocks = parse("\x02\x1d\x1fabc\x0fdef")

        assert blocks == [
            Block("abc", bold=True, italic=True, underline=True),
            Block("def"),
        ]

    def test_double_toggle_splits_without_style_change(self):
        # The empty bold run is dropped; the text on each side stays separate.
        assert parse("a\x02\x02b") == [Block("a"), Block("b")]

    def test_unclosed_bold_runs_to_end(self):
        assert parse("\x02no close") == [Block("no close", bold=True)]


class TestParseColor:
    def test_fg_and_bg(self):
        assert parse("\x034,1red-on-blue\x0f") == [
            Block("red-on-blue", color=4, highlight=1),
        ]

    def test_fg_only(self):
        assert parse("\x0312blue") == [Block("blue", color=12)]

    def test_bare_color_without_digits_is_reset(self):
        blocks = parse("\x03not-a-color")

        assert blocks == [Block("not-a-color")]
        assert blocks[0].color == NO_COLOR

    def test_bare_color_resets_previous_color(self):
        assert parse("\x034,2a\x03b") == [
            Block("a", color=4, highlight=2),
            Block("b"),
        ]

    def test_at_most_two_digits_consumed(self):
        assert parse("\x03123") == [Block("3", color=12)]

    def test_highlight_at_most_two_digits(self):
        assert parse("\x031,234") == [Block("4", color=1, highlight=23)]

    def test_comma_without_digits_is_text(self):
        assert parse("\x034,x") == [Block(",x", color=4)]

    def test_space_before_digits_is_bare_reset(self):
        assert parse("\x03 4x") == [Block(" 4x")]

    def test_highlight_inherited_when_omitted(self):
        assert parse("\x0304,12a\x0305b") == [
            Block("a", color=4, highlight=12),
            Block("b", color=5, highlight=12),
        ]

    def test_zero_highlight_is_kept(self):
        assert parse("\x0304,00x") == [Block("x", color=4, highlight=0)]

    def test_non_ascii_digits_not_a_color(self):
        assert parse("\x03٣x") == [Block("٣x")]

    def test_color_keeps_flags(self):
        assert parse("\x02a\x034b") == [
            Block("a", bold=True),
            Block("b", bold=True, color=4),
        ]


class TestParseReverse:
    def test_reverse_without_color_flips_flag_only(self):
        assert parse("\x16a\x16b") == [Block("a", reverse=True), Block("b")]

    def test_reverse_swaps_colors(self):
        assert parse("\x034,1a\x16b") == [
            Block("a", color=4, highlight=1),
            Block("b", reverse=True, color=1, highlight=4),
        ]

    def test_reverse_without_highlight_defaults_fg_to_zero(self):
        assert parse("\x034a\x16b") == [
            Block("a", color=4),
            Block("b", reverse=True, color=0, highlight=4),
        ]

    def test_reverse_twice_does_not_restore_unset_highlight(self):
        blocks = parse("\x034a\x16\x16b")

        assert blocks[-1] == Block("b", color=4, highlight=0)


class TestParseReset:
    def test_reset_clears_everything(self):
        assert parse("\x02\x16\x034,5a\x0fb") == [
            Block("a", bold=True, reverse=True, color=4, highlight=5),
            Block("b"),
        ]

    def test_trailing_reset_adds_nothing(self):
        assert parse("a\x0f") == [Block("a")]

    def test_blocks_never_empty(self):
        blocks = parse("\x02\x03\x034\x16\x0f\x1dx\x1f\x1f")

        assert blocks
        assert all(b.text for b in blocks)
