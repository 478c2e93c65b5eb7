"""Tests for Block style helpers."""

from __future__ import annotations

from ircformat import EMPTY, NO_COLOR, Block


class TestBlock:
    def test_defaults_are_plain(self):
        block = Block()

        assert block.text == ""
        assert block.color == NO_COLOR
        assert block.highlight == NO_COLOR
        assert block.is_plain()

    def test_empty_is_baseline(self):
        assert EMPTY == Block()

    def test_derive_copies_style_not_text(self):
        # Arrange
        block = Block("abc", bold=True, color=3, highlight=7)

        # Act
        derived = block.derive()

        # Assert
        assert derived.text == ""
        assert derived.same_style(block)
        assert derived is not block

    def test_same_style_ignores_text(self):
        assert Block("a", italic=True).same_style(Block("b", italic=True))
        assert not Block("a", italic=True).same_style(Block("a"))

    def test_equality_includes_text(self):
        assert Block("a", bold=True) != Block("b", bold=True)

    def test_is_plain_false_for_any_flag_or_color(self):
        assert not Block(bold=True).is_plain()
        assert not Block(reverse=True).is_plain()
        assert not Block(color=0).is_plain()

    def test_has_same_color_ignores_highlight_without_fg(self):
        assert Block(highlight=3).has_same_color(Block())

    def test_has_same_color_compares_highlight_with_fg(self):
        assert Block(color=1, highlight=2).has_same_color(Block(color=1, highlight=2))
        assert not Block(color=1, highlight=2).has_same_color(Block(color=1))

    def test_color_string_pads_two_digits(self):
        assert Block(color=4).color_string() == "04"
        assert Block(color=4, highlight=1).color_string() == "04,01"
        assert Block(color=12, highlight=0).color_string() == "12,00"


class TestBlockReversed:
    def test_swaps_colors(self):
        assert Block("x", color=4, highlight=1).reversed() == Block(
            reverse=True, color=1, highlight=4
        )

    def test_missing_highlight_becomes_zero_fg(self):
        assert Block(color=4).reversed() == Block(reverse=True, color=0, highlight=4)

    def test_no_color_flips_flag_only(self):
        assert Block(reverse=True).reversed() == Block()

    def test_does_not_mutate_original(self):
        block = Block("x", color=4, highlight=1)

        block.reversed()

        assert block == Block("x", color=4, highlight=1)
