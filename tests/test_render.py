"""Tests for the debug dump renderer."""

import pytest

from wordbits.engine.render import render_bits


@pytest.mark.parametrize(
    "bits,expected",
    [
        (0, "BitSet[zeros]"),
        (0b1, "BitSet[1, zeros]"),
        (0b100, "BitSet[0, 0, 1, zeros]"),
        (0b01001010, "BitSet[0, 1, 0, 1, 0, 0, 1, zeros]"),
    ],
)
def test_render_stops_after_highest_bit(bits: int, expected: str) -> None:
    assert render_bits(bits) == expected


def test_render_full_word_has_every_position() -> None:
    text = render_bits(0xFFFFFFFF)
    assert text.count("1, ") == 32
    assert "0, " not in text


def test_render_top_bit_only() -> None:
    text = render_bits(0x80000000)
    assert text.count("0, ") == 31
    assert text.endswith("1, zeros]")
