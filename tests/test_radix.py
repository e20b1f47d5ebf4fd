"""Fixed-width byte rendering per radix."""

from __future__ import annotations

import pytest

from bytedump.lib.radix import Radix


@pytest.mark.parametrize("radix", list(Radix))
def test_blank_matches_rendered_width(radix: Radix) -> None:
    for byte in (0, 7, 100, 255):
        assert len(radix.render(byte)) == len(radix.blank) == radix.width
    assert radix.blank.strip() == ""


def test_hex_is_two_lowercase_digits() -> None:
    assert Radix.HEX.render(0) == "00"
    assert Radix.HEX.render(255) == "ff"
    assert Radix.HEX.render(0x0A) == "0a"


def test_decimal_is_right_aligned() -> None:
    assert Radix.DEC.render(5) == "  5"
    assert Radix.DEC.render(42) == " 42"
    assert Radix.DEC.render(255) == "255"


def test_octal_and_binary_are_zero_padded() -> None:
    assert Radix.OCT.render(8) == "010"
    assert Radix.OCT.render(255) == "377"
    assert Radix.BIN.render(5) == "00000101"
    assert Radix.BIN.render(255) == "11111111"


def test_radix_values_match_cli_names() -> None:
    assert [str(member) for member in Radix] == ["bin", "oct", "dec", "hex"]
    assert Radix("hex") is Radix.HEX
