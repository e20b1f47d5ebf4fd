"""Numeral bases used to render byte values."""

from __future__ import annotations

from enum import StrEnum


class Radix(StrEnum):
    """Fixed-width numeral base for one byte value."""

    BIN = "bin"
    OCT = "oct"
    DEC = "dec"
    HEX = "hex"

    @property
    def width(self) -> int:
        return _WIDTHS[self]

    @property
    def blank(self) -> str:
        """Padding occupying the same columns as a rendered value."""

        return " " * _WIDTHS[self]

    def render(self, byte: int) -> str:
        """Render one byte value at this radix's fixed width."""

        return format(byte, _FORMAT_SPECS[self])


_FORMAT_SPECS: dict[Radix, str] = {
    Radix.BIN: "08b",
    Radix.OCT: "03o",
    Radix.DEC: "3d",
    Radix.HEX: "02x",
}

_WIDTHS: dict[Radix, int] = {
    Radix.BIN: 8,
    Radix.OCT: 3,
    Radix.DEC: 3,
    Radix.HEX: 2,
}
