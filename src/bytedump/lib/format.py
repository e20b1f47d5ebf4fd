"""Compile display options into a flat sequence of rendering elements.

All configuration-dependent branching happens here, once per run. The render
pipeline then walks the same element sequence for every line without looking
at the configuration again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from bytedump.lib.radix import Radix

if TYPE_CHECKING:
    from bytedump.lib.domain import DumpConfig

ADDRESS_COLOR = "\x1b[1;95m"
TEXT_COLOR = "\x1b[94m"
RESET = "\x1b[0m"

ADDRESS_WIDTH = 6
COLUMN_GAP = "  "
VALUE_SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class Literal:
    """Verbatim text: separators, newlines and color escapes."""

    text: str


@dataclass(frozen=True, slots=True)
class AddressSlot:
    """Absolute offset of the byte at ``offset`` within the line."""

    offset: int


@dataclass(frozen=True, slots=True)
class ValueSlot:
    """Value of the byte at ``offset`` rendered in ``radix``."""

    radix: Radix
    offset: int


@dataclass(frozen=True, slots=True)
class AsciiSlot:
    """Printable character for the byte at ``offset``, or a space."""

    offset: int


Element: TypeAlias = Literal | AddressSlot | ValueSlot | AsciiSlot
ElementSequence: TypeAlias = tuple[Element, ...]


def compile_format(config: DumpConfig) -> ElementSequence:
    """Translate display options into the ordered elements of one line."""

    elements: list[Element] = []

    if config.show_address:
        if config.colored:
            elements.append(Literal(ADDRESS_COLOR))
        elements.append(AddressSlot(0))
        if config.colored:
            elements.append(Literal(RESET))
        elements.append(Literal(COLUMN_GAP))

    for offset in range(config.line_width):
        if offset:
            elements.append(Literal(VALUE_SEPARATOR))
        elements.append(ValueSlot(config.radix, offset))

    if config.show_text:
        elements.append(Literal(COLUMN_GAP))
        if config.colored:
            elements.append(Literal(TEXT_COLOR))
        elements.extend(AsciiSlot(offset) for offset in range(config.line_width))
        if config.colored:
            elements.append(Literal(RESET))

    elements.append(Literal("\n"))
    return tuple(elements)
