"""Core frozen domain dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from bytedump.lib.radix import Radix


@dataclass(frozen=True, slots=True)
class Selection:
    """Sub-range of absolute stream positions to dump.

    ``stop`` is applied against the absolute position before ``start`` skips
    anything, so a ``start`` at or past ``stop`` selects nothing.
    """

    start: int | None = None
    stop: int | None = None


@dataclass(frozen=True, slots=True)
class DumpConfig:
    """Resolved display options for one dump run."""

    show_address: bool = False
    show_text: bool = False
    radix: Radix = Radix.BIN
    select: Selection = field(default_factory=Selection)
    line_width: int = 8
    break_on: frozenset[int] = frozenset()
    colored: bool = False


@dataclass(frozen=True, slots=True)
class DumpStats:
    """Counters reported once a dump has run to completion."""

    lines: int = 0
    bytes: int = 0
