"""Parsers for the textual option values accepted by the CLI and config."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bytedump.lib.domain import Selection

if TYPE_CHECKING:
    from collections.abc import Iterable

RANGE_ERROR = "expecting a value matching the regex '[0-9]*\\.\\.[0-9]*'"
_BYTE_MAX = 0xFF


def _parse_bound(raw: str) -> int | None:
    if raw == "":
        return None
    if not (raw.isascii() and raw.isdigit()):
        raise ValueError(RANGE_ERROR)
    return int(raw)


def parse_range(value: str) -> Selection:
    """Parse ``N..N`` where either bound may be omitted.

    >>> parse_range("2..5")
    Selection(start=2, stop=5)
    >>> parse_range("..")
    Selection(start=None, stop=None)
    """

    parts = value.split("..")
    if len(parts) != 2:
        raise ValueError(RANGE_ERROR)
    start, stop = parts
    return Selection(start=_parse_bound(start), stop=_parse_bound(stop))


def parse_byte(value: str | int) -> int:
    """Parse one byte value given as an int or an integer literal string."""

    if isinstance(value, bool):
        raise ValueError(f"Invalid byte value {value!r}: expected an integer.")
    if isinstance(value, int):
        parsed = value
    else:
        normalized = value.strip()
        # Base 0 rejects leading zeros, so plain digits are read as decimal.
        base = 10 if normalized.isascii() and normalized.isdigit() else 0
        try:
            parsed = int(normalized, base)
        except ValueError as error:
            raise ValueError(
                f"Invalid byte value {value!r}: expected an integer such as 10 or 0x0a."
            ) from error
    if not 0 <= parsed <= _BYTE_MAX:
        raise ValueError(f"Invalid byte value {value!r}: expected 0..{_BYTE_MAX}.")
    return parsed


def parse_break_on(values: Iterable[str | int]) -> frozenset[int]:
    """Parse every break-on value into a set of byte values."""

    return frozenset(parse_byte(value) for value in values)
