"""Option value parsers for ranges and break-on bytes."""

from __future__ import annotations

import pytest

from bytedump.lib.config.parsing import RANGE_ERROR, parse_break_on, parse_byte, parse_range
from bytedump.lib.domain import Selection


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("..", Selection()),
        ("2..5", Selection(start=2, stop=5)),
        ("16..", Selection(start=16)),
        ("..64", Selection(stop=64)),
        ("5..3", Selection(start=5, stop=3)),
    ],
)
def test_parse_range_accepts_optional_bounds(raw: str, expected: Selection) -> None:
    assert parse_range(raw) == expected


@pytest.mark.parametrize("raw", ["", "5", "1..2..3", "a..b", "-1..4", "1...4", "0x10.."])
def test_parse_range_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(ValueError) as excinfo:
        parse_range(raw)
    assert str(excinfo.value) == RANGE_ERROR


def test_parse_byte_accepts_integer_literals() -> None:
    assert parse_byte("10") == 10
    assert parse_byte("0x0a") == 10
    assert parse_byte("0o12") == 10
    assert parse_byte("0b1010") == 10
    assert parse_byte("010") == 10
    assert parse_byte(255) == 255


@pytest.mark.parametrize("raw", ["256", "-1", "newline", True, 300])
def test_parse_byte_rejects_out_of_range_or_non_integers(raw: str | int) -> None:
    with pytest.raises(ValueError, match="Invalid byte value"):
        parse_byte(raw)


def test_parse_break_on_deduplicates() -> None:
    assert parse_break_on(["10", "0x0a", 13]) == frozenset({10, 13})
