"""Shared type aliases for the render pipeline."""

from collections.abc import Iterable, Iterator
from typing import TypeAlias

IndexedByte: TypeAlias = tuple[int, int]
"""Absolute stream offset paired with the byte value found there."""

Line: TypeAlias = list[IndexedByte]
ByteSource: TypeAlias = Iterable[int]
IndexedStream: TypeAlias = Iterator[IndexedByte]
