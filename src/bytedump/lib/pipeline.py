"""Streaming render pipeline: index, select, group into lines, render."""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING

import structlog

from bytedump.lib.domain import DumpStats
from bytedump.lib.format import (
    ADDRESS_WIDTH,
    AddressSlot,
    AsciiSlot,
    Literal,
    ValueSlot,
    compile_format,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Iterator
    from typing import BinaryIO, TextIO

    from bytedump.lib.domain import DumpConfig, Selection
    from bytedump.lib.format import ElementSequence
    from bytedump.lib.types import ByteSource, IndexedByte, IndexedStream, Line

DEFAULT_CHUNK_SIZE = 64 * 1024
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126

logger = structlog.get_logger(__name__)


def iter_stream_bytes(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[int]:
    """Yield byte values from a binary stream one chunk at a time."""

    # read1 returns as soon as any data is available, so piped input is not
    # held back until a whole chunk arrives.
    read = getattr(stream, "read1", stream.read)
    while chunk := read(chunk_size):
        yield from chunk


def select_range(indexed: Iterable[IndexedByte], selection: Selection) -> IndexedStream:
    """Restrict an indexed stream to ``selection``.

    The ``stop`` cutoff counts absolute positions and is applied before the
    ``start`` skip.
    """

    selected: IndexedStream = iter(indexed)
    if selection.stop is not None:
        selected = islice(selected, selection.stop)
    if selection.start:
        selected = islice(selected, selection.start, None)
    return selected


def iter_lines(
    indexed: Iterable[IndexedByte],
    line_width: int,
    break_on: Collection[int] = frozenset(),
) -> Iterator[Line]:
    """Group indexed bytes into lines of at most ``line_width`` entries.

    A byte whose value is in ``break_on`` ends its line early. The same list
    object is yielded every time and cleared before the next line is drawn;
    copy it to keep it.
    """

    source = iter(indexed)
    line: Line = []
    while True:
        line.clear()
        for entry in islice(source, line_width):
            line.append(entry)
            if entry[1] in break_on:
                break
        if not line:
            return
        yield line


def render_line(sequence: ElementSequence, line: Line) -> str:
    """Execute every element against one line and return the text."""

    size = len(line)
    parts: list[str] = []
    for element in sequence:
        match element:
            case Literal(text):
                parts.append(text)
            case AddressSlot(offset):
                if offset < size:
                    parts.append(f"{line[offset][0]:0{ADDRESS_WIDTH}x}")
                else:
                    parts.append(" " * ADDRESS_WIDTH)
            case ValueSlot(radix, offset):
                if offset < size:
                    parts.append(radix.render(line[offset][1]))
                else:
                    parts.append(radix.blank)
            case AsciiSlot(offset):
                if offset < size and PRINTABLE_MIN <= line[offset][1] <= PRINTABLE_MAX:
                    parts.append(chr(line[offset][1]))
                else:
                    parts.append(" ")
    return "".join(parts)


def render(
    source: ByteSource,
    config: DumpConfig,
    sequence: ElementSequence,
    sink: TextIO,
) -> DumpStats:
    """Drive ``source`` through ``sequence`` and write each line to ``sink``.

    Errors raised while reading the source or writing the sink propagate
    unchanged; lines already written stay written.
    """

    indexed = select_range(enumerate(source), config.select)
    lines = 0
    total = 0
    for line in iter_lines(indexed, config.line_width, config.break_on):
        sink.write(render_line(sequence, line))
        lines += 1
        total += len(line)

    logger.debug("dump finished", lines=lines, bytes=total)
    return DumpStats(lines=lines, bytes=total)


def dump(source: ByteSource, config: DumpConfig, sink: TextIO) -> DumpStats:
    """Compile ``config`` and render ``source`` with it."""

    sequence = compile_format(config)
    logger.debug(
        "format compiled",
        elements=len(sequence),
        radix=str(config.radix),
        line_width=config.line_width,
    )
    return render(source, config, sequence, sink)
