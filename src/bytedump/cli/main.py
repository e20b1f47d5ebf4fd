"""Cyclopts CLI entry point for bytedump."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, Parameter

from bytedump import __version__
from bytedump.lib.config import build_dump_config, load_defaults, parse_range
from bytedump.lib.pipeline import dump, iter_stream_bytes
from bytedump.lib.radix import Radix
from bytedump.lib.streams import open_input, open_output

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

app = App(
    name="bytedump",
    help="Dump a byte stream as binary, octal, decimal or hex text.",
    version=__version__,
)


@app.default
def dump_command(
    input_path: Annotated[
        Path | None,
        Parameter(help="Path to a binary file [default: stdin]."),
    ] = None,
    output_path: Annotated[
        Path | None,
        Parameter(help="Path to write the text output [default: stdout]."),
    ] = None,
    /,
    *,
    address: Annotated[
        bool | None,
        Parameter(name=["--address", "-a"], help="Show the address of the first byte of each line."),
    ] = None,
    text: Annotated[
        bool | None,
        Parameter(name=["--text", "-t"], help="Show the corresponding ASCII characters."),
    ] = None,
    radix: Annotated[
        Radix | None,
        Parameter(name=["--radix", "-r"], help="Numerical base for byte values. [default: bin]"),
    ] = None,
    select: Annotated[
        str | None,
        Parameter(
            name=["--select", "-s"],
            help="Range of the input to show, as N..N where each N is optional.",
        ),
    ] = None,
    line_width: Annotated[
        int | None,
        Parameter(name=["--line-width", "-l"], help="How many bytes per line. [default: 8]"),
    ] = None,
    break_on: Annotated[
        tuple[str, ...],
        Parameter(
            name=["--break-on", "-b"],
            help="Start a new line after this byte value (repeatable).",
            negative_iterable=(),
        ),
    ] = (),
    colored: Annotated[
        bool | None,
        Parameter(name=["--colored", "-c"], help="Use ANSI escape sequences in the output."),
    ] = None,
) -> None:
    """Render INPUT as a line-oriented dump."""

    config = build_dump_config(
        load_defaults(),
        address=address,
        text=text,
        radix=radix,
        select=parse_range(select) if select is not None else None,
        line_width=line_width,
        break_on=break_on,
        colored=colored,
    )
    logger.info(
        "dump starting",
        input=str(input_path) if input_path is not None else "<stdin>",
        output=str(output_path) if output_path is not None else "<stdout>",
        radix=str(config.radix),
        line_width=config.line_width,
    )

    with open_input(input_path) as source, open_output(output_path) as sink:
        stats = dump(iter_stream_bytes(source), config, sink)

    logger.info("dump complete", lines=stats.lines, bytes=stats.bytes)


def _extract_verbosity(argv: Sequence[str]) -> tuple[list[str], int]:
    verbosity = 0
    cleaned: list[str] = []
    for index, arg in enumerate(argv):
        if arg == "--":
            cleaned.extend(argv[index:])
            break
        if arg == "--verbose":
            verbosity += 1
            continue
        if len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"v"}:
            verbosity += len(arg) - 1
            continue
        cleaned.append(arg)
    return cleaned, verbosity


def _error_message(exc: Exception) -> str:
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `bytedump` and `python -m bytedump`."""

    from bytedump.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    args, verbosity = _extract_verbosity(args)
    # Configure logging before parsing so warnings land on stderr, not in the dump.
    configure_logging(verbosity=verbosity)

    try:
        app(args)
    except (ValueError, OSError) as exc:
        print(f"error: {_error_message(exc)}", file=sys.stderr)
        raise SystemExit(1) from None
