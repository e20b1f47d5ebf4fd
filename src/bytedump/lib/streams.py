"""Input and output stream acquisition for dump runs."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, BinaryIO, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@contextmanager
def open_input(path: Path | None) -> Iterator[BinaryIO]:
    """Open ``path`` for binary reading, or borrow stdin when it is ``None``."""

    if path is None:
        yield sys.stdin.buffer
        return
    with path.open("rb") as handle:
        yield handle


@contextmanager
def open_output(path: Path | None) -> Iterator[TextIO]:
    """Open ``path`` for ASCII text writing, or borrow stdout when it is ``None``."""

    if path is None:
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return
    # newline="" keeps "\n" untranslated on every platform.
    with path.open("w", encoding="ascii", newline="") as handle:
        yield handle
