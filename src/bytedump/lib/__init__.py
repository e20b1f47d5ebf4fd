"""Core bytedump library exports."""

from bytedump.lib.domain import DumpConfig, DumpStats, Selection
from bytedump.lib.format import compile_format
from bytedump.lib.pipeline import dump, render, render_line
from bytedump.lib.radix import Radix

__all__ = [
    "DumpConfig",
    "DumpStats",
    "Radix",
    "Selection",
    "compile_format",
    "dump",
    "render",
    "render_line",
]
