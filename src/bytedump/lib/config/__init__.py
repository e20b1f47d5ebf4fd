"""Configuration loading and option parsing helpers."""

from bytedump.lib.config.parsing import parse_break_on, parse_byte, parse_range
from bytedump.lib.config.settings import (
    DumpDefaults,
    build_dump_config,
    load_defaults,
    resolve_config_path,
)

__all__ = [
    "DumpDefaults",
    "build_dump_config",
    "load_defaults",
    "parse_break_on",
    "parse_byte",
    "parse_range",
    "resolve_config_path",
]
