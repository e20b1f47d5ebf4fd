"""Dump defaults loader: `.bytedump.toml` plus environment overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, cast

from bytedump.lib.config.parsing import parse_break_on
from bytedump.lib.domain import DumpConfig, Selection
from bytedump.lib.radix import Radix

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".bytedump.toml"
CONFIG_PATH_ENV = "BYTEDUMP_CONFIG"


@dataclass(frozen=True, slots=True)
class DumpDefaults:
    """Display defaults applied when a CLI flag is not given."""

    address: bool = False
    text: bool = False
    radix: Radix = Radix.BIN
    line_width: int = 8
    break_on: frozenset[int] = frozenset()
    colored: bool = False


_SECTION_KEY_MAP: dict[str, dict[str, str]] = {
    "display": {
        "address": "address",
        "text": "text",
        "colored": "colored",
        "radix": "radix",
    },
    "lines": {
        "width": "line_width",
        "line_width": "line_width",
        "break_on": "break_on",
    },
}

_TOP_LEVEL_KEY_MAP: dict[str, str] = {
    "address": "address",
    "text": "text",
    "colored": "colored",
    "radix": "radix",
    "line_width": "line_width",
    "break_on": "break_on",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "BYTEDUMP_ADDRESS": "address",
    "BYTEDUMP_TEXT": "text",
    "BYTEDUMP_COLORED": "colored",
    "BYTEDUMP_RADIX": "radix",
    "BYTEDUMP_LINE_WIDTH": "line_width",
    "BYTEDUMP_BREAK_ON": "break_on",
}

_BOOL_FIELDS = frozenset({"address", "text", "colored"})
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _radix_from_name(raw_value: str, source: str) -> Radix:
    normalized = raw_value.strip().lower()
    try:
        return Radix(normalized)
    except ValueError as error:
        raise ValueError(
            f"Invalid value for '{source}': expected one of "
            f"{[str(member) for member in Radix]}, got {raw_value!r}."
        ) from error


def validate_line_width(value: int, source: str = "line_width") -> int:
    if value < 1:
        raise ValueError(f"Invalid value for '{source}': expected at least 1, got {value!r}.")
    return value


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    if field_name in _BOOL_FIELDS:
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if field_name == "line_width":
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ValueError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return validate_line_width(raw_value, source)

    if field_name == "break_on":
        if not isinstance(raw_value, list):
            raise ValueError(
                f"Invalid value for '{source}': expected array of bytes, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        try:
            return parse_break_on(cast("list[str | int]", raw_value))
        except ValueError as error:
            raise ValueError(f"Invalid value for '{source}': {error}") from error

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    return _radix_from_name(raw_value, source)


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    normalized = raw_value.strip()
    if field_name in _BOOL_FIELDS:
        lowered = normalized.lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected a boolean, got {raw_value!r}."
        )

    if field_name == "line_width":
        try:
            parsed = int(normalized)
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error
        return validate_line_width(parsed, env_name)

    if field_name == "break_on":
        tokens = [token for token in normalized.split(",") if token.strip()]
        try:
            return parse_break_on(tokens)
        except ValueError as error:
            raise ValueError(f"Invalid environment override '{env_name}': {error}") from error

    return _radix_from_name(raw_value, env_name)


def _default_values() -> dict[str, object]:
    defaults = DumpDefaults()
    return {field.name: getattr(defaults, field.name) for field in fields(DumpDefaults)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        section_map = _SECTION_KEY_MAP.get(key)
        if section_map is not None:
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
            for section_key, section_value in cast("dict[str, object]", raw_value).items():
                field_name = section_map.get(section_key)
                if field_name is None:
                    logger.warning(
                        "Ignoring unknown bytedump config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                values[field_name] = _coerce_file_value(
                    field_name=field_name,
                    raw_value=section_value,
                    source=f"{key}.{section_key}",
                )
            continue

        field_name = _TOP_LEVEL_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown bytedump config key '%s'.", key)
            continue
        values[field_name] = _coerce_file_value(
            field_name=field_name,
            raw_value=raw_value,
            source=key,
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def _build_defaults(values: dict[str, object]) -> DumpDefaults:
    return DumpDefaults(
        address=cast("bool", values["address"]),
        text=cast("bool", values["text"]),
        radix=cast("Radix", values["radix"]),
        line_width=cast("int", values["line_width"]),
        break_on=cast("frozenset[int]", values["break_on"]),
        colored=cast("bool", values["colored"]),
    )


def resolve_config_path(cwd: Path | None = None) -> Path:
    """Return the config file to read.

    Precedence:
    1. `BYTEDUMP_CONFIG` environment variable.
    2. `.bytedump.toml` in ``cwd`` (current working directory by default).
    """

    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    base = cwd if cwd is not None else Path.cwd()
    return base / CONFIG_FILENAME


def load_defaults(cwd: Path | None = None) -> DumpDefaults:
    """Load `.bytedump.toml` and apply environment overrides."""

    values = _default_values()
    path = resolve_config_path(cwd)
    if path.is_file():
        payload = cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))
        _apply_toml_payload(values=values, payload=payload, path=path)
    elif os.getenv(CONFIG_PATH_ENV):
        raise FileNotFoundError(f"Config file named by {CONFIG_PATH_ENV} not found: {path}")

    _apply_env_overrides(values)
    return _build_defaults(values)


def build_dump_config(
    defaults: DumpDefaults,
    *,
    address: bool | None = None,
    text: bool | None = None,
    radix: Radix | None = None,
    select: Selection | None = None,
    line_width: int | None = None,
    break_on: Iterable[str | int] = (),
    colored: bool | None = None,
) -> DumpConfig:
    """Merge explicit options over ``defaults`` into a validated `DumpConfig`."""

    explicit_break_on = tuple(break_on)
    return DumpConfig(
        show_address=defaults.address if address is None else address,
        show_text=defaults.text if text is None else text,
        radix=defaults.radix if radix is None else radix,
        select=Selection() if select is None else select,
        line_width=(
            defaults.line_width
            if line_width is None
            else validate_line_width(line_width, "--line-width")
        ),
        break_on=parse_break_on(explicit_break_on) if explicit_break_on else defaults.break_on,
        colored=defaults.colored if colored is None else colored,
    )
