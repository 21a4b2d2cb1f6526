"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    Only the first ``=`` separates path from value, so values may contain
    ``=`` themselves.

    Raises:
        ValueError: If the string lacks ``=``, has no dot in the key, or has
            empty section/key components.

    Examples:
        >>> override = parse_override("algebra.overflow=wrap")
        >>> override.section, override.key_path, override.value
        ('algebra', ('overflow',), 'wrap')

        >>> parse_override("algebra.inputs=[2,4]").value
        [2, 4]

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path_part.split(".")
    key_parts = tuple(keys)

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_parts, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("16")
        16
        >>> coerce_value("[5, 3, 9]")
        [5, 3, 9]
        >>> coerce_value("false")
        False
        >>> coerce_value("null")
        >>> coerce_value("saturate")
        'saturate'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Examples:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride(section="algebra", key_path=("bits",), value=8))
        >>> tree
        {'algebra': {'bits': 8}}
        >>> _nest_override(tree, ConfigOverride(section="x", key_path=("y", "z"), value=1))
        >>> tree["x"]
        {'y': {'z': 1}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into ``config``.

    Args:
        config: Configuration loaded from file and environment layers.
        raw_overrides: ``SECTION.KEY=VALUE`` strings in command-line order;
            later assignments to the same key win.

    Returns:
        A new Config, or ``config`` itself when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> from lib_layered_config import Config
        >>> cfg = Config({"algebra": {"bits": 32}}, {})
        >>> apply_overrides(cfg, ("algebra.bits=16",))["algebra"]["bits"]
        16
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
