"""YAML configuration loading and dotted-path override helpers."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Iterable, Mapping, MutableMapping

import yaml


def load_config(config_path: Path) -> Mapping[str, Any]:
    """
    Read a benchmark config such as ``configs/default.yaml``.

    An empty file yields an empty mapping; a non-mapping root is rejected so
    the ``benchmark`` and ``output`` sections can always be looked up by path.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, Mapping):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")
    return loaded


def clone_config(config: Mapping[str, Any]) -> dict[str, Any]:
    """Deep copy used before applying CLI overrides so the loaded config stays intact."""
    return copy.deepcopy(dict(config))


def set_by_dotted_path(
    config: MutableMapping[str, Any],
    dotted_key: str,
    value: Any,
) -> None:
    """
    Assign ``value`` at ``dotted_key``, creating intermediate sections.

    Examples
    --------
    >>> cfg = {"benchmark": {"lookups": 100}}
    >>> set_by_dotted_path(cfg, "benchmark.lookups", 500)
    >>> cfg["benchmark"]["lookups"]
    500
    """
    keys = dotted_key.split(".")
    current: MutableMapping[str, Any] = config
    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], MutableMapping):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def get_by_dotted_path(config: Mapping[str, Any], dotted_key: str, default: Any = None) -> Any:
    """Read ``dotted_key`` (e.g. ``"benchmark.sizes"``), or ``default`` when any level is missing."""
    current: Any = config
    for key in dotted_key.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def parse_override(raw: str) -> tuple[str, Any]:
    """
    Split a ``dotted.key=value`` override, parsing the value as a YAML scalar.

    ``benchmark.sizes=[100, 1000]`` yields ``("benchmark.sizes", [100, 1000])``.
    """
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"Override must look like 'dotted.key=value', got {raw!r}")
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise ValueError(f"Could not parse override value for '{key}': {value!r}") from exc
    return key, parsed


def apply_overrides(config: Mapping[str, Any], overrides: Iterable[str]) -> dict[str, Any]:
    """Return a copy of ``config`` with each ``key=value`` override applied."""
    updated = clone_config(config)
    for raw in overrides:
        key, value = parse_override(raw)
        set_by_dotted_path(updated, key, value)
    return updated
