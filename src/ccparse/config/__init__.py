"""
ccparse.config - Configuration loading and defaults

Configuration lives in a ``.ccparse.toml`` file found by walking up
from the working directory. Values are layered as::

    DEFAULT_CONFIG < .ccparse.toml < CCPARSE_<SECTION>_<KEY> env vars
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

import tomlkit
from tomlkit.exceptions import ParseError as TOMLParseError

from ccparse.config.defaults import DEFAULT_CONFIG
from ccparse.serialize import FIELD_CASES

CONFIG_FILENAME = ".ccparse.toml"
ENV_PREFIX = "CCPARSE_"


class ConfigError(ValueError):
    """Configuration file or value is invalid."""


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text, keeping the tomlkit document for round-trip edits."""
    return tomlkit.parse(content)


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """
    Find .ccparse.toml in ``start`` or any parent directory.

    Args:
        start: Directory to search from (defaults to the current directory)

    Returns:
        Path to the config file, or None if not found
    """
    current = Path(start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(defaults: dict[str, Any], user: dict[str, Any]) -> dict[str, Any]:
    """
    Recursively merge ``user`` over ``defaults``.

    Neither input is modified.
    """
    merged = copy.deepcopy(defaults)
    for key, value in user.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(raw: str) -> Any:
    """Parse an environment value into a bool, int, list/dict, or string."""
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    stripped = raw.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    try:
        return int(stripped)
    except ValueError:
        return raw


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply CCPARSE_<SECTION>_<KEY> environment variables.

    The section is the first underscore-separated word; the rest is the
    key, lowercased (CCPARSE_OUTPUT_FIELD_CASE -> output.field_case).
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        parts = name[len(ENV_PREFIX) :].lower().split("_", 1)
        if len(parts) != 2 or not all(parts):
            continue
        section, key = parts
        config.setdefault(section, {})
        if isinstance(config[section], dict):
            config[section][key] = _try_parse_env_value(raw)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """
    Check the output settings.

    Raises:
        ConfigError: If field_case or indent is invalid
    """
    output = config.get("output", {})
    field_case = output.get("field_case")
    if field_case not in FIELD_CASES:
        raise ConfigError(
            f"output.field_case must be one of {', '.join(FIELD_CASES)} (got {field_case!r})"
        )
    indent = output.get("indent")
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ConfigError(f"output.indent must be a non-negative integer (got {indent!r})")


def load_config(path: Optional[Path] = None, start: Optional[Path] = None) -> dict[str, Any]:
    """
    Load configuration.

    Args:
        path: Explicit config file; when None, search upward from ``start``
        start: Directory to search from when ``path`` is not given

    Returns:
        Merged configuration dict

    Raises:
        ConfigError: If the file cannot be read or parsed, or a value is invalid
    """
    if path is None:
        path = find_config_file(start)

    user: dict[str, Any] = {}
    if path is not None:
        try:
            user = parse_toml(Path(path).read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except TOMLParseError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    config = _apply_env_overrides(merge_configs(DEFAULT_CONFIG, user))
    validate_config(config)
    return config


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_CONFIG",
    "find_config_file",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "validate_config",
]
