"""Load MenuflowConfig from menuflow.yaml or menuflow.toml if present.

Merges file config with explicit overrides.  Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

import yaml

from menuflow._errors import ConfigError
from menuflow.config import MenuflowConfig

CONFIG_FILES = ("menuflow.yaml", "menuflow.yml", "menuflow.toml")

_KNOWN_KEYS = frozenset(f.name for f in fields(MenuflowConfig)) - {"root"}


def load_config(root: Path, **overrides: object) -> MenuflowConfig:
    """Load MenuflowConfig from root, optionally merging a config file.

    Looks for menuflow.yaml, menuflow.yml, or menuflow.toml in root.  If
    found, loads it and merges with overrides.

    Raises:
        ConfigError: The file cannot be parsed or names unknown settings.

    """
    file_config = _read_config(root)
    merged = {**file_config, **overrides}
    unknown = sorted(set(merged) - _KNOWN_KEYS)
    if unknown:
        msg = f"unknown menuflow settings: {', '.join(unknown)}"
        raise ConfigError(msg)
    return MenuflowConfig(root=root, **merged)  # type: ignore[arg-type]


def find_config(root: Path) -> Path | None:
    """Return the config file that ``load_config`` would read, if any."""
    for name in CONFIG_FILES:
        path = root / name
        if path.is_file():
            return path
    return None


def _read_config(root: Path) -> dict[str, object]:
    path = find_config(root)
    if path is None:
        return {}
    if path.suffix == ".toml":
        return _parse_toml(path)
    return _parse_yaml(path)


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"cannot read {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"cannot read {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _flatten_section(data: object, path: Path) -> dict[str, object]:
    """Merge top-level settings with those under a ``menuflow`` section."""
    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping"
        raise ConfigError(msg)
    result = {k: v for k, v in data.items() if k != "menuflow"}
    section = data.get("menuflow")
    if section is not None:
        if not isinstance(section, dict):
            msg = f"{path.name}: 'menuflow' must be a mapping"
            raise ConfigError(msg)
        result.update(section)
    return result
