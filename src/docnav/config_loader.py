"""Load NavConfig from docnav.yaml, docnav.toml or pyproject.toml if present.

Merges file config with caller overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import yaml

from docnav._errors import ConfigError
from docnav.config import NavConfig, create_config, normalize_options

CONFIG_FILENAMES: tuple[str, ...] = ("docnav.yaml", "docnav.yml", "docnav.toml")


def load_config(root: Path, **overrides: Any) -> NavConfig:
    """Load NavConfig from *root*, optionally merging a config file.

    Looks for docnav.yaml, docnav.yml, docnav.toml, then a ``[tool.docnav]``
    table in pyproject.toml. A relative ``docs_dir`` from a file is taken
    relative to *root*; one passed as an override is left to NavConfig.

    Raises:
        ConfigError: If a config file cannot be parsed, has unknown keys, or
            holds a value of the wrong type.

    """
    file_config = normalize_options(_read_docnav_config(root))
    docs_dir = file_config.get("docs_dir")
    if isinstance(docs_dir, str) and not Path(docs_dir).is_absolute():
        file_config["docs_dir"] = root / docs_dir
    merged = {**file_config, **normalize_options(overrides)}
    return create_config(**merged)


def find_config_file(root: Path) -> Path | None:
    """Return the config file docnav would read from *root*, if any."""
    for name in CONFIG_FILENAMES:
        path = root / name
        if path.is_file():
            return path
    pyproject = root / "pyproject.toml"
    if pyproject.is_file() and "docnav" in _parse_toml(pyproject).get("tool", {}):
        return pyproject
    return None


def _read_docnav_config(root: Path) -> dict[str, Any]:
    """Read docnav config from yaml/toml if present. Returns empty dict otherwise."""
    path = find_config_file(root)
    if path is None:
        return {}
    if path.name == "pyproject.toml":
        return dict(_parse_toml(path)["tool"]["docnav"])
    if path.suffix == ".toml":
        return _flatten_docnav_section(_parse_toml(path))
    return _flatten_docnav_section(_parse_yaml(path))


def _parse_yaml(path: Path) -> dict[str, Any]:
    """Parse a YAML config file into a mapping."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return data


def _parse_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML config file into a mapping."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc


def _flatten_docnav_section(data: dict[str, Any]) -> dict[str, Any]:
    """Extract docnav.* keys into top-level config."""
    result: dict[str, Any] = {}
    section = data.get("docnav")
    if isinstance(section, dict):
        result.update(section)
    for k, v in data.items():
        if k != "docnav":
            result[k] = v
    return result
