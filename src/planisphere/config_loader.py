"""Load SitemapOptions from planisphere.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from planisphere._errors import ConfigError
from planisphere.config import SitemapOptions

CONFIG_FILENAMES = ("planisphere.yaml", "planisphere.yml", "planisphere.toml")

_OPTION_KEYS = frozenset({"base_url", "trailing_slash", "defaults", "pretty", "output"})


def load_options(root: str | Path = ".", **overrides: object) -> SitemapOptions:
    """Load SitemapOptions from *root*, optionally merging planisphere.yaml.

    Looks for planisphere.yaml, planisphere.yml, or planisphere.toml in
    root. If found, loads and merges with overrides. Overrides take
    precedence; overrides set to ``None`` are ignored.

    Raises:
        ConfigError: If the config file cannot be parsed.

    """
    file_config = _read_config(Path(root))
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    unknown = set(merged) - _OPTION_KEYS
    if unknown:
        msg = f"Unknown option(s): {', '.join(sorted(unknown))}"
        raise ConfigError(msg)
    return SitemapOptions(**merged)  # type: ignore[arg-type]


def _read_config(root: Path) -> dict[str, object]:
    """Read planisphere config from yaml/toml if present. Returns empty dict otherwise."""
    for name in CONFIG_FILENAMES:
        path = root / name
        if not path.is_file():
            continue
        if path.suffix == ".toml":
            return _parse_toml(path)
        return _parse_yaml(path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot read {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _flatten_section(data: object, path: Path) -> dict[str, object]:
    """Extract planisphere.* keys and known top-level keys."""
    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    result: dict[str, object] = {}
    for k, v in data.items():
        if k in _OPTION_KEYS:
            result[k] = v
    section = data.get("planisphere")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _OPTION_KEYS:
                result[k] = v
    return result
