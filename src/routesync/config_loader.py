"""Load SitemapConfig from routesync.yaml if present, and resolve credentials.

Merges file config with keyword overrides.  Overrides take precedence.
Credential lookups walk an explicit, ordered list of candidate sources so
the precedence is visible and testable.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from routesync.config import DEFAULT_API_URL, SitemapConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

# Environment variables consulted in order, after any explicit value
API_URL_ENV_VARS: tuple[str, ...] = ("UPTRADE_API_URL", "NEXT_PUBLIC_UPTRADE_API_URL")
API_KEY_ENV_VARS: tuple[str, ...] = ("UPTRADE_API_KEY", "NEXT_PUBLIC_UPTRADE_API_KEY")

# Dotenv files loaded by the CLI, first file wins for any given variable
ENV_FILES: tuple[str, ...] = (".env.local", ".env")

_CONFIG_KEYS: frozenset[str] = frozenset({
    "base_url",
    "exclude",
    "default_priority",
    "default_change_frequency",
    "priorities",
    "api_url",
    "api_key",
    "disable_sync",
})


def resolve_first(*candidates: str | None) -> str | None:
    """Return the first candidate that is set and non-empty."""
    for value in candidates:
        if value:
            return value
    return None


def resolve_api_url(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Resolve the Portal API URL: explicit value, environment, then default."""
    env = os.environ if environ is None else environ
    resolved = resolve_first(explicit, *(env.get(name) for name in API_URL_ENV_VARS))
    return resolved or DEFAULT_API_URL


def resolve_api_key(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
    env_vars: tuple[str, ...] = API_KEY_ENV_VARS,
) -> str | None:
    """Resolve the Portal API key: explicit value, then *env_vars* in order."""
    env = os.environ if environ is None else environ
    return resolve_first(explicit, *(env.get(name) for name in env_vars))


def load_env_files(root: Path) -> list[Path]:
    """Load ``.env.local`` then ``.env`` from *root* into ``os.environ``.

    Variables already present in the environment are never overwritten, so
    the earlier file wins.  Returns the files that were loaded.
    """
    from dotenv import load_dotenv

    loaded: list[Path] = []
    for name in ENV_FILES:
        path = root / name
        if path.is_file():
            load_dotenv(path, override=False)
            loaded.append(path)
    return loaded


def load_config(root: Path, **overrides: object) -> SitemapConfig:
    """Load SitemapConfig from root, optionally merging routesync.yaml.

    Looks for routesync.yaml, routesync.yml, or routesync.toml in root.  If
    found, loads and merges with overrides.  Overrides take precedence;
    overrides whose value is None are ignored.
    """
    file_config = _read_config_file(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if "exclude" in merged and isinstance(merged["exclude"], list):
        merged["exclude"] = tuple(merged["exclude"])
    return SitemapConfig(root=root, **merged)


def _read_config_file(root: Path) -> dict[str, object]:
    """Read config from yaml/toml if present.  Returns empty dict otherwise."""
    for name in ("routesync.yaml", "routesync.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "routesync.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config.  Returns empty dict on error."""
    import yaml

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return _flatten_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config.  Returns empty dict on error."""
    import tomllib

    try:
        data = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return _flatten_section(data)


def _flatten_section(data: dict[str, object]) -> dict[str, object]:
    """Extract routesync.* keys and known top-level keys into one dict."""
    result: dict[str, object] = {}
    for k, v in data.items():
        if k != "routesync" and k in _CONFIG_KEYS:
            result[k] = v
    section = data.get("routesync")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _CONFIG_KEYS:
                result[k] = v
    return result
