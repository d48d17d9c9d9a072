"""Load and merge configuration from config.toml, .gitnav.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitnav.config.schema import (
    OUTPUT_FORMATS,
    STALE_CHECKS,
    CacheConfig,
    NavigatorConfig,
    OutputConfig,
)
from gitnav.errors import NavigatorError

REPO_CONFIG_NAME = ".gitnav.toml"
USER_CONFIG_NAME = "config.toml"


class ConfigError(NavigatorError):
    """Raised when config is malformed or unreadable."""

    exit_code = 2


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay one TOML document on another, one level of sections deep."""
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: NavigatorConfig, env: Mapping[str, str]) -> None:
    """Apply GITNAV_* environment variable overrides."""
    if val := env.get("GITNAV_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := env.get("GITNAV_CACHE_DIR"):
        cfg.cache.directory = val
    if val := env.get("GITNAV_STALE_CHECK"):
        if val in STALE_CHECKS:
            cfg.cache.stale_check = val  # type: ignore[assignment]


def _validate(cfg: NavigatorConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output.format {cfg.output.format!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    if cfg.cache.stale_check not in STALE_CHECKS:
        raise ConfigError(
            f"Invalid cache.stale_check {cfg.cache.stale_check!r}; "
            f"expected one of {', '.join(STALE_CHECKS)}"
        )
    if not isinstance(cfg.output.show_header, bool):
        raise ConfigError(
            f"Invalid output.show_header {cfg.output.show_header!r}; expected true or false"
        )
    if cfg.cache.directory is not None and not isinstance(cfg.cache.directory, str):
        raise ConfigError(
            f"Invalid cache.directory {cfg.cache.directory!r}; expected a path string"
        )


def find_config_files(repo_root: Optional[Path], user_dir: Optional[Path]) -> list[Path]:
    """Existing config files, lowest precedence first."""
    candidates = []
    if user_dir is not None:
        candidates.append(user_dir / USER_CONFIG_NAME)
    if repo_root is not None:
        candidates.append(repo_root / REPO_CONFIG_NAME)
    return [p for p in candidates if p.is_file()]


def load_config(
    repo_root: Optional[Path],
    *,
    user_dir: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> NavigatorConfig:
    """Load, merge, validate and return a NavigatorConfig."""
    raw: Dict[str, Any] = {}
    for path in find_config_files(repo_root, user_dir):
        raw = _merge(raw, _parse_toml(path))

    cfg = NavigatorConfig(
        version=str(raw.get("version", "1.0")),
        output=_build_section(raw, OutputConfig, "output"),
        cache=_build_section(raw, CacheConfig, "cache"),
    )

    _merge_env_overrides(cfg, os.environ if env is None else env)
    _validate(cfg)
    return cfg
