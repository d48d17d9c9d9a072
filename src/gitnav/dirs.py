"""Cache and config directory resolution.

Both resolvers take the platform name, an environment mapping and the home
directory as arguments so callers (and tests) decide where those come from.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Mapping, Optional

TOOL_NAME = "git-navigator"

_UNIX_LIKE = ("linux", "freebsd", "netbsd", "openbsd")


def _family(platform: str) -> str:
    if platform.startswith(_UNIX_LIKE):
        return "unix"
    if platform == "darwin":
        return "macos"
    if platform in ("win32", "cygwin"):
        return "windows"
    return "other"


def cache_root(
    platform: str,
    env: Mapping[str, str],
    home: Optional[Path],
    override: Optional[str] = None,
) -> Path:
    """Return ``<cache-home>/git-navigator``.

    *override* (from config or ``GITNAV_CACHE_DIR``) is used verbatim as the
    tool directory. Otherwise ``XDG_CACHE_HOME`` wins on every platform,
    then the platform convention, then the system temp directory.
    """
    if override:
        return Path(override).expanduser()

    if xdg := env.get("XDG_CACHE_HOME"):
        return Path(xdg) / TOOL_NAME

    family = _family(platform)
    base: Optional[Path] = None
    if family == "windows":
        if local := env.get("LOCALAPPDATA"):
            base = Path(local)
    elif home is not None:
        if family == "macos":
            base = home / "Library" / "Caches"
        else:
            base = home / ".cache"

    if base is None:
        base = Path(tempfile.gettempdir())
    return base / TOOL_NAME


def config_root(platform: str, env: Mapping[str, str], home: Optional[Path]) -> Optional[Path]:
    """Return ``<config-home>/git-navigator`` or None if it cannot be determined."""
    family = _family(platform)
    base: Optional[Path] = None
    if family == "windows":
        if appdata := env.get("APPDATA"):
            base = Path(appdata)
    elif family == "macos":
        if home is not None:
            base = home / "Library" / "Application Support"
    else:
        if xdg := env.get("XDG_CONFIG_HOME"):
            base = Path(xdg)
        elif home is not None:
            base = home / ".config"
    return base / TOOL_NAME if base is not None else None


def _home() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        return None


def default_cache_root(override: Optional[str] = None) -> Path:
    """Resolve the cache root from the live process environment."""
    return cache_root(sys.platform, os.environ, _home(), override)


def default_config_root() -> Optional[Path]:
    return config_root(sys.platform, os.environ, _home())
