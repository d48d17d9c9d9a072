"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormat = Literal["terminal", "json"]
StaleCheck = Literal["off", "warn", "error"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")
STALE_CHECKS: tuple[str, ...] = ("off", "warn", "error")


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_header: bool = True  # branch / parent lines above the file list


@dataclass
class CacheConfig:
    directory: Optional[str] = None  # replaces <cache-home>/git-navigator
    stale_check: StaleCheck = "warn"  # re-check selections against live status


@dataclass
class NavigatorConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
