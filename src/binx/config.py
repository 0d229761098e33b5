"""User configuration loaded from YAML."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from binx.core.store import DEFAULT_CAPACITY

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class BinxConfig:
    viewport_width: int = 80
    queue_capacity: int = DEFAULT_CAPACITY
    glyph: str = "░"
    log_file: str | None = None
    log_level: str = "WARNING"

    def with_overrides(self, **overrides: Any) -> BinxConfig:
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def get_default_config_path() -> Path:
    """Platform-appropriate user config file."""
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "binx" / "config.yaml"
    return Path.home() / ".config" / "binx" / "config.yaml"


def parse_config(text: str) -> BinxConfig:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError([f"YAML parse error: {e}"]) from None

    if not isinstance(data, dict):
        raise ConfigError(["Top-level YAML must be a mapping."])

    known = {f.name for f in fields(BinxConfig)}
    errors = [f"unknown key: {k}" for k in sorted(map(str, data)) if k not in known]

    width = data.get("viewport_width", BinxConfig.viewport_width)
    if not isinstance(width, int) or isinstance(width, bool) or width <= 0:
        errors.append("viewport_width must be a positive integer")

    capacity = data.get("queue_capacity", BinxConfig.queue_capacity)
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
        errors.append("queue_capacity must be a positive integer")

    glyph = data.get("glyph", BinxConfig.glyph)
    if not isinstance(glyph, str) or len(glyph) != 1:
        errors.append("glyph must be a single character")

    log_file = data.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        errors.append("log_file must be a path string")

    level = data.get("log_level", BinxConfig.log_level)
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    if errors:
        raise ConfigError(errors)

    return BinxConfig(
        viewport_width=width,
        queue_capacity=capacity,
        glyph=glyph,
        log_file=log_file,
        log_level=level.upper(),
    )


def load_config(path: str | Path | None = None) -> BinxConfig:
    """Load config from `path`, or the default user file if it exists.

    An explicit path that does not exist is an error; a missing default file
    just yields the defaults.
    """
    if path is None:
        default = get_default_config_path()
        if not default.exists():
            return BinxConfig()
        path = default
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError([f"config file not found: {p}"]) from None
    except OSError as e:
        raise ConfigError([f"cannot read config {p}: {e}"]) from None
    return parse_config(text)
