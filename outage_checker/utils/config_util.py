# utils/config_util.py
import os
from dataclasses import dataclass
from typing import Optional

import yaml

from ..scraping.hep_scraper import BASE_URL
from ..scraping.window import DEFAULT_DELAY_SECONDS, DEFAULT_WINDOW_DAYS
from .env_util import ConfigError

DEFAULT_CONFIG_PATH = "config/config.yaml"


def load_config(path=DEFAULT_CONFIG_PATH):
    """Read the YAML run settings. A missing file means defaults."""
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path} must be a mapping of settings, got {type(cfg).__name__}")
    return cfg


def _number(cfg, key, cast, default):
    value = cfg.get(key)
    if value is None:
        return default
    try:
        value = cast(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be a number, got {value!r}") from None
    if value < 0:
        raise ConfigError(f"{key} must not be negative, got {value!r}")
    return value


@dataclass(frozen=True)
class RunSettings:
    window_days: int = DEFAULT_WINDOW_DAYS
    delay_seconds: float = DEFAULT_DELAY_SECONDS
    base_url: str = BASE_URL
    heading_tag: str = "h3"
    schedule: Optional[str] = None
    timezone: str = "Europe/Zagreb"
    filter: Optional[str] = None

    @classmethod
    def from_dict(cls, cfg: dict) -> "RunSettings":
        return cls(
            window_days=_number(cfg, "window_days", int, DEFAULT_WINDOW_DAYS),
            delay_seconds=_number(cfg, "delay_seconds", float, DEFAULT_DELAY_SECONDS),
            base_url=cfg.get("base_url") or BASE_URL,
            heading_tag=cfg.get("heading_tag") or "h3",
            schedule=cfg.get("schedule") or None,
            timezone=cfg.get("timezone") or "Europe/Zagreb",
            filter=cfg.get("filter") or None,
        )
