# -*- coding: utf-8 -*-
"""
Config in a human-readable JSON file.

Fields:
- title: str                   tray tooltip / notification app name
- log_level: str               overridden by TRAYCONTROLS_LOG_LEVEL
- notifications_enabled: bool
- icon_size: int               16..256
- default_color: "red" | "green" | "blue"

The file is only read; menu state is not written back.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .icon import COLORS

log = logging.getLogger("traycontrols.config")

DEFAULT_CONFIG_FILENAME = "config.json"
LOG_LEVEL_ENV = "TRAYCONTROLS_LOG_LEVEL"


def _to_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
    return default


def _clamp_icon_size(value) -> int:
    try:
        out = int(value)
    except (TypeError, ValueError):
        out = 16
    if out < 16:
        out = 16
    if out > 256:
        out = 256
    return out


@dataclass
class AppConfig:
    title: str = "tray-controls"
    log_level: str = "INFO"
    notifications_enabled: bool = True
    icon_size: int = 16
    default_color: str = "red"

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        title = data.get("title") or "tray-controls"
        log_level = str(data.get("log_level") or "INFO").strip().upper()
        default_color = str(data.get("default_color", "red")).strip().lower()
        if default_color not in COLORS:
            default_color = "red"
        return cls(
            title=str(title),
            log_level=log_level,
            notifications_enabled=_to_bool(data.get("notifications_enabled", True), True),
            icon_size=_clamp_icon_size(data.get("icon_size", 16)),
            default_color=default_color,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "log_level": self.log_level,
            "notifications_enabled": self.notifications_enabled,
            "icon_size": self.icon_size,
            "default_color": self.default_color,
        }


class ConfigManager:
    def __init__(self, config_path: Path):
        self.config_path = config_path

    def load(self) -> AppConfig:
        cfg = self._read()
        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            cfg.log_level = env_level.strip().upper()
        return cfg

    def _read(self) -> AppConfig:
        if not self.config_path.exists():
            return AppConfig()
        try:
            data = json.loads(self.config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            # If config is corrupted, start with defaults but do not crash.
            log.warning("Ignoring unreadable config %s: %s", self.config_path, exc)
            return AppConfig()
        if not isinstance(data, dict):
            log.warning("Ignoring config %s: top level is not an object", self.config_path)
            return AppConfig()
        return AppConfig.from_dict(data)
