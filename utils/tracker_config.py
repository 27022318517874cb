from __future__ import annotations

"""Tracker configuration.

Values come from three layers, later ones winning: the module defaults, the
JSON overrides file ``data/tracker_config.json`` and ``TS_*`` environment
variables.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from utils.path_utils import get_base_dir, resolve_path

_LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME = "tracker_config.json"

_DEFAULTS: Dict[str, Any] = {
    "data_dir": "data",
    # Caller-level gate; the lineup engine itself accepts any size.
    "min_lineup_size": 9,
    "recent_windows": [5, 10],
    "hot_cold_window": 5,
    "hot_cold_count": 3,
    # Baseline used for OPS+ when the team has no qualifying totals yet.
    "default_team_obp": 0.320,
    "default_team_slg": 0.400,
    "admin_password_hash": "",
}

# env var -> (key, parser)
_ENV_OVERRIDES = {
    "TS_DATA_DIR": ("data_dir", str),
    "TS_MIN_LINEUP_SIZE": ("min_lineup_size", int),
    "TS_HOT_COLD_WINDOW": ("hot_cold_window", int),
    "TS_HOT_COLD_COUNT": ("hot_cold_count", int),
    "TS_DEFAULT_TEAM_OBP": ("default_team_obp", float),
    "TS_DEFAULT_TEAM_SLG": ("default_team_slg", float),
    "TS_ADMIN_PASSWORD_HASH": ("admin_password_hash", str),
}


def _truthy_env(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _parse_windows(raw: str) -> List[int]:
    windows = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        windows.append(int(token))
    return windows


@dataclass
class TrackerConfig:
    """Mapping-like access to tracker settings with typed accessors."""

    values: Dict[str, Any] = field(default_factory=lambda: dict(_DEFAULTS))

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, _DEFAULTS.get(key, default))

    @property
    def data_dir(self) -> Path:
        return resolve_path(self.get("data_dir"))

    @property
    def min_lineup_size(self) -> int:
        return int(self.get("min_lineup_size"))

    @property
    def recent_windows(self) -> List[int]:
        return [int(n) for n in self.get("recent_windows") or []]

    @property
    def hot_cold_window(self) -> int:
        return int(self.get("hot_cold_window"))

    @property
    def hot_cold_count(self) -> int:
        return int(self.get("hot_cold_count"))

    @property
    def default_baseline(self) -> tuple[float, float]:
        return float(self.get("default_team_obp")), float(self.get("default_team_slg"))

    @property
    def admin_password_hash(self) -> str:
        return str(self.get("admin_password_hash") or "")


def _load_overrides(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError):
        _LOGGER.warning("Ignoring unreadable config overrides at %s", path)
        return {}
    if not isinstance(data, dict):
        _LOGGER.warning("Ignoring config overrides at %s: expected an object", path)
        return {}
    return data


def _env_overrides() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for env_name, (key, parser) in _ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == "":
            continue
        try:
            values[key] = parser(raw.strip())
        except ValueError:
            _LOGGER.warning("Ignoring invalid %s=%r", env_name, raw)
    raw_windows = os.getenv("TS_RECENT_WINDOWS")
    if raw_windows:
        try:
            values["recent_windows"] = _parse_windows(raw_windows)
        except ValueError:
            _LOGGER.warning("Ignoring invalid TS_RECENT_WINDOWS=%r", raw_windows)
    return values


def load_config(path: str | Path | None = None) -> TrackerConfig:
    """Return the effective :class:`TrackerConfig`.

    ``path`` defaults to ``data/tracker_config.json`` under the project root.
    """

    values = dict(_DEFAULTS)
    config_path = (
        resolve_path(path) if path is not None else get_base_dir() / "data" / CONFIG_FILENAME
    )
    values.update(_load_overrides(config_path))
    if not _truthy_env("TS_IGNORE_ENV"):
        values.update(_env_overrides())
    return TrackerConfig(values)


__all__ = ["CONFIG_FILENAME", "TrackerConfig", "load_config"]
