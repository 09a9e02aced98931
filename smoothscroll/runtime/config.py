"""Persistent JSON config for animation tunables.

All access is defensive: a missing or malformed file, or a value of the
wrong type, falls back to the built-in default for that key.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

from platformdirs import user_config_dir

from ..engine.settings import EngineSettings

logger = logging.getLogger(__name__)

APP_NAME = "smoothscroll"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

_BOOL_KEYS = ("enabled", "break_on_reverse")
_NUMBER_KEYS = (
    "speed_constant_factor",
    "speed_linear_factor",
    "speed_exponentiation_factor",
)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def settings_from_config(data: dict[str, object]) -> EngineSettings:
    """Build engine settings from a config dict, key by key."""
    overrides: dict[str, object] = {}
    for key in _BOOL_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            overrides[key] = value
    for key in _NUMBER_KEYS:
        value = data.get(key)
        if _is_number(value):
            overrides[key] = float(value)
    interval = data.get("update_interval_ms")
    if _is_number(interval) and interval > 0:
        overrides["update_interval_ms"] = max(1, int(interval))
    return replace(EngineSettings(), **overrides)


def load_engine_settings() -> EngineSettings:
    """Load engine settings from the persisted config."""
    return settings_from_config(load_config())


def save_engine_settings(settings: EngineSettings) -> None:
    """Persist every engine tunable, keeping unrelated config keys."""
    config = load_config()
    config.update(
        enabled=settings.enabled,
        update_interval_ms=settings.update_interval_ms,
        speed_constant_factor=settings.speed_constant_factor,
        speed_linear_factor=settings.speed_linear_factor,
        speed_exponentiation_factor=settings.speed_exponentiation_factor,
        break_on_reverse=settings.break_on_reverse,
    )
    save_config(config)


class LiveSettings:
    """Settings provider that re-reads the config file when it changes.

    ``overrides`` (typically from command-line flags) win over file values.
    """

    def __init__(self, **overrides: object) -> None:
        self.overrides = overrides
        self._stamp: float | None = None
        self._cached: EngineSettings | None = None

    def _config_stamp(self) -> float | None:
        try:
            return CONFIG_PATH.stat().st_mtime
        except OSError:
            return None

    def __call__(self) -> EngineSettings:
        stamp = self._config_stamp()
        if self._cached is None or stamp != self._stamp:
            self._stamp = stamp
            self._cached = replace(load_engine_settings(), **self.overrides)
            logger.debug("engine settings loaded: %s", self._cached)
        return self._cached
