"""Tunables read by the animation engine on every request and tick."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_UPDATE_INTERVAL_MS = 20
DEFAULT_SPEED_CONSTANT_FACTOR = 10.0
DEFAULT_SPEED_LINEAR_FACTOR = 10.0
DEFAULT_SPEED_EXPONENTIATION_FACTOR = 0.9


@dataclass(frozen=True)
class EngineSettings:
    enabled: bool = True
    update_interval_ms: int = DEFAULT_UPDATE_INTERVAL_MS
    speed_constant_factor: float = DEFAULT_SPEED_CONSTANT_FACTOR
    speed_linear_factor: float = DEFAULT_SPEED_LINEAR_FACTOR
    speed_exponentiation_factor: float = DEFAULT_SPEED_EXPONENTIATION_FACTOR
    break_on_reverse: bool = False

    @property
    def tick_seconds(self) -> float:
        return self.update_interval_ms / 1000.0


SettingsProvider = Callable[[], EngineSettings]


def fixed_settings(settings: EngineSettings) -> SettingsProvider:
    """Wrap a settings value as a provider that never changes."""
    return lambda: settings
