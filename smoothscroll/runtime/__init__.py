"""Runtime services: config, jump list, timers, terminal, and the pager loop."""

from .config import LiveSettings, load_engine_settings, save_engine_settings
from .navigation import LineJumpHistory, LineLocation
from .scheduler import TickScheduler

__all__ = [
    "LineJumpHistory",
    "LineLocation",
    "LiveSettings",
    "TickScheduler",
    "load_engine_settings",
    "save_engine_settings",
]
