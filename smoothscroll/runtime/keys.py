"""Key dispatch for the pager: count prefixes, two-key combos, and actions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..commands import ScrollCommands
from ..jumps.planner import JumpPlanner
from ..view.text_view import TextView
from .navigation import LineLocation

logger = logging.getLogger(__name__)

WHEEL_LINES = 3
PREFIX_KEYS = frozenset({"g", "z"})
DIGIT_KEYS = frozenset("0123456789")


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small exact-match key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key`` and return its handled result."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


class PagerKeyHandler:
    """Translate key tokens into scroll commands and jumps for one view."""

    def __init__(self, view: TextView, commands: ScrollCommands, planner: JumpPlanner) -> None:
        self.view = view
        self.commands = commands
        self.planner = planner
        self.count_buffer = ""
        self.pending_prefix = ""
        self.quit_requested = False
        self._count: int | None = None
        self.registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("q",), self._quit),
            KeyComboBinding(("j", "DOWN", "ENTER"), lambda: self._move_cursor(1)),
            KeyComboBinding(("k", "UP"), lambda: self._move_cursor(-1)),
            KeyComboBinding(("CTRL_D",), lambda: self.commands.downwards(self._count or 0)),
            KeyComboBinding(("CTRL_U",), lambda: self.commands.upwards(self._count or 0)),
            KeyComboBinding(("CTRL_F", " ", "PAGE_DOWN"), lambda: self.commands.forwards(self._count or 1)),
            KeyComboBinding(("CTRL_B", "PAGE_UP"), lambda: self.commands.backwards(self._count or 1)),
            KeyComboBinding(("MOUSE_WHEEL_DOWN",), lambda: self.commands.scroll_lines(WHEEL_LINES)),
            KeyComboBinding(("MOUSE_WHEEL_UP",), lambda: self.commands.scroll_lines(-WHEEL_LINES)),
            KeyComboBinding(("G",), lambda: self.planner.jump("G", self._count)),
            KeyComboBinding(("+",), lambda: self.planner.jump("+", self._count)),
            KeyComboBinding(("-",), lambda: self.planner.jump("-", self._count)),
            KeyComboBinding(("CTRL_O",), self._jump_back),
            KeyComboBinding(("TAB",), self._jump_forward),
            KeyComboBinding(("gg",), lambda: self.planner.jump("gg", self._count)),
            KeyComboBinding(("za",), self.view.toggle_fold_at_cursor),
        )

    def _quit(self) -> bool:
        self.quit_requested = True
        return True

    def _move_cursor(self, direction: int) -> bool:
        self.view.move_cursor_relative(direction * (self._count or 1))
        return True

    def _jump_to_location(self, location: LineLocation | None) -> bool:
        if location is None:
            self.view.ring_alert()
            return False
        self.planner.animate_to_line(location.line)
        self.view.column = location.column
        return True

    def _jump_back(self) -> bool:
        return self._jump_to_location(self.view.history.go_back(self.view.current_location()))

    def _jump_forward(self) -> bool:
        return self._jump_to_location(self.view.history.go_forward(self.view.current_location()))

    def handle(self, key: str) -> bool:
        """Handle one key token and return whether it was consumed."""
        if self.pending_prefix:
            key = self.pending_prefix + key
            self.pending_prefix = ""
        elif key in PREFIX_KEYS:
            self.pending_prefix = key
            return True
        elif key in DIGIT_KEYS and (key != "0" or self.count_buffer):
            self.count_buffer += key
            return True
        self._count = int(self.count_buffer) if self.count_buffer else None
        self.count_buffer = ""
        if key not in self.registry:
            logger.debug("unbound key %r", key)
            self._count = None
            return False
        try:
            self.registry.dispatch(key)
        finally:
            self._count = None
        return True
