"""Single-line steps against the host surface.

A step either scrolls the window together with the cursor (scroll mode) or
moves only the cursor (cursor-jump mode). Every step reports whether it ran
into the start or end of the buffer instead of moving.
"""

from __future__ import annotations

import logging

from .host import HostSurface
from .state import AnimationState, MotionMode

logger = logging.getLogger(__name__)

UP = -1
DOWN = 1


class Stepper:
    """Apply whole-line moves for one view, honoring its animation state."""

    def __init__(self, host: HostSurface, state: AnimationState) -> None:
        self.host = host
        self.state = state

    def is_blocked(self, direction: int) -> bool:
        """Return whether a step in ``direction`` cannot make any progress."""
        if direction < 0:
            return self.host.current_line() <= 1
        if self.host.current_line() < self.host.last_line():
            return False
        return not self._can_reveal_below()

    def _can_reveal_below(self) -> bool:
        return (
            self.state.forward_scroll_compensation
            and self.host.current_screen_row() < self.host.window_height()
        )

    def _scroll_one(self, direction: int) -> None:
        # The host primitive scrolls by the scroll amount; pin it to one line
        # for this call only.
        saved_amount = self.host.scroll_amount_lines()
        self.host.set_scroll_amount(1)
        try:
            self.host.scroll_half_page(direction)
        finally:
            self.host.set_scroll_amount(saved_amount)

    def step_one(self, direction: int) -> bool:
        """Move one line in ``direction``; return ``True`` on a boundary hit."""
        if direction < 0:
            return self._step_up()
        return self._step_down()

    def _step_up(self) -> bool:
        if self.host.current_line() <= 1:
            return True
        if self.state.mode is MotionMode.CURSOR_JUMP:
            self.host.move_cursor_relative(UP)
        else:
            self._scroll_one(UP)
        return False

    def _step_down(self) -> bool:
        host = self.host
        if host.current_line() < host.last_line():
            if self.state.mode is MotionMode.CURSOR_JUMP:
                host.move_cursor_relative(DOWN)
                return False
            fold_end = host.fold_end_of(host.bottom_line())
            if fold_end is not None:
                # Park on the fold's last line so one step clears the whole fold.
                host.jump_to_line(fold_end)
            initial_row = host.current_screen_row()
            self._scroll_one(DOWN)
            if self.state.forward_scroll_compensation and host.current_screen_row() > initial_row:
                host.move_viewport_relative(DOWN)
            return False
        if self._can_reveal_below():
            initial_row = host.current_screen_row()
            host.move_viewport_relative(DOWN)
            if host.current_screen_row() == initial_row:
                logger.debug("window cannot scroll past line %d", host.last_line())
                return True
            return False
        return True

    def step_many(self, lines: int) -> bool:
        """Step ``|lines|`` times towards the sign of ``lines``.

        Stops at the first boundary hit and returns ``True``; remaining steps
        are dropped.
        """
        direction = DOWN if lines > 0 else UP
        for _ in range(abs(lines)):
            if self.step_one(direction):
                logger.debug("boundary hit stepping %s", "down" if direction > 0 else "up")
                return True
        return False
