"""User-facing scroll commands built on the animation engine.

Half-window and full-window scrolls become scroll-mode move requests; with
animation disabled they fall through to the host's instant equivalents.
"""

from __future__ import annotations

from .engine.animator import SmoothScroller
from .engine.state import MotionMode, MoveRequest


class ScrollCommands:
    def __init__(self, scroller: SmoothScroller) -> None:
        self.scroller = scroller
        self.host = scroller.host

    def _animated(self) -> bool:
        return self.scroller.settings().enabled

    def downwards(self, count: int = 0) -> None:
        """Scroll half a window down; a count replaces the scroll amount."""
        self._half_page(1, count)

    def upwards(self, count: int = 0) -> None:
        """Scroll half a window up; a count replaces the scroll amount."""
        self._half_page(-1, count)

    def _half_page(self, direction: int, count: int) -> None:
        if count > 0:
            self.host.set_scroll_amount(count)
        if not self._animated():
            self.host.scroll_half_page(direction)
            return
        lines = self.host.scroll_amount_lines()
        self.scroller.submit(MoveRequest(direction * lines, MotionMode.SCROLL))

    def forwards(self, count: int = 1) -> None:
        """Scroll ``count`` full windows down, revealing past the last line."""
        count = max(1, count)
        if not self._animated():
            self.host.scroll_page(count)
            return
        lines = self.host.window_height() * count
        self.scroller.submit(MoveRequest(lines, MotionMode.SCROLL, forward_compensation=True))

    def backwards(self, count: int = 1) -> None:
        """Scroll ``count`` full windows up."""
        count = max(1, count)
        if not self._animated():
            self.host.scroll_page(-count)
            return
        lines = self.host.window_height() * count
        self.scroller.submit(MoveRequest(-lines, MotionMode.SCROLL))

    def scroll_lines(self, lines: int) -> None:
        """Scroll an arbitrary signed number of lines, e.g. for a mouse wheel."""
        if not self._animated():
            self.host.move_viewport_relative(lines)
            return
        self.scroller.submit(MoveRequest(lines, MotionMode.SCROLL))
