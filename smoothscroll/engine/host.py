"""Host-surface protocol: the only boundary the animation engine touches.

A host is one editor view. Lines are 1-based buffer lines; screen rows are
1-based rows inside the window, where a closed fold occupies a single row.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class HostSurface(Protocol):
    def current_line(self) -> int: ...

    def last_line(self) -> int: ...

    def window_height(self) -> int: ...

    def current_screen_row(self) -> int: ...

    def bottom_line(self) -> int:
        """First buffer line shown on the last visible screen row."""
        ...

    def move_cursor_relative(self, delta_lines: int) -> None: ...

    def move_viewport_relative(self, delta_lines: int) -> None: ...

    def scroll_half_page(self, direction: int) -> None:
        """Scroll window and cursor together by the current scroll amount."""
        ...

    def scroll_amount_lines(self) -> int: ...

    def set_scroll_amount(self, lines: int) -> None: ...

    def scroll_page(self, pages: int) -> None: ...

    def fold_start_of(self, line: int) -> int | None: ...

    def fold_end_of(self, line: int) -> int | None: ...

    def jump_to_line(self, line: int, linewise: bool = False) -> None: ...

    def move_to_first_non_blank(self) -> None: ...

    def record_jump(self) -> None: ...

    def ring_alert(self) -> None: ...

    def request_redraw(self) -> None: ...

    def schedule_periodic(self, interval_ms: int, callback: Callable[[], None]) -> int: ...

    def cancel_periodic(self, handle: int) -> None: ...

    def yield_for(self, seconds: float) -> None:
        """Cooperatively wait; due periodic callbacks must still fire."""
        ...
