"""In-memory text window implementing the host surface.

Holds buffer lines, closed folds, a viewport and a cursor. All positions are
1-based buffer lines; internally motion happens over *display lines*, where
every closed fold collapses into the single display line of its first line.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..runtime.navigation import LineJumpHistory, LineLocation
from ..runtime.scheduler import TickScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fold:
    start: int
    end: int


def indent_fold_range(lines: list[str], line: int) -> tuple[int, int] | None:
    """Return the indentation block opened by ``line``, if any.

    The block covers ``line`` plus every following line indented deeper than
    it (blank lines inside the block included, trailing blank lines not).
    """
    index = line - 1
    if index < 0 or index >= len(lines) or not lines[index].strip():
        return None
    base_indent = len(lines[index]) - len(lines[index].lstrip())
    end = index
    for probe in range(index + 1, len(lines)):
        text = lines[probe]
        if not text.strip():
            continue
        if len(text) - len(text.lstrip()) <= base_indent:
            break
        end = probe
    if end == index:
        return None
    return line, end + 1


class TextView:
    """One editor view over a list of lines."""

    def __init__(
        self,
        lines: list[str],
        height: int = 20,
        *,
        scheduler: TickScheduler | None = None,
        history: LineJumpHistory | None = None,
        on_alert: Callable[[], None] | None = None,
        on_yield: Callable[[], None] | None = None,
    ) -> None:
        self.lines = list(lines) or [""]
        self.height = max(1, height)
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.history = history if history is not None else LineJumpHistory()
        self.on_alert = on_alert
        self.on_yield = on_yield
        self.top = 1
        self.cursor = 1
        self.column = 0
        self.scroll_amount = max(1, self.height // 2)
        self.alerts = 0
        self.dirty = True
        self.last_jump_linewise = False
        self._folds: list[Fold] = []
        self._display_starts: list[int] = []
        self._rebuild_display()

    # Display-line bookkeeping.

    def _rebuild_display(self) -> None:
        starts: list[int] = []
        line = 1
        last = len(self.lines)
        while line <= last:
            starts.append(line)
            fold = self._closed_fold_at(line)
            line = (fold.end if fold is not None else line) + 1
        self._display_starts = starts

    def _closed_fold_at(self, line: int) -> Fold | None:
        for fold in self._folds:
            if fold.start <= line <= fold.end:
                return fold
        return None

    def _index_of(self, line: int) -> int:
        return max(0, bisect.bisect_right(self._display_starts, line) - 1)

    def _line_at(self, index: int) -> int:
        index = max(0, min(index, len(self._display_starts) - 1))
        return self._display_starts[index]

    @property
    def display_line_count(self) -> int:
        return len(self._display_starts)

    def _scroll_to_cursor(self) -> None:
        cursor_index = self._index_of(self.cursor)
        top_index = self._index_of(self.top)
        if cursor_index < top_index:
            self.top = self._line_at(cursor_index)
        elif cursor_index >= top_index + self.height:
            self.top = self._line_at(cursor_index - self.height + 1)
        self.dirty = True

    def visible_lines(self) -> list[int]:
        """Return the first buffer line of each visible screen row."""
        top_index = self._index_of(self.top)
        return self._display_starts[top_index : top_index + self.height]

    def resize(self, height: int) -> None:
        self.height = max(1, height)
        self._scroll_to_cursor()

    # Folds.

    def close_fold(self, start: int, end: int) -> None:
        """Close a fold over ``start..end``, replacing overlapping folds."""
        start = max(1, start)
        end = min(self.last_line(), end)
        if end <= start:
            return
        self._folds = [fold for fold in self._folds if fold.end < start or fold.start > end]
        self._folds.append(Fold(start, end))
        self._folds.sort(key=lambda fold: fold.start)
        self._rebuild_display()
        self.cursor = self._line_at(self._index_of(self.cursor))
        self.top = self._line_at(self._index_of(self.top))
        self._scroll_to_cursor()

    def open_fold(self, line: int) -> bool:
        fold = self._closed_fold_at(line)
        if fold is None:
            return False
        self._folds.remove(fold)
        self._rebuild_display()
        self.dirty = True
        return True

    def toggle_fold_at_cursor(self) -> bool:
        """Open the fold under the cursor or close an indentation fold there."""
        if self.open_fold(self.cursor):
            return True
        block = indent_fold_range(self.lines, self.cursor)
        if block is None:
            return False
        self.close_fold(*block)
        return True

    @property
    def folds(self) -> list[Fold]:
        return list(self._folds)

    def fold_start_of(self, line: int) -> int | None:
        fold = self._closed_fold_at(line)
        return fold.start if fold is not None else None

    def fold_end_of(self, line: int) -> int | None:
        fold = self._closed_fold_at(line)
        return fold.end if fold is not None else None

    # Positions.

    def current_line(self) -> int:
        return self.cursor

    def last_line(self) -> int:
        return len(self.lines)

    def window_height(self) -> int:
        return self.height

    def current_screen_row(self) -> int:
        return self._index_of(self.cursor) - self._index_of(self.top) + 1

    def bottom_line(self) -> int:
        return self._line_at(self._index_of(self.top) + self.height - 1)

    # Motion primitives.

    def move_cursor_relative(self, delta_lines: int) -> None:
        self.cursor = self._line_at(self._index_of(self.cursor) + delta_lines)
        self._scroll_to_cursor()

    def move_viewport_relative(self, delta_lines: int) -> None:
        top_index = self._index_of(self.top) + delta_lines
        top_index = max(0, min(top_index, self.display_line_count - 1))
        self.top = self._line_at(top_index)
        cursor_index = self._index_of(self.cursor)
        if cursor_index < top_index:
            self.cursor = self._line_at(top_index)
        elif cursor_index >= top_index + self.height:
            self.cursor = self._line_at(top_index + self.height - 1)
        self.dirty = True

    def scroll_half_page(self, direction: int) -> None:
        amount = max(1, self.scroll_amount)
        top_index = self._index_of(self.top)
        cursor_index = self._index_of(self.cursor)
        if direction > 0:
            max_top = max(top_index, self.display_line_count - self.height)
            top_index = min(top_index + amount, max_top)
            cursor_index += amount
        else:
            top_index = max(0, top_index - amount)
            cursor_index -= amount
        self.top = self._line_at(top_index)
        self.cursor = self._line_at(cursor_index)
        self._scroll_to_cursor()

    def scroll_amount_lines(self) -> int:
        return self.scroll_amount

    def set_scroll_amount(self, lines: int) -> None:
        self.scroll_amount = max(1, int(lines))

    def scroll_page(self, pages: int) -> None:
        top_index = self._index_of(self.top) + pages * self.height
        top_index = max(0, min(top_index, self.display_line_count - 1))
        self.top = self._line_at(top_index)
        if pages > 0:
            self.cursor = self.top
        else:
            self.cursor = self._line_at(min(top_index + self.height, self.display_line_count) - 1)
        self._scroll_to_cursor()

    def jump_to_line(self, line: int, linewise: bool = False) -> None:
        line = max(1, min(line, self.last_line()))
        self.cursor = self._line_at(self._index_of(line))
        self.last_jump_linewise = linewise
        self._scroll_to_cursor()

    def move_to_first_non_blank(self) -> None:
        text = self.lines[self.cursor - 1]
        self.column = len(text) - len(text.lstrip())

    def current_location(self) -> LineLocation:
        return LineLocation(self.cursor, self.column)

    def record_jump(self) -> None:
        self.history.record(self.current_location())

    # Host services.

    def ring_alert(self) -> None:
        self.alerts += 1
        logger.debug("alert at line %d", self.cursor)
        if self.on_alert is not None:
            self.on_alert()

    def request_redraw(self) -> None:
        self.dirty = True

    def schedule_periodic(self, interval_ms: int, callback: Callable[[], None]) -> int:
        return self.scheduler.schedule_periodic(interval_ms, callback)

    def cancel_periodic(self, handle: int) -> None:
        self.scheduler.cancel_periodic(handle)

    def yield_for(self, seconds: float) -> None:
        self.scheduler.wait(seconds)
        if self.on_yield is not None:
            self.on_yield()
