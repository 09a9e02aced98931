"""Animated cursor jumps that block their caller until arrival.

A jump resolves its target line, converts the distance into screen lines
(closed folds count once), hands that count to the scroller as a cursor-jump
request, and then yields to the host until the cursor lands.
"""

from __future__ import annotations

import logging

from ..engine.animator import SmoothScroller
from ..engine.host import HostSurface
from ..engine.state import MotionMode, MoveRequest
from .specs import JumpSpec, lookup_jump

logger = logging.getLogger(__name__)


def count_screen_lines(host: HostSurface, from_line: int, to_line: int) -> int:
    """Return the signed number of screen lines between two buffer lines.

    A closed fold contributes exactly one screen line whichever direction it
    is crossed in.
    """
    count = 0
    line = from_line
    while line < to_line:
        fold_end = host.fold_end_of(line)
        if fold_end is not None:
            line = fold_end
        line += 1
        count += 1
    while line > to_line:
        line -= 1
        fold_start = host.fold_start_of(line)
        if fold_start is not None:
            line = fold_start
        count -= 1
    return count


def _fold_adjusted(host: HostSurface, line: int) -> int:
    fold_start = host.fold_start_of(line)
    return fold_start if fold_start is not None else line


class JumpPlanner:
    """Turn named jumps into animated cursor motion for one view."""

    def __init__(self, scroller: SmoothScroller) -> None:
        self.scroller = scroller
        self.host = scroller.host

    def jump(self, name: str, count: int | None = None, *, operator_pending: bool = False) -> bool:
        """Run the jump called ``name``; return ``False`` for unknown names."""
        spec = lookup_jump(name)
        if spec is None:
            logger.debug("not a recognized jump: %r", name)
            return False
        target = spec.target_line(self.host, count)
        if operator_pending or not self.scroller.settings().enabled:
            self._jump_immediately(spec, target, linewise=operator_pending)
            return True
        self.animate_to_line(
            target,
            snap_to_first_non_blank=spec.snap_to_first_non_blank,
            record_jump=spec.record_jump,
        )
        return True

    def _jump_immediately(self, spec: JumpSpec, target: int, *, linewise: bool) -> None:
        if spec.record_jump:
            self.host.record_jump()
        self.host.jump_to_line(max(1, min(target, self.host.last_line())), linewise=linewise)
        if spec.snap_to_first_non_blank:
            self.host.move_to_first_non_blank()

    def animate_to_line(
        self,
        target: int,
        *,
        snap_to_first_non_blank: bool = False,
        record_jump: bool = False,
    ) -> bool:
        """Animate the cursor to ``target`` and return once it has arrived.

        Returns ``False`` without moving when the cursor is already there.
        The wait also ends if the motion stops early (boundary or ``stop()``).
        """
        host = self.host
        target = _fold_adjusted(host, max(1, min(target, host.last_line())))
        current = _fold_adjusted(host, host.current_line())
        if target == current:
            return False
        if record_jump:
            host.record_jump()
        lines = count_screen_lines(host, current, target)
        logger.debug("jump %d -> %d over %d screen lines", current, target, lines)
        self.scroller.submit(MoveRequest(lines, MotionMode.CURSOR_JUMP))
        while host.current_line() != target and self.scroller.is_moving:
            host.yield_for(self.scroller.settings().tick_seconds)
        if snap_to_first_non_blank:
            host.move_to_first_non_blank()
        return True
