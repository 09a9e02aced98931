"""Merge a new move request into an in-flight animation."""

from __future__ import annotations

from dataclasses import dataclass

from .state import MotionMode


@dataclass(frozen=True)
class MergeResult:
    """Displacement to animate next, and whether to stop the current motion first."""

    target_displacement: int
    stop_first: bool


def merge(
    existing_target: int,
    new_lines: int,
    mode: MotionMode,
    break_on_reverse: bool,
) -> MergeResult:
    """Combine ``new_lines`` with the displacement still owed.

    Reversing direction with ``break_on_reverse`` discards the old motion.
    Cursor jumps always restart, because their line count was computed from
    the cursor's position at request time. Scroll requests accumulate.
    """
    if new_lines == 0:
        return MergeResult(existing_target, stop_first=False)
    if break_on_reverse and existing_target * new_lines < 0:
        return MergeResult(new_lines, stop_first=True)
    if mode is MotionMode.CURSOR_JUMP:
        return MergeResult(new_lines, stop_first=True)
    return MergeResult(existing_target + new_lines, stop_first=False)
