"""Mutable animation state and transient move requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MotionMode(Enum):
    """How a single-line step is applied to the view."""

    SCROLL = "scroll"
    CURSOR_JUMP = "cursor_jump"


@dataclass
class AnimationState:
    """Animation bookkeeping for one view.

    ``target_displacement`` counts whole lines still owed (positive is
    downwards). ``subline_carry`` holds fractional progress in ``(-1, 1)``
    that has not yet become a whole step.
    """

    target_displacement: int = 0
    subline_carry: float = 0.0
    is_active: bool = False
    mode: MotionMode = MotionMode.SCROLL
    forward_scroll_compensation: bool = False

    def reset(self) -> None:
        """Return to idle: no displacement, no carry, no compensation."""
        self.target_displacement = 0
        self.subline_carry = 0.0
        self.is_active = False
        self.forward_scroll_compensation = False


@dataclass(frozen=True)
class MoveRequest:
    """Signed line count to animate, tagged with its motion mode."""

    lines: int
    mode: MotionMode = MotionMode.SCROLL
    forward_compensation: bool = False
