"""Named cursor jumps and the planner that animates them."""

from .planner import JumpPlanner, count_screen_lines
from .specs import JUMP_SPECS, EndJump, JumpSpec, LineJump, RelativeJump, lookup_jump

__all__ = [
    "EndJump",
    "JUMP_SPECS",
    "JumpPlanner",
    "JumpSpec",
    "LineJump",
    "RelativeJump",
    "count_screen_lines",
    "lookup_jump",
]
