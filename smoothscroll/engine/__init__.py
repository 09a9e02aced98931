"""Line-quantized motion animation engine.

``SmoothScroller`` is the entry point; the other modules are its parts.
"""

from .animator import SmoothScroller
from .host import HostSurface
from .reconcile import MergeResult, merge
from .settings import EngineSettings, fixed_settings
from .state import AnimationState, MotionMode, MoveRequest
from .stepper import DOWN, UP, Stepper
from .velocity import velocity

__all__ = [
    "AnimationState",
    "DOWN",
    "EngineSettings",
    "HostSurface",
    "MergeResult",
    "MotionMode",
    "MoveRequest",
    "SmoothScroller",
    "Stepper",
    "UP",
    "fixed_settings",
    "merge",
    "velocity",
]
