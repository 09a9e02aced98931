"""Tick-driven animation state machine for one view.

The host owns the periodic trigger; this module only asks for one while
moving and cancels it when motion ends. Each tick converts velocity into a
fractional step, materializes its whole-line part, and carries the rest.
"""

from __future__ import annotations

import logging

from .host import HostSurface
from .reconcile import merge
from .settings import EngineSettings, SettingsProvider, fixed_settings
from .state import AnimationState, MoveRequest
from .stepper import DOWN, UP, Stepper
from .velocity import velocity

logger = logging.getLogger(__name__)


class SmoothScroller:
    """Own the animation state of one view and drive it from host ticks."""

    def __init__(
        self,
        host: HostSurface,
        settings: SettingsProvider | None = None,
    ) -> None:
        self.host = host
        self.state = AnimationState()
        self.stepper = Stepper(host, self.state)
        self._settings = settings if settings is not None else fixed_settings(EngineSettings())
        self._timer: int | None = None

    def settings(self) -> EngineSettings:
        """Return the engine settings currently in effect."""
        return self._settings()

    @property
    def is_moving(self) -> bool:
        """Whether an animation is in flight."""
        return self.state.is_active

    def submit(self, request: MoveRequest) -> None:
        """Merge ``request`` into the current motion and start ticking if idle."""
        if request.lines == 0:
            return
        result = merge(
            self.state.target_displacement,
            request.lines,
            request.mode,
            self.settings().break_on_reverse,
        )
        if result.stop_first:
            logger.debug(
                "restarting motion: %d owed, %d requested (%s)",
                self.state.target_displacement,
                request.lines,
                request.mode.value,
            )
            self.stop()
        self.state.mode = request.mode
        self.state.forward_scroll_compensation = request.forward_compensation
        self._retarget(result.target_displacement)

    def _retarget(self, target_displacement: int) -> None:
        self.state.target_displacement = target_displacement
        if target_displacement == 0:
            self.stop()
            return
        if self.state.is_active:
            return
        direction = DOWN if target_displacement > 0 else UP
        if self.stepper.is_blocked(direction):
            self.host.ring_alert()
        interval_ms = self.settings().update_interval_ms
        self._timer = self.host.schedule_periodic(interval_ms, self.on_tick)
        self.state.is_active = True
        logger.debug("motion started: %d lines every %d ms", target_displacement, interval_ms)

    def on_tick(self) -> None:
        """Advance the animation by one timer interval."""
        state = self.state
        if state.target_displacement == 0:
            self.stop()
            return
        settings = self.settings()
        speed = velocity(
            state.target_displacement,
            state.subline_carry,
            constant_factor=settings.speed_constant_factor,
            linear_factor=settings.speed_linear_factor,
            exponent=settings.speed_exponentiation_factor,
        )
        subline_step = state.subline_carry + settings.tick_seconds * speed
        step_size = int(subline_step)
        if abs(step_size) > abs(state.target_displacement):
            step_size = state.target_displacement
        if self.stepper.step_many(step_size):
            self.stop()
            return
        state.target_displacement -= step_size
        state.subline_carry = subline_step - step_size
        if step_size > 0:
            self.host.request_redraw()
        if state.target_displacement == 0:
            self.stop()

    def stop(self) -> None:
        """Cancel any motion immediately and return to idle."""
        if self._timer is not None:
            self.host.cancel_periodic(self._timer)
            self._timer = None
        if self.state.is_active:
            logger.debug("motion stopped with %d lines owed", self.state.target_displacement)
        self.state.reset()
