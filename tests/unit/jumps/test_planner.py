"""Tests for animated named jumps and screen-line counting across folds."""

from __future__ import annotations

import unittest

from smoothscroll.engine.animator import SmoothScroller
from smoothscroll.engine.settings import EngineSettings, fixed_settings
from smoothscroll.jumps.planner import JumpPlanner, count_screen_lines
from smoothscroll.jumps.specs import EndJump, LineJump, RelativeJump, lookup_jump
from smoothscroll.runtime.navigation import LineLocation
from smoothscroll.runtime.scheduler import TickScheduler
from smoothscroll.view.text_view import TextView


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


def _make_planner(
    lines: list[str] | None = None,
    **settings: object,
) -> tuple[JumpPlanner, TextView]:
    clock = _FakeClock()
    if lines is None:
        lines = [f"line {number}" for number in range(1, 101)]
    view = TextView(lines, height=20, scheduler=TickScheduler(clock=clock, sleep=clock.sleep))
    scroller = SmoothScroller(view, fixed_settings(EngineSettings(**settings)))
    return JumpPlanner(scroller), view


class CountScreenLinesTests(unittest.TestCase):
    def test_without_folds_counts_buffer_lines(self) -> None:
        _planner, view = _make_planner()
        self.assertEqual(count_screen_lines(view, 1, 100), 99)
        self.assertEqual(count_screen_lines(view, 100, 1), -99)
        self.assertEqual(count_screen_lines(view, 7, 7), 0)

    def test_closed_fold_counts_as_one_line(self) -> None:
        _planner, view = _make_planner()
        view.close_fold(40, 60)
        self.assertEqual(count_screen_lines(view, 1, 100), 99 - (60 - 40))
        self.assertEqual(count_screen_lines(view, 100, 1), -(99 - (60 - 40)))

    def test_fold_at_either_end_of_the_walk(self) -> None:
        _planner, view = _make_planner()
        view.close_fold(10, 19)
        self.assertEqual(count_screen_lines(view, 10, 25), 6)
        self.assertEqual(count_screen_lines(view, 25, 10), -6)
        self.assertEqual(count_screen_lines(view, 1, 10), 9)


class JumpSpecTests(unittest.TestCase):
    def test_registry_maps_names_to_variants(self) -> None:
        self.assertIsInstance(lookup_jump("gg"), LineJump)
        self.assertIsInstance(lookup_jump("G"), EndJump)
        self.assertIsInstance(lookup_jump("+"), RelativeJump)
        self.assertIsNone(lookup_jump("zz"))

    def test_target_resolution_uses_count_then_default(self) -> None:
        _planner, view = _make_planner()
        view.jump_to_line(30)
        self.assertEqual(LineJump().target_line(view, None), 1)
        self.assertEqual(LineJump().target_line(view, 12), 12)
        self.assertEqual(EndJump().target_line(view, None), 100)
        self.assertEqual(EndJump().target_line(view, 12), 12)
        self.assertEqual(RelativeJump(direction=-1).target_line(view, None), 29)
        self.assertEqual(RelativeJump(direction=1).target_line(view, 5), 35)


class JumpPlannerTests(unittest.TestCase):
    def test_go_to_first_line_blocks_until_arrival(self) -> None:
        planner, view = _make_planner()
        view.jump_to_line(50)

        self.assertTrue(planner.jump("gg"))

        self.assertEqual(view.current_line(), 1)
        self.assertFalse(planner.scroller.is_moving)
        self.assertEqual(view.history.back, [LineLocation(50, 0)])

    def test_go_to_end_crosses_closed_fold(self) -> None:
        planner, view = _make_planner()
        view.close_fold(40, 60)

        self.assertTrue(planner.jump("G"))

        self.assertEqual(view.current_line(), 100)

    def test_target_inside_fold_lands_on_fold_start(self) -> None:
        planner, view = _make_planner()
        view.close_fold(40, 60)

        planner.jump("G", 45)

        self.assertEqual(view.current_line(), 40)

    def test_target_is_clamped_to_last_line(self) -> None:
        planner, view = _make_planner()
        planner.jump("G", 500)
        self.assertEqual(view.current_line(), 100)

    def test_jump_to_current_line_is_a_no_op(self) -> None:
        planner, view = _make_planner()

        self.assertTrue(planner.jump("gg"))

        self.assertEqual(view.history.back, [])
        self.assertEqual(view.scheduler.pending, 0)

    def test_unknown_jump_is_rejected_without_changes(self) -> None:
        planner, view = _make_planner()
        view.jump_to_line(20)

        self.assertFalse(planner.jump("not-a-jump"))

        self.assertEqual(view.current_line(), 20)
        self.assertEqual(view.history.back, [])

    def test_relative_jump_does_not_record_history(self) -> None:
        planner, view = _make_planner()
        view.jump_to_line(10)

        planner.jump("+", 5)

        self.assertEqual(view.current_line(), 15)
        self.assertEqual(view.history.back, [])

    def test_arrival_snaps_to_first_non_blank(self) -> None:
        lines = ["top"] + ["    indented"] * 9
        planner, view = _make_planner(lines)

        planner.jump("G")

        self.assertEqual(view.current_line(), 10)
        self.assertEqual(view.column, 4)

    def test_disabled_animation_jumps_immediately(self) -> None:
        planner, view = _make_planner(enabled=False)
        view.jump_to_line(50)

        self.assertTrue(planner.jump("gg"))

        self.assertEqual(view.current_line(), 1)
        self.assertEqual(view.scheduler.pending, 0)
        self.assertEqual(view.history.back, [LineLocation(50, 0)])
        self.assertFalse(view.last_jump_linewise)

    def test_operator_pending_jump_is_linewise_and_instant(self) -> None:
        planner, view = _make_planner()
        view.jump_to_line(50)

        self.assertTrue(planner.jump("G", operator_pending=True))

        self.assertEqual(view.current_line(), 100)
        self.assertTrue(view.last_jump_linewise)
        self.assertFalse(planner.scroller.is_moving)

    def test_stopping_the_scroller_releases_a_blocked_jump(self) -> None:
        planner, view = _make_planner()
        view.jump_to_line(90)
        view.on_yield = planner.scroller.stop

        self.assertTrue(planner.animate_to_line(1))

        self.assertGreater(view.current_line(), 1)
        self.assertFalse(planner.scroller.is_moving)


if __name__ == "__main__":
    unittest.main()
