"""Tests for half-window and full-window scroll commands."""

from __future__ import annotations

import unittest

from smoothscroll.commands import ScrollCommands
from smoothscroll.engine.animator import SmoothScroller
from smoothscroll.engine.settings import EngineSettings, fixed_settings
from smoothscroll.engine.state import MotionMode
from smoothscroll.view.text_view import TextView


def _make_commands(line_count: int = 100, height: int = 20, **settings: object) -> ScrollCommands:
    view = TextView([f"line {number}" for number in range(1, line_count + 1)], height=height)
    return ScrollCommands(SmoothScroller(view, fixed_settings(EngineSettings(**settings))))


def _finish(commands: ScrollCommands) -> None:
    scroller = commands.scroller
    for _ in range(1000):
        if not scroller.is_moving:
            return
        scroller.on_tick()
    raise AssertionError("animation did not finish")


class HalfPageTests(unittest.TestCase):
    def test_downwards_requests_scroll_amount(self) -> None:
        commands = _make_commands()

        commands.downwards()

        state = commands.scroller.state
        self.assertEqual(state.target_displacement, 10)
        self.assertIs(state.mode, MotionMode.SCROLL)
        self.assertFalse(state.forward_scroll_compensation)

    def test_count_replaces_scroll_amount(self) -> None:
        commands = _make_commands()

        commands.downwards(4)
        _finish(commands)
        commands.downwards()

        self.assertEqual(commands.host.scroll_amount_lines(), 4)
        self.assertEqual(commands.scroller.state.target_displacement, 4)

    def test_upwards_lands_on_requested_line(self) -> None:
        commands = _make_commands()
        commands.host.jump_to_line(60)

        commands.upwards()
        _finish(commands)

        self.assertEqual(commands.host.current_line(), 50)

    def test_disabled_scrolls_instantly(self) -> None:
        commands = _make_commands(enabled=False)

        commands.downwards()

        self.assertEqual(commands.host.current_line(), 11)
        self.assertFalse(commands.scroller.is_moving)


class FullPageTests(unittest.TestCase):
    def test_forwards_sets_compensation(self) -> None:
        commands = _make_commands()

        commands.forwards(2)

        state = commands.scroller.state
        self.assertEqual(state.target_displacement, 40)
        self.assertTrue(state.forward_scroll_compensation)

    def test_backwards_has_no_compensation(self) -> None:
        commands = _make_commands()
        commands.host.jump_to_line(80)

        commands.backwards()

        state = commands.scroller.state
        self.assertEqual(state.target_displacement, -20)
        self.assertFalse(state.forward_scroll_compensation)

    def test_forwards_past_end_reveals_last_line_at_top(self) -> None:
        commands = _make_commands(line_count=30, height=10)

        commands.forwards(3)
        _finish(commands)

        self.assertEqual(commands.host.current_line(), 30)
        self.assertEqual(commands.host.top, 30)

    def test_plain_scroll_past_end_keeps_window_full(self) -> None:
        commands = _make_commands(line_count=30, height=10)

        commands.downwards(30)
        _finish(commands)

        self.assertEqual(commands.host.current_line(), 30)
        self.assertEqual(commands.host.top, 21)

    def test_half_page_merged_into_forward_page_drops_compensation(self) -> None:
        commands = _make_commands()
        commands.host.jump_to_line(90)
        commands.host.move_viewport_relative(10)
        self.assertEqual((commands.host.top, commands.host.current_line()), (81, 90))

        commands.forwards()
        commands.downwards()
        self.assertFalse(commands.scroller.state.forward_scroll_compensation)
        _finish(commands)

        self.assertEqual(commands.host.current_line(), 100)
        self.assertEqual(commands.host.top, 81)

    def test_disabled_pages_instantly(self) -> None:
        commands = _make_commands(enabled=False)

        commands.forwards()
        self.assertEqual(commands.host.top, 21)
        commands.backwards()
        self.assertEqual(commands.host.top, 1)


class ScrollLinesTests(unittest.TestCase):
    def test_repeated_wheel_scrolls_compound(self) -> None:
        commands = _make_commands()

        commands.scroll_lines(3)
        commands.scroll_lines(3)
        _finish(commands)

        self.assertEqual(commands.host.current_line(), 7)


if __name__ == "__main__":
    unittest.main()
