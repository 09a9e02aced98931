"""Tests for the velocity curve.

Checks the speed formula, its sign, and the effect of carried sub-line progress.
"""

from __future__ import annotations

import unittest

from smoothscroll.engine.velocity import velocity

DEFAULT_FACTORS = {"constant_factor": 10.0, "linear_factor": 10.0, "exponent": 0.9}


class VelocityTests(unittest.TestCase):
    def test_speed_follows_power_curve(self) -> None:
        speed = velocity(10, 0.0, **DEFAULT_FACTORS)
        self.assertAlmostEqual(speed, 10.0 + 10.0 * 10.0**0.9)

    def test_speed_is_negative_for_upward_motion(self) -> None:
        down = velocity(25, 0.0, **DEFAULT_FACTORS)
        up = velocity(-25, 0.0, **DEFAULT_FACTORS)
        self.assertAlmostEqual(up, -down)

    def test_carry_reduces_remaining_distance(self) -> None:
        without_carry = velocity(5, 0.0, **DEFAULT_FACTORS)
        with_carry = velocity(5, 0.5, **DEFAULT_FACTORS)
        self.assertAlmostEqual(with_carry, 10.0 + 10.0 * 4.5**0.9)
        self.assertLess(with_carry, without_carry)

    def test_zero_linear_factor_gives_constant_speed(self) -> None:
        self.assertEqual(velocity(100, 0.0, constant_factor=7.0, linear_factor=0.0, exponent=0.9), 7.0)
        self.assertEqual(velocity(-3, -0.25, constant_factor=7.0, linear_factor=0.0, exponent=0.9), -7.0)


if __name__ == "__main__":
    unittest.main()
