"""Velocity curve used to pace animated line motion.

Speed grows with the distance still owed and shrinks as the target nears,
so long jumps start fast and every motion eases into its final line.
"""

from __future__ import annotations


def velocity(
    target_displacement: int,
    subline_carry: float,
    *,
    constant_factor: float,
    linear_factor: float,
    exponent: float,
) -> float:
    """Return signed speed in lines per second for the remaining displacement.

    ``constant_factor + linear_factor * |target - carry| ** exponent``, signed
    like ``target_displacement``.
    """
    distance = abs(target_displacement - subline_carry)
    absolute_speed = constant_factor + linear_factor * distance**exponent
    if target_displacement < 0:
        return -absolute_speed
    return absolute_speed
