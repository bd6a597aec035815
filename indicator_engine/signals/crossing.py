"""Crossing detection shared by every signal-bearing indicator.

An operand is either a series (its last two points are compared) or a
constant line. The result is ``None`` when either series has fewer than
two defined trailing points: "no verdict yet" is not the same as "no
crossing".
"""

from collections.abc import Sequence
from decimal import Decimal

from indicator_engine.models.signal import Signal

Operand = Sequence[float | None] | float | int | Decimal


def _last_two(operand: Operand) -> tuple[float, float] | None:
    if isinstance(operand, (int, float, Decimal)):
        return float(operand), float(operand)
    if len(operand) < 2:
        return None
    previous, current = operand[-2], operand[-1]
    if previous is None or current is None:
        return None
    return float(previous), float(current)


def cross_up(a: Operand, b: Operand) -> bool | None:
    """True iff ``a[t-1] <= b[t-1]`` and ``a[t] > b[t]``; None without a verdict."""
    a_points = _last_two(a)
    b_points = _last_two(b)
    if a_points is None or b_points is None:
        return None
    return a_points[0] <= b_points[0] and a_points[1] > b_points[1]


def cross_down(a: Operand, b: Operand) -> bool | None:
    """True iff ``a[t-1] >= b[t-1]`` and ``a[t] < b[t]``; None without a verdict."""
    a_points = _last_two(a)
    b_points = _last_two(b)
    if a_points is None or b_points is None:
        return None
    return a_points[0] >= b_points[0] and a_points[1] < b_points[1]


def crossing_signal(a: Operand, b: Operand) -> Signal | None:
    """BUY when ``a`` crosses above ``b``, SELL when below, NONE otherwise."""
    up = cross_up(a, b)
    if up is None:
        return None
    if up:
        return Signal.BUY
    if cross_down(a, b):
        return Signal.SELL
    return Signal.NONE
