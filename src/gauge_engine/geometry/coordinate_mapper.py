"""
Coordinate Mapper

Value ↔ percentage ↔ angle conversions and polar → Cartesian projection.

Angle 0° lies on the positive X axis and angles increase clockwise, since the
target space has its Y axis pointing down.
"""

import math
from typing import NamedTuple

from gauge_engine.utils.numbers import round_to

# Decimal places kept for projected coordinates
COORD_PRECISION = 3


class Point(NamedTuple):
    x: float
    y: float


def angle_from_percentage(percentage: float, span_angle: float) -> float:
    """
    Translate a percentage of the dial into an angle.

    e.g. with a 180° span, 50% is 90°. No bounds checking.
    """
    return percentage * span_angle / 100


def percentage_from_value(value: float, min_value: float, max_value: float) -> float:
    """
    Position of value inside [min_value, max_value] as a percentage.

    Raises ZeroDivisionError when min_value == max_value; callers check
    GaugeConfig.is_degenerate first.
    """
    return 100 * (value - min_value) / (max_value - min_value)


def span_angle(start_angle: float, end_angle: float) -> float:
    """Clockwise sweep from start_angle to end_angle, in [0, 360)."""
    return (end_angle - start_angle) % 360


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Point:
    """
    Project a point on a circle.

    Args:
        cx: Center X
        cy: Center Y
        radius: Circle radius
        angle: Angle in degrees

    Returns:
        Point with both coordinates rounded to 3 decimal places
    """
    rad = math.radians(angle)
    return Point(
        x=round_to(cx + radius * math.cos(rad), COORD_PRECISION),
        y=round_to(cy + radius * math.sin(rad), COORD_PRECISION),
    )
