"""
Path Builder

Builds SVG arc path data ("d" attribute) inside a normalized 100x100
viewport centered on (50, 50).
"""

from typing import NamedTuple

from gauge_engine.geometry.coordinate_mapper import Point, polar_to_cartesian
from gauge_engine.utils.numbers import format_number

VIEWPORT_SIZE = 100
CENTER_X = 50
CENTER_Y = 50

# Arcs are always drawn clockwise
SWEEP_FLAG = 1


class ArcEndpoints(NamedTuple):
    start: Point
    end: Point


def arc_endpoints(radius: float, start_angle: float, end_angle: float) -> ArcEndpoints:
    """Start and end points of an arc around the viewport center."""
    return ArcEndpoints(
        start=polar_to_cartesian(CENTER_X, CENTER_Y, radius, start_angle),
        end=polar_to_cartesian(CENTER_X, CENTER_Y, radius, end_angle),
    )


def large_arc_flag(angle: float) -> int:
    """
    Select which of the two arcs joining the endpoints is drawn.

    0 for the ≤180° arc, 1 for the >180° one. Picking the wrong flag draws the
    complementary arc between the very same endpoints.
    """
    return 0 if abs(angle) <= 180 else 1


def build_arc_path(radius: float, start_angle: float, end_angle: float, large_arc: int = 1) -> str:
    """
    Build a move-to + single circular arc path.

    Format: "M {sx} {sy} A {r} {r} 0 {large_arc} 1 {ex} {ey}"

    Example:
        >>> build_arc_path(40, 135, 45, 1)
        'M 21.716 78.284 A 40 40 0 1 1 78.284 78.284'
    """
    start, end = arc_endpoints(radius, start_angle, end_angle)
    parts = [
        'M', start.x, start.y,
        'A', radius, radius, 0, large_arc, SWEEP_FLAG, end.x, end.y,
    ]
    return ' '.join(p if isinstance(p, str) else format_number(p) for p in parts)
