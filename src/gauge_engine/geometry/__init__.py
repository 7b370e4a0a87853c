"""
Gauge geometry: coordinate mapping, arc paths and range clamping
"""

from .coordinate_mapper import (
    Point,
    angle_from_percentage,
    percentage_from_value,
    polar_to_cartesian,
    span_angle,
)
from .path_builder import ArcEndpoints, arc_endpoints, build_arc_path, large_arc_flag
from .range_normalizer import Normalizer, make_normalizer

__all__ = [
    'ArcEndpoints',
    'Normalizer',
    'Point',
    'angle_from_percentage',
    'arc_endpoints',
    'build_arc_path',
    'large_arc_flag',
    'make_normalizer',
    'percentage_from_value',
    'polar_to_cartesian',
    'span_angle',
]
