"""
gauge_engine - geometry and animation core for SVG dial gauges

Maps a value in [min, max] onto an arc of a circular dial, builds the SVG
path data for it and animates between values frame by frame.
"""

from gauge_engine.engine import (
    AnimationHandle,
    AsyncioFrameScheduler,
    ImmediateFrameScheduler,
    ManualFrameScheduler,
    ease,
    run_animation,
)
from gauge_engine.geometry import (
    angle_from_percentage,
    arc_endpoints,
    build_arc_path,
    make_normalizer,
    percentage_from_value,
    polar_to_cartesian,
)
from gauge_engine.models import DerivedOutputs, GaugeConfig, GaugeEventType
from gauge_engine.services import EventBus, GaugeState

__version__ = "1.0.0"

__all__ = [
    'AnimationHandle',
    'AsyncioFrameScheduler',
    'DerivedOutputs',
    'EventBus',
    'GaugeConfig',
    'GaugeEventType',
    'GaugeState',
    'ImmediateFrameScheduler',
    'ManualFrameScheduler',
    'angle_from_percentage',
    'arc_endpoints',
    'build_arc_path',
    'ease',
    'make_normalizer',
    'percentage_from_value',
    'polar_to_cartesian',
    'run_animation',
]
