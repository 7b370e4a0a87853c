"""
Animation engine: easing, frame scheduling and the frame-driven interpolator
"""

from .easing import EASINGS, Easing, ease, ease_linear
from .frame_scheduler import (
    AsyncioFrameScheduler,
    FrameScheduler,
    ImmediateFrameScheduler,
    ManualFrameScheduler,
)
from .animation_driver import AnimationHandle, run_animation

__all__ = [
    'AnimationHandle',
    'AsyncioFrameScheduler',
    'EASINGS',
    'Easing',
    'FrameScheduler',
    'ImmediateFrameScheduler',
    'ManualFrameScheduler',
    'ease',
    'ease_linear',
    'run_animation',
]
