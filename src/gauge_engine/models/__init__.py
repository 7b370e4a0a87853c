"""
Gauge domain models
"""

from .enums import AnimationStatus, EventSource, GaugeEventType, LogCategory, LogLevel
from .gauge_config import GaugeConfig
from .animation_session import AnimationSession, FRAMES_PER_SECOND
from .derived_outputs import DerivedOutputs
from .events import (
    AnimationEvent,
    ConfigChangedEvent,
    Event,
    OutputsUpdatedEvent,
    ValueChangedEvent,
)

__all__ = [
    'AnimationEvent',
    'AnimationSession',
    'AnimationStatus',
    'ConfigChangedEvent',
    'DerivedOutputs',
    'Event',
    'EventSource',
    'FRAMES_PER_SECOND',
    'GaugeConfig',
    'GaugeEventType',
    'LogCategory',
    'LogLevel',
    'OutputsUpdatedEvent',
    'ValueChangedEvent',
]
