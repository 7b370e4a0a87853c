"""
Enums for the gauge engine
"""

from enum import Enum, auto


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    GEOMETRY = auto()    # Angle/coordinate/path math
    ANIMATION = auto()   # Animation sessions, frame loop
    STATE = auto()       # Gauge value changes, derived outputs
    EVENT = auto()       # Event bus events and handling
    RENDER = auto()      # SVG snapshot rendering
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category


class GaugeEventType(Enum):
    """Events published by GaugeState"""
    VALUE_CHANGED = auto()        # New target value accepted
    OUTPUTS_UPDATED = auto()      # Current value republished, paths recomputed
    CONFIG_CHANGED = auto()       # GaugeConfig replaced
    ANIMATION_STARTED = auto()
    ANIMATION_COMPLETED = auto()
    ANIMATION_CANCELLED = auto()  # Superseded by a newer value


class EventSource(Enum):
    """Event source identifiers"""
    GAUGE_STATE = auto()
    ANIMATION_DRIVER = auto()
    HOST = auto()                 # Presentation layer / caller


class AnimationStatus(Enum):
    """Lifecycle of a single animation session"""
    PENDING = auto()     # Created, first frame not yet run
    RUNNING = auto()
    COMPLETED = auto()   # progress reached 1.0
    CANCELLED = auto()   # Superseded or cancelled explicitly
