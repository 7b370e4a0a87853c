"""
Gauge services
"""

from .event_bus import EventBus
from .gauge_state import GaugeState
from .middleware import log_middleware

__all__ = ['EventBus', 'GaugeState', 'log_middleware']
