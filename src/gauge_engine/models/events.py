"""
Gauge events

Dataclass events published by GaugeState through the EventBus.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from gauge_engine.models.derived_outputs import DerivedOutputs
from gauge_engine.models.enums import EventSource, GaugeEventType
from gauge_engine.models.gauge_config import GaugeConfig


@dataclass(init=False)
class Event:
    """
    Base event class.

    - type: GaugeEventType
    - source: EventSource
    - timestamp: auto
    """

    type: GaugeEventType
    source: Optional[EventSource]
    timestamp: float = field(default_factory=time.time)

    def __init__(self, *, type: GaugeEventType, source: Optional[EventSource] = EventSource.GAUGE_STATE):
        self.type = type
        self.source = source
        self.timestamp = time.time()

    def to_data(self) -> Dict[str, Any]:
        """Event payload without metadata."""
        data = {}
        for k, v in self.__dict__.items():
            if k in ("type", "source", "timestamp"):
                continue
            data[k] = v
        return data


class ValueChangedEvent(Event):
    """A new target value was accepted"""

    def __init__(self, previous: Optional[float], target: float, generation: int):
        super().__init__(type=GaugeEventType.VALUE_CHANGED)
        self.previous = previous
        self.target = target
        self.generation = generation


class OutputsUpdatedEvent(Event):
    """Current value republished and derived outputs recomputed"""

    def __init__(self, current_value: Optional[float], outputs: DerivedOutputs, frame: Optional[int] = None):
        super().__init__(type=GaugeEventType.OUTPUTS_UPDATED)
        self.current_value = current_value
        self.outputs = outputs
        self.frame = frame


class ConfigChangedEvent(Event):
    def __init__(self, previous: GaugeConfig, config: GaugeConfig):
        super().__init__(type=GaugeEventType.CONFIG_CHANGED)
        self.previous = previous
        self.config = config


class AnimationEvent(Event):
    """Animation session lifecycle (started / completed / cancelled)"""

    def __init__(self, type: GaugeEventType, start_value: float, end_value: float, generation: int, frames: int = 0):
        super().__init__(type=type, source=EventSource.ANIMATION_DRIVER)
        self.start_value = start_value
        self.end_value = end_value
        self.generation = generation
        self.frames = frames
