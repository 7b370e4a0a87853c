"""Gauge configuration model"""

from dataclasses import dataclass, field
from typing import Any, Callable

from gauge_engine.utils.numbers import round_half_up


@dataclass(frozen=True)
class GaugeConfig:
    """
    Immutable gauge configuration.

    Angles are in degrees; 0° lies on the positive X axis and angles grow
    clockwise (screen space, Y pointing down). The dial sweeps clockwise
    from start_angle to end_angle.

    Attributes:
        min_value: Lower bound of the value domain (may be negative)
        max_value: Upper bound of the value domain (must exceed min_value)
        start_angle: Angle where the dial starts
        end_angle: Angle where the dial ends
        radius: Arc radius inside the 100x100 viewport
        timing_ms: Animation duration in milliseconds (0 = instant)
        easing_power: Easing curve power (1 = linear, 4 = smooth in/out)
        animation_enabled: Animate between values instead of jumping
        show_label: Presentation hint, host draws label_value when True
        label_transform: Maps the live value to the displayed label
    """
    min_value: float = 0
    max_value: float = 100
    start_angle: float = 135
    end_angle: float = 45
    radius: float = 40
    timing_ms: float = 1000
    easing_power: float = 4
    animation_enabled: bool = True
    show_label: bool = False
    label_transform: Callable[[float], Any] = field(default=round_half_up, compare=False)

    @property
    def duration_seconds(self) -> float:
        return self.timing_ms / 1000

    @property
    def is_degenerate(self) -> bool:
        """True when the value domain is empty and no value arc can be drawn."""
        return self.max_value <= self.min_value

    def dial_key(self) -> tuple:
        """Inputs the dial path depends on."""
        return (self.radius, self.start_angle, self.end_angle)

    def range_key(self) -> tuple:
        """Inputs the normalizer depends on."""
        return (self.min_value, self.max_value)
