"""
Serialization utilities - plain-dict views of gauge models for hosts

Provides conversion from:
- GaugeConfig / DerivedOutputs → dicts
- GaugeState → JSON-ready snapshot
"""

from typing import Any, Dict

from gauge_engine.models.derived_outputs import DerivedOutputs
from gauge_engine.models.gauge_config import GaugeConfig


class Serializer:
    """Model → dict conversion"""

    @staticmethod
    def config_to_dict(config: GaugeConfig) -> Dict[str, Any]:
        """GaugeConfig without the (non-serializable) label transform"""
        return {
            "min_value": config.min_value,
            "max_value": config.max_value,
            "start_angle": config.start_angle,
            "end_angle": config.end_angle,
            "radius": config.radius,
            "timing_ms": config.timing_ms,
            "easing_power": config.easing_power,
            "animation_enabled": config.animation_enabled,
            "show_label": config.show_label,
        }

    @staticmethod
    def outputs_to_dict(outputs: DerivedOutputs) -> Dict[str, Any]:
        return {
            "dial_arc_path": outputs.dial_arc_path,
            "value_arc_path": outputs.value_arc_path,
            "label_value": outputs.label_value,
        }

    @staticmethod
    def gauge_to_dict(gauge) -> Dict[str, Any]:
        """Target, live value, configuration and outputs of a GaugeState"""
        return {
            "value": gauge.value,
            "current_value": gauge.current_value,
            "generation": gauge.generation,
            "config": Serializer.config_to_dict(gauge.config),
            "outputs": Serializer.outputs_to_dict(gauge.outputs),
        }
