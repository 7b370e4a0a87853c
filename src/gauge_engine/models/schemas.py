"""
Configuration schemas - Pydantic models validating gauge YAML/dict input
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class GaugeConfigSchema(BaseModel):
    """Gauge section of a configuration file"""
    min_value: float = Field(0, description="Lower bound of the value domain (may be negative)")
    max_value: float = Field(100, description="Upper bound of the value domain")
    start_angle: float = Field(135, description="Dial start angle in degrees (0 = +X axis, clockwise)")
    end_angle: float = Field(45, description="Dial end angle in degrees")
    radius: float = Field(40, gt=0, description="Arc radius in the 100x100 viewport")
    timing_ms: float = Field(1000, ge=0, description="Animation duration in milliseconds")
    easing_power: float = Field(4, ge=1, description="Easing power, 1 = linear")
    animation_enabled: bool = Field(True, description="Animate between values")
    show_label: bool = Field(False, description="Host should draw the label")
    label_decimals: Optional[int] = Field(
        None,
        ge=0,
        le=10,
        description="Label precision; null rounds to the nearest integer"
    )

    @model_validator(mode="after")
    def validate_ranges(self):
        if self.max_value < self.min_value:
            raise ValueError("max_value must not be lower than min_value")
        if (self.end_angle - self.start_angle) % 360 == 0:
            raise ValueError("start_angle and end_angle must span a non-zero arc")
        return self


class SchedulerSchema(BaseModel):
    """Frame scheduler section"""
    fps: int = Field(60, ge=1, le=240, description="Frame rate of the asyncio scheduler")


class GaugeFileSchema(BaseModel):
    """Whole configuration file"""
    gauge: GaugeConfigSchema = Field(default_factory=GaugeConfigSchema)
    scheduler: SchedulerSchema = Field(default_factory=SchedulerSchema)
