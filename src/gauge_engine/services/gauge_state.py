"""
Gauge State

Owns the gauge configuration, the target value and the live (interpolated)
value, and derives the dial path, value path and label from them.

Single-writer rule: the live value is written either by the direct setter
(animation disabled / zero duration) or by the step callback of the newest
animation session. Every accepted set_value() bumps a generation counter;
steps captured under an older generation are dropped and the older session
is cancelled.
"""

import asyncio
from dataclasses import replace
from typing import Any, Optional

from gauge_engine.engine.animation_driver import AnimationHandle, run_animation
from gauge_engine.engine.easing import ease
from gauge_engine.engine.frame_scheduler import FrameScheduler, ImmediateFrameScheduler
from gauge_engine.geometry.coordinate_mapper import angle_from_percentage, percentage_from_value, span_angle
from gauge_engine.geometry.path_builder import build_arc_path, large_arc_flag
from gauge_engine.geometry.range_normalizer import make_normalizer
from gauge_engine.models.derived_outputs import DerivedOutputs
from gauge_engine.models.enums import GaugeEventType, LogCategory
from gauge_engine.models.events import (
    AnimationEvent,
    ConfigChangedEvent,
    Event,
    OutputsUpdatedEvent,
    ValueChangedEvent,
)
from gauge_engine.models.gauge_config import GaugeConfig
from gauge_engine.services.event_bus import EventBus
from gauge_engine.utils.logger import get_logger
from gauge_engine.utils.numbers import coerce_number

log = get_logger().for_category(LogCategory.STATE)


class GaugeState:
    """
    Gauge model driven by an external caller.

    Example:
        gauge = GaugeState(GaugeConfig(animation_enabled=False))
        gauge.set_value(50)
        gauge.label_value      # 50
        gauge.value_arc_path   # 'M 21.716 78.284 A 40 40 0 0 1 50 10'
    """

    def __init__(
        self,
        config: Optional[GaugeConfig] = None,
        scheduler: Optional[FrameScheduler] = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Args:
            config: Gauge configuration (default: GaugeConfig())
            scheduler: Frame scheduler for animations (default: ImmediateFrameScheduler)
            event_bus: Optional bus receiving gauge events
        """
        self._config = config or GaugeConfig()
        self.scheduler = scheduler or ImmediateFrameScheduler()
        self.event_bus = event_bus

        self._value: Optional[float] = None
        self._current: Optional[float] = None
        self._generation = 0
        self._handle: Optional[AnimationHandle] = None

        self._normalize = make_normalizer(self._config.min_value, self._config.max_value)
        self._dial_path = self._compute_dial_path()
        self._warn_if_degenerate()

    # ------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------

    @property
    def config(self) -> GaugeConfig:
        return self._config

    @property
    def value(self) -> Optional[float]:
        """Last accepted target value"""
        return self._value

    @property
    def current_value(self) -> Optional[float]:
        """Live value (normalized), moves towards value while animating"""
        return self._current

    @property
    def generation(self) -> int:
        return self._generation

    def set_value(self, new_value: Any) -> bool:
        """
        Set a new target value.

        Unset/non-numeric input and a repeat of the current target are no-ops.
        Otherwise the live value jumps (animation disabled or timing 0) or
        animates from the previous target to the new one.

        Returns:
            True if the value was accepted
        """
        target = coerce_number(new_value)
        if target is None:
            if new_value is not None:
                log.warn("Ignoring non-numeric gauge value", value=repr(new_value))
            return False

        previous = self._value
        if previous == target:
            return False

        self._value = target
        self._generation += 1
        generation = self._generation
        self.cancel_animation()

        log.debug("Target value changed", previous=previous, target=target, generation=generation)
        self._publish(ValueChangedEvent(previous, target, generation))

        config = self._config
        if not config.animation_enabled or config.duration_seconds <= 0:
            self._set_current(self._normalize(target))
            return True

        start = self._normalize(previous if previous is not None else 0)
        end = self._normalize(target)
        last_frame = [0]

        def step(value: float, frame: int):
            if generation != self._generation:
                return
            last_frame[0] = frame
            self._set_current(self._normalize(value), frame)

        def complete():
            if generation != self._generation:
                return
            self._handle = None
            self._publish(AnimationEvent(GaugeEventType.ANIMATION_COMPLETED, start, end, generation, last_frame[0]))

        def started(handle: AnimationHandle):
            self._handle = handle

        self._publish(AnimationEvent(GaugeEventType.ANIMATION_STARTED, start, end, generation))
        try:
            run_animation(
                start_value=start,
                end_value=end,
                duration_seconds=config.duration_seconds,
                step=step,
                easing=ease(config.easing_power),
                scheduler=self.scheduler,
                on_complete=complete,
                generation=generation,
                on_start=started,
            )
        except Exception:
            # Drop the target so the same value can be retried
            if generation == self._generation:
                self.cancel_animation()
                self._value = previous
            log.error("Animation failed to start", target=target, generation=generation)
            raise
        return True

    def update_config(self, **changes) -> GaugeConfig:
        """
        Replace configuration fields.

        Example:
            gauge.update_config(min_value=-50, radius=30)
        """
        return self.set_config(replace(self._config, **changes))

    def set_config(self, config: GaugeConfig) -> GaugeConfig:
        """
        Swap the whole configuration.

        Only the pieces whose inputs changed are rebuilt: the dial path for
        radius/angles, the normalizer for min/max. The live value is clamped
        into a changed range.
        """
        previous = self._config
        if config == previous and config.label_transform is previous.label_transform:
            return previous

        self._config = config

        if config.range_key() != previous.range_key():
            self._normalize = make_normalizer(config.min_value, config.max_value)
            if self._current is not None:
                self._current = self._normalize(self._current)
            self._warn_if_degenerate()

        if config.dial_key() != previous.dial_key():
            self._dial_path = self._compute_dial_path()

        log.info("Gauge configuration changed", config=self._describe(config))
        self._publish(ConfigChangedEvent(previous, config))
        if self._current is not None:
            self._publish(OutputsUpdatedEvent(self._current, self.outputs))
        return config

    # ------------------------------------------------------------
    # Animation control
    # ------------------------------------------------------------

    def is_animating(self) -> bool:
        return self._handle is not None and not self._handle.done

    def cancel_animation(self) -> bool:
        """
        Stop the running session, leaving the live value where it is.

        Returns:
            True if a session was cancelled
        """
        handle = self._handle
        self._handle = None
        if handle is None or not handle.cancel():
            return False

        session = handle.session
        self._publish(AnimationEvent(
            GaugeEventType.ANIMATION_CANCELLED,
            session.start_value,
            session.end_value,
            handle.generation,
            handle.frames_run,
        ))
        return True

    async def wait_for_idle(self):
        """Wait until no animation is running"""
        while self.is_animating():
            await asyncio.sleep(0.01)

    # ------------------------------------------------------------
    # Derived outputs
    # ------------------------------------------------------------

    @property
    def dial_arc_path(self) -> str:
        """Background track, full start → end sweep"""
        return self._dial_path

    @property
    def value_arc_path(self) -> Optional[str]:
        """Filled arc from the start angle to the live value"""
        if self._current is None or self._config.is_degenerate:
            return None

        config = self._config
        percentage = percentage_from_value(self._current, config.min_value, config.max_value)
        angle = angle_from_percentage(percentage, span_angle(config.start_angle, config.end_angle))

        return build_arc_path(
            config.radius,
            config.start_angle,
            config.start_angle + angle,
            large_arc_flag(angle),
        )

    @property
    def label_value(self) -> Optional[Any]:
        """label_transform applied to the live value"""
        if self._current is None or self._config.is_degenerate:
            return None
        try:
            return self._config.label_transform(self._current)
        except Exception as e:
            log.error("Label transform failed", value=self._current, exception=repr(e))
            return None

    @property
    def outputs(self) -> DerivedOutputs:
        return DerivedOutputs(
            dial_arc_path=self._dial_path,
            value_arc_path=self.value_arc_path,
            label_value=self.label_value,
        )

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    def _set_current(self, value: float, frame: Optional[int] = None):
        self._current = value
        if self.event_bus is not None:
            self.event_bus.publish(OutputsUpdatedEvent(value, self.outputs, frame))

    def _publish(self, event: Event):
        if self.event_bus is not None:
            self.event_bus.publish(event)

    def _compute_dial_path(self) -> str:
        config = self._config
        angle = angle_from_percentage(100, span_angle(config.start_angle, config.end_angle))
        return build_arc_path(config.radius, config.start_angle, config.end_angle, large_arc_flag(angle))

    def _warn_if_degenerate(self):
        if self._config.is_degenerate:
            log.warn(
                "Empty value range, value arc and label disabled",
                min_value=self._config.min_value,
                max_value=self._config.max_value,
            )

    @staticmethod
    def _describe(config: GaugeConfig) -> str:
        return (
            f"[{config.min_value}, {config.max_value}] "
            f"{config.start_angle}°→{config.end_angle}° r={config.radius} "
            f"{config.timing_ms}ms power={config.easing_power}"
        )
