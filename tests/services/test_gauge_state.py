"""
Tests for GaugeState: value changes, animation sessions, derived outputs
and configuration updates.
"""

from unittest.mock import patch

import pytest

from gauge_engine.engine.frame_scheduler import AsyncioFrameScheduler
from gauge_engine.models.derived_outputs import DerivedOutputs
from gauge_engine.models.enums import GaugeEventType
from gauge_engine.models.gauge_config import GaugeConfig
from gauge_engine.services.gauge_state import GaugeState

CANONICAL_DIAL = "M 21.716 78.284 A 40 40 0 1 1 78.284 78.284"
HALF_VALUE_ARC = "M 21.716 78.284 A 40 40 0 0 1 50 10"


class TestStaticGauge:
    """Animation disabled: set_value publishes the normalized value directly."""

    def test_end_to_end_half_value(self, static_config):
        gauge = GaugeState(static_config)

        assert gauge.set_value(50) is True

        assert gauge.label_value == 50
        assert gauge.value_arc_path == HALF_VALUE_ARC
        assert gauge.dial_arc_path == CANONICAL_DIAL

    def test_value_arc_starts_at_dial_start(self, static_config):
        gauge = GaugeState(static_config)
        gauge.set_value(73)
        assert gauge.value_arc_path.split(" A ")[0] == gauge.dial_arc_path.split(" A ")[0]

    def test_unset_value(self, static_config):
        gauge = GaugeState(static_config)

        assert gauge.value is None
        assert gauge.label_value is None
        assert gauge.value_arc_path is None
        assert gauge.dial_arc_path == CANONICAL_DIAL

    def test_values_are_clamped(self, static_config):
        gauge = GaugeState(static_config)

        gauge.set_value(150)
        assert gauge.value == 150
        assert gauge.current_value == 100
        assert gauge.label_value == 100
        assert gauge.value_arc_path == CANONICAL_DIAL

        gauge.set_value(-10)
        assert gauge.current_value == 0
        assert gauge.value_arc_path == "M 21.716 78.284 A 40 40 0 0 1 21.716 78.284"

    def test_negative_minimum(self):
        gauge = GaugeState(GaugeConfig(min_value=-50, max_value=50, animation_enabled=False))
        gauge.set_value(0)
        assert gauge.value_arc_path == HALF_VALUE_ARC
        assert gauge.label_value == 0

    def test_first_value_of_zero_is_accepted(self, static_config):
        gauge = GaugeState(static_config)
        assert gauge.set_value(0) is True
        assert gauge.label_value == 0

    def test_label_rounds_half_up(self, static_config):
        gauge = GaugeState(static_config)
        gauge.set_value(2.5)
        assert gauge.label_value == 3

    def test_custom_label_transform(self):
        config = GaugeConfig(animation_enabled=False, label_transform=lambda v: f"{v:.1f}%")
        gauge = GaugeState(config)
        gauge.set_value(12.34)
        assert gauge.label_value == "12.3%"

    def test_failing_label_transform_degrades_to_none(self):
        def broken(value):
            raise ValueError("nope")

        gauge = GaugeState(GaugeConfig(animation_enabled=False, label_transform=broken))
        gauge.set_value(10)

        assert gauge.label_value is None
        assert gauge.value_arc_path is not None

    def test_outputs_snapshot(self, static_config):
        gauge = GaugeState(static_config)
        gauge.set_value(50)
        assert gauge.outputs == DerivedOutputs(CANONICAL_DIAL, HALF_VALUE_ARC, 50)
        assert gauge.outputs.has_value


class TestDegenerateRange:

    def test_empty_range_disables_value_outputs(self):
        gauge = GaugeState(GaugeConfig(min_value=10, max_value=10, animation_enabled=False))

        gauge.set_value(10)

        assert gauge.value_arc_path is None
        assert gauge.label_value is None
        assert gauge.dial_arc_path == CANONICAL_DIAL

    def test_inverted_range_disables_value_outputs(self):
        gauge = GaugeState(GaugeConfig(min_value=10, max_value=0, animation_enabled=False))
        gauge.set_value(5)
        assert gauge.value_arc_path is None
        assert gauge.label_value is None


class TestInputCoercion:

    @pytest.mark.parametrize("raw", [None, "abc", float("nan"), float("inf"), True, [1]])
    def test_unusable_input_is_ignored(self, static_config, raw):
        gauge = GaugeState(static_config)
        assert gauge.set_value(raw) is False
        assert gauge.value is None
        assert gauge.generation == 0

    def test_numeric_strings_are_coerced(self, static_config):
        gauge = GaugeState(static_config)
        assert gauge.set_value("42") is True
        assert gauge.value == 42
        assert gauge.label_value == 42


class TestAnimatedGauge:

    def test_animates_sixty_frames(self, immediate_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(), scheduler=immediate_scheduler, event_bus=event_bus)

        gauge.set_value(100)

        updates = recorder[GaugeEventType.OUTPUTS_UPDATED]
        assert [e.frame for e in updates] == list(range(1, 61))
        assert updates[-1].current_value == pytest.approx(100)
        assert gauge.label_value == 100
        assert gauge.value_arc_path == CANONICAL_DIAL
        assert not gauge.is_animating()

        started = recorder[GaugeEventType.ANIMATION_STARTED]
        completed = recorder[GaugeEventType.ANIMATION_COMPLETED]
        assert len(started) == 1
        assert (started[0].start_value, started[0].end_value) == (0, 100)
        assert len(completed) == 1
        assert completed[0].frames == 60

    def test_intermediate_values_are_normalized(self, immediate_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(), scheduler=immediate_scheduler, event_bus=event_bus)
        gauge.set_value(500)

        values = [e.current_value for e in recorder[GaugeEventType.OUTPUTS_UPDATED]]
        assert all(0 <= v <= 100 for v in values)
        assert values == sorted(values)
        assert recorder[GaugeEventType.ANIMATION_STARTED][0].end_value == 100

    def test_same_value_twice_is_noop(self, immediate_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(), scheduler=immediate_scheduler, event_bus=event_bus)

        assert gauge.set_value(50) is True
        frames_after_first = len(recorder[GaugeEventType.OUTPUTS_UPDATED])
        assert gauge.set_value(50) is False

        assert len(recorder[GaugeEventType.ANIMATION_STARTED]) == 1
        assert len(recorder[GaugeEventType.OUTPUTS_UPDATED]) == frames_after_first
        assert gauge.generation == 1

    def test_animates_from_previous_target(self, immediate_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(), scheduler=immediate_scheduler, event_bus=event_bus)
        gauge.set_value(40)
        gauge.set_value(10)

        second = recorder[GaugeEventType.ANIMATION_STARTED][1]
        assert (second.start_value, second.end_value) == (40, 10)
        assert gauge.current_value == pytest.approx(10)

    def test_zero_timing_is_instant(self, manual_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(timing_ms=0), scheduler=manual_scheduler, event_bus=event_bus)

        gauge.set_value(75)

        assert gauge.current_value == 75
        assert manual_scheduler.pending == 0
        assert recorder[GaugeEventType.ANIMATION_STARTED] == []
        assert len(recorder[GaugeEventType.OUTPUTS_UPDATED]) == 1

    def test_is_animating_until_last_frame(self, manual_scheduler):
        gauge = GaugeState(GaugeConfig(timing_ms=500), scheduler=manual_scheduler)

        gauge.set_value(30)
        assert gauge.is_animating()
        assert gauge.current_value is None

        manual_scheduler.tick()
        assert gauge.current_value is not None
        assert gauge.is_animating()

        manual_scheduler.run_until_idle()
        assert not gauge.is_animating()
        assert gauge.current_value == pytest.approx(30)

    def test_linear_power(self, immediate_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(easing_power=1), scheduler=immediate_scheduler, event_bus=event_bus)
        gauge.set_value(60)

        values = [e.current_value for e in recorder[GaugeEventType.OUTPUTS_UPDATED]]
        assert values[29] == pytest.approx(30)


class TestSupersededAnimation:
    """A new value cancels the running session; stale frames never write."""

    def test_new_value_cancels_running_session(self, manual_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(), scheduler=manual_scheduler, event_bus=event_bus)

        gauge.set_value(100)
        for _ in range(10):
            manual_scheduler.tick()
        midway = gauge.current_value
        assert 0 < midway < 100

        gauge.set_value(20)

        cancelled = recorder[GaugeEventType.ANIMATION_CANCELLED]
        assert len(cancelled) == 1
        assert cancelled[0].generation == 1
        assert cancelled[0].frames == 10

        started = recorder[GaugeEventType.ANIMATION_STARTED][-1]
        assert (started.start_value, started.end_value, started.generation) == (100, 20, 2)

        updates_before = len(recorder[GaugeEventType.OUTPUTS_UPDATED])
        manual_scheduler.run_until_idle()
        new_updates = recorder[GaugeEventType.OUTPUTS_UPDATED][updates_before:]

        assert [e.frame for e in new_updates] == list(range(1, 61))
        assert gauge.current_value == pytest.approx(20)
        assert len(recorder[GaugeEventType.ANIMATION_COMPLETED]) == 1

    def test_value_set_from_frame_handler_supersedes(self, immediate_scheduler, event_bus, recorder):
        gauge = GaugeState(GaugeConfig(), scheduler=immediate_scheduler, event_bus=event_bus)

        def retarget(event):
            if event.frame == 10 and gauge.value == 100:
                gauge.set_value(20)

        event_bus.subscribe(GaugeEventType.OUTPUTS_UPDATED, retarget)
        gauge.set_value(100)

        cancelled = recorder[GaugeEventType.ANIMATION_CANCELLED]
        assert len(cancelled) == 1
        assert cancelled[0].generation == 1

        completed = recorder[GaugeEventType.ANIMATION_COMPLETED]
        assert [e.generation for e in completed] == [2]
        assert gauge.current_value == pytest.approx(20)
        assert not gauge.is_animating()

    def test_failed_scheduling_allows_retry(self, manual_scheduler, event_bus, recorder):
        # No running event loop, so the first frame cannot be scheduled
        gauge = GaugeState(GaugeConfig(), scheduler=AsyncioFrameScheduler(), event_bus=event_bus)

        with pytest.raises(RuntimeError):
            gauge.set_value(50)

        assert gauge.value is None
        assert gauge.current_value is None
        assert not gauge.is_animating()
        assert len(recorder[GaugeEventType.ANIMATION_CANCELLED]) == 1

        gauge.scheduler = manual_scheduler
        assert gauge.set_value(50) is True
        manual_scheduler.run_until_idle()
        assert gauge.current_value == pytest.approx(50)

    def test_cancel_animation_freezes_value(self, manual_scheduler):
        gauge = GaugeState(GaugeConfig(), scheduler=manual_scheduler)
        gauge.set_value(80)
        for _ in range(30):
            manual_scheduler.tick()
        frozen = gauge.current_value

        assert gauge.cancel_animation() is True
        manual_scheduler.run_until_idle()

        assert gauge.current_value == frozen
        assert not gauge.is_animating()
        assert gauge.cancel_animation() is False

    @pytest.mark.asyncio
    async def test_wait_for_idle_on_event_loop(self):
        scheduler = AsyncioFrameScheduler(fps=240)
        gauge = GaugeState(GaugeConfig(timing_ms=50), scheduler=scheduler)

        gauge.set_value(10)
        assert gauge.is_animating()

        await gauge.wait_for_idle()

        assert gauge.current_value == pytest.approx(10)
        assert gauge.label_value == 10


class TestConfigUpdates:

    def test_radius_change_rebuilds_dial(self, static_config):
        gauge = GaugeState(static_config)
        gauge.update_config(radius=30)
        assert gauge.dial_arc_path == "M 28.787 71.213 A 30 30 0 1 1 71.213 71.213"

    def test_quarter_dial_uses_small_arc(self):
        gauge = GaugeState(GaugeConfig(start_angle=0, end_angle=90, animation_enabled=False))
        assert gauge.dial_arc_path == "M 90 50 A 40 40 0 0 1 50 90"

    def test_dial_rebuilt_only_when_its_inputs_change(self, static_config):
        gauge = GaugeState(static_config)

        with patch.object(gauge, "_compute_dial_path", wraps=gauge._compute_dial_path) as spy:
            gauge.update_config(min_value=10, timing_ms=200)
            assert spy.call_count == 0

            gauge.update_config(end_angle=90)
            assert spy.call_count == 1

    def test_range_change_reclamps_live_value(self, static_config):
        gauge = GaugeState(static_config)
        gauge.set_value(20)

        gauge.update_config(min_value=50)

        assert gauge.current_value == 50
        assert gauge.label_value == 50

    def test_config_changed_event(self, static_config, event_bus, recorder):
        gauge = GaugeState(static_config, event_bus=event_bus)
        gauge.set_value(10)

        gauge.update_config(max_value=200)

        changed = recorder[GaugeEventType.CONFIG_CHANGED]
        assert len(changed) == 1
        assert changed[0].previous.max_value == 100
        assert changed[0].config.max_value == 200
        assert recorder[GaugeEventType.OUTPUTS_UPDATED][-1].outputs.label_value == 10

    def test_unchanged_config_is_ignored(self, static_config, event_bus, recorder):
        gauge = GaugeState(static_config, event_bus=event_bus)
        gauge.update_config()
        gauge.set_config(GaugeConfig(**{
            "min_value": 0, "max_value": 100, "start_angle": 135, "end_angle": 45,
            "animation_enabled": False,
        }))
        assert recorder[GaugeEventType.CONFIG_CHANGED] == []

    def test_collapsing_range_disables_value_outputs(self, static_config):
        gauge = GaugeState(static_config)
        gauge.set_value(30)

        gauge.update_config(max_value=0)

        assert gauge.value_arc_path is None
        assert gauge.label_value is None
        assert gauge.dial_arc_path == CANONICAL_DIAL
