"""
Animation Driver

Frame-scheduled interpolation between two values.

Each frame computes:
    progress = frame / total_frames          (total_frames = 60 * duration)
    value    = (end - start) * easing(progress) + start

and hands the value to step(value, frame). Another frame is scheduled while
progress < 1, so the loop is frame-count based, not wall-clock based.

run_animation() returns an AnimationHandle; cancelling it makes every later
frame of that session a no-op, which is how a newer value supersedes an
older animation.
"""

from __future__ import annotations

from typing import Callable, Optional

from gauge_engine.engine.easing import Easing, ease_linear
from gauge_engine.engine.frame_scheduler import FrameScheduler, ImmediateFrameScheduler
from gauge_engine.models.animation_session import AnimationSession
from gauge_engine.models.enums import AnimationStatus, LogCategory
from gauge_engine.utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

StepCallback = Callable[[float, int], None]


class AnimationHandle:
    """Cancellation token and progress view for one animation session."""

    def __init__(self, session: AnimationSession):
        self.session = session
        self.frames_run = 0

    @property
    def generation(self) -> int:
        return self.session.generation

    @property
    def cancelled(self) -> bool:
        return self.session.status == AnimationStatus.CANCELLED

    @property
    def done(self) -> bool:
        return not self.session.is_active

    def cancel(self) -> bool:
        """
        Stop the session before its next frame.

        Returns:
            True if the session was still active
        """
        if not self.session.is_active:
            return False
        self.session.status = AnimationStatus.CANCELLED
        log.debug("Animation cancelled", generation=self.generation, frames=self.frames_run)
        return True

    def __repr__(self):
        return f"AnimationHandle({self.session!r})"


def run_animation(
    start_value: float,
    end_value: float,
    duration_seconds: float,
    step: StepCallback,
    easing: Easing = ease_linear,
    scheduler: Optional[FrameScheduler] = None,
    on_complete: Optional[Callable[[], None]] = None,
    generation: int = 0,
    on_start: Optional[Callable[[AnimationHandle], None]] = None,
) -> AnimationHandle:
    """
    Animate from start_value to end_value, one step() call per frame.

    A zero (or negative) duration is instantaneous: step(end_value, 1) runs
    synchronously once and nothing is scheduled.

    Args:
        start_value: Value at progress 0
        end_value: Value at progress 1
        duration_seconds: Nominal duration; 60 frames per second
        step: Called with (value, frame_index), frame_index starting at 1
        easing: Progress → eased progress
        scheduler: Frame scheduler (default: ImmediateFrameScheduler)
        on_complete: Called once after the last frame, never after cancel
        generation: Caller's id for this session
        on_start: Called with the handle before the first frame runs

    Returns:
        AnimationHandle for cancellation and inspection
    """
    scheduler = scheduler or ImmediateFrameScheduler()
    session = AnimationSession(
        start_value=float(start_value),
        end_value=float(end_value),
        duration_seconds=max(0.0, float(duration_seconds)),
        generation=generation,
    )
    handle = AnimationHandle(session)

    log.debug(
        "Animation session started",
        start=session.start_value,
        end=session.end_value,
        frames=f"{session.total_frames:g}",
        generation=generation,
    )
    if on_start:
        on_start(handle)

    def finish():
        session.status = AnimationStatus.COMPLETED
        log.debug("Animation session completed", generation=generation, frames=handle.frames_run)
        if on_complete:
            on_complete()

    if session.total_frames <= 0:
        if handle.cancelled:
            return handle
        session.status = AnimationStatus.RUNNING
        step(session.end_value, 1)
        handle.frames_run = 1
        if not handle.cancelled:
            finish()
        return handle

    def animate():
        if handle.cancelled:
            return

        session.status = AnimationStatus.RUNNING
        frame = session.current_frame
        progress = session.progress

        # A fractional frame count overshoots 1.0 on the last frame
        eased = easing(min(progress, 1.0))
        value = session.change * eased + session.start_value

        step(value, frame)
        handle.frames_run += 1
        session.current_frame += 1

        if handle.cancelled:
            return

        if progress < 1:
            scheduler.schedule_frame(animate)
        else:
            finish()

    scheduler.schedule_frame(animate)
    return handle
