"""
Frame Schedulers

The animation driver never sleeps or loops on its own: it hands one callback
per frame to a FrameScheduler and returns control to the host. Swapping the
scheduler is how the same driver runs on an asyncio loop, inside a test, or
synchronously.

Implementations:
  - AsyncioFrameScheduler: cooperative, 1/fps spaced callbacks on the event loop
  - ImmediateFrameScheduler: runs frames back to back, synchronously
  - ManualFrameScheduler: runs frames only when tick() is called
"""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Callable, Deque, Optional, Protocol

from gauge_engine.models.enums import LogCategory
from gauge_engine.utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

FrameCallback = Callable[[], None]

DEFAULT_FPS = 60


class FrameScheduler(Protocol):
    """Anything that can run a callback on the next display frame."""

    def schedule_frame(self, callback: FrameCallback) -> None:
        ...


class AsyncioFrameScheduler:
    """
    Frame scheduler backed by the asyncio event loop.

    Each scheduled callback runs once, 1/fps seconds later. Frame timing is
    best effort: a busy loop delays frames, it never drops them.

    Example:
        scheduler = AsyncioFrameScheduler(fps=60)
        gauge = GaugeState(scheduler=scheduler)
        gauge.set_value(75)
        await scheduler.wait_for_idle()
    """

    def __init__(self, fps: int = DEFAULT_FPS, loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Args:
            fps: Frame rate (1-240, default 60)
            loop: Event loop to schedule on (default: running loop at schedule time)
        """
        self.fps = max(1, min(int(fps), 240))
        self._loop = loop
        self._pending = 0
        self.frames_run = 0

    @property
    def frame_interval(self) -> float:
        return 1 / self.fps

    @property
    def pending(self) -> int:
        return self._pending

    def schedule_frame(self, callback: FrameCallback) -> None:
        loop = self._loop or asyncio.get_running_loop()
        self._pending += 1
        loop.call_later(self.frame_interval, self._run, callback)

    def _run(self, callback: FrameCallback) -> None:
        try:
            callback()
        except Exception as e:
            log.error(f"Frame callback failed: {e}", error_type=type(e).__name__)
        finally:
            self._pending -= 1
            self.frames_run += 1

    def is_idle(self) -> bool:
        return self._pending == 0

    async def wait_for_idle(self):
        """Wait until no frame callbacks are pending"""
        while self._pending:
            await asyncio.sleep(0.01)


class ImmediateFrameScheduler:
    """
    Synchronous scheduler: every frame runs as soon as the previous one returns.

    Callbacks scheduled from inside a running frame are queued and drained by
    the outermost call, so a 600-frame animation does not recurse 600 deep.
    """

    def __init__(self):
        self._queue: Deque[FrameCallback] = deque()
        self._draining = False
        self.frames_run = 0

    def schedule_frame(self, callback: FrameCallback) -> None:
        self._queue.append(callback)
        if self._draining:
            return

        self._draining = True
        try:
            while self._queue:
                self._queue.popleft()()
                self.frames_run += 1
        except Exception:
            # Frames queued by a failing callback belong to its session
            self._queue.clear()
            raise
        finally:
            self._draining = False


class ManualFrameScheduler:
    """
    Test scheduler: frames advance only when tick() is called.

    Example:
        scheduler = ManualFrameScheduler()
        gauge = GaugeState(scheduler=scheduler)
        gauge.set_value(50)
        scheduler.tick()            # frame 1
        scheduler.run_until_idle()  # remaining frames
    """

    def __init__(self):
        self._queue: Deque[FrameCallback] = deque()
        self.frames_run = 0

    @property
    def pending(self) -> int:
        return len(self._queue)

    def schedule_frame(self, callback: FrameCallback) -> None:
        self._queue.append(callback)

    def tick(self) -> int:
        """
        Run one display frame.

        Only callbacks queued before the tick run; callbacks they schedule
        wait for the next tick.

        Returns:
            Number of callbacks run
        """
        batch = list(self._queue)
        self._queue.clear()
        for callback in batch:
            callback()
        if batch:
            self.frames_run += 1
        return len(batch)

    def run_until_idle(self, max_frames: int = 100_000) -> int:
        """
        Tick until nothing is queued.

        Returns:
            Number of ticks that ran callbacks
        """
        ticks = 0
        while self._queue and ticks < max_frames:
            self.tick()
            ticks += 1
        return ticks
