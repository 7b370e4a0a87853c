"""Animation session model"""

from dataclasses import dataclass

from gauge_engine.models.enums import AnimationStatus

# Frame rate the frame-count based interpolation assumes
FRAMES_PER_SECOND = 60


@dataclass
class AnimationSession:
    """
    State of one interpolation between two values.

    Progress is frame-count based: total_frames = 60 * duration_seconds,
    so wall-clock duration drifts if the host drops frames.
    """
    start_value: float
    end_value: float
    duration_seconds: float
    generation: int = 0
    current_frame: int = 1
    status: AnimationStatus = AnimationStatus.PENDING

    @property
    def total_frames(self) -> float:
        # 0.1s * 60 is 6.000000000000001 in floating point
        return round(FRAMES_PER_SECOND * self.duration_seconds, 6)

    @property
    def change(self) -> float:
        return self.end_value - self.start_value

    @property
    def progress(self) -> float:
        """Progress of the frame about to run (may exceed 1.0 on the last one)."""
        if self.total_frames <= 0:
            return 1.0
        return self.current_frame / self.total_frames

    @property
    def is_active(self) -> bool:
        return self.status in (AnimationStatus.PENDING, AnimationStatus.RUNNING)

    def __repr__(self):
        return (
            f"AnimationSession({self.start_value} → {self.end_value}, "
            f"{self.duration_seconds}s, frame {self.current_frame}/{self.total_frames:g}, "
            f"{self.status.name})"
        )
