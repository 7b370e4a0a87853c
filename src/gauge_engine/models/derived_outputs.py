"""Derived gauge outputs observed by the host"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class DerivedOutputs:
    """
    Snapshot of everything the presentation layer draws.

    Pure function of GaugeConfig and the current interpolated value;
    recomputed on every publish, never cached beyond one frame.
    """
    dial_arc_path: str
    value_arc_path: Optional[str] = None
    label_value: Optional[Any] = None

    @property
    def has_value(self) -> bool:
        return self.value_arc_path is not None
