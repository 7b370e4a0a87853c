"""
Range Normalizer

Clamps raw values into the configured [min, max] domain before they reach
any angle or path math.
"""

from typing import Callable

Normalizer = Callable[[float], float]


def make_normalizer(min_value: float, max_value: float) -> Normalizer:
    """
    Return a reusable clamp into [min_value, max_value].

    Built once per min/max change, not per frame.

    Example:
        >>> normalize = make_normalizer(0, 100)
        >>> normalize(150), normalize(-10), normalize(50)
        (100.0, 0.0, 50.0)
    """
    lo = float(min_value)
    hi = float(max_value)

    def normalize(value: float) -> float:
        return max(lo, min(hi, float(value)))

    return normalize
