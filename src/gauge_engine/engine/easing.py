"""
Easing Functions

Map linear progress (0.0 → 1.0) to eased progress. The gauge uses ease(power);
the named curves can be injected into run_animation directly.
"""

from typing import Callable

Easing = Callable[[float], float]


def ease(power: float = 4) -> Easing:
    """
    Build a symmetric ease-in-out curve of the given power.

    power=1 is linear, 2 quadratic, 3 cubic, 4 gives a soft start and stop.

    Args:
        power: Curve power (>= 1)

    Returns:
        Easing function t → eased t
    """
    power = max(1.0, float(power))

    def _ease(t: float) -> float:
        if t < 0.5:
            return 2 ** (power - 1) * t ** power
        return 1 - (2 - 2 * t) ** power / 2

    return _ease


def ease_linear(t: float) -> float:
    """Linear easing (constant speed)"""
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in (very slow start)"""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out (very slow end)"""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out (very smooth acceleration/deceleration)"""
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


EASINGS = {
    'linear': ease_linear,
    'in_quad': ease_in_quad,
    'out_quad': ease_out_quad,
    'in_out_quad': ease_in_out_quad,
    'in_cubic': ease_in_cubic,
    'out_cubic': ease_out_cubic,
    'in_out_cubic': ease_in_out_cubic,
}
