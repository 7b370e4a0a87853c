"""
Utility functions for the gauge engine
"""

from .numbers import (
    coerce_number,
    format_number,
    round_half_up,
    round_to,
)

__all__ = [
    'coerce_number',
    'format_number',
    'round_half_up',
    'round_to',
]
