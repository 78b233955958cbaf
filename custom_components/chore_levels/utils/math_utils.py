# File: utils/math_utils.py
"""Math and calculation utilities for Chore Levels.

Pure Python math functions with ZERO Home Assistant dependencies.
All functions here can be unit tested without Home Assistant mocking.

⚠️ UTILS PURITY: NO `homeassistant.*` imports allowed.

Functions:
    - is_whole_number: Accept ints and whole, finite floats (never bools)
    - to_whole_number: Convert an accepted value to int
    - floor_percentage: Integer progress percentage with zero-target guard
    - clamp: Bound a value to a range
"""

from __future__ import annotations

import logging
import math
from numbers import Integral, Real

# Module-level logger (no HA dependency)
_LOGGER = logging.getLogger(__name__)


# ==============================================================================
# Input Normalization
# ==============================================================================


def is_whole_number(value: object) -> bool:
    """Return True if value is an integer or a finite float with no fraction.

    Point balances are stored as floats by the chore subsystem, so 120.0 is a
    valid point total while 120.5, NaN and True are not.

    Examples:
        is_whole_number(120) → True
        is_whole_number(120.0) → True
        is_whole_number(120.5) → False
        is_whole_number(float("nan")) → False
        is_whole_number(True) → False
        is_whole_number("120") → False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    if isinstance(value, Real):
        as_float = float(value)
        return math.isfinite(as_float) and as_float.is_integer()
    return False


def to_whole_number(value: int | float) -> int:
    """Convert a value accepted by is_whole_number() to int.

    Callers must check is_whole_number() first; no rounding happens here.
    """
    if isinstance(value, Integral):
        return int(value)
    return int(float(value))


# ==============================================================================
# Percentage Functions
# ==============================================================================


def floor_percentage(current: int, target: int) -> int:
    """Calculate a floored 0-100 percentage using integer arithmetic.

    Args:
        current: Progress made
        target: Amount required for completion

    Returns:
        floor(100 * current / target) clamped to [0, 100], or 100 if target
        is 0 or less (nothing left to earn)

    Examples:
        floor_percentage(50, 75) → 66
        floor_percentage(0, 50) → 0
        floor_percentage(75, 75) → 100
        floor_percentage(10, 0) → 100  # Division by zero protection
    """
    if target <= 0:
        _LOGGER.debug("Percentage target is %s, reporting complete", target)
        return 100
    return int(clamp((100 * current) // target, 0, 100))


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Value clamped to [min_val, max_val] range

    Examples:
        clamp(150, 0, 100) → 100
        clamp(-10, 0, 100) → 0
        clamp(50, 0, 100) → 50
    """
    return max(min_val, min(value, max_val))
