"""
Input clamping — the single validation policy of the engine.

The engine is advisory: an out-of-range value (negative sleep, a stress
level of 12, a zero body weight) is pulled back to the nearest valid
bound and processing continues.  Only values of the wrong *type* are
rejected, with a :class:`TypeError`.

The same helpers back the pydantic input models (``mode="after"``
validators) and the plain-argument entry points, so every public
function applies identical bounds.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Optional

logger = logging.getLogger(__name__)

# ======================================================================
# Bounds
# ======================================================================

# (low, high); ``None`` means unbounded on that side.
BOUNDS: dict[str, tuple[Optional[float], Optional[float]]] = {
    "hours": (0.0, 24.0),
    "level": (1.0, 10.0),
    "count": (0.0, None),
    "days_per_week": (0.0, 7.0),
    "weight_kg": (30.0, 300.0),
    "height_cm": (120.0, 230.0),
    "age": (14.0, 100.0),
    "body_fat_percent": (3.0, 60.0),
    "percent": (0.0, None),
    "hour_of_day": (0.0, 23.0),
    "readiness": (0.0, 10.0),
    "sets": (1.0, None),
    "reps": (1.0, None),
    "minutes": (0.0, 24 * 60.0),
}


# ======================================================================
# Core helper
# ======================================================================


def clamp(
    value: float,
    low: Optional[float] = None,
    high: Optional[float] = None,
    *,
    field: str = "value",
) -> float:
    """Clamp *value* into ``[low, high]``.

    Raises:
        TypeError: if *value* is not a real number (``bool`` and ``None``
            included) or is NaN.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{field} must be a number, got {type(value).__name__}")
    if isinstance(value, float) and math.isnan(value):
        raise TypeError(f"{field} must be a number, got NaN")

    clamped = value
    if low is not None and clamped < low:
        clamped = low
    if high is not None and clamped > high:
        clamped = high

    if clamped != value:
        logger.debug("Clamped %s from %r to %r", field, value, clamped)
    return clamped


def clamp_to(kind: str, value: float, field: Optional[str] = None) -> float:
    """Clamp *value* using the named entry of :data:`BOUNDS`."""
    low, high = BOUNDS[kind]
    return clamp(value, low, high, field=field or kind)


def clamp_int(kind: str, value: int, field: Optional[str] = None) -> int:
    """Integer variant of :func:`clamp_to` (rounds after clamping)."""
    return int(round(clamp_to(kind, value, field)))


# ======================================================================
# Arithmetic guards
# ======================================================================


def safe_ratio(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator``, or ``0.0`` when the denominator
    is zero or negative (treated as "no progress")."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def round_half_up(value: float) -> int:
    """Round half up (0.5 → 1), as nutrition labels do."""
    return int(math.floor(value + 0.5))
