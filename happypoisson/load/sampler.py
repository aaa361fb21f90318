"""Inverse-CDF sampling of exponential inter-arrival gaps.

For a Poisson process with ``rate`` events per reference unit, the probability
that no event happens within time t (in reference units) is ``exp(-rate * t)``.
The gap until the next event therefore has CDF ``F(t) = 1 - exp(-rate * t)``.
Solving ``F(t) = p`` for t gives

    t = -ln(1 - p) / rate

which is scaled to nanoseconds by the length of the reference unit. Feeding a
uniform p from (0, 1) yields exponentially distributed gaps.
"""

from __future__ import annotations

import logging
import math

from happypoisson.core.temporal import INT64_MAX

logger = logging.getLogger(__name__)

# float(INT64_MAX) rounds up to 2**63, so compare against the exact power.
_INT64_LIMIT = float(2**63)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def exponential_gap_nanos(rate: int, reference_unit_nanos: int, p: float) -> int:
    """Map a uniform sample to an inter-arrival gap in nanoseconds.

    Args:
        rate: Events per reference unit. Must be > 0.
        reference_unit_nanos: Length of the reference unit in nanoseconds.
        p: Uniform sample, strictly inside (0, 1).

    Returns:
        ``round(-ln(1 - p) / rate * reference_unit_nanos)`` with ties rounded
        away from zero. Tiny p gives a gap of 0 (a same-instant arrival).

    Raises:
        ValueError: If p is outside (0, 1) or rate is not positive.
        OverflowError: If the gap does not fit a signed 64-bit integer.
    """
    if not 0.0 < p < 1.0:
        raise ValueError(f"uniform sample must be in (0, 1), got {p!r}")
    if rate <= 0:
        raise ValueError(f"rate must be > 0, got {rate}")

    gap = -math.log1p(-p) / rate * reference_unit_nanos
    if not math.isfinite(gap) or gap >= _INT64_LIMIT:
        logger.error(
            "Gap overflow: p=%r rate=%d reference_unit_nanos=%d", p, rate, reference_unit_nanos
        )
        raise OverflowError(
            f"inter-arrival gap {gap} exceeds the 64-bit range (max {INT64_MAX}ns)"
        )
    return round_half_away(gap)
