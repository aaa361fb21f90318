"""Time primitives: durations and clocks."""

from happypoisson.core.clock import REAL_TIME_CLOCK, Clock, MonotonicClock, TickClock, TickState
from happypoisson.core.temporal import INT64_MAX, INT64_MIN, Duration

__all__ = [
    "Clock",
    "Duration",
    "INT64_MAX",
    "INT64_MIN",
    "MonotonicClock",
    "REAL_TIME_CLOCK",
    "TickClock",
    "TickState",
]
