"""Clock sources for event generators.

A generator only ever asks its clock one question: "what time is it, in
nanoseconds?". Two implementations are provided:

- ``MonotonicClock`` reads the platform monotonic timer. It holds no state and
  can be shared freely between generators and threads.
- ``TickClock`` is a virtual clock for deterministic simulation. Time only moves
  when the owner calls ``advance_tick()``.

Usage::

    from happypoisson import Duration, TickClock

    clock = TickClock(Duration.from_seconds(2))
    clock.advance_tick()
    clock.now_nanos()  # 2_000_000_000
"""

from __future__ import annotations

import logging
import time
from typing import NamedTuple, Protocol, runtime_checkable

from happypoisson.core.temporal import INT64_MAX, INT64_MIN, Duration

logger = logging.getLogger(__name__)


@runtime_checkable
class Clock(Protocol):
    """Protocol for time sources.

    Readings must be monotonic non-decreasing for the lifetime of any
    generator that uses the clock.
    """

    def now_nanos(self) -> int:
        """Return the current time in nanoseconds."""
        ...


class MonotonicClock:
    """Stateless adapter over ``time.monotonic_ns()``."""

    def now_nanos(self) -> int:
        return time.monotonic_ns()

    def __repr__(self) -> str:
        return "MonotonicClock()"


REAL_TIME_CLOCK = MonotonicClock()


class TickState(NamedTuple):
    """Snapshot of a ``TickClock``: current time and number of ticks so far."""

    now_nanos: int
    tick_count: int


class TickClock:
    """Virtual clock that advances by a fixed tick size on demand.

    The (time, tick count) pair is kept in a single immutable ``TickState``
    that is replaced on every tick, so a reader never sees the time of one
    tick paired with the count of another.

    Only one thread may call ``advance_tick()``. Concurrent readers of
    ``now_nanos()`` observe the last published snapshot.

    Args:
        tick: Amount of time added per tick, as a Duration or integer nanos.
        start_nanos: Initial clock reading.
    """

    def __init__(self, tick: Duration | int, start_nanos: int = 0):
        tick_nanos = tick.nanoseconds if isinstance(tick, Duration) else int(tick)
        if tick_nanos <= 0:
            raise ValueError(f"tick must be positive, got {tick_nanos}ns")
        if not INT64_MIN <= start_nanos <= INT64_MAX:
            raise OverflowError(f"start_nanos {start_nanos} outside the signed 64-bit range")
        self._tick_nanos = tick_nanos
        self._state = TickState(start_nanos, 0)

    @property
    def tick(self) -> Duration:
        return Duration(self._tick_nanos)

    @property
    def tick_count(self) -> int:
        return self._state.tick_count

    @property
    def state(self) -> TickState:
        return self._state

    def now_nanos(self) -> int:
        return self._state.now_nanos

    def advance_tick(self) -> int:
        """Move the clock forward by one tick.

        Returns:
            The new tick count.

        Raises:
            OverflowError: If the new time would leave the signed 64-bit
                range. The clock is left unchanged.
        """
        current = self._state
        next_nanos = current.now_nanos + self._tick_nanos
        if next_nanos > INT64_MAX:
            logger.error(
                "Tick clock overflow: now=%d tick=%d count=%d",
                current.now_nanos,
                self._tick_nanos,
                current.tick_count,
            )
            raise OverflowError(
                f"advancing {current.now_nanos}ns by {self._tick_nanos}ns overflows 64-bit time"
            )
        self._state = TickState(next_nanos, current.tick_count + 1)
        return self._state.tick_count

    def advance(self, ticks: int) -> int:
        """Advance ``ticks`` ticks, one at a time. Returns the final tick count."""
        if ticks < 0:
            raise ValueError(f"ticks must be >= 0, got {ticks}")
        count = self._state.tick_count
        for _ in range(ticks):
            count = self.advance_tick()
        return count

    def __repr__(self) -> str:
        state = self._state
        return f"TickClock(tick={self._tick_nanos}ns, now={state.now_nanos}ns, ticks={state.tick_count})"
