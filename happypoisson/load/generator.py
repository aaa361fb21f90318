"""Poisson event generator.

The generator keeps two pieces of state:

- ``last_reported_event``: instant (ns) of the last arrival already reported.
  The next gap is measured from here, never from "now", so arrivals keep
  their exact spacing no matter how irregularly the caller polls.
- ``held_event``: an arrival instant already drawn but not yet due.

Each ``poll()`` reads the clock once and reports every arrival that falls at
or before that reading since the previous poll. Exactly one arrival beyond
"now" is drawn and held for the next poll.

Usage::

    from happypoisson import Duration, GeneratorBuilder, ReferenceUnit, TickClock

    clock = TickClock(Duration.from_seconds(2))
    generator = (
        GeneratorBuilder(100, ReferenceUnit.HOUR)
        .with_clock(clock)
        .build()
    )
    clock.advance_tick()
    arrived = generator.poll()

Thread safety: ``poll()`` is a read-modify-write over both fields and is not
safe to call from several threads at once. Serialize calls externally if
more than one thread polls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from happypoisson.core.temporal import INT64_MAX

if TYPE_CHECKING:
    from happypoisson.core.clock import Clock
    from happypoisson.load.config import GeneratorConfig
    from happypoisson.load.gap_provider import GapProvider

logger = logging.getLogger(__name__)


class PoissonEventGenerator:
    """Counts Poisson arrivals between successive polls.

    A generator built directly from this constructor starts *fresh* and must
    be initialized with ``reset_and_init()`` before the first ``poll()``.
    ``GeneratorBuilder.build()`` does that for you.

    Args:
        config: Immutable generator configuration.
        gap_provider: Source of inter-arrival gaps built from ``config``.
    """

    def __init__(self, config: GeneratorConfig, gap_provider: GapProvider):
        self._config = config
        self._clock: Clock = config.clock
        self._gaps = gap_provider
        self._held_event: int | None = None
        self._last_reported_event = 0
        self._initialized = False
        self._total_reported = 0

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def gap_provider(self) -> GapProvider:
        return self._gaps

    @property
    def held_event(self) -> int | None:
        """Drawn arrival instant not yet due, or None when caught up."""
        return self._held_event

    @property
    def last_reported_event(self) -> int:
        return self._last_reported_event

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def total_reported(self) -> int:
        """Arrivals reported since the last reset."""
        return self._total_reported

    def reset_and_init(self) -> None:
        """Drop any held arrival and rebase the process on the clock's now.

        Safe to call again at any time, e.g. to resynchronize after a clock
        discontinuity. Arrivals between the previous baseline and now are
        discarded, not reported.
        """
        self._held_event = None
        self._last_reported_event = self._clock.now_nanos()
        self._initialized = True
        self._total_reported = 0
        logger.debug(
            "Generator reset: rate=%d unit=%s baseline=%d",
            self._config.rate,
            self._config.reference_unit.name,
            self._last_reported_event,
        )

    def poll(self) -> int:
        """Return the number of arrivals since the previous poll.

        Raises:
            RuntimeError: If the generator was never initialized.
            OverflowError: If an arrival instant leaves the 64-bit range.
        """
        if not self._initialized:
            raise RuntimeError("PoissonEventGenerator polled before reset_and_init()")

        now = self._clock.now_nanos()
        held = self._held_event
        last = self._last_reported_event
        count = 0

        if held is not None:
            if held > now:
                return 0
            count += 1
            last = held
            held = None

        next_gap = self._gaps.next_gap
        while held is None:
            candidate = last + next_gap()
            if candidate > INT64_MAX:
                logger.error("Arrival overflow: last=%d candidate=%d", last, candidate)
                raise OverflowError(f"next arrival {candidate}ns exceeds the 64-bit range")
            if candidate <= now:
                count += 1
                last = candidate
            else:
                held = candidate

        self._held_event = held
        self._last_reported_event = last
        self._total_reported += count
        return count

    def __repr__(self) -> str:
        return (
            f"PoissonEventGenerator(rate={self._config.rate}, "
            f"unit={self._config.reference_unit.name}, "
            f"held={self._held_event}, last={self._last_reported_event})"
        )
