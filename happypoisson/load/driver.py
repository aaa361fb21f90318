"""Drive a generator with a tick clock and summarize what it reported."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from happypoisson.core.clock import TickClock
from happypoisson.load.generator import PoissonEventGenerator
from happypoisson.load.reference_unit import ReferenceUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Per-tick statistics of one simulated run.

    Attributes:
        ticks: Number of clock ticks driven.
        total: Sum of all poll counts.
        min_per_tick: Smallest count reported by a single poll.
        max_per_tick: Largest count reported by a single poll.
        elapsed_nanos: Simulated time covered by the run.
    """

    ticks: int
    total: int
    min_per_tick: int
    max_per_tick: int
    elapsed_nanos: int

    @property
    def mean_per_tick(self) -> float:
        if self.ticks == 0:
            return 0.0
        return self.total / self.ticks

    def deviation_pct(self, expected: float) -> float:
        """Absolute deviation of ``total`` from ``expected``, in percent."""
        if expected <= 0:
            raise ValueError(f"expected must be > 0, got {expected}")
        return 100.0 * abs(self.total - expected) / expected


def expected_events(rate: int, reference_unit: ReferenceUnit, elapsed_nanos: int) -> float:
    """Mean number of arrivals (rate * T) over ``elapsed_nanos``."""
    return rate * elapsed_nanos / reference_unit.nanos


def run_ticks(generator: PoissonEventGenerator, clock: TickClock, ticks: int) -> RunSummary:
    """Advance ``clock`` one tick at a time and poll after every tick.

    The generator must be driven by ``clock`` and already initialized.
    """
    if ticks < 0:
        raise ValueError(f"ticks must be >= 0, got {ticks}")
    if generator.config.clock is not clock:
        raise ValueError("generator is not driven by the given clock")

    start = clock.now_nanos()
    total = 0
    lowest = None
    highest = 0
    poll = generator.poll
    advance = clock.advance_tick
    for _ in range(ticks):
        advance()
        count = poll()
        total += count
        if lowest is None or count < lowest:
            lowest = count
        if count > highest:
            highest = count

    summary = RunSummary(
        ticks=ticks,
        total=total,
        min_per_tick=lowest or 0,
        max_per_tick=highest,
        elapsed_nanos=clock.now_nanos() - start,
    )
    logger.info(
        "Run finished: ticks=%d total=%d mean/tick=%.4f", ticks, total, summary.mean_per_tick
    )
    return summary
