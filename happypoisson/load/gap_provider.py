"""Sources of inter-arrival gaps for the event generator.

- UnbufferedGapProvider: one fresh uniform draw per gap.
- BufferedGapProvider: draws N gaps up front and serves them cyclically,
  taking the random source off the polling path.

Buffering trades statistical independence for throughput. With the default
``BufferPolicy.RECYCLE`` the same N gaps replay forever once the buffer wraps,
so a long-running generator with a small N shows a periodic, non-random
pattern after warm-up. ``BufferPolicy.REFRESH`` redraws the whole buffer each
time it wraps instead, paying the O(N) cost again at every wrap.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from happypoisson.load.reference_unit import ReferenceUnit
from happypoisson.load.sampler import exponential_gap_nanos
from happypoisson.load.uniform import UniformSource

logger = logging.getLogger(__name__)


class BufferPolicy(Enum):
    RECYCLE = "recycle"  # replay the same gaps after wrapping
    REFRESH = "refresh"  # redraw all gaps after wrapping


class GapProvider(ABC):
    """Yields exponential inter-arrival gaps for a fixed rate and unit.

    Attributes:
        rate: Events per reference unit.
        reference_unit: Unit the rate is expressed against.
    """

    def __init__(self, rate: int, reference_unit: ReferenceUnit, source: UniformSource):
        self.rate = rate
        self.reference_unit = reference_unit
        self._source = source
        self._unit_nanos = reference_unit.nanos

    def _sample_gap(self) -> int:
        return exponential_gap_nanos(self.rate, self._unit_nanos, self._source.next())

    @abstractmethod
    def next_gap(self) -> int:
        """Return the next inter-arrival gap in nanoseconds."""


class UnbufferedGapProvider(GapProvider):
    def next_gap(self) -> int:
        return self._sample_gap()


class BufferedGapProvider(GapProvider):
    """Serves gaps from a buffer filled eagerly at construction.

    Construction draws exactly ``size`` samples from the source and blocks
    until they are all computed. Afterwards, with ``RECYCLE``, the source is
    never called again.

    Args:
        rate: Events per reference unit.
        reference_unit: Unit the rate is expressed against.
        source: Zero-guarded uniform source.
        size: Number of gaps to precompute. Must be > 0.
        policy: What to do when the read index wraps.
    """

    def __init__(
        self,
        rate: int,
        reference_unit: ReferenceUnit,
        source: UniformSource,
        size: int,
        policy: BufferPolicy = BufferPolicy.RECYCLE,
    ):
        if size <= 0:
            raise ValueError(f"buffer size must be > 0, got {size}")
        super().__init__(rate, reference_unit, source)
        self.size = size
        self.policy = policy
        self._index = 0
        self._buffer: list[int] = []
        self._fill()

    def _fill(self) -> None:
        gaps = [self._sample_gap() for _ in range(self.size)]
        # A cycle of zero gaps never moves the arrival cursor past "now".
        if not any(gaps):
            logger.error("Gap buffer of size %d holds only 0ns gaps", self.size)
            raise ValueError(
                f"all {self.size} precomputed gaps round to 0ns; "
                "use a larger buffer or a coarser rate"
            )
        self._buffer = gaps
        logger.debug(
            "Filled gap buffer: size=%d rate=%d unit=%s policy=%s",
            self.size,
            self.rate,
            self.reference_unit.name,
            self.policy.value,
        )

    @property
    def index(self) -> int:
        return self._index

    @property
    def gaps(self) -> tuple[int, ...]:
        return tuple(self._buffer)

    def next_gap(self) -> int:
        gap = self._buffer[self._index]
        self._index = (self._index + 1) % self.size
        if self._index == 0 and self.policy is BufferPolicy.REFRESH:
            self._fill()
        return gap
