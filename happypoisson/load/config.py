"""Generator configuration and builder.

Usage scenarios::

    # 100 events per hour on the real-time clock
    generator = GeneratorBuilder(100, ReferenceUnit.HOUR).build()

    # 1000 events per millisecond, custom PRNG, 100k precomputed gaps
    generator = (
        GeneratorBuilder(1000, ReferenceUnit.MILLIS_1)
        .with_uniform_source(my_prng)
        .with_buffering(100_000)
        .build()
    )

    # Same thing as a single call
    generator = build_generator(1000, "millis_1", uniform_source=my_prng, buffer_size=100_000)

All validation happens here, at build time. Invalid values raise ValueError
and are never coerced.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass

from happypoisson.core.clock import REAL_TIME_CLOCK, Clock
from happypoisson.load.gap_provider import (
    BufferedGapProvider,
    BufferPolicy,
    GapProvider,
    UnbufferedGapProvider,
)
from happypoisson.load.generator import PoissonEventGenerator
from happypoisson.load.reference_unit import ReferenceUnit
from happypoisson.load.uniform import NonZeroUniform, NumpyUniformSource, UniformLike

logger = logging.getLogger(__name__)


def _check_rate(rate, reference_unit: ReferenceUnit) -> int:
    if isinstance(rate, bool) or not isinstance(rate, numbers.Integral):
        raise ValueError(f"rate must be an integer, got {type(rate).__name__} {rate!r}")
    if rate <= 0:
        raise ValueError(f"rate must be > 0, got {rate}")
    # Gaps are whole nanoseconds; a mean gap below 1ns rounds every gap to 0.
    if rate > reference_unit.nanos:
        raise ValueError(
            f"rate {rate} per {reference_unit.name} is finer than 1 event per ns "
            f"(max {reference_unit.nanos}); use a coarser reference unit"
        )
    return int(rate)


def _check_buffer_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise ValueError(f"buffer size must be an integer, got {type(size).__name__} {size!r}")
    if size < 0:
        raise ValueError(f"buffer size must be >= 0, got {size}")
    return int(size)


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable configuration of a PoissonEventGenerator.

    Attributes:
        rate: Events per reference unit (> 0).
        reference_unit: Unit the rate is expressed against.
        clock: Time source.
        uniform_source: Zero-guarded uniform random source.
        buffer_size: Number of precomputed gaps; 0 disables buffering.
        buffer_policy: Behaviour of the buffer once it wraps.
    """

    rate: int
    reference_unit: ReferenceUnit
    clock: Clock
    uniform_source: NonZeroUniform
    buffer_size: int = 0
    buffer_policy: BufferPolicy = BufferPolicy.RECYCLE

    def __post_init__(self):
        object.__setattr__(self, "reference_unit", ReferenceUnit.parse(self.reference_unit))
        object.__setattr__(self, "rate", _check_rate(self.rate, self.reference_unit))
        object.__setattr__(self, "buffer_size", _check_buffer_size(self.buffer_size))
        if not isinstance(self.uniform_source, NonZeroUniform):
            object.__setattr__(self, "uniform_source", NonZeroUniform(self.uniform_source))
        if not isinstance(self.clock, Clock):
            raise ValueError(f"clock must provide now_nanos(), got {type(self.clock).__name__}")

    @property
    def is_buffered(self) -> bool:
        return self.buffer_size > 0

    @property
    def mean_gap_nanos(self) -> float:
        return self.reference_unit.nanos / self.rate

    def create_gap_provider(self) -> GapProvider:
        if self.is_buffered:
            return BufferedGapProvider(
                self.rate,
                self.reference_unit,
                self.uniform_source,
                self.buffer_size,
                self.buffer_policy,
            )
        return UnbufferedGapProvider(self.rate, self.reference_unit, self.uniform_source)


class GeneratorBuilder:
    """Fluent builder for PoissonEventGenerator.

    Args:
        rate: Events per reference unit. Must be a positive integer.
        reference_unit: A ReferenceUnit or its name (case-insensitive).
    """

    def __init__(self, rate: int, reference_unit: ReferenceUnit | str):
        self._reference_unit = ReferenceUnit.parse(reference_unit)
        self._rate = _check_rate(rate, self._reference_unit)
        self._clock: Clock = REAL_TIME_CLOCK
        self._uniform_source: UniformLike | None = None
        self._buffer_size = 0
        self._buffer_policy = BufferPolicy.RECYCLE

    def with_clock(self, clock: Clock) -> GeneratorBuilder:
        if clock is None:
            raise ValueError("clock must not be None")
        self._clock = clock
        return self

    def with_uniform_source(self, source: UniformLike) -> GeneratorBuilder:
        if source is None:
            raise ValueError("uniform source must not be None")
        self._uniform_source = source
        return self

    def with_buffering(self, size: int, policy: BufferPolicy = BufferPolicy.RECYCLE) -> GeneratorBuilder:
        """Precompute ``size`` gaps at build time. A size of 0 disables buffering."""
        self._buffer_size = _check_buffer_size(size)
        self._buffer_policy = BufferPolicy(policy)
        return self

    def build_config(self) -> GeneratorConfig:
        source = self._uniform_source if self._uniform_source is not None else NumpyUniformSource()
        return GeneratorConfig(
            rate=self._rate,
            reference_unit=self._reference_unit,
            clock=self._clock,
            uniform_source=NonZeroUniform(source),
            buffer_size=self._buffer_size,
            buffer_policy=self._buffer_policy,
        )

    def build(self) -> PoissonEventGenerator:
        """Build an initialized generator, ready to poll.

        With buffering enabled this blocks while all gaps are drawn.
        """
        config = self.build_config()
        generator = PoissonEventGenerator(config, config.create_gap_provider())
        generator.reset_and_init()
        logger.debug(
            "Built generator: rate=%d unit=%s buffer_size=%d policy=%s clock=%r",
            config.rate,
            config.reference_unit.name,
            config.buffer_size,
            config.buffer_policy.value,
            config.clock,
        )
        return generator


def build_generator(
    rate: int,
    reference_unit: ReferenceUnit | str,
    *,
    clock: Clock | None = None,
    uniform_source: UniformLike | None = None,
    buffer_size: int = 0,
    buffer_policy: BufferPolicy = BufferPolicy.RECYCLE,
) -> PoissonEventGenerator:
    """Validate the options and return an initialized generator."""
    builder = GeneratorBuilder(rate, reference_unit).with_buffering(buffer_size, buffer_policy)
    if clock is not None:
        builder.with_clock(clock)
    if uniform_source is not None:
        builder.with_uniform_source(uniform_source)
    return builder.build()
