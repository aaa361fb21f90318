"""happypoisson: Poisson arrival counting for load generators and simulations.

Build a generator for a rate per reference unit, advance a clock, and ask how
many events arrived since the last poll:

    from happypoisson import Duration, GeneratorBuilder, ReferenceUnit, TickClock

    clock = TickClock(Duration.from_seconds(2))
    generator = GeneratorBuilder(100, ReferenceUnit.HOUR).with_clock(clock).build()
    clock.advance_tick()
    generator.poll()

The library is silent by default; see ``happypoisson.logging_config``.
"""

import logging

logging.getLogger("happypoisson").addHandler(logging.NullHandler())

from happypoisson.core.clock import REAL_TIME_CLOCK, Clock, MonotonicClock, TickClock, TickState
from happypoisson.core.temporal import INT64_MAX, Duration
from happypoisson.load.config import GeneratorBuilder, GeneratorConfig, build_generator
from happypoisson.load.driver import RunSummary, expected_events, run_ticks
from happypoisson.load.gap_provider import (
    BufferedGapProvider,
    BufferPolicy,
    GapProvider,
    UnbufferedGapProvider,
)
from happypoisson.load.generator import PoissonEventGenerator
from happypoisson.load.reference_unit import ReferenceUnit
from happypoisson.load.sampler import exponential_gap_nanos
from happypoisson.load.uniform import NonZeroUniform, NumpyUniformSource, UniformSource
from happypoisson.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)

__version__ = "0.1.0"

__all__ = [
    # Time
    "Clock",
    "Duration",
    "INT64_MAX",
    "MonotonicClock",
    "REAL_TIME_CLOCK",
    "TickClock",
    "TickState",
    # Load generation
    "BufferPolicy",
    "BufferedGapProvider",
    "GapProvider",
    "GeneratorBuilder",
    "GeneratorConfig",
    "NonZeroUniform",
    "NumpyUniformSource",
    "PoissonEventGenerator",
    "ReferenceUnit",
    "RunSummary",
    "UnbufferedGapProvider",
    "UniformSource",
    "build_generator",
    "exponential_gap_nanos",
    "expected_events",
    "run_ticks",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
]
