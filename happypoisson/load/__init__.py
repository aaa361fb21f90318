"""Poisson load generation: sampling, buffering and event counting."""

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
from happypoisson.load.sampler import exponential_gap_nanos, round_half_away
from happypoisson.load.uniform import (
    CallableUniformSource,
    NonZeroUniform,
    NumpyUniformSource,
    UniformSource,
)

__all__ = [
    "BufferPolicy",
    "BufferedGapProvider",
    "CallableUniformSource",
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
    "round_half_away",
    "run_ticks",
]
