"""Uniform random sources feeding the exponential sampler.

The sampler needs values strictly inside (0, 1). Raw sources return values in
[0, 1); ``NonZeroUniform`` retries the underlying source until it produces a
non-zero value and passes everything else through untouched, so the
distribution is otherwise unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Union, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for uniform random sources over [0, 1)."""

    def next(self) -> float:
        """Return the next uniform sample in [0, 1)."""
        ...


UniformLike = Union[UniformSource, Callable[[], float]]


class CallableUniformSource:
    """Adapts a zero-argument callable to the ``UniformSource`` protocol."""

    def __init__(self, fn: Callable[[], float]):
        self._fn = fn

    def next(self) -> float:
        return self._fn()


class NumpyUniformSource:
    """Uniform source backed by a numpy ``Generator``.

    Args:
        seed: Optional seed; the same seed reproduces the same sequence.
    """

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def next(self) -> float:
        return float(self._rng.random())


def as_uniform_source(source: UniformLike) -> UniformSource:
    """Coerce an object with ``next()`` or a plain callable into a source."""
    if isinstance(source, UniformSource):
        return source
    if callable(source):
        return CallableUniformSource(source)
    raise TypeError(f"Expected a UniformSource or a zero-argument callable, got {type(source).__name__}")


class NonZeroUniform:
    """Wraps a uniform source so that it never yields exactly 0.0."""

    def __init__(self, source: UniformLike):
        if isinstance(source, NonZeroUniform):
            source = source.inner
        self._inner = as_uniform_source(source)

    @property
    def inner(self) -> UniformSource:
        return self._inner

    def next(self) -> float:
        value = self._inner.next()
        while value == 0.0:
            logger.debug("Uniform source returned 0.0; drawing again")
            value = self._inner.next()
        return value
