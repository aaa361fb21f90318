"""
Shared pytest fixtures for happy-poisson tests.
"""

import logging
from pathlib import Path

import pytest

from happypoisson.load.gap_provider import GapProvider
from happypoisson.load.reference_unit import ReferenceUnit


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: statistical convergence runs (many polls)")


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_dir = test_output_root / module_name / request.node.name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture(autouse=True)
def reset_happypoisson_logging():
    """Start every test with only a NullHandler on the library logger."""
    logger = logging.getLogger("happypoisson")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()


class CountingUniform:
    """Uniform source stub that replays scripted values and counts calls.

    The last scripted value repeats once the script is exhausted.
    """

    def __init__(self, *values: float):
        self._values = list(values)
        self.calls = 0

    def next(self) -> float:
        self.calls += 1
        index = min(self.calls, len(self._values)) - 1
        return self._values[index]


class ScriptedGaps(GapProvider):
    """Gap provider returning fixed gaps, cycling through the script."""

    def __init__(self, *gaps: int):
        super().__init__(1, ReferenceUnit.SECOND_1, source=None)
        self._script = list(gaps)
        self.draws = 0

    def next_gap(self) -> int:
        gap = self._script[self.draws % len(self._script)]
        self.draws += 1
        return gap


@pytest.fixture
def counting_uniform():
    return CountingUniform


@pytest.fixture
def scripted_gaps():
    return ScriptedGaps
