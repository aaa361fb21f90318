"""Integer-nanosecond durations.

All time arithmetic in happypoisson is done on plain ``int`` nanoseconds so
that arrival instants can be compared exactly. ``Duration`` is a thin value
type used at the edges (tick sizes, reference units) where seconds or
milliseconds are the natural way to spell a length of time.
"""

from __future__ import annotations

from typing import Union

# Signed 64-bit range; arrival instants and clock readings must stay inside it.
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000


class Duration:
    """A length of time stored as integer nanoseconds."""

    __slots__ = ("nanoseconds",)

    def __init__(self, nanoseconds: int):
        self.nanoseconds = int(nanoseconds)

    @classmethod
    def from_seconds(cls, seconds: Union[int, float]) -> Duration:
        if isinstance(seconds, int):
            return cls(seconds * NANOS_PER_SECOND)
        return cls(round(seconds * NANOS_PER_SECOND))

    @classmethod
    def from_millis(cls, millis: Union[int, float]) -> Duration:
        if isinstance(millis, int):
            return cls(millis * NANOS_PER_MILLI)
        return cls(round(millis * NANOS_PER_MILLI))

    def to_seconds(self) -> float:
        return float(self.nanoseconds) / NANOS_PER_SECOND

    def __mul__(self, factor: int) -> Duration:
        if isinstance(factor, int):
            return Duration(self.nanoseconds * factor)
        return NotImplemented

    __rmul__ = __mul__

    def __add__(self, other: Duration) -> Duration:
        if isinstance(other, Duration):
            return Duration(self.nanoseconds + other.nanoseconds)
        return NotImplemented

    def __sub__(self, other: Duration) -> Duration:
        if isinstance(other, Duration):
            return Duration(self.nanoseconds - other.nanoseconds)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __le__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds <= other.nanoseconds

    def __gt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds > other.nanoseconds

    def __ge__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds >= other.nanoseconds

    def __hash__(self):
        return hash(self.nanoseconds)

    def __repr__(self) -> str:
        return f"Duration({self.nanoseconds}ns)"
