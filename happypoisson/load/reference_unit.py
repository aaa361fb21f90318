"""Reference units that an event rate is expressed against.

A rate is always "N events per reference unit", e.g. 100 per HOUR. The set of
units is closed on purpose: when a rate does not fit a unit naturally, pick a
coarser or finer one. One event per minute is better written as 60 per HOUR,
and 86_400_000 per DAY_1 as 60_000 per MINUTE_1. Precision is the same for
every unit.
"""

from __future__ import annotations

from enum import Enum

from happypoisson.core.temporal import NANOS_PER_MILLI, Duration


class ReferenceUnit(Enum):
    """Admissible reference durations, valued in milliseconds."""

    MILLIS_1 = 1
    MILLIS_2 = 2
    MILLIS_3 = 3
    MILLIS_5 = 5
    MILLIS_7 = 7
    MILLIS_10 = 10
    MILLIS_11 = 11
    MILLIS_13 = 13
    MILLIS_17 = 17
    MILLIS_19 = 19

    SECOND_1 = 1_000
    SECOND_3 = 3_000
    SECOND_5 = 5_000
    SECOND_45 = 45_000

    MINUTE_1 = 60_000
    MINUTE_7 = 420_000

    QUARTER_HOUR = 900_000
    HALF_HOUR = 1_800_000
    HOUR = 3_600_000
    HOURS_3 = 10_800_000
    HOURS_5 = 18_000_000
    HOURS_7 = 25_200_000

    DAY_1 = 86_400_000

    @property
    def millis(self) -> int:
        return self.value

    @property
    def nanos(self) -> int:
        return self.value * NANOS_PER_MILLI

    @property
    def duration(self) -> Duration:
        return Duration(self.nanos)

    @classmethod
    def parse(cls, name: str | ReferenceUnit) -> ReferenceUnit:
        """Look up a unit by name, ignoring case.

        Raises:
            ValueError: If the name is not one of the admissible units.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            allowed = ", ".join(member.name for member in cls)
            raise ValueError(f"Unknown reference unit {name!r}; expected one of: {allowed}") from None
