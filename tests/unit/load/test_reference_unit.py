import pytest

from happypoisson.core.temporal import Duration
from happypoisson.load.reference_unit import ReferenceUnit


def test_closed_set_of_units():
    assert len(ReferenceUnit) == 23
    assert ReferenceUnit.MILLIS_1.nanos == 1_000_000
    assert ReferenceUnit.SECOND_45.nanos == 45_000_000_000
    assert ReferenceUnit.HALF_HOUR.nanos == 1_800_000_000_000
    assert ReferenceUnit.HOUR.nanos == 3_600_000_000_000
    assert ReferenceUnit.DAY_1.nanos == 86_400_000_000_000


def test_duration_matches_nanos():
    assert ReferenceUnit.MINUTE_7.duration == Duration.from_seconds(420)
    assert ReferenceUnit.MINUTE_7.millis == 420_000


@pytest.mark.parametrize("name", ["hour", "HOUR", " Hour "])
def test_parse_is_case_insensitive(name):
    assert ReferenceUnit.parse(name) is ReferenceUnit.HOUR


def test_parse_passes_members_through():
    assert ReferenceUnit.parse(ReferenceUnit.MILLIS_13) is ReferenceUnit.MILLIS_13


def test_parse_unknown_unit_lists_choices():
    with pytest.raises(ValueError, match="MILLIS_1"):
        ReferenceUnit.parse("fortnight")
