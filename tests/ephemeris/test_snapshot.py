from datetime import UTC, datetime, timedelta, timezone

import pytest

from jataka.ephemeris import UNIX_EPOCH_JD, EphemerisSample, EphemerisSnapshot, julian_day
from jataka.ephemeris.swisseph_adapter import resolve_house_code


def test_julian_day_epochs():
    assert julian_day(datetime(2000, 1, 1, 12, tzinfo=UTC)) == pytest.approx(2451545.0)
    assert julian_day(datetime(1970, 1, 1, tzinfo=UTC)) == pytest.approx(UNIX_EPOCH_JD)


def test_julian_day_converts_offsets():
    ist = timezone(timedelta(hours=5, minutes=30))
    assert julian_day(datetime(2000, 1, 1, 17, 30, tzinfo=ist)) == pytest.approx(2451545.0)


def test_julian_day_rejects_naive_datetimes():
    with pytest.raises(ValueError):
        julian_day(datetime(2000, 1, 1, 12))


def test_snapshot_requires_twelve_cusps():
    with pytest.raises(ValueError, match="12 house cusps"):
        EphemerisSnapshot(
            julian_day=2451545.0,
            bodies={"Sun": EphemerisSample(280.0)},
            cusps=tuple(range(11)),
            ascendant=0.0,
        )


def test_resolve_house_code_aliases():
    assert resolve_house_code("Whole Sign") == ("whole_sign", b"W")
    assert resolve_house_code("placidus") == ("placidus", b"P")
    assert resolve_house_code("bhava") == ("sripati", b"S")
    with pytest.raises(ValueError, match="Unsupported house system"):
        resolve_house_code("campanus")
