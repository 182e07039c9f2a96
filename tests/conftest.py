from __future__ import annotations

import importlib.util
import warnings
from collections.abc import Callable, Mapping

import pytest

from jataka.ephemeris import EphemerisSample, EphemerisSnapshot
from jataka.vedic.chart import VedicChart, build_chart

if importlib.util.find_spec("swisseph") is None:
    warnings.warn(
        "pyswisseph not installed; Swiss-marked tests will be skipped.",
        RuntimeWarning,
        stacklevel=1,
    )

# Aries lagna; only Gajakesari, Raja (Mars) and Anapha yogas fire, and no doshas.
DEFAULT_LONGITUDES: Mapping[str, float] = {
    "Sun": 15.0,
    "Moon": 100.0,
    "Mars": 165.0,
    "Mercury": 45.0,
    "Jupiter": 200.0,
    "Venus": 75.0,
    "Saturn": 255.0,
    "Rahu": 290.0,
}

DEFAULT_SPEEDS: Mapping[str, float] = {
    "Sun": 0.985,
    "Moon": 13.2,
    "Mars": 0.52,
    "Mercury": 1.2,
    "Jupiter": 0.08,
    "Venus": 1.2,
    "Saturn": 0.03,
    "Rahu": -0.053,
}


def _have_pyswisseph() -> bool:
    return importlib.util.find_spec("swisseph") is not None


def pytest_collection_modifyitems(config, items):
    """Skip Swiss-marked tests when pyswisseph is unavailable."""

    if _have_pyswisseph():
        return
    skip_swiss = pytest.mark.skip(reason="Swiss Ephemeris unavailable (no pyswisseph).")
    for item in items:
        if "swiss" in item.keywords:
            item.add_marker(skip_swiss)


def _make_snapshot(
    longitudes: Mapping[str, float] | None = None,
    *,
    lagna_sign: int = 1,
    ascendant_degree: float = 10.0,
    speeds: Mapping[str, float] | None = None,
    latitudes: Mapping[str, float] | None = None,
    omit: tuple[str, ...] = (),
    julian_day: float = 2451545.0,
) -> EphemerisSnapshot:
    placements = dict(DEFAULT_LONGITUDES)
    placements.update(longitudes or {})
    motion = dict(DEFAULT_SPEEDS)
    motion.update(speeds or {})
    lats = dict(latitudes or {})
    bodies = {
        name: EphemerisSample(
            longitude=lon,
            latitude=lats.get(name, 0.0),
            speed_longitude=motion.get(name, 0.0),
        )
        for name, lon in placements.items()
        if name not in omit
    }
    cusps = tuple(((lagna_sign - 1 + idx) % 12) * 30.0 for idx in range(12))
    return EphemerisSnapshot(
        julian_day=julian_day,
        bodies=bodies,
        cusps=cusps,
        ascendant=cusps[0] + ascendant_degree,
    )


@pytest.fixture
def make_snapshot() -> Callable[..., EphemerisSnapshot]:
    """Return a factory building whole-sign snapshots from longitudes."""

    return _make_snapshot


@pytest.fixture
def make_chart() -> Callable[..., VedicChart]:
    """Return a factory building D-1 charts from longitudes."""

    def _factory(longitudes: Mapping[str, float] | None = None, **kwargs) -> VedicChart:
        return build_chart(_make_snapshot(longitudes, **kwargs))

    return _factory
