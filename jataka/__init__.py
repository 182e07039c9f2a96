"""Jataka: Vedic horoscope derivation from sidereal ephemeris snapshots."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _get_version

try:
    __version__ = _get_version("jataka")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .ephemeris import (  # noqa: E402
    EphemerisProvider,
    EphemerisSample,
    EphemerisSnapshot,
    EphemerisUnavailable,
    SwissEphemerisProvider,
    julian_day,
)
from .vedic import (  # noqa: E402
    BirthInput,
    Computed,
    Horoscope,
    HoroscopeOptions,
    InvalidBirthInput,
    Omitted,
    SectionUnavailable,
    build_horoscope,
    compute_horoscope,
    require,
)


def get_version() -> str:
    """Return the resolved Jataka package version."""

    return __version__


__all__ = [
    "__version__",
    "BirthInput",
    "Computed",
    "EphemerisProvider",
    "EphemerisSample",
    "EphemerisSnapshot",
    "EphemerisUnavailable",
    "Horoscope",
    "HoroscopeOptions",
    "InvalidBirthInput",
    "Omitted",
    "SectionUnavailable",
    "SwissEphemerisProvider",
    "build_horoscope",
    "compute_horoscope",
    "get_version",
    "julian_day",
    "require",
]
