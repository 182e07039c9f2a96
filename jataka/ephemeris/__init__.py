"""Ephemeris collaborators supplying sidereal positions to the core."""

from __future__ import annotations

from .snapshot import (
    UNIX_EPOCH_JD,
    EphemerisProvider,
    EphemerisSample,
    EphemerisSnapshot,
    julian_day,
)
from .swisseph_adapter import (
    EphemerisUnavailable,
    SwissEphemerisProvider,
    get_swisseph,
    resolve_house_code,
)

__all__ = [
    "UNIX_EPOCH_JD",
    "EphemerisProvider",
    "EphemerisSample",
    "EphemerisSnapshot",
    "EphemerisUnavailable",
    "SwissEphemerisProvider",
    "get_swisseph",
    "julian_day",
    "resolve_house_code",
]
