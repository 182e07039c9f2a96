"""Ephemeris data carried into the pure derivation core."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

__all__ = [
    "UNIX_EPOCH_JD",
    "EphemerisProvider",
    "EphemerisSample",
    "EphemerisSnapshot",
    "julian_day",
]

UNIX_EPOCH_JD = 2440587.5


def julian_day(moment: datetime) -> float:
    """Return the Julian day (UT) for a timezone-aware :class:`datetime`."""

    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        raise ValueError("datetime must be timezone-aware in UTC or convertible to UTC")
    moment_utc = moment.astimezone(UTC)
    return moment_utc.timestamp() / 86400.0 + UNIX_EPOCH_JD


@dataclass(frozen=True)
class EphemerisSample:
    """Sidereal ecliptic position of one body at the snapshot instant."""

    longitude: float
    latitude: float = 0.0
    speed_longitude: float = 0.0
    distance_au: float = 0.0
    speed_latitude: float = 0.0
    speed_distance: float = 0.0


@dataclass(frozen=True)
class EphemerisSnapshot:
    """Positions, house cusps, and ascendant for a single Julian day.

    ``bodies`` is keyed by graha name and includes ``Rahu`` (mean node);
    ``Ketu`` is derived by the chart builder.  ``cusps`` holds the twelve
    sidereal cusp longitudes, house 1 first.
    """

    julian_day: float
    bodies: Mapping[str, EphemerisSample]
    cusps: Sequence[float]
    ascendant: float
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.cusps) != 12:
            raise ValueError(f"expected 12 house cusps, received {len(self.cusps)}")


class EphemerisProvider(Protocol):
    """Provider contract returning sidereal positions for a birth instant."""

    def snapshot(
        self, julian_day: float, latitude: float, longitude: float
    ) -> EphemerisSnapshot:
        """Return bodies, cusps, and ascendant at ``julian_day`` for the location."""

        ...
