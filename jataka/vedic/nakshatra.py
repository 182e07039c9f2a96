"""Nakshatra and pada calculations for sidereal longitudes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..core.angles import normalize_degrees
from .locale import DEFAULT_LANGUAGE, localized

__all__ = [
    "LORD_SEQUENCE",
    "NAKSHATRA_ARC_DEGREES",
    "NAKSHATRA_NAMES",
    "PADA_ARC_DEGREES",
    "Nakshatra",
    "NakshatraPosition",
    "lord_of_nakshatra",
    "nakshatra_info",
    "nakshatra_of",
    "pada_of",
    "position_for",
]

NAKSHATRA_ARC_DEGREES = 360.0 / 27.0
PADA_ARC_DEGREES = NAKSHATRA_ARC_DEGREES / 4.0

LORD_SEQUENCE: Sequence[str] = (
    "Ketu",
    "Venus",
    "Sun",
    "Moon",
    "Mars",
    "Rahu",
    "Jupiter",
    "Saturn",
    "Mercury",
)

NAKSHATRA_NAMES: Sequence[str] = (
    "Ashwini",
    "Bharani",
    "Krittika",
    "Rohini",
    "Mrigashira",
    "Ardra",
    "Punarvasu",
    "Pushya",
    "Ashlesha",
    "Magha",
    "Purva Phalguni",
    "Uttara Phalguni",
    "Hasta",
    "Chitra",
    "Swati",
    "Vishakha",
    "Anuradha",
    "Jyeshtha",
    "Mula",
    "Purva Ashadha",
    "Uttara Ashadha",
    "Shravana",
    "Dhanishta",
    "Shatabhisha",
    "Purva Bhadrapada",
    "Uttara Bhadrapada",
    "Revati",
)


@dataclass(frozen=True)
class Nakshatra:
    """Metadata describing a nakshatra (one-based ``number``)."""

    number: int
    name: str
    lord: str

    @property
    def start_longitude(self) -> float:
        return (self.number - 1) * NAKSHATRA_ARC_DEGREES

    def local_name(self, language: str = DEFAULT_LANGUAGE) -> str:
        return localized("nakshatras", self.number, language, default=self.name)


@dataclass(frozen=True)
class NakshatraPosition:
    """Detailed placement of a longitude within a nakshatra."""

    nakshatra: Nakshatra
    pada: int
    offset: float
    longitude: float

    @property
    def progress(self) -> float:
        """Fraction of the nakshatra already traversed (0–1)."""

        return min(1.0, self.offset / NAKSHATRA_ARC_DEGREES)


_NAKSHATRAS: Sequence[Nakshatra] = tuple(
    Nakshatra(number=idx + 1, name=name, lord=LORD_SEQUENCE[idx % 9])
    for idx, name in enumerate(NAKSHATRA_NAMES)
)


def nakshatra_of(longitude: float) -> int:
    """Return the one-based nakshatra (1–27) for ``longitude`` in degrees."""

    lon = normalize_degrees(longitude)
    return min(int(lon // NAKSHATRA_ARC_DEGREES) + 1, 27)


def nakshatra_info(number: int) -> Nakshatra:
    """Return the :class:`Nakshatra` metadata for the one-based ``number``."""

    return _NAKSHATRAS[(number - 1) % len(_NAKSHATRAS)]


def pada_of(longitude: float) -> int:
    """Return the one-based pada (1–4) for ``longitude``."""

    lon = normalize_degrees(longitude)
    offset = lon - (nakshatra_of(lon) - 1) * NAKSHATRA_ARC_DEGREES
    return min(int(offset // PADA_ARC_DEGREES) + 1, 4)


def lord_of_nakshatra(number: int) -> str:
    """Return the Vimśottarī lord ruling nakshatra ``number``."""

    return nakshatra_info(number).lord


def position_for(longitude: float) -> NakshatraPosition:
    """Return a :class:`NakshatraPosition` for ``longitude``."""

    lon = normalize_degrees(longitude)
    number = nakshatra_of(lon)
    offset = lon - (number - 1) * NAKSHATRA_ARC_DEGREES
    return NakshatraPosition(
        nakshatra=nakshatra_info(number),
        pada=pada_of(lon),
        offset=offset,
        longitude=lon,
    )
