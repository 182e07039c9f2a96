"""Pañchānga helpers derived from sidereal Sun and Moon longitudes.

Every component is a pure function of the two luminary longitudes (plus
the civil date for the weekday).  Index overruns caused by floating point
drift at the end of the cycle are clamped rather than rejected.

The karana mapping deliberately folds the 60 half-tithis onto the seven
movable karanas with ``((n - 1) mod 7) + 1``; the four fixed karanas at the
lunar-month boundary are therefore never produced.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from ..core.angles import normalize_degrees, sign_of
from .locale import DEFAULT_LANGUAGE, localized
from .nakshatra import NakshatraPosition, position_for

__all__ = [
    "KARANA_ARC_DEGREES",
    "TITHI_ARC_DEGREES",
    "YOGA_ARC_DEGREES",
    "Karana",
    "PanchangamResult",
    "SolarMonth",
    "Tithi",
    "Vara",
    "Yoga",
    "karana_from_longitudes",
    "panchang_from_longitudes",
    "solar_month_from_longitude",
    "tithi_from_longitudes",
    "vara_from_datetime",
    "yoga_from_longitudes",
]


TITHI_ARC_DEGREES: float = 360.0 / 30.0
"""Angular span of a single tithi in degrees."""

YOGA_ARC_DEGREES: float = 360.0 / 27.0
"""Angular span of a single yoga in degrees."""

KARANA_ARC_DEGREES: float = TITHI_ARC_DEGREES / 2.0
"""Angular span of a single karana (half tithi) in degrees."""


@dataclass(frozen=True)
class Tithi:
    """Derived lunar day metadata."""

    number: int
    name: str
    local_name: str
    paksha: str
    local_paksha: str
    longitude_delta: float

    @property
    def waxing(self) -> bool:
        return self.paksha == "Shukla"


@dataclass(frozen=True)
class Yoga:
    """Sum of luminary longitudes divided into 27 yogas."""

    number: int
    name: str
    local_name: str
    longitude_sum: float


@dataclass(frozen=True)
class Karana:
    """Half-tithi segment folded onto the karana catalogue."""

    number: int
    name: str
    local_name: str
    half_tithi: int


@dataclass(frozen=True)
class Vara:
    """Civil weekday, numbered from Sunday (0) to Saturday (6)."""

    number: int
    name: str
    local_name: str


@dataclass(frozen=True)
class SolarMonth:
    """Solar month named after the Sun's sidereal sign."""

    number: int
    name: str
    local_name: str


@dataclass(frozen=True)
class PanchangamResult:
    """Complete pañchānga snapshot for a birth moment."""

    moment: datetime
    sun_longitude: float
    moon_longitude: float
    tithi: Tithi
    nakshatra: NakshatraPosition
    nakshatra_local_name: str
    yoga: Yoga
    karana: Karana
    vara: Vara
    solar_month: SolarMonth


_TITHI_NAMES: Sequence[str] = (
    "Pratipada",
    "Dwitiya",
    "Tritiya",
    "Chaturthi",
    "Panchami",
    "Shashthi",
    "Saptami",
    "Ashtami",
    "Navami",
    "Dasami",
    "Ekadashi",
    "Dwadashi",
    "Trayodashi",
    "Chaturdashi",
)

_YOGA_NAMES: Sequence[str] = (
    "Vishkambha",
    "Priti",
    "Ayushman",
    "Saubhagya",
    "Shobhana",
    "Atiganda",
    "Sukarma",
    "Dhriti",
    "Shula",
    "Ganda",
    "Vriddhi",
    "Dhruva",
    "Vyaghata",
    "Harshana",
    "Vajra",
    "Siddhi",
    "Vyatipata",
    "Variyan",
    "Parigha",
    "Shiva",
    "Siddha",
    "Sadhya",
    "Shubha",
    "Shukla",
    "Brahma",
    "Indra",
    "Vaidhriti",
)

_KARANA_NAMES: Sequence[str] = (
    "Bava",
    "Balava",
    "Kaulava",
    "Taitila",
    "Garaja",
    "Vanija",
    "Vishti",
    "Shakuni",
    "Chatushpada",
    "Naga",
    "Kimstughna",
)

_VARA_NAMES: Sequence[str] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_SOLAR_MONTH_NAMES: Sequence[str] = (
    "Chithirai",
    "Vaikasi",
    "Aani",
    "Aadi",
    "Aavani",
    "Purattasi",
    "Aippasi",
    "Karthikai",
    "Margazhi",
    "Thai",
    "Maasi",
    "Panguni",
)


def _tithi_name(number: int) -> str:
    if number == 15:
        return "Purnima"
    if number == 30:
        return "Amavasya"
    return _TITHI_NAMES[(number - 1) % 15]


def tithi_from_longitudes(
    moon_longitude: float,
    sun_longitude: float,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> Tithi:
    """Return the tithi for the provided sidereal longitudes."""

    delta = normalize_degrees(moon_longitude - sun_longitude)
    number = min(int(delta // TITHI_ARC_DEGREES) + 1, 30)
    paksha = "Shukla" if number <= 15 else "Krishna"
    name = _tithi_name(number)
    return Tithi(
        number=number,
        name=name,
        local_name=localized("tithis", number, language, default=name),
        paksha=paksha,
        local_paksha=localized("paksha", paksha, language, default=f"{paksha} Paksha"),
        longitude_delta=delta,
    )


def yoga_from_longitudes(
    moon_longitude: float,
    sun_longitude: float,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> Yoga:
    """Return the yoga for the provided sidereal longitudes."""

    total = normalize_degrees(moon_longitude + sun_longitude)
    number = min(int(total // YOGA_ARC_DEGREES) + 1, 27)
    name = _YOGA_NAMES[number - 1]
    return Yoga(
        number=number,
        name=name,
        local_name=localized("panchang_yogas", number, language, default=name),
        longitude_sum=total,
    )


def karana_from_longitudes(
    moon_longitude: float,
    sun_longitude: float,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> Karana:
    """Return the karana for the provided sidereal longitudes."""

    delta = normalize_degrees(moon_longitude - sun_longitude)
    half_tithi = int(delta // KARANA_ARC_DEGREES) + 1
    if half_tithi > 60:
        half_tithi %= 60
    number = ((half_tithi - 1) % 7) + 1
    name = _KARANA_NAMES[number - 1]
    return Karana(
        number=number,
        name=name,
        local_name=localized("karanas", number, language, default=name),
        half_tithi=half_tithi,
    )


def vara_from_datetime(moment: datetime, *, language: str = DEFAULT_LANGUAGE) -> Vara:
    """Return the civil weekday of ``moment`` (0 = Sunday)."""

    number = (moment.weekday() + 1) % 7
    name = _VARA_NAMES[number]
    return Vara(
        number=number,
        name=name,
        local_name=localized("varas", number, language, default=name),
    )


def solar_month_from_longitude(
    sun_longitude: float, *, language: str = DEFAULT_LANGUAGE
) -> SolarMonth:
    """Return the solar month for the Sun's sidereal longitude."""

    number = sign_of(sun_longitude)
    name = _SOLAR_MONTH_NAMES[number - 1]
    return SolarMonth(
        number=number,
        name=name,
        local_name=localized("solar_months", number, language, default=name),
    )


def panchang_from_longitudes(
    moment: datetime,
    sun_longitude: float,
    moon_longitude: float,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> PanchangamResult:
    """Return pañchānga components for the civil ``moment``."""

    sun = normalize_degrees(sun_longitude)
    moon = normalize_degrees(moon_longitude)
    nakshatra = position_for(moon)
    return PanchangamResult(
        moment=moment,
        sun_longitude=sun,
        moon_longitude=moon,
        tithi=tithi_from_longitudes(moon, sun, language=language),
        nakshatra=nakshatra,
        nakshatra_local_name=nakshatra.nakshatra.local_name(language),
        yoga=yoga_from_longitudes(moon, sun, language=language),
        karana=karana_from_longitudes(moon, sun, language=language),
        vara=vara_from_datetime(moment, language=language),
        solar_month=solar_month_from_longitude(sun, language=language),
    )
