"""Birth input validation and D-1 (rasi) chart assembly."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from ..core.angles import degree_in_sign, normalize_degrees, sign_of
from ..ephemeris.snapshot import EphemerisSample, EphemerisSnapshot, julian_day
from .data import GRAHAS, NODES, SIGN_LORDS, SIGN_NAMES
from .locale import DEFAULT_LANGUAGE, graha_name, localized
from .nakshatra import NakshatraPosition, position_for

LOG = logging.getLogger(__name__)

__all__ = [
    "BirthInput",
    "Graha",
    "HouseEntry",
    "InvalidBirthInput",
    "VedicChart",
    "build_chart",
    "derive_ketu",
    "house_for_longitude",
    "make_graha",
]


class InvalidBirthInput(ValueError):
    """Raised when birth data falls outside the accepted ranges."""


@dataclass(frozen=True)
class BirthInput:
    """Civil birth moment and place.

    ``moment`` is the naive local clock time; ``utc_offset`` is the zone
    offset in hours east of Greenwich at that moment.
    """

    moment: datetime
    latitude: float
    longitude: float
    utc_offset: float
    place_name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.moment, datetime):
            raise InvalidBirthInput("moment must be a datetime")
        if self.moment.tzinfo is not None:
            raise InvalidBirthInput(
                "moment must be the naive civil time; pass the zone as utc_offset"
            )
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidBirthInput(f"latitude {self.latitude} outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidBirthInput(f"longitude {self.longitude} outside [-180, 180]")
        if not -14.0 <= self.utc_offset <= 14.0:
            raise InvalidBirthInput(f"utc_offset {self.utc_offset} outside [-14, 14]")

    @property
    def utc_moment(self) -> datetime:
        """Return the birth instant as an aware UTC datetime."""

        return (self.moment - timedelta(hours=self.utc_offset)).replace(tzinfo=UTC)

    @property
    def julian_day(self) -> float:
        return julian_day(self.utc_moment)


@dataclass(frozen=True)
class Graha:
    """Sidereal placement of one graha."""

    name: str
    longitude: float
    latitude: float
    speed: float
    retrograde: bool
    sign: int
    degree: float
    nakshatra: NakshatraPosition
    house: int | None = None
    distance_au: float = 0.0
    speed_latitude: float = 0.0
    speed_distance: float = 0.0

    @property
    def sign_name(self) -> str:
        return SIGN_NAMES[self.sign - 1]

    @property
    def sign_lord(self) -> str:
        return SIGN_LORDS[self.sign]

    @property
    def is_node(self) -> bool:
        return self.name in NODES

    def local_name(self, language: str = DEFAULT_LANGUAGE) -> str:
        return graha_name(self.name, language)


@dataclass(frozen=True)
class HouseEntry:
    """A bhava with its cusp, sign, lord, and occupants."""

    number: int
    cusp: float
    sign: int
    lord: str
    occupants: tuple[str, ...] = ()

    @property
    def sign_name(self) -> str:
        return SIGN_NAMES[self.sign - 1]

    def local_sign_name(self, language: str = DEFAULT_LANGUAGE) -> str:
        return localized("rasis", self.sign, language, default=self.sign_name)


@dataclass(frozen=True)
class VedicChart:
    """D-1 chart: nine grahas, twelve houses, and the lagna."""

    julian_day: float
    lagna: float
    lagna_sign: int
    grahas: Mapping[str, Graha]
    houses: tuple[HouseEntry, ...]

    def __contains__(self, name: object) -> bool:
        return name in self.grahas

    def __iter__(self) -> Iterator[Graha]:
        return iter(self.grahas.values())

    def get(self, name: str) -> Graha | None:
        return self.grahas.get(name)

    def house(self, number: int) -> HouseEntry:
        return self.houses[(number - 1) % 12]

    @property
    def lagna_sign_name(self) -> str:
        return SIGN_NAMES[self.lagna_sign - 1]


def house_for_longitude(longitude: float, cusps: Sequence[float]) -> int:
    """Return the house (1–12) whose cusp interval contains ``longitude``.

    The interval of house ``i`` is ``[cusp[i], cusp[i + 1])`` with house 12
    wrapping back to cusp 1.  Degenerate cusp sets that leave the longitude
    uncovered resolve to house 1.
    """

    lon = normalize_degrees(longitude)
    for idx in range(12):
        start = normalize_degrees(cusps[idx])
        end = normalize_degrees(cusps[(idx + 1) % 12])
        if start <= end:
            if start <= lon < end:
                return idx + 1
        elif lon >= start or lon < end:
            return idx + 1
    LOG.warning(
        {
            "event": "house_fallback",
            "longitude": lon,
            "cusps": [float(c) for c in cusps],
        }
    )
    return 1


def make_graha(
    name: str,
    longitude: float,
    *,
    latitude: float = 0.0,
    speed: float = 0.0,
    house: int | None = None,
    retrograde: bool | None = None,
    distance_au: float = 0.0,
    speed_latitude: float = 0.0,
    speed_distance: float = 0.0,
) -> Graha:
    """Build a :class:`Graha` with derived sign, degree, and nakshatra."""

    lon = normalize_degrees(longitude)
    if retrograde is None:
        retrograde = name in NODES or speed < 0.0
    return Graha(
        name=name,
        longitude=lon,
        latitude=latitude,
        speed=speed,
        retrograde=retrograde,
        sign=sign_of(lon),
        degree=degree_in_sign(lon),
        nakshatra=position_for(lon),
        house=house,
        distance_au=distance_au,
        speed_latitude=speed_latitude,
        speed_distance=speed_distance,
    )


def derive_ketu(rahu: EphemerisSample) -> EphemerisSample:
    """Return Ketu's sample as the point opposite ``rahu``."""

    return EphemerisSample(
        longitude=normalize_degrees(rahu.longitude + 180.0),
        latitude=-rahu.latitude,
        speed_longitude=rahu.speed_longitude,
        distance_au=rahu.distance_au,
        speed_latitude=-rahu.speed_latitude,
        speed_distance=rahu.speed_distance,
    )


def build_chart(snapshot: EphemerisSnapshot) -> VedicChart:
    """Assemble the D-1 chart from an ephemeris snapshot."""

    samples: dict[str, EphemerisSample] = dict(snapshot.bodies)
    if "Rahu" in samples and "Ketu" not in samples:
        samples["Ketu"] = derive_ketu(samples["Rahu"])

    cusps = [normalize_degrees(c) for c in snapshot.cusps]
    grahas: dict[str, Graha] = {}
    for name in GRAHAS:
        sample = samples.get(name)
        if sample is None:
            LOG.debug("Snapshot has no sample for %s; skipping", name)
            continue
        grahas[name] = make_graha(
            name,
            sample.longitude,
            latitude=sample.latitude,
            speed=sample.speed_longitude,
            house=house_for_longitude(sample.longitude, cusps),
            distance_au=sample.distance_au,
            speed_latitude=sample.speed_latitude,
            speed_distance=sample.speed_distance,
        )

    houses = []
    for idx, cusp in enumerate(cusps):
        number = idx + 1
        sign = sign_of(cusp)
        occupants = tuple(g.name for g in grahas.values() if g.house == number)
        houses.append(
            HouseEntry(
                number=number,
                cusp=cusp,
                sign=sign,
                lord=SIGN_LORDS[sign],
                occupants=occupants,
            )
        )

    return VedicChart(
        julian_day=snapshot.julian_day,
        lagna=normalize_degrees(snapshot.ascendant),
        lagna_sign=sign_of(cusps[0]),
        grahas=grahas,
        houses=tuple(houses),
    )
