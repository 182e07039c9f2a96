"""Classical Śaḍbala strength metrics for the seven visible grahas.

Every factor is evaluated in virupas (sixtieths of a rupa) and the six
component totals are reported in rupas.  The formulas follow *Bṛhat Parāśara
Horā Śāstra* as tabulated by B. V. Raman with two simplifications: the time
of day factors assume a 6 AM sunrise and 6 PM sunset on the civil clock, and
Ayana bala approximates declination from the sidereal longitude.

A graha's overall percentage maps its required minimum to 50% and twice the
minimum to 100%.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from ..core.angles import circular_separation, normalize_degrees, sign_of
from .aspects import drishti_value, house_advance
from .chart import Graha, VedicChart
from .data import (
    APOKLIMA_HOUSES,
    BENEFICS,
    CHALDEAN_ORDER,
    DIG_BALA_IDEAL_HOUSE,
    DIGNITIES,
    DIGNITY_VIRUPAS,
    KENDRA_HOUSES,
    MEAN_DAILY_MOTION,
    NAISARGIKA_VIRUPAS,
    NODES,
    PANAPARA_HOUSES,
    PLANETARY_WAR_BRIGHTNESS,
    REQUIRED_RUPAS,
    SAPTA_GRAHAS,
    SIGN_LORDS,
    WEEKDAY_LORDS,
    YEAR_LORDS,
    relationship,
)
from .locale import DEFAULT_LANGUAGE, graha_name
from .varga import VARGA_SIGN_FUNCTIONS, navamsa_sign

LOG = logging.getLogger(__name__)

__all__ = [
    "COMPONENTS",
    "ShadbalaResult",
    "compute_shadbala",
    "dignity_virupas",
    "strength_grade",
]

VIRUPAS_PER_RUPA = 60.0
DEFAULT_MEAN_MOTION = 0.5
OBLIQUITY_DEGREES = 23.45

COMPONENTS: tuple[str, ...] = (
    "positional",
    "directional",
    "temporal",
    "motional",
    "natural",
    "aspectual",
)

_FEMININE = frozenset({"Moon", "Venus"})
_DIURNAL = frozenset({"Sun", "Jupiter", "Venus"})
_MALE = frozenset({"Sun", "Mars", "Jupiter"})
_FEMALE = frozenset({"Moon", "Venus", "Saturn"})
_TARA_GRAHAS = frozenset({"Mars", "Mercury", "Jupiter", "Venus", "Saturn"})

# Civil-clock thirds of day and night: (start hour, end hour, ruler).
_TRIBHAGA = (
    (6.0, 10.0, "Mercury"),
    (10.0, 14.0, "Sun"),
    (14.0, 18.0, "Saturn"),
    (18.0, 22.0, "Moon"),
    (2.0, 6.0, "Mars"),
)

_GRADES = (
    (80.0, "Excellent"),
    (60.0, "Good"),
    (40.0, "Average"),
    (20.0, "Weak"),
)


@dataclass(frozen=True)
class ShadbalaResult:
    """Six-fold strength of one graha, components in rupas."""

    graha: str
    local_name: str
    positional: float
    directional: float
    temporal: float
    motional: float
    natural: float
    aspectual: float
    required: float
    breakdown: Mapping[str, Mapping[str, float]] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return (
            self.positional
            + self.directional
            + self.temporal
            + self.motional
            + self.natural
            + self.aspectual
        )

    @property
    def total_virupas(self) -> float:
        return self.total * VIRUPAS_PER_RUPA

    @property
    def percentage(self) -> float:
        if self.required <= 0:
            return 50.0
        return max(0.0, min(100.0, self.total / self.required * 50.0))

    @property
    def grade(self) -> str:
        return strength_grade(self.percentage)

    @property
    def has_sufficient_strength(self) -> bool:
        return self.total >= self.required

    def components(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in COMPONENTS}


def strength_grade(percentage: float) -> str:
    for threshold, label in _GRADES:
        if percentage >= threshold:
            return label
    return "Very Weak"


def _clock_hours(moment: datetime) -> float:
    return moment.hour + moment.minute / 60.0 + moment.second / 3600.0


# ---------------------------------------------------------------------------
# Sthana bala
# ---------------------------------------------------------------------------


def _uchcha(graha: Graha) -> float:
    debilitation = DIGNITIES[graha.name].debilitation_longitude
    return circular_separation(graha.longitude, debilitation) / 3.0


def dignity_virupas(name: str, sign: int) -> float:
    """Return the Saptavargaja points for graha ``name`` placed in ``sign``."""

    dignity = DIGNITIES[name]
    if sign == dignity.debilitation_sign:
        return DIGNITY_VIRUPAS["debilitated"]
    if sign == dignity.exaltation_sign:
        return DIGNITY_VIRUPAS["exalted"]
    if sign == dignity.moolatrikona_sign:
        return DIGNITY_VIRUPAS["moolatrikona"]
    if sign in dignity.own_signs:
        return DIGNITY_VIRUPAS["own"]
    return DIGNITY_VIRUPAS[relationship(name, SIGN_LORDS[sign])]


def _saptavargaja(graha: Graha) -> float:
    return sum(
        dignity_virupas(graha.name, sign_fn(graha.longitude))
        for sign_fn in VARGA_SIGN_FUNCTIONS.values()
    )


def _ojhayugma(graha: Graha) -> float:
    wants_even = graha.name in _FEMININE
    total = 0.0
    for sign in (graha.sign, navamsa_sign(graha.longitude)):
        if (sign % 2 == 0) == wants_even:
            total += 15.0
    return total


def _kendra(house: int) -> float:
    if house in KENDRA_HOUSES:
        return 60.0
    if house in PANAPARA_HOUSES:
        return 30.0
    if house in APOKLIMA_HOUSES:
        return 15.0
    return 0.0


def _drekkana(graha: Graha) -> float:
    decanate = min(int(graha.degree // 10.0) + 1, 3)
    if graha.name in _MALE:
        wanted = 1
    elif graha.name in _FEMALE:
        wanted = 3
    else:
        wanted = 2
    return 15.0 if decanate == wanted else 0.0


def _sthana(graha: Graha) -> dict[str, float]:
    return {
        "uchcha": _uchcha(graha),
        "saptavargaja": _saptavargaja(graha),
        "ojhayugma": _ojhayugma(graha),
        "kendra": _kendra(graha.house or 1),
        "drekkana": _drekkana(graha),
    }


# ---------------------------------------------------------------------------
# Dig bala
# ---------------------------------------------------------------------------


def _dig(graha: Graha) -> float:
    forward = ((graha.house or 1) - DIG_BALA_IDEAL_HOUSE[graha.name]) % 12
    distance = min(forward, 12 - forward)
    return 60.0 - distance * 10.0


# ---------------------------------------------------------------------------
# Kala bala
# ---------------------------------------------------------------------------


def _nathonnatha(name: str, hours: float) -> float:
    if name == "Mercury":
        return 60.0
    if name in _DIURNAL:
        distance = abs(hours - 12.0)
    else:
        distance = hours if hours <= 12.0 else 24.0 - hours
    return max(0.0, (12.0 - distance) / 12.0 * 60.0)


def _paksha(name: str, moon: float, sun: float) -> float:
    elongation = normalize_degrees(moon - sun)
    waxing_arc = elongation if elongation <= 180.0 else 360.0 - elongation
    if name in BENEFICS:
        value = waxing_arc / 180.0 * 60.0
    else:
        value = (180.0 - waxing_arc) / 180.0 * 60.0
    return max(0.0, min(60.0, value))


def _tribhaga_ruler(hours: float) -> str:
    for start, end, ruler in _TRIBHAGA:
        if start <= hours < end:
            return ruler
    return "Venus"


def _tribhaga(name: str, hours: float) -> float:
    if name == "Jupiter":
        return 60.0
    return 60.0 if _tribhaga_ruler(hours) == name else 0.0


def _weekday_lord(moment: datetime) -> str:
    return WEEKDAY_LORDS[(moment.weekday() + 1) % 7]


def _hora_lord(moment: datetime) -> str:
    since_sunrise = (moment.hour - 6.0 + moment.minute / 60.0) % 24.0
    start = CHALDEAN_ORDER.index(_weekday_lord(moment))
    return CHALDEAN_ORDER[(start + int(since_sunrise)) % 7]


def _ayana(longitude: float) -> float:
    declination = OBLIQUITY_DEGREES * math.sin(math.radians(normalize_degrees(longitude)))
    value = (declination + OBLIQUITY_DEGREES) / (2.0 * OBLIQUITY_DEGREES) * 60.0
    return max(0.0, min(60.0, value))


def _war_outcome(graha: Graha, other: Graha) -> float:
    if graha.latitude > other.latitude:
        return 30.0
    if graha.latitude < other.latitude:
        return -30.0
    mine = PLANETARY_WAR_BRIGHTNESS.get(graha.name, 0)
    theirs = PLANETARY_WAR_BRIGHTNESS.get(other.name, 0)
    if mine > theirs:
        return 30.0
    if mine < theirs:
        return -30.0
    return 0.0


def _yuddha(graha: Graha, chart: VedicChart) -> float:
    if graha.name not in _TARA_GRAHAS:
        return 0.0
    total = 0.0
    for other in chart:
        if other.name == graha.name or other.name not in _TARA_GRAHAS:
            continue
        if circular_separation(graha.longitude, other.longitude) <= 1.0:
            total += _war_outcome(graha, other)
    return total


def _kala(
    graha: Graha, chart: VedicChart, moment: datetime, sun: float, moon: float
) -> dict[str, float]:
    name = graha.name
    hours = _clock_hours(moment)
    parts = {"nathonnatha": _nathonnatha(name, hours)}
    if name != "Moon":
        parts["paksha"] = _paksha(name, moon, sun)
    parts["tribhaga"] = _tribhaga(name, hours)
    parts["abda"] = 15.0 if YEAR_LORDS[moment.year % 7] == name else 0.0
    parts["masa"] = 30.0 if SIGN_LORDS[sign_of(sun)] == name else 0.0
    parts["vara"] = 45.0 if _weekday_lord(moment) == name else 0.0
    parts["hora"] = 60.0 if _hora_lord(moment) == name else 0.0
    if name != "Sun":
        parts["ayana"] = _ayana(graha.longitude)
    parts["yuddha"] = _yuddha(graha, chart)
    return parts


# ---------------------------------------------------------------------------
# Chesta and Drik bala
# ---------------------------------------------------------------------------


def _chesta(graha: Graha, sun: float, moon: float) -> float:
    if graha.name == "Sun":
        return _ayana(graha.longitude)
    if graha.name == "Moon":
        return _paksha("Moon", moon, sun)
    if graha.retrograde:
        return 60.0
    mean = MEAN_DAILY_MOTION.get(graha.name, DEFAULT_MEAN_MOTION)
    return max(0.0, min(60.0, abs(graha.speed) / mean * 30.0))


def _drik(graha: Graha, chart: VedicChart) -> dict[str, float]:
    parts: dict[str, float] = {}
    for other in chart:
        if other.name == graha.name or other.name in NODES:
            continue
        value = drishti_value(other.name, house_advance(other.house or 1, graha.house or 1))
        if value <= 0.0:
            continue
        contribution = value * 15.0
        parts[other.name] = contribution if other.name in BENEFICS else -contribution
    return parts


def _score(
    graha: Graha,
    chart: VedicChart,
    moment: datetime,
    sun: float,
    moon: float,
    language: str,
) -> ShadbalaResult:
    sthana = _sthana(graha)
    kala = _kala(graha, chart, moment, sun, moon)
    drik = _drik(graha, chart)
    dig = _dig(graha)
    chesta = _chesta(graha, sun, moon)
    natural = NAISARGIKA_VIRUPAS[graha.name]
    breakdown = {
        "positional": MappingProxyType(sthana),
        "directional": MappingProxyType({"dig": dig}),
        "temporal": MappingProxyType(kala),
        "motional": MappingProxyType({"chesta": chesta}),
        "natural": MappingProxyType({"naisargika": natural}),
        "aspectual": MappingProxyType(drik),
    }
    return ShadbalaResult(
        graha=graha.name,
        local_name=graha_name(graha.name, language),
        positional=sum(sthana.values()) / VIRUPAS_PER_RUPA,
        directional=dig / VIRUPAS_PER_RUPA,
        temporal=sum(kala.values()) / VIRUPAS_PER_RUPA,
        motional=chesta / VIRUPAS_PER_RUPA,
        natural=natural / VIRUPAS_PER_RUPA,
        aspectual=sum(drik.values()) / VIRUPAS_PER_RUPA,
        required=REQUIRED_RUPAS[graha.name],
        breakdown=MappingProxyType(breakdown),
    )


def compute_shadbala(
    chart: VedicChart,
    moment: datetime,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> dict[str, ShadbalaResult]:
    """Return Śaḍbala results keyed by graha for the local civil ``moment``.

    Grahas absent from ``chart`` are skipped.  Sun and Moon longitudes for
    Paksha and Masa bala are read from the chart itself.
    """

    sun_graha = chart.get("Sun")
    moon_graha = chart.get("Moon")
    if sun_graha is None or moon_graha is None:
        LOG.debug("Shadbala needs both luminaries; returning no results")
        return {}
    sun, moon = sun_graha.longitude, moon_graha.longitude

    results: dict[str, ShadbalaResult] = {}
    for name in SAPTA_GRAHAS:
        graha = chart.get(name)
        if graha is None:
            continue
        results[name] = _score(graha, chart, moment, sun, moon, language)
    LOG.debug("Computed shadbala for %d grahas", len(results))
    return results
