"""Reference tables for classical Jyotiṣa rulership, dignity, and timing data.

The constants in this module are drawn from widely cited Vedic astrology
sources:

* Sign lordship, own signs, exaltation/debilitation points, and moolatrikona
  signs follow *Brihat Parashara Hora Shastra* (BPHS) and the tables compiled
  by B. V. Raman in *Graha and Bhava Balas*.
* Natural friendship and enmity mirror BPHS Chapter 3.
* Graded aspect (drishti) values and the special full aspects of Mars,
  Jupiter, and Saturn follow BPHS Chapter 26.
* Naisargika bala, dig bala ideal houses, mean daily motions, and required
  shadbala minimums follow BPHS Chapter 27 as tabulated by Raman.

Every table is an immutable mapping built once at import time.  Rule engines
look entries up rather than branching per body, so adding a body or a rule is
a data change.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "APOKLIMA_HOUSES",
    "ASPECT_OFFSETS",
    "BENEFICS",
    "CHALDEAN_ORDER",
    "DASHA_ORDER",
    "DASHA_TOTAL_YEARS",
    "DIG_BALA_IDEAL_HOUSE",
    "DIGNITIES",
    "DIGNITY_VIRUPAS",
    "DRISHTI_VALUES",
    "GRAHAS",
    "GrahaDignity",
    "KENDRA_HOUSES",
    "MEAN_DAILY_MOTION",
    "NAISARGIKA_VIRUPAS",
    "NODES",
    "PANAPARA_HOUSES",
    "PLANETARY_WAR_BRIGHTNESS",
    "PLANET_ENEMIES",
    "PLANET_FRIENDS",
    "REQUIRED_RUPAS",
    "SAPTA_GRAHAS",
    "SIGN_LORDS",
    "SIGN_NAMES",
    "SPECIAL_ASPECTS",
    "TRIKONA_HOUSES",
    "WEEKDAY_LORDS",
    "YEAR_LORDS",
    "relationship",
    "ruled_houses",
]


SAPTA_GRAHAS: tuple[str, ...] = (
    "Sun",
    "Moon",
    "Mars",
    "Mercury",
    "Jupiter",
    "Venus",
    "Saturn",
)
NODES: frozenset[str] = frozenset({"Rahu", "Ketu"})
GRAHAS: tuple[str, ...] = SAPTA_GRAHAS + ("Rahu", "Ketu")

SIGN_NAMES: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

SIGN_LORDS: Mapping[int, str] = MappingProxyType(
    {
        1: "Mars",
        2: "Venus",
        3: "Mercury",
        4: "Moon",
        5: "Sun",
        6: "Mercury",
        7: "Venus",
        8: "Mars",
        9: "Jupiter",
        10: "Saturn",
        11: "Saturn",
        12: "Jupiter",
    }
)

KENDRA_HOUSES: frozenset[int] = frozenset({1, 4, 7, 10})
PANAPARA_HOUSES: frozenset[int] = frozenset({2, 5, 8, 11})
APOKLIMA_HOUSES: frozenset[int] = frozenset({3, 6, 9, 12})
TRIKONA_HOUSES: frozenset[int] = frozenset({1, 5, 9})


@dataclass(frozen=True)
class GrahaDignity:
    """Dignity anchors for a single graha, with signs numbered 1–12."""

    own_signs: tuple[int, ...]
    exaltation_sign: int
    exaltation_degree: float
    debilitation_sign: int
    debilitation_degree: float
    moolatrikona_sign: int

    @property
    def exaltation_longitude(self) -> float:
        return (self.exaltation_sign - 1) * 30.0 + self.exaltation_degree

    @property
    def debilitation_longitude(self) -> float:
        return (self.debilitation_sign - 1) * 30.0 + self.debilitation_degree


DIGNITIES: Mapping[str, GrahaDignity] = MappingProxyType(
    {
        "Sun": GrahaDignity((5,), 1, 10.0, 7, 10.0, 5),
        "Moon": GrahaDignity((4,), 2, 3.0, 8, 3.0, 2),
        "Mars": GrahaDignity((1, 8), 10, 28.0, 4, 28.0, 1),
        "Mercury": GrahaDignity((3, 6), 6, 15.0, 12, 15.0, 6),
        "Jupiter": GrahaDignity((9, 12), 4, 5.0, 10, 5.0, 9),
        "Venus": GrahaDignity((2, 7), 12, 27.0, 6, 27.0, 7),
        "Saturn": GrahaDignity((10, 11), 7, 20.0, 1, 20.0, 11),
    }
)

PLANET_FRIENDS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "Sun": frozenset({"Moon", "Mars", "Jupiter"}),
        "Moon": frozenset({"Sun", "Mercury"}),
        "Mars": frozenset({"Sun", "Moon", "Jupiter"}),
        "Mercury": frozenset({"Sun", "Venus"}),
        "Jupiter": frozenset({"Sun", "Moon", "Mars"}),
        "Venus": frozenset({"Mercury", "Saturn"}),
        "Saturn": frozenset({"Mercury", "Venus"}),
    }
)

PLANET_ENEMIES: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "Sun": frozenset({"Venus", "Saturn"}),
        "Moon": frozenset(),
        "Mars": frozenset({"Mercury"}),
        "Mercury": frozenset({"Moon"}),
        "Jupiter": frozenset({"Mercury", "Venus"}),
        "Venus": frozenset({"Sun", "Moon"}),
        "Saturn": frozenset({"Sun", "Moon", "Mars"}),
    }
)

# Saptavargaja points per dignity, in virupas.
DIGNITY_VIRUPAS: Mapping[str, float] = MappingProxyType(
    {
        "debilitated": 1.875,
        "exalted": 45.0,
        "moolatrikona": 45.0,
        "own": 30.0,
        "friend": 15.0,
        "neutral": 7.5,
        "enemy": 3.75,
    }
)

BENEFICS: frozenset[str] = frozenset({"Jupiter", "Venus", "Moon", "Mercury"})

# Whole-sign aspect offsets counted inclusively from the occupied house.
ASPECT_OFFSETS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        "Mars": (4, 7, 8),
        "Jupiter": (5, 7, 9),
        "Saturn": (3, 7, 10),
    }
)

# Graded Parasara drishti shared by every graha.
DRISHTI_VALUES: Mapping[int, float] = MappingProxyType(
    {3: 0.25, 10: 0.25, 4: 0.75, 8: 0.75, 5: 0.5, 9: 0.5, 7: 1.0}
)

SPECIAL_ASPECTS: Mapping[str, frozenset[int]] = MappingProxyType(
    {
        "Mars": frozenset({4, 8}),
        "Jupiter": frozenset({5, 9}),
        "Saturn": frozenset({3, 10}),
    }
)

NAISARGIKA_VIRUPAS: Mapping[str, float] = MappingProxyType(
    {
        "Sun": 60.0,
        "Moon": 51.43,
        "Venus": 42.86,
        "Jupiter": 34.29,
        "Mercury": 25.71,
        "Mars": 17.14,
        "Saturn": 8.57,
    }
)

DIG_BALA_IDEAL_HOUSE: Mapping[str, int] = MappingProxyType(
    {
        "Jupiter": 1,
        "Mercury": 1,
        "Sun": 10,
        "Mars": 10,
        "Saturn": 7,
        "Moon": 4,
        "Venus": 4,
    }
)

# Mean daily motion in degrees for the Tara grahas.
MEAN_DAILY_MOTION: Mapping[str, float] = MappingProxyType(
    {
        "Mercury": 1.383,
        "Venus": 1.202,
        "Mars": 0.524,
        "Jupiter": 0.083,
        "Saturn": 0.033,
    }
)

REQUIRED_RUPAS: Mapping[str, float] = MappingProxyType(
    {
        "Sun": 6.5,
        "Moon": 6.0,
        "Mars": 5.0,
        "Mercury": 7.0,
        "Jupiter": 6.5,
        "Venus": 5.5,
        "Saturn": 5.0,
    }
)

# Index 0 is Sunday, matching the civil weekday numbering used by vara.
WEEKDAY_LORDS: tuple[str, ...] = (
    "Sun",
    "Moon",
    "Mars",
    "Mercury",
    "Jupiter",
    "Venus",
    "Saturn",
)

CHALDEAN_ORDER: tuple[str, ...] = (
    "Saturn",
    "Jupiter",
    "Mars",
    "Sun",
    "Venus",
    "Mercury",
    "Moon",
)

# Abda (year) lords indexed by ``year % 7``.
YEAR_LORDS: tuple[str, ...] = (
    "Sun",
    "Venus",
    "Mercury",
    "Moon",
    "Saturn",
    "Jupiter",
    "Mars",
)

PLANETARY_WAR_BRIGHTNESS: Mapping[str, int] = MappingProxyType(
    {
        "Venus": 5,
        "Jupiter": 4,
        "Mercury": 3,
        "Mars": 2,
        "Saturn": 1,
    }
)

DASHA_ORDER: Sequence[tuple[str, float]] = (
    ("Ketu", 7.0),
    ("Venus", 20.0),
    ("Sun", 6.0),
    ("Moon", 10.0),
    ("Mars", 7.0),
    ("Rahu", 18.0),
    ("Jupiter", 16.0),
    ("Saturn", 19.0),
    ("Mercury", 17.0),
)
DASHA_TOTAL_YEARS: float = sum(years for _, years in DASHA_ORDER)


def relationship(planet: str, sign_lord: str) -> str:
    """Return the natural relationship of ``planet`` towards ``sign_lord``."""

    if planet == sign_lord:
        return "own"
    if sign_lord in PLANET_FRIENDS.get(planet, frozenset()):
        return "friend"
    if sign_lord in PLANET_ENEMIES.get(planet, frozenset()):
        return "enemy"
    return "neutral"


def ruled_houses(planet: str, lagna_sign: int) -> tuple[int, ...]:
    """Return the houses (counted from ``lagna_sign``) owned by ``planet``."""

    dignity = DIGNITIES.get(planet)
    if dignity is None:
        return ()
    return tuple(((sign - lagna_sign) % 12) + 1 for sign in dignity.own_signs)
