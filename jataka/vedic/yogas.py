"""Detection of beneficial yogas in a D-1 chart.

Each rule is an independent predicate over the chart; rules that need a
graha absent from the chart are skipped.  Moon-relative yogas count signs
(rasi) from the Moon, while lordship yogas count houses from the lagna.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from ..core.angles import count_from
from .chart import Graha, VedicChart
from .data import DIGNITIES, KENDRA_HOUSES, NODES, SAPTA_GRAHAS, TRIKONA_HOUSES, ruled_houses
from .locale import DEFAULT_LANGUAGE, yoga_description, yoga_name

LOG = logging.getLogger(__name__)

__all__ = [
    "MAHAPURUSHA_YOGAS",
    "YOGA_RULES",
    "YogaResult",
    "detect_yogas",
]

_WEALTH_HOUSES = frozenset({2, 11})
_FORTUNE_HOUSES = frozenset({5, 9})
_LUMINARIES_AND_NODES = NODES | {"Sun", "Moon"}

# Pancha Mahapurusha yoga name -> graha forming it.
MAHAPURUSHA_YOGAS: tuple[tuple[str, str], ...] = (
    ("Hamsa Yoga", "Jupiter"),
    ("Malavya Yoga", "Venus"),
    ("Sasa Yoga", "Saturn"),
    ("Ruchaka Yoga", "Mars"),
    ("Bhadra Yoga", "Mercury"),
)


@dataclass(frozen=True)
class YogaResult:
    """A detected yoga with the grahas and houses that form it."""

    name: str
    local_name: str
    description: str
    bodies: tuple[str, ...]
    houses: tuple[int, ...]
    strength: int
    is_beneficial: bool = True


def _result(
    name: str,
    bodies: Iterable[str],
    houses: Iterable[int],
    strength: int,
    language: str,
    **fields: object,
) -> YogaResult:
    return YogaResult(
        name=name,
        local_name=yoga_name(name, language),
        description=yoga_description(name, **fields),
        bodies=tuple(bodies),
        houses=tuple(houses),
        strength=strength,
    )


def _distinct(values: Iterable[int | None]) -> tuple[int, ...]:
    seen: list[int] = []
    for value in values:
        if value is not None and value not in seen:
            seen.append(value)
    return tuple(seen)


def _grahas_in_sign(chart: VedicChart, sign: int, exclude: frozenset[str]) -> list[Graha]:
    return [g for g in chart if g.sign == sign and g.name not in exclude]


def count_sign(sign: int, nth: int) -> int:
    """Return the ``nth`` sign counted inclusively from ``sign``."""

    return ((sign - 1 + nth - 1) % 12) + 1


def _moon_flank(chart: VedicChart, moon: Graha, nth: int) -> list[Graha]:
    return _grahas_in_sign(chart, count_sign(moon.sign, nth), _LUMINARIES_AND_NODES)


def gajakesari(chart: VedicChart, language: str) -> list[YogaResult]:
    moon, jupiter = chart.get("Moon"), chart.get("Jupiter")
    if moon is None or jupiter is None:
        return []
    house_from_moon = count_from(moon.sign, jupiter.sign)
    if house_from_moon not in KENDRA_HOUSES:
        return []
    strength = 10 if house_from_moon == 1 else 8
    return [
        _result(
            "Gajakesari Yoga",
            ("Jupiter", "Moon"),
            (moon.house or 1, jupiter.house or 1),
            strength,
            language,
        )
    ]


def _lordship_yogas(
    chart: VedicChart,
    language: str,
    name: str,
    first: frozenset[int],
    second: frozenset[int],
    strength: int,
) -> list[YogaResult]:
    found = []
    for graha in SAPTA_GRAHAS:
        if graha not in chart:
            continue
        houses = ruled_houses(graha, chart.lagna_sign)
        if any(h in first for h in houses) and any(h in second for h in houses):
            found.append(_result(name, (graha,), houses, strength, language, planet=graha))
    return found


def raja(chart: VedicChart, language: str) -> list[YogaResult]:
    return _lordship_yogas(chart, language, "Raja Yoga", KENDRA_HOUSES, TRIKONA_HOUSES, 9)


def dhana(chart: VedicChart, language: str) -> list[YogaResult]:
    return _lordship_yogas(chart, language, "Dhana Yoga", _WEALTH_HOUSES, _FORTUNE_HOUSES, 8)


def sunapha(chart: VedicChart, language: str) -> list[YogaResult]:
    moon = chart.get("Moon")
    if moon is None:
        return []
    flank = _moon_flank(chart, moon, 2)
    if not flank:
        return []
    return [
        _result(
            "Sunapha Yoga",
            (g.name for g in flank),
            _distinct(g.house for g in flank),
            7,
            language,
        )
    ]


def anapha(chart: VedicChart, language: str) -> list[YogaResult]:
    moon = chart.get("Moon")
    if moon is None:
        return []
    flank = _moon_flank(chart, moon, 12)
    if not flank:
        return []
    return [
        _result(
            "Anapha Yoga",
            (g.name for g in flank),
            _distinct(g.house for g in flank),
            7,
            language,
        )
    ]


def durdhura(chart: VedicChart, language: str) -> list[YogaResult]:
    moon = chart.get("Moon")
    if moon is None:
        return []
    if not (_moon_flank(chart, moon, 2) and _moon_flank(chart, moon, 12)):
        return []
    luminaries = frozenset({"Sun", "Moon"})
    bodies = [g.name for g in _grahas_in_sign(chart, count_sign(moon.sign, 2), luminaries)]
    bodies += [g.name for g in _grahas_in_sign(chart, count_sign(moon.sign, 12), luminaries)]
    return [_result("Durdhura Yoga", bodies, (), 8, language)]


def budha_aditya(chart: VedicChart, language: str) -> list[YogaResult]:
    sun, mercury = chart.get("Sun"), chart.get("Mercury")
    if sun is None or mercury is None or sun.sign != mercury.sign:
        return []
    return [
        _result(
            "Budha Aditya Yoga",
            ("Sun", "Mercury"),
            (sun.house or 1,),
            7,
            language,
        )
    ]


def mahapurusha(chart: VedicChart, language: str) -> list[YogaResult]:
    found = []
    for name, graha_name in MAHAPURUSHA_YOGAS:
        graha = chart.get(graha_name)
        if graha is None or graha.house not in KENDRA_HOUSES:
            continue
        dignity = DIGNITIES[graha_name]
        if graha.sign in dignity.own_signs or graha.sign == dignity.exaltation_sign:
            found.append(_result(name, (graha_name,), (graha.house,), 9, language))
    return found


YOGA_RULES: Sequence[Callable[[VedicChart, str], list[YogaResult]]] = (
    gajakesari,
    raja,
    dhana,
    sunapha,
    anapha,
    durdhura,
    budha_aditya,
    mahapurusha,
)


def detect_yogas(chart: VedicChart, *, language: str = DEFAULT_LANGUAGE) -> list[YogaResult]:
    """Run every yoga rule over ``chart`` and return the matches in rule order."""

    found: list[YogaResult] = []
    for rule in YOGA_RULES:
        found.extend(rule(chart, language))
    LOG.debug("Detected %d yogas", len(found))
    return found
