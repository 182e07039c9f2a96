"""Detection of afflictive doshas with severity and remedies."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from ..core.angles import count_from
from .aspects import is_aspecting
from .chart import VedicChart
from .data import DIGNITIES, NODES
from .locale import DEFAULT_LANGUAGE, dosha_description, dosha_name, dosha_remedies

LOG = logging.getLogger(__name__)

__all__ = [
    "DOSHA_RULES",
    "MANGAL_HOUSES",
    "DosaResult",
    "detect_doshas",
    "hemmed_by_nodes",
]

MANGAL_DOSHA = "Mangal Dosha (Kuja Dosha)"
MANGAL_HOUSES = frozenset({1, 2, 4, 7, 8, 12})
CANCELLATION_RELIEF = 4

_MANGAL_SEVERITY = {7: 10, 8: 10, 1: 8, 12: 8}


@dataclass(frozen=True)
class DosaResult:
    """A detected dosha with its severity (1–10) and suggested remedies."""

    name: str
    local_name: str
    description: str
    bodies: tuple[str, ...]
    houses: tuple[int, ...]
    severity: int
    remedies: tuple[str, ...] = ()
    cancellations: tuple[str, ...] = ()

    @property
    def cancelled(self) -> bool:
        return bool(self.cancellations)


def _result(
    name: str,
    bodies: Iterable[str],
    houses: Iterable[int],
    severity: int,
    language: str,
    *,
    cancellations: Sequence[str] = (),
    **fields: object,
) -> DosaResult:
    description = dosha_description(name, **fields)
    if cancellations:
        description += f" Note: Dosha is partially cancelled - {', '.join(cancellations)}"
    return DosaResult(
        name=name,
        local_name=dosha_name(name, language),
        description=description,
        bodies=tuple(bodies),
        houses=tuple(houses),
        severity=severity,
        remedies=dosha_remedies(name),
        cancellations=tuple(cancellations),
    )


def mangal(chart: VedicChart, language: str) -> list[DosaResult]:
    mars = chart.get("Mars")
    if mars is None or mars.house not in MANGAL_HOUSES:
        return []
    severity = _MANGAL_SEVERITY.get(mars.house, 6)

    reasons = []
    dignity = DIGNITIES["Mars"]
    if mars.sign in dignity.own_signs or mars.sign == dignity.exaltation_sign:
        reasons.append("Mars is in own sign or exaltation")
    jupiter = chart.get("Jupiter")
    if jupiter is not None and is_aspecting("Jupiter", jupiter.house or 1, mars.house):
        reasons.append("Jupiter aspects Mars")
    if reasons:
        severity = max(1, severity - CANCELLATION_RELIEF)

    return [
        _result(
            MANGAL_DOSHA,
            ("Mars",),
            (mars.house,),
            severity,
            language,
            cancellations=reasons,
            house=mars.house,
        )
    ]


def hemmed_by_nodes(house: int, rahu_house: int, ketu_house: int) -> bool:
    """Return ``True`` when ``house`` lies strictly after Rahu and before Ketu."""

    if rahu_house > ketu_house:
        return house > rahu_house or house < ketu_house
    return rahu_house < house < ketu_house


def kaal_sarp(chart: VedicChart, language: str) -> list[DosaResult]:
    rahu, ketu = chart.get("Rahu"), chart.get("Ketu")
    if rahu is None or ketu is None:
        return []
    rahu_house, ketu_house = rahu.house or 1, ketu.house or 1
    others = [g for g in chart if g.name not in NODES]
    if not all(hemmed_by_nodes(g.house or 1, rahu_house, ketu_house) for g in others):
        return []
    return [
        _result(
            "Kaal Sarp Dosha",
            ("Rahu", "Ketu"),
            (rahu_house, ketu_house),
            9,
            language,
        )
    ]


def pitra(chart: VedicChart, language: str) -> list[DosaResult]:
    sun = chart.get("Sun")
    if sun is None:
        return []
    nodes = [chart.get("Rahu"), chart.get("Ketu")]
    reason, severity = "", 0
    for node in nodes:
        if node is not None and node.sign == sun.sign:
            reason, severity = f"Sun is conjunct with {node.name}", 8
            break
    else:
        for node in nodes:
            if node is not None and node.house == 9:
                reason, severity = f"{node.name} in 9th house (house of ancestors)", 7
                break
    if not severity:
        return []
    return [
        _result(
            "Pitra Dosha",
            ("Sun",),
            (sun.house or 1,),
            severity,
            language,
            reason=reason,
        )
    ]


def shakat(chart: VedicChart, language: str) -> list[DosaResult]:
    moon, jupiter = chart.get("Moon"), chart.get("Jupiter")
    if moon is None or jupiter is None:
        return []
    house_from_jupiter = count_from(jupiter.house or 1, moon.house or 1)
    if house_from_jupiter not in (6, 8):
        return []
    return [
        _result(
            "Shakat Dosha",
            ("Moon", "Jupiter"),
            (moon.house or 1, jupiter.house or 1),
            6,
            language,
            house=house_from_jupiter,
        )
    ]


def kemadruma(chart: VedicChart, language: str) -> list[DosaResult]:
    moon = chart.get("Moon")
    if moon is None:
        return []
    for graha in chart:
        if graha.name == "Moon" or graha.name in NODES:
            continue
        if count_from(moon.sign, graha.sign) in (2, 12):
            return []
    return [_result("Kemadruma Dosha", ("Moon",), (moon.house or 1,), 7, language)]


DOSHA_RULES: Sequence[Callable[[VedicChart, str], list[DosaResult]]] = (
    mangal,
    kaal_sarp,
    pitra,
    shakat,
    kemadruma,
)


def detect_doshas(chart: VedicChart, *, language: str = DEFAULT_LANGUAGE) -> list[DosaResult]:
    """Run every dosha rule over ``chart`` and return the matches in rule order."""

    found: list[DosaResult] = []
    for rule in DOSHA_RULES:
        found.extend(rule(chart, language))
    LOG.debug("Detected %d doshas", len(found))
    return found
