"""Vimśottarī daśā/bhukti timelines anchored on the Moon's nakshatra."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.angles import normalize_degrees
from .data import DASHA_ORDER, DASHA_TOTAL_YEARS
from .locale import DEFAULT_LANGUAGE, graha_name
from .nakshatra import NAKSHATRA_ARC_DEGREES, lord_of_nakshatra, nakshatra_of

LOG = logging.getLogger(__name__)

__all__ = [
    "BALANCE_THRESHOLD_YEARS",
    "DAYS_PER_YEAR",
    "BhuktiPeriod",
    "DasaPeriod",
    "build_vimshottari",
    "current_periods",
    "dasa_balance",
]

DAYS_PER_YEAR = 365.25
BALANCE_THRESHOLD_YEARS = 0.001

_LORDS: tuple[str, ...] = tuple(lord for lord, _ in DASHA_ORDER)
_YEARS: dict[str, float] = dict(DASHA_ORDER)


@dataclass(frozen=True)
class BhuktiPeriod:
    """Sub-period of a daśā."""

    lord: str
    local_lord: str
    start: datetime
    end: datetime

    @property
    def duration_years(self) -> float:
        return (self.end - self.start).total_seconds() / 86400.0 / DAYS_PER_YEAR

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


@dataclass(frozen=True)
class DasaPeriod:
    """Major period with its nine bhuktis."""

    lord: str
    local_lord: str
    start: datetime
    end: datetime
    bhuktis: tuple[BhuktiPeriod, ...]
    balance: bool = False

    @property
    def duration_years(self) -> float:
        return (self.end - self.start).total_seconds() / 86400.0 / DAYS_PER_YEAR

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end

    def bhukti_at(self, moment: datetime) -> BhuktiPeriod | None:
        for bhukti in self.bhuktis:
            if bhukti.contains(moment):
                return bhukti
        return None


def _add_years(moment: datetime, years: float) -> datetime:
    return moment + timedelta(days=years * DAYS_PER_YEAR)


def dasa_balance(moon_longitude: float) -> tuple[str, float, float]:
    """Return ``(lord, fraction_traversed, balance_years)`` at birth."""

    lon = normalize_degrees(moon_longitude)
    number = nakshatra_of(lon)
    lord = lord_of_nakshatra(number)
    fraction = (lon - (number - 1) * NAKSHATRA_ARC_DEGREES) / NAKSHATRA_ARC_DEGREES
    fraction = min(max(fraction, 0.0), 1.0)
    return lord, fraction, _YEARS[lord] * (1.0 - fraction)


def _bhuktis(
    dasa_lord: str, start: datetime, end: datetime, dasa_years: float, language: str
) -> tuple[BhuktiPeriod, ...]:
    offset = _LORDS.index(dasa_lord)
    periods: list[BhuktiPeriod] = []
    cursor = start
    for idx in range(len(_LORDS)):
        lord = _LORDS[(offset + idx) % len(_LORDS)]
        if idx == len(_LORDS) - 1:
            bhukti_end = end
        else:
            bhukti_end = _add_years(cursor, dasa_years * _YEARS[lord] / DASHA_TOTAL_YEARS)
        periods.append(
            BhuktiPeriod(
                lord=lord,
                local_lord=graha_name(lord, language),
                start=cursor,
                end=bhukti_end,
            )
        )
        cursor = bhukti_end
    return tuple(periods)


def _dasa(
    lord: str, start: datetime, years: float, language: str, *, balance: bool = False
) -> DasaPeriod:
    end = _add_years(start, years)
    return DasaPeriod(
        lord=lord,
        local_lord=graha_name(lord, language),
        start=start,
        end=end,
        bhuktis=_bhuktis(lord, start, end, years, language),
        balance=balance,
    )


def build_vimshottari(
    birth_moment: datetime,
    moon_longitude: float,
    *,
    years: float = DASHA_TOTAL_YEARS,
    language: str = DEFAULT_LANGUAGE,
) -> list[DasaPeriod]:
    """Generate daśās from ``birth_moment`` until ``years`` are covered.

    The first period is the unexpired balance of the birth nakshatra lord
    and is skipped when less than :data:`BALANCE_THRESHOLD_YEARS` remains.
    The final period may run past the horizon.
    """

    if years <= 0:
        raise ValueError("years must be positive")
    lord, fraction, balance = dasa_balance(moon_longitude)
    LOG.debug(
        "Vimshottari start lord=%s traversed=%.4f balance=%.4fy", lord, fraction, balance
    )

    periods: list[DasaPeriod] = []
    cursor = birth_moment
    covered = 0.0
    if balance > BALANCE_THRESHOLD_YEARS:
        first = _dasa(lord, cursor, balance, language, balance=True)
        periods.append(first)
        cursor = first.end
        covered += balance

    index = (_LORDS.index(lord) + 1) % len(_LORDS)
    while covered < years:
        current = _LORDS[index]
        span = _YEARS[current]
        period = _dasa(current, cursor, span, language)
        periods.append(period)
        cursor = period.end
        covered += span
        index = (index + 1) % len(_LORDS)
    return periods


def current_periods(
    dasas: Sequence[DasaPeriod], moment: datetime
) -> tuple[DasaPeriod, BhuktiPeriod] | None:
    """Return the running daśā and bhukti at ``moment``, if covered."""

    for dasa in dasas:
        if dasa.contains(moment):
            bhukti = dasa.bhukti_at(moment)
            if bhukti is not None:
                return dasa, bhukti
    return None
