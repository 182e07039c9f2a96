"""Horoscope aggregate tying the derivation pipeline together.

:func:`build_horoscope` is pure: given a validated :class:`BirthInput` and
an :class:`EphemerisSnapshot` it derives the pañchānga, the D-1 chart, and
each optional section requested by :class:`HoroscopeOptions`.  Optional
sections are either :class:`Computed` or :class:`Omitted`, never ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar, Union

from ..ephemeris.snapshot import EphemerisProvider, EphemerisSnapshot
from .chart import BirthInput, Graha, VedicChart, build_chart
from .dasha import BhuktiPeriod, DasaPeriod, build_vimshottari, current_periods
from .data import DASHA_TOTAL_YEARS
from .doshas import DosaResult, detect_doshas
from .locale import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from .panchang import PanchangamResult, panchang_from_longitudes
from .shadbala import ShadbalaResult, compute_shadbala
from .varga import navamsa_chart
from .yogas import YogaResult, detect_yogas

LOG = logging.getLogger(__name__)

__all__ = [
    "Computed",
    "Horoscope",
    "HoroscopeOptions",
    "Omitted",
    "Section",
    "SectionUnavailable",
    "build_horoscope",
    "compute_horoscope",
    "require",
]

T = TypeVar("T")


class SectionUnavailable(LookupError):
    """Raised when reading a horoscope section that was not computed."""


@dataclass(frozen=True)
class Computed(Generic[T]):
    value: T


@dataclass(frozen=True)
class Omitted:
    reason: str


Section = Union[Computed[T], Omitted]


def require(section: Section[T], name: str = "section") -> T:
    """Return the computed value of ``section`` or raise :class:`SectionUnavailable`."""

    if isinstance(section, Computed):
        return section.value
    raise SectionUnavailable(f"{name} was not computed: {section.reason}")


@dataclass(frozen=True)
class HoroscopeOptions:
    """Feature flags selecting which optional sections are derived."""

    include_navamsa: bool = True
    include_dasa: bool = True
    include_strength: bool = True
    include_yogas: bool = True
    include_dosas: bool = True
    dasa_years: float = DASHA_TOTAL_YEARS
    language: str = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        if self.dasa_years <= 0:
            raise ValueError("dasa_years must be positive")
        if self.language not in SUPPORTED_LANGUAGES:
            options = ", ".join(SUPPORTED_LANGUAGES)
            raise ValueError(f"Unsupported language '{self.language}'. Supported: {options}")


@dataclass(frozen=True)
class Horoscope:
    """Complete horoscope for one birth."""

    birth: BirthInput
    julian_day: float
    panchang: PanchangamResult
    chart: VedicChart
    navamsa: Section[Mapping[str, Graha]]
    dasas: Section[Sequence[DasaPeriod]]
    strengths: Section[Mapping[str, ShadbalaResult]]
    yogas: Section[Sequence[YogaResult]]
    doshas: Section[Sequence[DosaResult]]
    language: str = DEFAULT_LANGUAGE

    @property
    def grahas(self) -> Mapping[str, Graha]:
        return self.chart.grahas

    def current_dasa(self, moment: datetime) -> tuple[DasaPeriod, BhuktiPeriod] | None:
        """Return the running daśā and bhukti at the civil ``moment``."""

        return current_periods(require(self.dasas, "dasas"), moment)


def _disabled(flag: str) -> Omitted:
    return Omitted(f"{flag} is disabled")


def build_horoscope(
    birth: BirthInput,
    snapshot: EphemerisSnapshot,
    options: HoroscopeOptions | None = None,
) -> Horoscope:
    """Derive a :class:`Horoscope` from ``birth`` and an ephemeris ``snapshot``."""

    opts = options or HoroscopeOptions()
    language = opts.language
    chart = build_chart(snapshot)
    sun, moon = chart.get("Sun"), chart.get("Moon")
    if sun is None or moon is None:
        raise ValueError("ephemeris snapshot must include the Sun and Moon")

    panchang = panchang_from_longitudes(
        birth.moment, sun.longitude, moon.longitude, language=language
    )

    navamsa: Section[Mapping[str, Graha]] = (
        Computed(navamsa_chart(chart)) if opts.include_navamsa else _disabled("include_navamsa")
    )
    dasas: Section[Sequence[DasaPeriod]] = (
        Computed(
            tuple(
                build_vimshottari(
                    birth.moment, moon.longitude, years=opts.dasa_years, language=language
                )
            )
        )
        if opts.include_dasa
        else _disabled("include_dasa")
    )
    strengths: Section[Mapping[str, ShadbalaResult]] = (
        Computed(compute_shadbala(chart, birth.moment, language=language))
        if opts.include_strength
        else _disabled("include_strength")
    )
    yogas: Section[Sequence[YogaResult]] = (
        Computed(tuple(detect_yogas(chart, language=language)))
        if opts.include_yogas
        else _disabled("include_yogas")
    )
    doshas: Section[Sequence[DosaResult]] = (
        Computed(tuple(detect_doshas(chart, language=language)))
        if opts.include_dosas
        else _disabled("include_dosas")
    )

    LOG.debug(
        "Built horoscope jd=%.6f lagna=%s place=%r",
        snapshot.julian_day,
        chart.lagna_sign_name,
        birth.place_name,
    )
    return Horoscope(
        birth=birth,
        julian_day=snapshot.julian_day,
        panchang=panchang,
        chart=chart,
        navamsa=navamsa,
        dasas=dasas,
        strengths=strengths,
        yogas=yogas,
        doshas=doshas,
        language=language,
    )


def compute_horoscope(
    birth: BirthInput,
    provider: EphemerisProvider,
    options: HoroscopeOptions | None = None,
) -> Horoscope:
    """Fetch a snapshot from ``provider`` for ``birth`` and build the horoscope."""

    snapshot = provider.snapshot(birth.julian_day, birth.latitude, birth.longitude)
    return build_horoscope(birth, snapshot, options)
