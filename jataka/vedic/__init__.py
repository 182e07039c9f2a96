"""Vedic (Jyotiṣa) derivation pipeline: chart, pañchānga, vargas, daśās, strength, yogas and doshas."""

from __future__ import annotations

from .chart import (
    BirthInput,
    Graha,
    HouseEntry,
    InvalidBirthInput,
    VedicChart,
    build_chart,
    house_for_longitude,
)
from .dasha import BhuktiPeriod, DasaPeriod, build_vimshottari, current_periods
from .doshas import DosaResult, detect_doshas
from .horoscope import (
    Computed,
    Horoscope,
    HoroscopeOptions,
    Omitted,
    SectionUnavailable,
    build_horoscope,
    compute_horoscope,
    require,
)
from .nakshatra import Nakshatra, NakshatraPosition, nakshatra_of, pada_of, position_for
from .panchang import PanchangamResult, panchang_from_longitudes
from .shadbala import ShadbalaResult, compute_shadbala
from .varga import VARGA_SIGN_FUNCTIONS, navamsa_chart, navamsa_longitude
from .yogas import YogaResult, detect_yogas

__all__ = [
    "VARGA_SIGN_FUNCTIONS",
    "BhuktiPeriod",
    "BirthInput",
    "Computed",
    "DasaPeriod",
    "DosaResult",
    "Graha",
    "Horoscope",
    "HoroscopeOptions",
    "HouseEntry",
    "InvalidBirthInput",
    "Nakshatra",
    "NakshatraPosition",
    "Omitted",
    "PanchangamResult",
    "SectionUnavailable",
    "ShadbalaResult",
    "VedicChart",
    "YogaResult",
    "build_chart",
    "build_horoscope",
    "build_vimshottari",
    "compute_horoscope",
    "compute_shadbala",
    "current_periods",
    "detect_doshas",
    "detect_yogas",
    "house_for_longitude",
    "nakshatra_of",
    "navamsa_chart",
    "navamsa_longitude",
    "pada_of",
    "panchang_from_longitudes",
    "position_for",
    "require",
]
