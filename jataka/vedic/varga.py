"""Divisional chart helpers for the Saptavarga.

Each ``*_sign`` helper maps a sidereal longitude to the one-based sign it
occupies in the corresponding divisional chart.  Only the Navāṁśa (D9) also
carries a scaled longitude, which :func:`navamsa_chart` uses to project the
D-1 grahas.  Houses are not recomputed for divisional charts.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from ..core.angles import SIGN_ARC_DEGREES, normalize_degrees, sign_of
from .chart import Graha, VedicChart, make_graha

__all__ = [
    "NAVAMSA_ARC_DEGREES",
    "VARGA_SIGN_FUNCTIONS",
    "drekkana_sign",
    "dwadasamsa_sign",
    "hora_sign",
    "navamsa_chart",
    "navamsa_longitude",
    "navamsa_sign",
    "rasi_sign",
    "saptamsa_sign",
    "trimsamsa_sign",
]

NAVAMSA_ARC_DEGREES = SIGN_ARC_DEGREES / 9.0

# Navāṁśa counting starts from the movable sign of the element (0-based).
_NAVAMSA_START = (0, 9, 6, 3)  # fire: Aries, earth: Capricorn, air: Libra, water: Cancer

# Trimśāṁśa boundaries (degrees within sign) and destination signs.
_ODD_TRIMSAMSA = ((5.0, 1), (10.0, 10), (18.0, 9), (25.0, 6), (30.0, 7))
_EVEN_TRIMSAMSA = ((5.0, 7), (12.0, 6), (20.0, 9), (25.0, 10), (30.0, 1))


def _split(longitude: float) -> tuple[int, float]:
    lon = normalize_degrees(longitude)
    sign = sign_of(lon)
    return sign, lon - (sign - 1) * SIGN_ARC_DEGREES


def _part(position: float, divisions: int) -> int:
    return min(int(position // (SIGN_ARC_DEGREES / divisions)), divisions - 1)


def rasi_sign(longitude: float) -> int:
    return sign_of(normalize_degrees(longitude))


def hora_sign(longitude: float) -> int:
    """D-2: odd signs give Leo then Cancer, even signs Cancer then Leo."""

    sign, pos = _split(longitude)
    first_half = pos < 15.0
    if sign % 2 == 1:
        return 5 if first_half else 4
    return 4 if first_half else 5


def drekkana_sign(longitude: float) -> int:
    """D-3: the sign itself, then its 5th and 9th."""

    sign, pos = _split(longitude)
    return ((sign - 1) + _part(pos, 3) * 4) % 12 + 1


def saptamsa_sign(longitude: float) -> int:
    """D-7: odd signs count from themselves, even signs from their 7th."""

    sign, pos = _split(longitude)
    start = sign if sign % 2 == 1 else (sign + 6 - 1) % 12 + 1
    return ((start - 1) + _part(pos, 7)) % 12 + 1


def navamsa_sign(longitude: float) -> int:
    return sign_of(navamsa_longitude(longitude))


def dwadasamsa_sign(longitude: float) -> int:
    """D-12: twelve 2.5° parts counted from the sign itself."""

    sign, pos = _split(longitude)
    return ((sign - 1) + _part(pos, 12)) % 12 + 1


def trimsamsa_sign(longitude: float) -> int:
    """D-30: unequal parts ruled by the five Tara grahas."""

    sign, pos = _split(longitude)
    table = _ODD_TRIMSAMSA if sign % 2 == 1 else _EVEN_TRIMSAMSA
    for limit, dest in table:
        if pos < limit:
            return dest
    return table[-1][1]


def navamsa_longitude(longitude: float) -> float:
    """Return the D-9 longitude for a D-1 ``longitude``.

    The ninth part occupied within the sign selects the destination sign
    (counted from the element's movable sign) and the offset within that
    part is scaled up to a full 30° sign.
    """

    sign, pos = _split(longitude)
    part = _part(pos, 9)
    start = _NAVAMSA_START[(sign - 1) % 4]
    dest = (start + part) % 12
    offset = max(0.0, pos - part * NAVAMSA_ARC_DEGREES)
    remainder = min(offset / NAVAMSA_ARC_DEGREES * SIGN_ARC_DEGREES, SIGN_ARC_DEGREES - 1e-7)
    return normalize_degrees(dest * SIGN_ARC_DEGREES + remainder)


def _navamsa_graha(graha: Graha) -> Graha:
    return make_graha(
        graha.name,
        navamsa_longitude(graha.longitude),
        latitude=graha.latitude,
        speed=graha.speed,
        retrograde=graha.retrograde,
        distance_au=graha.distance_au,
        speed_latitude=graha.speed_latitude,
        speed_distance=graha.speed_distance,
    )


def navamsa_chart(chart: VedicChart) -> Mapping[str, Graha]:
    """Return the D-9 placements of every graha in ``chart``.

    The returned grahas keep their D-1 motion flags; ``house`` is ``None``.
    """

    return MappingProxyType({name: _navamsa_graha(g) for name, g in chart.grahas.items()})


VARGA_SIGN_FUNCTIONS: Mapping[str, Callable[[float], int]] = MappingProxyType(
    {
        "D1": rasi_sign,
        "D2": hora_sign,
        "D3": drekkana_sign,
        "D7": saptamsa_sign,
        "D9": navamsa_sign,
        "D12": dwadasamsa_sign,
        "D30": trimsamsa_sign,
    }
)
