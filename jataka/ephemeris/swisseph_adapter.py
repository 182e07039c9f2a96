"""Swiss Ephemeris backed provider producing sidereal snapshots."""

from __future__ import annotations

import importlib
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType

from .snapshot import EphemerisSample, EphemerisSnapshot

LOG = logging.getLogger(__name__)

__all__ = [
    "BODY_CODES",
    "EphemerisUnavailable",
    "SwissEphemerisProvider",
    "get_swisseph",
    "resolve_house_code",
]


class EphemerisUnavailable(RuntimeError):
    """Raised when the Swiss Ephemeris backend cannot be loaded or queried."""


_swe_mod: ModuleType | None = None


def get_swisseph() -> ModuleType:
    """Return the cached :mod:`swisseph` module, raising if unavailable."""

    global _swe_mod
    if _swe_mod is None:
        try:
            _swe_mod = importlib.import_module("swisseph")
        except ImportError as exc:
            raise EphemerisUnavailable(
                "Swiss Ephemeris not available. Install pyswisseph (package: 'pyswisseph') "
                "and set SE_EPHE_PATH to your ephemeris data directory."
            ) from exc
    return _swe_mod


# Body name -> ``swisseph`` attribute holding its planet index.
BODY_CODES: Mapping[str, str] = {
    "Sun": "SUN",
    "Moon": "MOON",
    "Mars": "MARS",
    "Mercury": "MERCURY",
    "Jupiter": "JUPITER",
    "Venus": "VENUS",
    "Saturn": "SATURN",
    "Rahu": "MEAN_NODE",
}

_HOUSE_SYSTEM_CODES: Mapping[str, bytes] = {
    "whole_sign": b"W",
    "equal": b"E",
    "placidus": b"P",
    "koch": b"K",
    "porphyry": b"O",
    "sripati": b"S",
}

_HOUSE_ALIASES: Mapping[str, str] = {
    "ws": "whole_sign",
    "wholesign": "whole_sign",
    "whole": "whole_sign",
    "bhava": "sripati",
}

_AYANAMSHA_ATTRS: Mapping[str, str] = {
    "lahiri": "SIDM_LAHIRI",
    "raman": "SIDM_RAMAN",
    "krishnamurti": "SIDM_KRISHNAMURTI",
    "fagan_bradley": "SIDM_FAGAN_BRADLEY",
    "yukteshwar": "SIDM_YUKTESHWAR",
}

_EPHE_ENV_KEYS: tuple[str, ...] = ("SE_EPHE_PATH", "SWE_EPH_PATH", "JATAKA_EPHEMERIS_PATH")


def resolve_house_code(name: str) -> tuple[str, bytes]:
    """Return the canonical house system key and its Swiss Ephemeris code."""

    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    key = _HOUSE_ALIASES.get(key, key)
    try:
        return key, _HOUSE_SYSTEM_CODES[key]
    except KeyError as exc:
        options = ", ".join(sorted(_HOUSE_SYSTEM_CODES))
        raise ValueError(
            f"Unsupported house system '{name}'. Supported options: {options}"
        ) from exc


class SwissEphemerisProvider:
    """Compute sidereal body positions and cusps with pyswisseph.

    Positions use the Swiss ephemeris files when available and fall back to
    the built-in Moshier ephemeris otherwise.  Rahu is the mean lunar node.
    """

    def __init__(
        self,
        ephemeris_path: str | os.PathLike[str] | None = None,
        *,
        ayanamsha: str = "lahiri",
        house_system: str = "whole_sign",
    ) -> None:
        swe = get_swisseph()
        key = ayanamsha.strip().lower()
        if key not in _AYANAMSHA_ATTRS:
            options = ", ".join(sorted(_AYANAMSHA_ATTRS))
            raise ValueError(
                f"Unsupported ayanamsha '{ayanamsha}'. Supported options: {options}"
            )
        self.ayanamsha = key
        self.house_system, self._house_code = resolve_house_code(house_system)
        self._sidereal_mode = getattr(swe, _AYANAMSHA_ATTRS[key])
        self._calc_flags = swe.FLG_SWIEPH | swe.FLG_SPEED | swe.FLG_SIDEREAL
        self._fallback_flags = swe.FLG_MOSEPH | swe.FLG_SPEED | swe.FLG_SIDEREAL
        self.ephemeris_path = self._configure_ephemeris_path(ephemeris_path)

    def _configure_ephemeris_path(
        self, ephemeris_path: str | os.PathLike[str] | None
    ) -> str | None:
        swe = get_swisseph()
        if ephemeris_path is not None:
            swe.set_ephe_path(str(ephemeris_path))
            return str(ephemeris_path)
        for env_key in _EPHE_ENV_KEYS:
            value = os.getenv(env_key)
            if value and Path(value).exists():
                swe.set_ephe_path(value)
                return value
        return None

    def _apply_sidereal_mode(self) -> None:
        get_swisseph().set_sid_mode(self._sidereal_mode, 0.0, 0.0)

    def _calc(self, julian_day: float, code: int) -> tuple[float, ...]:
        swe = get_swisseph()
        try:
            values, _ = swe.calc_ut(julian_day, code, self._calc_flags)
        except swe.Error:
            LOG.debug("Swiss ephemeris files unavailable for %s; using Moshier", code)
            try:
                values, _ = swe.calc_ut(julian_day, code, self._fallback_flags)
            except swe.Error as exc:
                raise EphemerisUnavailable(str(exc)) from exc
        return tuple(float(value) for value in values)

    def sample(self, julian_day: float, body: str) -> EphemerisSample:
        """Return the sidereal sample for a single named body."""

        swe = get_swisseph()
        try:
            code = getattr(swe, BODY_CODES[body])
        except KeyError as exc:
            raise ValueError(f"Unsupported body '{body}'") from exc
        self._apply_sidereal_mode()
        lon, lat, dist, speed_lon, speed_lat, speed_dist = self._calc(julian_day, code)
        return EphemerisSample(
            longitude=lon % 360.0,
            latitude=lat,
            speed_longitude=speed_lon,
            distance_au=dist,
            speed_latitude=speed_lat,
            speed_distance=speed_dist,
        )

    def houses(
        self, julian_day: float, latitude: float, longitude: float
    ) -> tuple[tuple[float, ...], float]:
        """Return the twelve sidereal cusps and the ascendant."""

        swe = get_swisseph()
        self._apply_sidereal_mode()
        code = self._house_code
        try:
            cusps, angles = swe.houses_ex(
                julian_day, latitude, longitude, code, swe.FLG_SIDEREAL
            )
        except swe.Error as exc:
            if self.house_system == "whole_sign":
                raise EphemerisUnavailable(str(exc)) from exc
            # Quadrant systems fail at extreme latitudes.
            LOG.warning(
                {
                    "event": "house_system_fallback",
                    "from": self.house_system,
                    "to": "whole_sign",
                    "latitude": latitude,
                    "longitude": longitude,
                    "reason": str(exc),
                }
            )
            cusps, angles = swe.houses_ex(
                julian_day, latitude, longitude, b"W", swe.FLG_SIDEREAL
            )
        # Older pyswisseph releases return a 13-tuple with a dummy leading cusp.
        if len(cusps) == 13:
            cusps = cusps[1:]
        return tuple(float(c) % 360.0 for c in cusps), float(angles[0]) % 360.0

    def snapshot(
        self, julian_day: float, latitude: float, longitude: float
    ) -> EphemerisSnapshot:
        bodies = {name: self.sample(julian_day, name) for name in BODY_CODES}
        cusps, ascendant = self.houses(julian_day, latitude, longitude)
        LOG.debug(
            "Computed snapshot jd=%.6f lat=%.4f lon=%.4f asc=%.4f",
            julian_day,
            latitude,
            longitude,
            ascendant,
        )
        return EphemerisSnapshot(
            julian_day=julian_day,
            bodies=bodies,
            cusps=cusps,
            ascendant=ascendant,
            metadata={
                "ayanamsha": self.ayanamsha,
                "house_system": self.house_system,
                "ayanamsha_value": float(
                    get_swisseph().get_ayanamsa_ut(julian_day)
                ),
                "nodes": "mean",
            },
        )
