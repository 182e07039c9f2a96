"""Angular utilities shared by every Jyotiṣa derivation.

Sidereal longitudes are compared against sign, nakshatra, and house
boundaries constantly.  Doing so with raw modulo arithmetic invites subtle
bugs around the 0°/360° boundary, so the helpers in this module centralise
degree normalisation and the cyclic "Nth from" counting used by the rule
engines.  Out-of-range drift is always clamped, never rejected.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "EPSILON_DEG",
    "SIGN_ARC_DEGREES",
    "circular_separation",
    "count_from",
    "degree_in_sign",
    "normalize_degrees",
    "sign_of",
    "signed_delta",
]


EPSILON_DEG: Final[float] = 1e-9
SIGN_ARC_DEGREES: Final[float] = 30.0


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` normalised to the ``[0, 360)`` interval.

    Parameters
    ----------
    angle:
        Value in **degrees**. Inputs outside the canonical range are
        wrapped by multiples of 360°.

    Returns
    -------
    float
        A degree value in ``[0, 360)``. Values within ``1e-9`` of ``360``
        are coerced to ``0`` so sign and nakshatra lookups never see an
        index one past the end of the zodiac.
    """

    wrapped = float(angle) % 360.0
    if wrapped >= 360.0 - EPSILON_DEG:
        wrapped = 0.0
    return wrapped if wrapped >= 0.0 else wrapped + 360.0


def signed_delta(angle: float) -> float:
    """Return ``angle`` wrapped to the ``[-180, 180)`` interval."""

    wrapped = normalize_degrees(angle)
    if wrapped >= 180.0:
        return wrapped - 360.0
    return wrapped


def circular_separation(a: float, b: float) -> float:
    """Return the smallest angular separation between ``a`` and ``b`` degrees."""

    return abs(signed_delta(float(a) - float(b)))


def sign_of(longitude: float) -> int:
    """Return the one-based rasi (1–12) containing ``longitude``."""

    index = int(normalize_degrees(longitude) // SIGN_ARC_DEGREES) + 1
    return min(index, 12)


def degree_in_sign(longitude: float) -> float:
    """Return the degree within the active sign (0–30)."""

    return normalize_degrees(longitude) % SIGN_ARC_DEGREES


def count_from(reference: int, target: int) -> int:
    """Return the position of ``target`` counted inclusively from ``reference``.

    Both arguments are one-based sign or house numbers.  A target in the
    same sign as the reference is the 1st; the sign immediately behind it is
    the 12th.
    """

    return ((int(target) - int(reference)) % 12) + 1
