"""Core helpers shared by the Jataka derivation engine."""

from __future__ import annotations

from .angles import (
    circular_separation,
    count_from,
    degree_in_sign,
    normalize_degrees,
    sign_of,
    signed_delta,
)

__all__ = [
    "circular_separation",
    "count_from",
    "degree_in_sign",
    "normalize_degrees",
    "sign_of",
    "signed_delta",
]
