"""Whole-house graha drishti (aspect) helpers."""

from __future__ import annotations

from ..core.angles import count_from
from .data import ASPECT_OFFSETS, DRISHTI_VALUES, SPECIAL_ASPECTS

__all__ = [
    "aspected_houses",
    "drishti_value",
    "house_advance",
    "is_aspecting",
]

_DEFAULT_OFFSETS: tuple[int, ...] = (7,)


def aspected_houses(graha: str, house: int) -> tuple[int, ...]:
    """Return the houses receiving full aspect from ``graha`` in ``house``."""

    offsets = ASPECT_OFFSETS.get(graha, _DEFAULT_OFFSETS)
    return tuple(((house - 1 + offset - 1) % 12) + 1 for offset in offsets)


def is_aspecting(graha: str, from_house: int, to_house: int) -> bool:
    """Return ``True`` when ``to_house`` is one of the houses ``graha`` aspects.

    Houses are counted inclusively, so the occupied house is the 1st.
    """

    return count_from(from_house, to_house) in ASPECT_OFFSETS.get(graha, _DEFAULT_OFFSETS)


def house_advance(from_house: int, to_house: int) -> int:
    """Return the houses advanced from ``from_house`` to ``to_house`` (1–12).

    The same house counts as a full circuit of 12.
    """

    diff = (to_house - from_house) % 12
    return diff or 12


def drishti_value(graha: str, advance: int) -> float:
    """Return the graded aspect strength (0–1) of ``graha`` over ``advance`` houses."""

    if advance in SPECIAL_ASPECTS.get(graha, frozenset()):
        return 1.0
    return DRISHTI_VALUES.get(advance, 0.0)
