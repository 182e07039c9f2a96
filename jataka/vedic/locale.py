"""Localized names, rationale templates, and remedies.

English is the canonical key for every catalogue entry.  When a requested
language (or the entry itself) is missing from the packaged profile the
English name is returned unchanged, so presentation layers always receive a
usable label.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..profiles import load_locale_profile

__all__ = [
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "dosha_description",
    "dosha_name",
    "dosha_remedies",
    "graha_name",
    "localized",
    "yoga_description",
    "yoga_name",
]

LOG = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "Tamil"
SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "English",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
)


def _section(name: str) -> Mapping[Any, Any]:
    section = load_locale_profile().get(name) or {}
    return section if isinstance(section, Mapping) else {}


def localized(section: str, key: Any, language: str, *, default: str) -> str:
    """Return the ``language`` label for ``key`` in ``section``.

    Sections keyed by number (rasis, nakshatras, tithis...) and by English
    name (grahas, paksha) are both supported.  ``default`` is returned for
    English and for any miss.
    """

    if language == "English":
        return default
    entry = _section(section).get(key)
    if isinstance(entry, Mapping) and "names" in entry:
        entry = entry["names"]
    if not isinstance(entry, Mapping):
        return default
    value = entry.get(language)
    if not value:
        LOG.debug("No %s label for %s[%r]; using %r", language, section, key, default)
        return default
    return str(value)


def graha_name(graha: str, language: str = DEFAULT_LANGUAGE) -> str:
    return localized("grahas", graha, language, default=graha)


def yoga_name(name: str, language: str = DEFAULT_LANGUAGE) -> str:
    return localized("yogas", name, language, default=name)


def dosha_name(name: str, language: str = DEFAULT_LANGUAGE) -> str:
    return localized("doshas", name, language, default=name)


def _template(section: str, name: str) -> str:
    entry = _section(section).get(name)
    if isinstance(entry, Mapping):
        return str(entry.get("description", ""))
    return ""


def yoga_description(name: str, **fields: object) -> str:
    """Return the rationale for yoga ``name`` with ``fields`` interpolated."""

    return _template("yogas", name).format(**fields)


def dosha_description(name: str, **fields: object) -> str:
    """Return the rationale for dosha ``name`` with ``fields`` interpolated."""

    return _template("doshas", name).format(**fields)


def dosha_remedies(name: str) -> tuple[str, ...]:
    entry = _section("doshas").get(name)
    if not isinstance(entry, Mapping):
        return ()
    return tuple(str(item) for item in entry.get("remedies") or ())
