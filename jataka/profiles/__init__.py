"""Packaged profile data and loaders."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources as importlib_resources
from typing import Any

import yaml

__all__ = ["LOCALE_PROFILE", "load_locale_profile"]

LOCALE_PROFILE = "locale.yaml"


@lru_cache(maxsize=1)
def load_locale_profile() -> dict[str, Any]:
    """Return the packaged localisation profile as a mapping."""

    resource = importlib_resources.files(__name__).joinpath(LOCALE_PROFILE)
    # ``read_text`` works for regular and zip-based installations alike.
    text = resource.read_text(encoding="utf-8")
    payload = yaml.safe_load(text) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"{LOCALE_PROFILE} must contain a mapping at the top level")
    return payload
