"""Configuration helpers exposed at :mod:`jataka.config`."""

from __future__ import annotations

from .settings import (
    CONFIG_FILENAME,
    EphemerisCfg,
    FeaturesCfg,
    HousesCfg,
    LocaleCfg,
    Settings,
    ZodiacCfg,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "CONFIG_FILENAME",
    "EphemerisCfg",
    "FeaturesCfg",
    "HousesCfg",
    "LocaleCfg",
    "Settings",
    "ZodiacCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]
