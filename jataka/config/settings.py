"""Configuration models and helpers for Jataka settings."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..vedic.horoscope import HoroscopeOptions

if TYPE_CHECKING:  # pragma: no cover - runtime import avoided for typing only
    from ..ephemeris.swisseph_adapter import SwissEphemerisProvider

CURRENT_SETTINGS_SCHEMA_VERSION = 1
CONFIG_FILENAME = "config.yaml"

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
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

# -------------------- Settings Schema --------------------


class ZodiacCfg(BaseModel):
    """Sidereal zodiac configuration."""

    ayanamsa: Literal[
        "lahiri",
        "raman",
        "krishnamurti",
        "fagan_bradley",
        "yukteshwar",
    ] = "lahiri"


class HousesCfg(BaseModel):
    """House system configuration."""

    system: Literal[
        "whole_sign",
        "equal",
        "placidus",
        "koch",
        "porphyry",
        "sripati",
    ] = "whole_sign"


class FeaturesCfg(BaseModel):
    """Optional horoscope sections."""

    include_navamsa: bool = True
    include_dasa: bool = True
    include_strength: bool = True
    include_yogas: bool = True
    include_dosas: bool = True
    dasa_years: float = 120.0

    @field_validator("dasa_years", mode="before")
    @classmethod
    def _clamp_dasa_years(cls, value: float) -> float:
        try:
            numeric = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"dasa_years must be a number, got {value!r}") from exc
        return max(1.0, min(240.0, numeric))


class LocaleCfg(BaseModel):
    """Presentation language for localized names."""

    language: Literal["English", "Tamil", "Telugu", "Kannada", "Malayalam"] = "Tamil"


class EphemerisCfg(BaseModel):
    """Swiss Ephemeris data location."""

    path: Optional[str] = None


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    zodiac: ZodiacCfg = Field(default_factory=ZodiacCfg)
    houses: HousesCfg = Field(default_factory=HousesCfg)
    features: FeaturesCfg = Field(default_factory=FeaturesCfg)
    locale: LocaleCfg = Field(default_factory=LocaleCfg)
    ephemeris: EphemerisCfg = Field(default_factory=EphemerisCfg)

    def horoscope_options(self) -> HoroscopeOptions:
        """Return the :class:`HoroscopeOptions` described by these settings."""

        features = self.features
        return HoroscopeOptions(
            include_navamsa=features.include_navamsa,
            include_dasa=features.include_dasa,
            include_strength=features.include_strength,
            include_yogas=features.include_yogas,
            include_dosas=features.include_dosas,
            dasa_years=features.dasa_years,
            language=self.locale.language,
        )

    def ephemeris_provider(self) -> SwissEphemerisProvider:
        """Instantiate the Swiss Ephemeris provider configured here."""

        from ..ephemeris.swisseph_adapter import SwissEphemerisProvider

        return SwissEphemerisProvider(
            self.ephemeris.path,
            ayanamsha=self.zodiac.ayanamsa,
            house_system=self.houses.system,
        )


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    override = os.environ.get("JATAKA_HOME")
    if override:
        return Path(override)
    if os.name == "nt":
        base = Path(
            os.environ.get(
                "LOCALAPPDATA", str(Path.home() / "AppData" / "Local")
            )
        )
        return base / "Jataka"
    return Path.home() / ".jataka"


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _upgrade_settings_payload(data: dict[str, object]) -> tuple[dict[str, object], bool]:
    """Stamp payloads with a missing or older schema marker.

    Payloads written by a newer release keep their marker untouched.
    """

    upgraded = deepcopy(data)
    version = upgraded.get("schema_version")
    if not isinstance(version, int) or version < CURRENT_SETTINGS_SCHEMA_VERSION:
        upgraded["schema_version"] = CURRENT_SETTINGS_SCHEMA_VERSION
        return upgraded, True
    return upgraded, False


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing.

    Invalid values raise :class:`pydantic.ValidationError` (a ``ValueError``).
    """

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    data, upgraded = _upgrade_settings_payload(raw)
    settings = Settings(**data)
    if upgraded:
        save_settings(settings, source_path)
    return settings
