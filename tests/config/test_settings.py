import pytest
import yaml
from pydantic import ValidationError

from jataka.config import (
    CONFIG_FILENAME,
    FeaturesCfg,
    Settings,
    config_path,
    get_config_home,
    default_settings,
    load_settings,
    save_settings,
)
from jataka.config.settings import CURRENT_SETTINGS_SCHEMA_VERSION


def test_defaults():
    settings = default_settings()
    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION
    assert settings.zodiac.ayanamsa == "lahiri"
    assert settings.houses.system == "whole_sign"
    assert settings.locale.language == "Tamil"
    assert settings.ephemeris.path is None


@pytest.mark.parametrize(("raw", "expected"), [(500, 240.0), (0, 1.0), ("60", 60.0)])
def test_dasa_years_clamped(raw, expected):
    assert FeaturesCfg(dasa_years=raw).dasa_years == pytest.approx(expected)


def test_roundtrip(tmp_path):
    path = tmp_path / "config.yaml"
    settings = Settings()
    settings.features.include_strength = False
    settings.locale.language = "Kannada"
    save_settings(settings, path)
    loaded = load_settings(path)
    assert loaded.features.include_strength is False
    assert loaded.locale.language == "Kannada"
    assert loaded == settings


def test_load_creates_defaults_when_missing(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    settings = load_settings(path)
    assert path.exists()
    assert settings == default_settings()


def test_legacy_payload_is_upgraded(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"houses": {"system": "placidus"}}), encoding="utf-8")
    settings = load_settings(path)
    assert settings.houses.system == "placidus"
    stored = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert stored["schema_version"] == CURRENT_SETTINGS_SCHEMA_VERSION


def test_invalid_values_raise(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"locale": {"language": "Klingon"}}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)


def test_config_home_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("JATAKA_HOME", str(tmp_path / "home"))
    assert config_path() == tmp_path / "home" / CONFIG_FILENAME
    assert (tmp_path / "home").is_dir()


def test_horoscope_options_mirror_features():
    settings = Settings()
    settings.features.include_yogas = False
    settings.features.dasa_years = 80
    settings.locale.language = "English"
    options = settings.horoscope_options()
    assert options.include_yogas is False
    assert options.include_dasa is True
    assert options.dasa_years == pytest.approx(80.0)
    assert options.language == "English"


@pytest.mark.swiss
def test_ephemeris_provider_uses_configured_systems():
    settings = Settings()
    settings.zodiac.ayanamsa = "raman"
    settings.houses.system = "equal"
    provider = settings.ephemeris_provider()
    assert provider.ayanamsha == "raman"
    assert provider.house_system == "equal"


@pytest.mark.parametrize("raw", [None, [1, 2], "soon"])
def test_non_numeric_dasa_years_raise_validation_error(raw):
    with pytest.raises(ValidationError):
        FeaturesCfg(dasa_years=raw)


def test_newer_schema_version_is_left_alone(tmp_path):
    path = tmp_path / "config.yaml"
    payload = {"schema_version": CURRENT_SETTINGS_SCHEMA_VERSION + 2}
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    settings = load_settings(path)
    assert settings.schema_version == CURRENT_SETTINGS_SCHEMA_VERSION + 2
    stored = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert stored == payload


def test_unset_config_home_defaults_under_user_home(tmp_path, monkeypatch):
    monkeypatch.delenv("JATAKA_HOME", raising=False)
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "appdata"))
    home = get_config_home()
    assert home.name in {".jataka", "Jataka"}
