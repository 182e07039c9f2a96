from jataka.profiles import load_locale_profile
from jataka.vedic.locale import (
    SUPPORTED_LANGUAGES,
    dosha_description,
    dosha_remedies,
    graha_name,
    localized,
    yoga_description,
    yoga_name,
)


def test_profile_lists_supported_languages():
    profile = load_locale_profile()
    assert profile["languages"] == list(SUPPORTED_LANGUAGES)
    assert load_locale_profile() is profile


def test_graha_names():
    assert graha_name("Moon", "Tamil") == "சந்திரன்"
    assert graha_name("Moon", "Malayalam") == "ചന്ദ്രൻ"
    assert graha_name("Moon", "English") == "Moon"


def test_missing_label_falls_back_to_default():
    assert localized("rasis", 1, "Telugu", default="Aries") == "మేషం"
    assert localized("tithis", 1, "Telugu", default="Pratipada") == "Pratipada"
    assert localized("unknown_section", 1, "Tamil", default="x") == "x"
    assert graha_name("Pluto", "Tamil") == "Pluto"


def test_yoga_and_dosha_names():
    assert yoga_name("Raja Yoga", "Kannada") == "ರಾಜ ಯೋಗ"
    assert yoga_name("Raja Yoga", "English") == "Raja Yoga"
    assert yoga_name("Unknown Yoga", "Tamil") == "Unknown Yoga"


def test_descriptions_interpolate_fields():
    assert yoga_description("Raja Yoga", planet="Venus").startswith("Venus rules")
    text = dosha_description("Pitra Dosha", reason="Sun is conjunct with Ketu")
    assert "Sun is conjunct with Ketu" in text
    assert dosha_description("Unknown Dosha") == ""


def test_remedies():
    remedies = dosha_remedies("Kaal Sarp Dosha")
    assert len(remedies) == 5
    assert remedies[0] == "Visit Kaal Sarp Dosha temples"
    assert dosha_remedies("Unknown Dosha") == ()
