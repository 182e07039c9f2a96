from datetime import datetime

import pytest

from jataka.vedic.panchang import (
    karana_from_longitudes,
    panchang_from_longitudes,
    solar_month_from_longitude,
    tithi_from_longitudes,
    vara_from_datetime,
    yoga_from_longitudes,
)


def test_tithi_names_at_fortnight_ends():
    full = tithi_from_longitudes(170.0, 0.0, language="English")
    assert full.number == 15
    assert full.name == "Purnima"
    assert full.paksha == "Shukla"
    assert full.waxing

    new = tithi_from_longitudes(355.0, 0.0, language="English")
    assert new.number == 30
    assert new.name == "Amavasya"
    assert new.paksha == "Krishna"
    assert new.local_paksha == "Krishna Paksha"


def test_tithi_after_full_moon_starts_krishna_paksha():
    tithi = tithi_from_longitudes(180.0, 0.0)
    assert tithi.number == 16
    assert tithi.name == "Pratipada"
    assert not tithi.waxing
    assert tithi.local_paksha == "தேய்பிறை"


def test_tithi_wraps_across_zero():
    tithi = tithi_from_longitudes(5.0, 350.0, language="English")
    assert tithi.number == 2
    assert tithi.longitude_delta == pytest.approx(15.0)


def test_yoga_from_sum():
    yoga = yoga_from_longitudes(5.0, 0.0, language="English")
    assert yoga.number == 1
    assert yoga.name == "Vishkambha"
    last = yoga_from_longitudes(355.0, 4.0, language="English")
    assert last.number == 27
    assert last.name == "Vaidhriti"


def test_karana_folds_onto_movable_karanas():
    assert karana_from_longitudes(5.0, 0.0).number == 1
    assert karana_from_longitudes(100.0, 0.0).number == 3
    last = karana_from_longitudes(355.0, 0.0, language="English")
    assert last.half_tithi == 60
    assert last.number == 4
    assert last.name == "Taitila"


def test_karana_never_returns_fixed_karanas():
    numbers = {karana_from_longitudes(deg + 0.5, 0.0).number for deg in range(360)}
    assert numbers == set(range(1, 8))


def test_vara_counts_from_sunday():
    sunday = vara_from_datetime(datetime(2024, 1, 7, 9, 0), language="English")
    assert sunday.number == 0
    assert sunday.name == "Sunday"
    saturday = vara_from_datetime(datetime(2024, 1, 6, 9, 0))
    assert saturday.number == 6
    assert saturday.local_name == "சனி"


def test_solar_month_follows_sun_sign():
    assert solar_month_from_longitude(15.0, language="English").name == "Chithirai"
    thai = solar_month_from_longitude(285.0)
    assert thai.number == 10
    assert thai.local_name == "தை"


def test_panchang_bundle():
    moment = datetime(2024, 1, 7, 6, 30)
    result = panchang_from_longitudes(moment, 370.0, 130.0)
    assert result.sun_longitude == pytest.approx(10.0)
    assert result.moon_longitude == pytest.approx(130.0)
    assert result.tithi.number == 11
    assert result.nakshatra.nakshatra.name == "Magha"
    assert result.nakshatra_local_name == "மகம்"
    assert result.vara.number == 0
    assert result.solar_month.number == 1
    assert result.tithi.local_name == "ஏகாதசி"
