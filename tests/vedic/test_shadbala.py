from datetime import datetime

import pytest

from jataka.vedic.chart import make_graha
from jataka.vedic.data import SAPTA_GRAHAS
from jataka.vedic.shadbala import (
    COMPONENTS,
    ShadbalaResult,
    _war_outcome,
    compute_shadbala,
    dignity_virupas,
    strength_grade,
)

MOMENT = datetime(2000, 1, 1, 12, 0)


def test_results_cover_the_seven_grahas(make_chart):
    results = compute_shadbala(make_chart(), MOMENT)
    assert list(results) == list(SAPTA_GRAHAS)
    assert "Rahu" not in results


def test_total_is_sum_of_components(make_chart):
    for result in compute_shadbala(make_chart(), MOMENT).values():
        assert result.total == pytest.approx(sum(result.components().values()))
        assert result.total_virupas == pytest.approx(result.total * 60.0)
        assert 0.0 <= result.percentage <= 100.0
        assert result.grade == strength_grade(result.percentage)
        assert set(result.breakdown) == set(COMPONENTS)


def test_components_are_breakdown_sums(make_chart):
    sun = compute_shadbala(make_chart(), MOMENT)["Sun"]
    assert sun.positional == pytest.approx(sum(sun.breakdown["positional"].values()) / 60.0)
    assert sun.temporal == pytest.approx(sum(sun.breakdown["temporal"].values()) / 60.0)
    assert sun.natural == pytest.approx(1.0)


def test_uchcha_measures_distance_from_debilitation(make_chart):
    sun = compute_shadbala(make_chart(), MOMENT)["Sun"]
    # Sun at 15° Aries, debilitation point 10° Libra.
    assert sun.breakdown["positional"]["uchcha"] == pytest.approx(175.0 / 3.0)
    assert sun.breakdown["positional"]["kendra"] == pytest.approx(60.0)


def test_luminary_specific_kala_factors(make_chart):
    results = compute_shadbala(make_chart(), MOMENT)
    assert "paksha" not in results["Moon"].breakdown["temporal"]
    assert "ayana" not in results["Sun"].breakdown["temporal"]
    assert "paksha" in results["Sun"].breakdown["temporal"]
    assert results["Mercury"].breakdown["temporal"]["nathonnatha"] == pytest.approx(60.0)


def test_dig_bala_peaks_in_ideal_house(make_chart):
    strong = compute_shadbala(make_chart({"Jupiter": 20.0}), MOMENT)["Jupiter"]
    weak = compute_shadbala(make_chart(), MOMENT)["Jupiter"]
    assert strong.directional == pytest.approx(1.0)
    assert weak.directional == pytest.approx(0.0)


def test_retrograde_chesta_is_full(make_chart):
    mars = compute_shadbala(make_chart(speeds={"Mars": -0.3}), MOMENT)["Mars"]
    assert mars.breakdown["motional"]["chesta"] == pytest.approx(60.0)


def test_planetary_war_favours_higher_latitude(make_chart):
    chart = make_chart(
        {"Mercury": 165.5},
        latitudes={"Mars": 1.0, "Mercury": 0.5},
    )
    results = compute_shadbala(chart, MOMENT)
    assert results["Mars"].breakdown["temporal"]["yuddha"] == pytest.approx(30.0)
    assert results["Mercury"].breakdown["temporal"]["yuddha"] == pytest.approx(-30.0)


def test_drik_bala_signs_by_benefic_nature(make_chart):
    drik = compute_shadbala(make_chart(), MOMENT)["Sun"].breakdown["aspectual"]
    assert drik["Moon"] == pytest.approx(7.5)
    assert drik["Mars"] == pytest.approx(-15.0)
    assert drik["Saturn"] == pytest.approx(-11.25)
    assert "Mercury" not in drik
    assert "Rahu" not in drik


def test_missing_graha_is_skipped(make_chart):
    results = compute_shadbala(make_chart(omit=("Mercury",)), MOMENT)
    assert "Mercury" not in results
    assert len(results) == 6


def test_no_results_without_luminaries(make_chart):
    assert compute_shadbala(make_chart(omit=("Sun",)), MOMENT) == {}


def test_local_names(make_chart):
    results = compute_shadbala(make_chart(), MOMENT, language="Tamil")
    assert results["Jupiter"].local_name == "குரு"


@pytest.mark.parametrize(
    ("percentage", "grade"),
    [
        (95.0, "Excellent"),
        (80.0, "Excellent"),
        (79.9, "Good"),
        (60.0, "Good"),
        (45.0, "Average"),
        (20.0, "Weak"),
        (19.9, "Very Weak"),
    ],
)
def test_strength_grade_ladder(percentage, grade):
    assert strength_grade(percentage) == grade


def test_dignity_virupas():
    assert dignity_virupas("Sun", 1) == pytest.approx(45.0)
    assert dignity_virupas("Sun", 7) == pytest.approx(1.875)
    assert dignity_virupas("Mars", 8) == pytest.approx(30.0)
    assert dignity_virupas("Sun", 4) == pytest.approx(15.0)
    assert dignity_virupas("Sun", 3) == pytest.approx(7.5)
    assert dignity_virupas("Sun", 10) == pytest.approx(3.75)


def test_percentage_maps_required_to_half():
    result = ShadbalaResult(
        graha="Sun",
        local_name="Sun",
        positional=3.0,
        directional=1.0,
        temporal=1.5,
        motional=0.5,
        natural=0.5,
        aspectual=0.0,
        required=6.5,
    )
    assert result.total == pytest.approx(6.5)
    assert result.percentage == pytest.approx(50.0)
    assert result.has_sufficient_strength
    assert result.grade == "Average"
    doubled = ShadbalaResult("Sun", "Sun", 13.0, 0.0, 0.0, 0.0, 0.0, 0.0, 6.5)
    assert doubled.percentage == pytest.approx(100.0)
    assert ShadbalaResult("Sun", "Sun", 30.0, 0.0, 0.0, 0.0, 0.0, 0.0, 6.5).percentage == 100.0


def test_planetary_war_on_equal_latitude_goes_to_brighter_graha(make_chart):
    results = compute_shadbala(make_chart({"Mercury": 165.5}), MOMENT)
    # Mercury outranks Mars in the brightness table.
    assert results["Mercury"].breakdown["temporal"]["yuddha"] == pytest.approx(30.0)
    assert results["Mars"].breakdown["temporal"]["yuddha"] == pytest.approx(-30.0)


def test_planetary_war_full_tie_scores_nothing():
    mars = make_graha("Mars", 165.0, latitude=0.5)
    twin = make_graha("Mars", 165.2, latitude=0.5)
    assert _war_outcome(mars, twin) == 0.0


def test_no_war_beyond_one_degree(make_chart):
    results = compute_shadbala(make_chart({"Mercury": 166.5}), MOMENT)
    assert results["Mars"].breakdown["temporal"]["yuddha"] == 0.0
    assert results["Mercury"].breakdown["temporal"]["yuddha"] == 0.0
