import pytest

from jataka.core.angles import (
    circular_separation,
    count_from,
    degree_in_sign,
    normalize_degrees,
    sign_of,
    signed_delta,
)


def test_normalize_wraps_negative_and_large_values():
    assert normalize_degrees(-30.0) == pytest.approx(330.0)
    assert normalize_degrees(720.0) == 0.0
    assert normalize_degrees(365.5) == pytest.approx(5.5)


def test_normalize_snaps_values_just_below_full_circle():
    assert normalize_degrees(360.0 - 1e-12) == 0.0
    assert sign_of(360.0 - 1e-12) == 1


def test_signed_delta_range():
    assert signed_delta(190.0) == pytest.approx(-170.0)
    assert signed_delta(-10.0) == pytest.approx(-10.0)
    assert signed_delta(180.0) == pytest.approx(-180.0)


def test_circular_separation_crosses_zero():
    assert circular_separation(350.0, 10.0) == pytest.approx(20.0)
    assert circular_separation(0.0, 180.0) == pytest.approx(180.0)


def test_sign_boundaries():
    assert sign_of(0.0) == 1
    assert sign_of(29.999) == 1
    assert sign_of(30.0) == 2
    assert sign_of(359.9) == 12
    assert degree_in_sign(45.0) == pytest.approx(15.0)


def test_count_from_is_inclusive():
    assert count_from(1, 1) == 1
    assert count_from(4, 7) == 4
    assert count_from(10, 1) == 4
    assert count_from(5, 4) == 12
