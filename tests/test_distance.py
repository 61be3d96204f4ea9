import math

import pytest

from navietta.domain.models import ResolvedLocation
from navietta.geo.distance import EARTH_RADIUS_KM, distance_between, haversine_km


def test_identical_points_are_zero_apart():
    assert haversine_km(48.8566, 2.3522, 48.8566, 2.3522) == 0.0


def test_distance_is_symmetric():
    forward = haversine_km(51.5074, -0.1278, 48.8566, 2.3522)
    backward = haversine_km(48.8566, 2.3522, 51.5074, -0.1278)
    assert forward == pytest.approx(backward)


def test_london_paris_is_about_344_km():
    assert haversine_km(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(343.5, abs=1.0)


def test_antipodal_points_are_half_circumference_apart():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_distance_between_resolved_locations():
    sydney = ResolvedLocation("Sydney", "Sydney, Australia", -33.8688, 151.2093, "Australia")
    melbourne = ResolvedLocation("Melbourne", "Melbourne, Australia", -37.8136, 144.9631, "Australia")

    assert distance_between(sydney, melbourne) == pytest.approx(714, abs=5)
