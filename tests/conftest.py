"""Shared fixtures."""

import pytest

from navietta.config import reset_config
from navietta.container import reset_container
from navietta.domain.schemas import FlightDetails, Preferences, Stop

_ENV_VARS = [
    "ANTHROPIC_API_KEY",
    "NAV_LLM_API_KEY",
    "GEONAMES_USERNAME",
    "NAV_GEO_USERNAME",
    "NAV_GEO_ENABLED",
    "NAV_VALIDATION_REPORT_ALL_FAILURES",
    "NAV_MOCK_DELAY_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer credentials out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_container()
    reset_config()


@pytest.fixture
def flight():
    return FlightDetails(
        from_location="London",
        to_location="Sydney",
        departure_time="08:00",
        departure_date="2025-09-02",
        adults=2,
        children=1,
        luggage_count=3,
        stops=[Stop(location="Dubai", arrival_time="15:30", arrival_date="2025-09-02")],
    )


@pytest.fixture
def preferences():
    return Preferences(budget=3, activities=2, transit_style="fast-track")
