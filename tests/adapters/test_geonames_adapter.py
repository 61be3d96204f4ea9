"""Tests for the GeoNames geocoder adapter."""

from unittest.mock import MagicMock

import pytest
import requests

from navietta.adapters.geocoding import GeoNamesGeocoderAdapter, OfflineGeocoderAdapter
from navietta.config import GeoNamesConfig
from navietta.domain.errors import GeocodingError


def _response(payload=None, status_code=200, json_error=None):
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestGeoNamesGeocoderAdapter:
    """Test suite for GeoNamesGeocoderAdapter."""

    @pytest.fixture
    def session(self):
        return MagicMock(spec=requests.Session)

    @pytest.fixture
    def adapter(self, session):
        config = GeoNamesConfig(username="tester", base_url="http://geonames.test/searchJSON")
        return GeoNamesGeocoderAdapter(config=config, session=session)

    def test_request_parameters(self, adapter, session):
        session.get.return_value = _response({"geonames": []})

        adapter.search("Paris", max_rows=5)

        args, kwargs = session.get.call_args
        assert args == ("http://geonames.test/searchJSON",)
        assert kwargs["params"] == [
            ("q", "Paris"),
            ("maxRows", 5),
            ("username", "tester"),
            ("featureClass", "P"),
            ("featureClass", "A"),
        ]
        assert kwargs["timeout"] is None

    def test_parses_candidates(self, adapter, session):
        session.get.return_value = _response(
            {
                "geonames": [
                    {
                        "name": "Paris",
                        "countryName": "France",
                        "adminName1": "Île-de-France",
                        "lat": "48.85341",
                        "lng": "2.3488",
                        "fcode": "PPLC",
                        "population": 2138551,
                    },
                    {
                        "name": "Paris",
                        "countryName": "United States",
                        "adminName1": "Texas",
                        "lat": "33.66094",
                        "lng": "-95.55551",
                        "fcode": "PPLA2",
                        "population": "24171",
                    },
                ]
            }
        )

        candidates = adapter.search("Paris")

        assert len(candidates) == 2
        first = candidates[0]
        assert first.full_name == "Paris, France, Île-de-France"
        assert first.latitude == pytest.approx(48.85341)
        assert first.is_populated_place
        assert candidates[1].population == 24171

    def test_missing_population_and_admin(self, adapter, session):
        session.get.return_value = _response(
            {"geonames": [{"name": "Nowhere", "countryName": "X", "lat": 1, "lng": 2, "fcode": "ADM1"}]}
        )

        (candidate,) = adapter.search("Nowhere")

        assert candidate.population is None
        assert candidate.population_or_zero == 0
        assert candidate.full_name == "Nowhere, X"
        assert not candidate.is_populated_place

    def test_empty_result(self, adapter, session):
        session.get.return_value = _response({"totalResultsCount": 0, "geonames": []})
        assert adapter.search("Zzqxw123") == []

    def test_network_error(self, adapter, session):
        session.get.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(GeocodingError) as exc_info:
            adapter.search("Paris")

        assert exc_info.value.query == "Paris"
        assert isinstance(exc_info.value.cause, requests.ConnectionError)

    def test_non_2xx_status(self, adapter, session):
        session.get.return_value = _response(status_code=503)

        with pytest.raises(GeocodingError) as exc_info:
            adapter.search("Paris")

        assert exc_info.value.status_code == 503
        assert not exc_info.value.is_rate_limited

    def test_error_status_in_body(self, adapter, session):
        session.get.return_value = _response(
            {"status": {"message": "user account not enabled", "value": 10}}
        )

        with pytest.raises(GeocodingError) as exc_info:
            adapter.search("Paris")

        assert "user account not enabled" in str(exc_info.value)
        assert exc_info.value.status_code == 10
        assert not exc_info.value.is_rate_limited

    @pytest.mark.parametrize("code", [18, 19, 20])
    def test_credit_exhaustion_is_rate_limiting(self, adapter, session, code):
        session.get.return_value = _response(
            {"status": {"message": "the daily limit of credits has been exceeded", "value": code}}
        )

        with pytest.raises(GeocodingError) as exc_info:
            adapter.search("Paris")

        assert exc_info.value.is_rate_limited

    def test_invalid_json(self, adapter, session):
        session.get.return_value = _response(json_error=ValueError("no json"))

        with pytest.raises(GeocodingError):
            adapter.search("Paris")

    def test_malformed_candidate(self, adapter, session):
        session.get.return_value = _response({"geonames": [{"name": "Paris", "lat": "north"}]})

        with pytest.raises(GeocodingError):
            adapter.search("Paris")

    def test_out_of_range_coordinates(self, adapter, session):
        session.get.return_value = _response(
            {"geonames": [{"name": "Bad", "countryName": "X", "lat": "123", "lng": "0"}]}
        )

        with pytest.raises(GeocodingError):
            adapter.search("Bad")


def test_offline_geocoder_always_fails():
    with pytest.raises(GeocodingError):
        OfflineGeocoderAdapter().search("Paris")
