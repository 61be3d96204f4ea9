"""GeoNames geocoder adapter.

This adapter queries the GeoNames ``searchJSON`` web service with:
- Configuration injection (endpoint, username, feature classes)
- A shared requests session
- Typed errors for every upstream failure mode

No retries and no timeout override: one failed call is reported
straight away so the caller can fall back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import requests

from ...config import GeoNamesConfig, get_config
from ...domain.errors import GeocodingError
from ...domain.models import GeoCandidate

# GeoNames status codes for exhausted credits (daily, hourly, weekly)
RATE_LIMIT_STATUS_CODES = frozenset({18, 19, 20})


def _parse_int(value: Any) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_candidate(raw: dict[str, Any]) -> GeoCandidate:
    """Convert one ``geonames`` entry to a candidate.

    Raises:
        KeyError, TypeError, ValueError: If required fields are missing
            or coordinates are not numeric.
    """
    latitude = float(raw["lat"])
    longitude = float(raw["lng"])
    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        raise ValueError(f"Coordinates out of range: {latitude}, {longitude}")

    return GeoCandidate(
        name=str(raw["name"]),
        country_name=str(raw.get("countryName") or ""),
        latitude=latitude,
        longitude=longitude,
        feature_code=str(raw.get("fcode") or ""),
        admin_name=raw.get("adminName1") or None,
        population=_parse_int(raw.get("population")),
    )


@dataclass
class GeoNamesGeocoderAdapter:
    """GeoNames geocoder adapter.

    This adapter implements GeocoderPort using the GeoNames
    place-search endpoint, restricted to the configured feature
    classes (populated places and administrative areas by default).

    Attributes:
        config: Geocoding configuration
        session: HTTP session used for outbound calls
    """

    config: GeoNamesConfig = field(default_factory=lambda: get_config().geocoding)
    session: requests.Session = field(default_factory=requests.Session, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _build_params(self, query: str, max_rows: int) -> list[tuple[str, Any]]:
        params: list[tuple[str, Any]] = [
            ("q", query),
            ("maxRows", max_rows),
            ("username", self.config.username),
        ]
        params.extend(("featureClass", fc) for fc in self.config.feature_classes)
        return params

    def search(self, query: str, max_rows: int = 5) -> Sequence[GeoCandidate]:
        """Search GeoNames for places matching a query.

        Args:
            query: The place name to look up.
            max_rows: Maximum number of candidates to request.

        Returns:
            Candidates in GeoNames order, possibly empty.

        Raises:
            GeocodingError: On network error, non-2xx status, an error
                status in the body, or a malformed body.
        """
        self._logger.debug(
            "GeoNames search",
            extra={"query": query, "max_rows": max_rows},
        )

        try:
            response = self.session.get(
                self.config.base_url,
                params=self._build_params(query, max_rows),
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise GeocodingError("GeoNames request failed", query=query, cause=e)

        if not response.ok:
            raise GeocodingError(
                f"GeoNames API error: {response.status_code}",
                query=query,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodingError("GeoNames returned invalid JSON", query=query, cause=e)

        if not isinstance(data, dict):
            raise GeocodingError("GeoNames returned an unexpected body", query=query)

        status = data.get("status")
        if status:
            code = _parse_int(status.get("value")) if isinstance(status, dict) else None
            message = status.get("message", "") if isinstance(status, dict) else str(status)
            raise GeocodingError(
                f"GeoNames reported an error: {message}",
                query=query,
                is_rate_limited=code in RATE_LIMIT_STATUS_CODES,
                status_code=code,
            )

        raw_candidates = data.get("geonames") or []
        try:
            candidates = [_parse_candidate(raw) for raw in raw_candidates]
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError("GeoNames returned a malformed candidate", query=query, cause=e)

        self._logger.debug(
            "GeoNames search done",
            extra={"query": query, "candidates": len(candidates)},
        )
        return candidates
