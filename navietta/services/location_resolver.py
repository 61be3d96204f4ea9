"""Location resolver service.

Maps a free-text place name to a resolved location through the
geocoder port, degrading to the offline city table when the service
cannot answer. Expected failures are returned as ``LocationInvalid``;
nothing is raised to the caller.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Sequence

from ..domain.errors import GeocodingError
from ..domain.models import (
    GeoCandidate,
    LocationInvalid,
    LocationValid,
    ResolvedLocation,
    ValidationResult,
)
from ..geo.fallback import example_locations, lookup_fallback
from ..ports.geocoding import GeocoderPort

MAX_CANDIDATES = 5
MAX_SUGGESTIONS = 3
EMPTY_LOCATION_MESSAGE = "Please enter a location."

_WHITESPACE_RE = re.compile(r"\s+")


def clean_location_name(text: str) -> str:
    """Trim and collapse internal whitespace to single spaces."""
    return _WHITESPACE_RE.sub(" ", text.strip())


def _prefer(best: GeoCandidate, current: GeoCandidate) -> GeoCandidate:
    if current.is_populated_place and not best.is_populated_place:
        return current
    if current.is_populated_place and best.is_populated_place:
        if current.population_or_zero > best.population_or_zero:
            return current
    return best


def pick_best_candidate(candidates: Sequence[GeoCandidate]) -> GeoCandidate:
    """Choose among geocoding candidates.

    Populated places beat administrative areas; among populated places
    the larger population wins (unknown counts as 0). Ties keep the
    first-seen candidate.

    Raises:
        ValueError: If ``candidates`` is empty.
    """
    if not candidates:
        raise ValueError("No candidates to choose from")
    return reduce(_prefer, candidates)


@dataclass
class LocationResolverService:
    """Resolve place names with a geocoder and an offline fallback.

    Attributes:
        geocoder: Geocoding service used on the primary path
        max_candidates: Number of candidates requested from the geocoder
    """

    geocoder: GeocoderPort
    max_candidates: int = MAX_CANDIDATES

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, text: str) -> ValidationResult:
        """Resolve a free-text place name.

        Args:
            text: Place name as typed by the user.

        Returns:
            LocationValid with the chosen location and alternate names,
            or LocationInvalid with guidance text and example names.
        """
        name = clean_location_name(text or "")
        if not name:
            return LocationInvalid(
                error=EMPTY_LOCATION_MESSAGE,
                suggestions=example_locations(),
            )

        try:
            candidates = self.geocoder.search(name, max_rows=self.max_candidates)
        except GeocodingError as e:
            self._logger.warning(
                "Geocoding failed, using offline table",
                extra={
                    "query": name,
                    "error": str(e),
                    "rate_limited": e.is_rate_limited,
                    "status_code": e.status_code,
                },
            )
            return lookup_fallback(name)

        if not candidates:
            self._logger.info(
                "Geocoding returned no candidates, using offline table",
                extra={"query": name},
            )
            return lookup_fallback(name)

        best = pick_best_candidate(candidates)
        suggestions = tuple(
            candidate.full_name
            for candidate in candidates[:MAX_SUGGESTIONS]
            if candidate.name != best.name
        )

        self._logger.debug(
            "Location resolved",
            extra={"query": name, "resolved": best.full_name},
        )
        return LocationValid(
            location=ResolvedLocation.from_candidate(best),
            suggestions=suggestions,
        )
