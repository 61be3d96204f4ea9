"""Journey validator service.

Resolves both endpoints of a journey concurrently, then checks the
great-circle distance against the claimed departure/arrival times.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime

from ..domain.models import (
    JourneyInvalid,
    JourneyQuery,
    JourneyValid,
    JourneyValidationResult,
    LocationInvalid,
    LocationValid,
)
from ..geo.distance import distance_between
from ..geo.plausibility import check_travel_time
from .location_resolver import LocationResolverService


@dataclass
class JourneyValidatorService:
    """Validate a journey between two place names.

    Attributes:
        resolver: Resolves each endpoint
        report_all_failures: When both endpoints fail, report both
            instead of only the departure side
    """

    resolver: LocationResolverService
    report_all_failures: bool = False

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def validate(
        self,
        origin: str,
        destination: str,
        departure: datetime,
        arrival: datetime,
    ) -> JourneyValidationResult:
        """Validate both endpoints and the travel time between them.

        Args:
            origin: Departure place name.
            destination: Arrival place name.
            departure: Departure timestamp.
            arrival: Arrival timestamp.

        Returns:
            JourneyValid with both locations and the distance, or
            JourneyInvalid. When the timing is implausible the locations
            and distance are still attached.
        """
        origin_result, destination_result = await asyncio.gather(
            asyncio.to_thread(self.resolver.resolve, origin),
            asyncio.to_thread(self.resolver.resolve, destination),
        )

        errors: list[str] = []
        if isinstance(origin_result, LocationInvalid):
            errors.append(f"Departure location: {origin_result.error}")
        if isinstance(destination_result, LocationInvalid) and (
            not errors or self.report_all_failures
        ):
            errors.append(f"Arrival location: {destination_result.error}")

        if errors:
            self._logger.info(
                "Journey rejected on location",
                extra={"origin": origin, "destination": destination},
            )
            return JourneyInvalid(error=" ".join(errors))

        assert isinstance(origin_result, LocationValid)
        assert isinstance(destination_result, LocationValid)

        distance_km = distance_between(origin_result.location, destination_result.location)
        check = check_travel_time(distance_km, departure, arrival)

        self._logger.info(
            "Journey checked",
            extra={
                "origin": origin_result.location.full_name,
                "destination": destination_result.location.full_name,
                "distance_km": round(distance_km, 1),
                "speed_kmh": check.speed_kmh,
                "plausible": check.is_valid,
            },
        )

        if not check.is_valid:
            return JourneyInvalid(
                error=check.error or "",
                distance_km=distance_km,
                origin=origin_result.location,
                destination=destination_result.location,
            )

        return JourneyValid(
            origin=origin_result.location,
            destination=destination_result.location,
            distance_km=distance_km,
        )

    async def validate_query(self, query: JourneyQuery) -> JourneyValidationResult:
        """Validate a journey described by a JourneyQuery."""
        return await self.validate(
            query.origin,
            query.destination,
            query.departure,
            query.arrival,
        )
