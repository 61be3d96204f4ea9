"""Immutable domain models for location and journey validation.

All models are frozen dataclasses with slots. They are produced per
request and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union


@dataclass(frozen=True, slots=True)
class GeoCandidate:
    """One match returned by the geocoding service.

    Attributes:
        name: Place name
        country_name: Country the place belongs to
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        feature_code: GeoNames feature code (e.g. 'PPLC', 'ADM1')
        admin_name: First-level administrative area, if any
        population: Recorded population, if any
    """

    name: str
    country_name: str
    latitude: float
    longitude: float
    feature_code: str = ""
    admin_name: Optional[str] = None
    population: Optional[int] = None

    @property
    def is_populated_place(self) -> bool:
        """City, town or village rather than an administrative region."""
        return self.feature_code.startswith("PPL")

    @property
    def population_or_zero(self) -> int:
        return self.population or 0

    @property
    def full_name(self) -> str:
        """Display name in the form 'Name, Country[, Region]'."""
        full = f"{self.name}, {self.country_name}"
        if self.admin_name:
            full += f", {self.admin_name}"
        return full


@dataclass(frozen=True, slots=True)
class ResolvedLocation:
    """A place name resolved to coordinates.

    Attributes:
        name: Short place name
        full_name: Display name including country (and region)
        latitude: Latitude in degrees, within [-90, 90]
        longitude: Longitude in degrees, within [-180, 180]
        country: Country name
        region: Administrative region, if known
    """

    name: str
    full_name: str
    latitude: float
    longitude: float
    country: str
    region: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    @classmethod
    def from_candidate(cls, candidate: GeoCandidate) -> ResolvedLocation:
        return cls(
            name=candidate.name,
            full_name=candidate.full_name,
            latitude=candidate.latitude,
            longitude=candidate.longitude,
            country=candidate.country_name,
            region=candidate.admin_name,
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "fullName": self.full_name,
            "lat": self.latitude,
            "lng": self.longitude,
            "country": self.country,
        }
        if self.region is not None:
            payload["region"] = self.region
        return payload


@dataclass(frozen=True, slots=True)
class LocationValid:
    """A location query that resolved successfully.

    Attributes:
        location: The resolved location
        suggestions: Alternate candidate names, best effort
    """

    location: ResolvedLocation
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return True

    def to_payload(self) -> dict[str, Any]:
        return {
            "isValid": True,
            "location": self.location.to_payload(),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True, slots=True)
class LocationInvalid:
    """A location query that could not be resolved.

    Attributes:
        error: User-facing explanation
        suggestions: Example names to guide the user
    """

    error: str
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return False

    def to_payload(self) -> dict[str, Any]:
        return {
            "isValid": False,
            "error": self.error,
            "suggestions": list(self.suggestions),
        }


ValidationResult = Union[LocationValid, LocationInvalid]


@dataclass(frozen=True, slots=True)
class JourneyQuery:
    """Two place names and the claimed departure/arrival times."""

    origin: str
    destination: str
    departure: datetime
    arrival: datetime


@dataclass(frozen=True, slots=True)
class TravelTimeCheck:
    """Outcome of the travel-time plausibility check.

    Attributes:
        is_valid: Whether the implied speed is plausible
        error: User-facing explanation when invalid
        speed_kmh: Implied average speed, when it could be computed
    """

    is_valid: bool
    error: Optional[str] = None
    speed_kmh: Optional[float] = None


@dataclass(frozen=True, slots=True)
class JourneyValid:
    """Both endpoints resolved and the timing is plausible."""

    origin: ResolvedLocation
    destination: ResolvedLocation
    distance_km: float

    @property
    def is_valid(self) -> bool:
        return True

    def to_payload(self) -> dict[str, Any]:
        return {
            "isValid": True,
            "fromLocationInfo": self.origin.to_payload(),
            "toLocationInfo": self.destination.to_payload(),
            "distance": self.distance_km,
        }


@dataclass(frozen=True, slots=True)
class JourneyInvalid:
    """Journey rejected, either on an endpoint or on its timing.

    Locations and distance are only present when both endpoints
    resolved and the timing check failed.
    """

    error: str
    distance_km: Optional[float] = None
    origin: Optional[ResolvedLocation] = None
    destination: Optional[ResolvedLocation] = None

    @property
    def is_valid(self) -> bool:
        return False

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"isValid": False, "error": self.error}
        if self.origin is not None:
            payload["fromLocationInfo"] = self.origin.to_payload()
        if self.destination is not None:
            payload["toLocationInfo"] = self.destination.to_payload()
        if self.distance_km is not None:
            payload["distance"] = self.distance_km
        return payload


JourneyValidationResult = Union[JourneyValid, JourneyInvalid]
