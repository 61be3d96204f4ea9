"""Domain layer - Core models, schemas and errors.

Validation models are immutable dataclasses with no external
dependencies; request and recommendation schemas are pydantic models.
"""

from .errors import (
    ConfigurationError,
    GeocodingError,
    NaviettaError,
    RecommendationError,
    RenderingError,
    SessionNotFoundError,
)
from .models import (
    GeoCandidate,
    JourneyInvalid,
    JourneyQuery,
    JourneyValid,
    JourneyValidationResult,
    LocationInvalid,
    LocationValid,
    ResolvedLocation,
    TravelTimeCheck,
    ValidationResult,
)
from .schemas import (
    ChatTurn,
    FlightDetails,
    Preferences,
    Stop,
    TravelRecommendations,
    TravelSession,
    TravelSessionData,
)

__all__ = [
    # Models
    "GeoCandidate",
    "ResolvedLocation",
    "LocationValid",
    "LocationInvalid",
    "ValidationResult",
    "JourneyQuery",
    "TravelTimeCheck",
    "JourneyValid",
    "JourneyInvalid",
    "JourneyValidationResult",
    # Schemas
    "FlightDetails",
    "Stop",
    "Preferences",
    "TravelRecommendations",
    "ChatTurn",
    "TravelSessionData",
    "TravelSession",
    # Errors
    "NaviettaError",
    "GeocodingError",
    "RecommendationError",
    "SessionNotFoundError",
    "ConfigurationError",
    "RenderingError",
]
