"""Services layer - Application orchestration.

Available services:
- LocationResolverService: Place name to coordinates, with offline fallback
- JourneyValidatorService: Resolves both ends of a journey and checks timing
- TravelPlannerService: Recommendations, sessions and follow-up questions
"""

from .journey_validator import JourneyValidatorService
from .location_resolver import LocationResolverService
from .travel_planner import TravelPlannerService

__all__ = [
    "LocationResolverService",
    "JourneyValidatorService",
    "TravelPlannerService",
]
