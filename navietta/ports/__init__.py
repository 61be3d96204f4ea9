"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable:
a test double can stand in for the geocoding service or the LLM without
network access.
"""

from .geocoding import GeocoderPort
from .recommendations import RecommendationGeneratorPort
from .rendering import MapRendererPort
from .sessions import SessionStorePort

__all__ = [
    # Geocoding
    "GeocoderPort",
    # Recommendations
    "RecommendationGeneratorPort",
    # Sessions
    "SessionStorePort",
    # Rendering
    "MapRendererPort",
]
