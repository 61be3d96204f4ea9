"""Offline table of well-known cities.

Used when the geocoding service is unreachable, reports an error, or
returns no candidates.
"""

from __future__ import annotations

from typing import Dict

from ..domain.models import LocationInvalid, LocationValid, ResolvedLocation, ValidationResult

FALLBACK_LOCATIONS: Dict[str, ResolvedLocation] = {
    "london": ResolvedLocation(
        name="London",
        full_name="London, United Kingdom",
        latitude=51.5074,
        longitude=-0.1278,
        country="United Kingdom",
    ),
    "paris": ResolvedLocation(
        name="Paris",
        full_name="Paris, France",
        latitude=48.8566,
        longitude=2.3522,
        country="France",
    ),
    "new york": ResolvedLocation(
        name="New York",
        full_name="New York, United States",
        latitude=40.7128,
        longitude=-74.0060,
        country="United States",
    ),
    "tokyo": ResolvedLocation(
        name="Tokyo",
        full_name="Tokyo, Japan",
        latitude=35.6762,
        longitude=139.6503,
        country="Japan",
    ),
    "sydney": ResolvedLocation(
        name="Sydney",
        full_name="Sydney, Australia",
        latitude=-33.8688,
        longitude=151.2093,
        country="Australia",
    ),
    "melbourne": ResolvedLocation(
        name="Melbourne",
        full_name="Melbourne, Australia",
        latitude=-37.8136,
        longitude=144.9631,
        country="Australia",
    ),
    "hong kong": ResolvedLocation(
        name="Hong Kong",
        full_name="Hong Kong, China",
        latitude=22.3193,
        longitude=114.1694,
        country="China",
    ),
}

MAX_EXAMPLE_SUGGESTIONS = 3


def unresolved_message(location_name: str) -> str:
    return (
        f'I cannot locate "{location_name}". '
        "Please verify the spelling or provide more details."
    )


def example_locations(limit: int = MAX_EXAMPLE_SUGGESTIONS) -> tuple[str, ...]:
    """Full names of the first ``limit`` table entries."""
    return tuple(loc.full_name for loc in list(FALLBACK_LOCATIONS.values())[:limit])


def lookup_fallback(location_name: str) -> ValidationResult:
    """Resolve a place name against the offline table.

    Matching is case-insensitive: exact key first, then substring
    containment in either direction. The first partial match wins and
    the other partial matches become suggestions.
    """
    key = location_name.lower().strip()

    if key in FALLBACK_LOCATIONS:
        return LocationValid(location=FALLBACK_LOCATIONS[key])

    partial_matches = [
        candidate for candidate in FALLBACK_LOCATIONS if candidate in key or key in candidate
    ]
    if key and partial_matches:
        return LocationValid(
            location=FALLBACK_LOCATIONS[partial_matches[0]],
            suggestions=tuple(
                FALLBACK_LOCATIONS[match].full_name for match in partial_matches[1:]
            ),
        )

    return LocationInvalid(
        error=unresolved_message(location_name),
        suggestions=example_locations(),
    )
