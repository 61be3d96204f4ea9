"""Offline geocoder adapter.

Used when network geocoding is disabled (NAV_GEO_ENABLED=false):
every search reports the service as unavailable so that resolution
goes straight to the offline table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...domain.errors import GeocodingError
from ...domain.models import GeoCandidate


@dataclass
class OfflineGeocoderAdapter:
    """Geocoder that is never reachable."""

    def search(self, query: str, max_rows: int = 5) -> Sequence[GeoCandidate]:
        raise GeocodingError("Geocoding is disabled", query=query)
