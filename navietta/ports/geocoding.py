"""Geocoding port - Abstraction for place-name search.

This protocol defines the contract for geocoding services, allowing
different implementations (GeoNames, offline, test doubles) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import GeoCandidate


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementations:
    - adapters/geocoding/geonames_adapter.py (GeoNamesGeocoderAdapter)
    - adapters/geocoding/offline_adapter.py (OfflineGeocoderAdapter)
    """

    def search(self, query: str, max_rows: int = 5) -> Sequence[GeoCandidate]:
        """Search for places matching a free-text query.

        Args:
            query: The place name to look up (e.g., "Melbourne").
            max_rows: Maximum number of candidates to return.

        Returns:
            Candidate matches in service order, possibly empty.

        Raises:
            GeocodingError: If the service is unreachable, answers with a
                non-2xx status, reports an error, or sends a malformed body.
        """
        ...
