"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- GeoNamesGeocoderAdapter: GeoNames searchJSON web service
- OfflineGeocoderAdapter: Always unavailable, forces the offline table
"""

from .geonames_adapter import GeoNamesGeocoderAdapter
from .offline_adapter import OfflineGeocoderAdapter

__all__ = ["GeoNamesGeocoderAdapter", "OfflineGeocoderAdapter"]
