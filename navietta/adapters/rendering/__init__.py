"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumJourneyRenderer: Folium-based interactive map rendering
"""

from .folium_adapter import FoliumJourneyRenderer

__all__ = ["FoliumJourneyRenderer"]
