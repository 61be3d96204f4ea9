"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Geocoding services (GeoNames, offline)
- LLM recommendation generators (Claude, mock)
- Session storage (in-memory)
- Rendering engines (Folium)
"""
