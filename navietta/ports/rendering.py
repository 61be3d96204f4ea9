"""Rendering port - Abstraction for journey map generation.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, Plotly, etc.) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import ResolvedLocation


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        origin: ResolvedLocation,
        destination: ResolvedLocation,
        output_path: Path,
    ) -> Path:
        """Render a journey on a map and save to file.

        Args:
            origin: Departure location.
            destination: Arrival location.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...
