"""Folium journey map renderer.

Draws the departure and arrival locations of a validated journey on an
interactive HTML map, joined by a straight line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import folium

from ...domain.errors import RenderingError
from ...domain.models import ResolvedLocation


@dataclass
class FoliumJourneyRenderer:
    """Folium-based implementation of MapRendererPort.

    Attributes:
        zoom_start: Initial zoom level of the map
        line_color: Color of the origin-destination line
    """

    zoom_start: int = 4
    line_color: str = "blue"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        origin: ResolvedLocation,
        destination: ResolvedLocation,
        output_path: Path,
    ) -> Path:
        """Render a journey on a map and save it to ``output_path``.

        Raises:
            RenderingError: If the map cannot be built or written.
        """
        self._logger.info(
            "Rendering journey map",
            extra={
                "origin": origin.full_name,
                "destination": destination.full_name,
                "output_path": str(output_path),
            },
        )

        try:
            center = [
                (origin.latitude + destination.latitude) / 2,
                (origin.longitude + destination.longitude) / 2,
            ]
            m = folium.Map(location=center, zoom_start=self.zoom_start)

            for location, color in ((origin, "green"), (destination, "red")):
                folium.Marker(
                    location=[location.latitude, location.longitude],
                    popup=location.full_name,
                    tooltip=location.name,
                    icon=folium.Icon(color=color),
                ).add_to(m)

            folium.PolyLine(
                [
                    [origin.latitude, origin.longitude],
                    [destination.latitude, destination.longitude],
                ],
                weight=3,
                color=self.line_color,
                opacity=0.8,
            ).add_to(m)
            m.fit_bounds(
                [
                    [origin.latitude, origin.longitude],
                    [destination.latitude, destination.longitude],
                ]
            )

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except (OSError, ValueError) as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path
