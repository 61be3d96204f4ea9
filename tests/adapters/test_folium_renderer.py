"""Tests for the Folium journey renderer."""

from unittest.mock import patch

import pytest

from navietta.adapters.rendering import FoliumJourneyRenderer
from navietta.domain.errors import RenderingError
from navietta.domain.models import ResolvedLocation

LONDON = ResolvedLocation("London", "London, United Kingdom", 51.5074, -0.1278, "United Kingdom")
PARIS = ResolvedLocation("Paris", "Paris, France", 48.8566, 2.3522, "France")


def test_render_writes_html(tmp_path):
    output = tmp_path / "maps" / "journey.html"

    result = FoliumJourneyRenderer().render(LONDON, PARIS, output)

    assert result == output
    html = output.read_text(encoding="utf-8")
    assert "London, United Kingdom" in html
    assert "Paris, France" in html


def test_save_failure_is_wrapped(tmp_path):
    with patch("folium.Map.save", side_effect=OSError("disk full")):
        with pytest.raises(RenderingError) as exc_info:
            FoliumJourneyRenderer().render(LONDON, PARIS, tmp_path / "journey.html")

    assert exc_info.value.renderer_type == "folium"
    assert isinstance(exc_info.value.cause, OSError)
