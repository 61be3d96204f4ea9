"""Recommendation port - Abstraction for transit recommendation generation.

Implementations:
- adapters/llm/claude_adapter.py (ClaudeRecommendationAdapter)
- adapters/llm/mock_adapter.py (MockRecommendationAdapter)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.schemas import (
        ChatTurn,
        FlightDetails,
        Preferences,
        TravelRecommendations,
    )


class RecommendationGeneratorPort(Protocol):
    """Port for generating and discussing transit recommendations."""

    def generate(
        self,
        flight_details: FlightDetails,
        preferences: Preferences,
    ) -> TravelRecommendations:
        """Generate ranked transit options for a journey.

        Raises:
            RecommendationError: If generation or parsing fails.
        """
        ...

    def follow_up(
        self,
        recommendations: TravelRecommendations,
        flight_details: FlightDetails,
        preferences: Preferences,
        history: Sequence[ChatTurn],
        question: str,
    ) -> str:
        """Answer a follow-up question about earlier recommendations.

        Raises:
            RecommendationError: If the answer cannot be produced.
        """
        ...
