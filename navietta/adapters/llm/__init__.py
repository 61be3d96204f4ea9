"""Recommendation adapters - Implementations of RecommendationGeneratorPort.

Available implementations:
- ClaudeRecommendationAdapter: Anthropic Messages API
- MockRecommendationAdapter: Deterministic options, no network
"""

from .claude_adapter import ClaudeRecommendationAdapter
from .mock_adapter import MockRecommendationAdapter

__all__ = ["ClaudeRecommendationAdapter", "MockRecommendationAdapter"]
