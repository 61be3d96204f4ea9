"""Claude recommendation adapter.

This adapter implements RecommendationGeneratorPort on top of the
Anthropic Messages API:
- Configuration injection (model, key, token budgets)
- Lazy client creation
- Tolerant JSON extraction (markdown fences, surrounding prose)
- Typed errors with the raw response kept for debugging
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import anthropic
from pydantic import ValidationError

from ...config import LLMConfig, get_config
from ...domain.errors import ConfigurationError, RecommendationError
from ...domain.schemas import ChatTurn, FlightDetails, Preferences, TravelRecommendations
from .prompts import (
    RECOMMENDATION_SYSTEM_PROMPT,
    build_follow_up_prompt,
    build_recommendation_prompt,
)

_FENCE_START_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END_RE = re.compile(r"\s*```$")


def extract_json_object(text: str) -> str:
    """Strip markdown fences and keep the outermost ``{...}`` block."""
    cleaned = _FENCE_START_RE.sub("", text.strip())
    cleaned = _FENCE_END_RE.sub("", cleaned)

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        cleaned = cleaned[start : end + 1]
    return cleaned


@dataclass
class ClaudeRecommendationAdapter:
    """Anthropic Claude recommendation generator.

    Attributes:
        config: LLM configuration
        client: Optional pre-built Anthropic client (tests inject a mock)
    """

    config: LLMConfig = field(default_factory=lambda: get_config().llm)
    client: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_client(self) -> Any:
        if self.client is not None:
            return self.client

        if not self.config.is_configured:
            raise ConfigurationError(
                "No Anthropic API key configured",
                setting_name="NAV_LLM_API_KEY",
            )

        assert self.config.api_key is not None
        self.client = anthropic.Anthropic(api_key=self.config.api_key.get_secret_value())
        return self.client

    def _complete(self, *, max_tokens: int, messages: list[dict[str, Any]], system: Optional[str] = None) -> str:
        kwargs: dict[str, Any] = {
            "model": self.config.model,
            "max_tokens": max_tokens,
            "messages": messages,
        }
        if system is not None:
            kwargs["system"] = system

        try:
            response = self._get_client().messages.create(**kwargs)
        except anthropic.APIError as e:
            raise RecommendationError("Claude API call failed", generator="claude", cause=e)

        usage = getattr(response, "usage", None)
        if usage is not None:
            self._logger.info(
                "Claude API responded",
                extra={
                    "input_tokens": usage.input_tokens,
                    "output_tokens": usage.output_tokens,
                },
            )

        if not response.content or response.content[0].type != "text":
            raise RecommendationError(
                "Unexpected response type from Claude API",
                generator="claude",
            )
        return response.content[0].text

    def generate(
        self,
        flight_details: FlightDetails,
        preferences: Preferences,
    ) -> TravelRecommendations:
        """Generate recommendations with Claude.

        Raises:
            RecommendationError: If the call fails or the answer is not
                valid recommendation JSON.
            ConfigurationError: If no API key is configured.
        """
        prompt = build_recommendation_prompt(flight_details, preferences)
        self._logger.debug(
            "Requesting recommendations",
            extra={
                "system_prompt_chars": len(RECOMMENDATION_SYSTEM_PROMPT),
                "prompt_chars": len(prompt),
            },
        )

        text = self._complete(
            max_tokens=self.config.max_tokens_recommendations,
            system=RECOMMENDATION_SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
        )
        payload = extract_json_object(text)

        try:
            return TravelRecommendations.model_validate(json.loads(payload))
        except (json.JSONDecodeError, ValidationError) as e:
            self._logger.error(
                "Could not parse recommendations",
                extra={"response_head": text[:500]},
            )
            raise RecommendationError(
                "Failed to parse travel recommendations",
                generator="claude",
                raw_response=text,
                cause=e,
            )

    def follow_up(
        self,
        recommendations: TravelRecommendations,
        flight_details: FlightDetails,
        preferences: Preferences,
        history: Sequence[ChatTurn],
        question: str,
    ) -> str:
        """Answer a follow-up question with Claude.

        Raises:
            RecommendationError: If the call fails.
            ConfigurationError: If no API key is configured.
        """
        prompt = build_follow_up_prompt(
            recommendations, flight_details, preferences, history, question
        )
        text = self._complete(
            max_tokens=self.config.max_tokens_follow_up,
            messages=[{"role": "user", "content": prompt}],
        )
        return text.strip()
