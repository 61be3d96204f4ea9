"""Tests for the Claude recommendation adapter."""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import anthropic
import httpx
import pytest

from navietta.adapters.llm.claude_adapter import ClaudeRecommendationAdapter, extract_json_object
from navietta.config import LLMConfig
from navietta.domain.errors import ConfigurationError, RecommendationError
from navietta.domain.schemas import ChatTurn

RECOMMENDATIONS = {
    "reasoning": "You have a comfortable window in Dubai.",
    "options": [
        {
            "id": "option-1",
            "title": "Metro into the city",
            "description": "Quick visit to the Creek",
            "highlights": ["Cheap", "Fast"],
            "timelineItems": [
                {"time": "15:45", "title": "Arrive", "description": "Clear immigration", "type": "primary"}
            ],
            "cost": "AED 30",
            "duration": "4 hours",
            "energyLevel": "Moderate activity",
            "comfortLevel": "Standard",
            "stressLevel": "Low",
            "recommended": True,
            "confidence": "high",
        },
        {
            "id": "option-2",
            "title": "Airport lounge",
            "description": "Rest before the next leg",
            "cost": "USD 60",
            "duration": "4 hours",
            "energyLevel": "Resting",
            "comfortLevel": "Comfort",
        },
    ],
    "finalRecommendation": {"optionId": "option-1", "reasoning": "Fits your energy", "confidence": 82},
    "fallbackMode": False,
}


def _message(text, content_type="text"):
    return SimpleNamespace(
        content=[SimpleNamespace(type=content_type, text=text)],
        usage=SimpleNamespace(input_tokens=120, output_tokens=340),
    )


class TestExtractJsonObject:
    def test_plain_object(self):
        assert extract_json_object('{"a": 1}') == '{"a": 1}'

    def test_markdown_fence(self):
        assert extract_json_object('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_surrounding_prose(self):
        assert extract_json_object('Here you go:\n{"a": {"b": 2}}\nEnjoy!') == '{"a": {"b": 2}}'


class TestClaudeRecommendationAdapter:
    @pytest.fixture
    def client(self):
        return MagicMock()

    @pytest.fixture
    def adapter(self, client):
        config = LLMConfig(api_key="sk-test", model="claude-test")
        return ClaudeRecommendationAdapter(config=config, client=client)

    def test_generate_parses_fenced_json(self, adapter, client, flight, preferences):
        client.messages.create.return_value = _message(
            "```json\n" + json.dumps(RECOMMENDATIONS) + "\n```"
        )

        recs = adapter.generate(flight, preferences)

        assert [opt.id for opt in recs.options] == ["option-1", "option-2"]
        assert recs.final_recommendation.confidence == 82
        assert recs.options[0].timeline_items[0].time == "15:45"
        assert recs.fallback_mode is False

        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-test"
        assert kwargs["max_tokens"] == 2500
        assert "system" in kwargs
        prompt = kwargs["messages"][0]["content"]
        assert "Dubai" in prompt
        assert "fast-track" in prompt

    def test_generate_invalid_json(self, adapter, client, flight, preferences):
        client.messages.create.return_value = _message("I cannot help with that.")

        with pytest.raises(RecommendationError) as exc_info:
            adapter.generate(flight, preferences)

        assert exc_info.value.raw_response == "I cannot help with that."

    def test_generate_schema_mismatch(self, adapter, client, flight, preferences):
        client.messages.create.return_value = _message('{"options": "none"}')

        with pytest.raises(RecommendationError):
            adapter.generate(flight, preferences)

    def test_non_text_content(self, adapter, client, flight, preferences):
        client.messages.create.return_value = _message("", content_type="tool_use")

        with pytest.raises(RecommendationError):
            adapter.generate(flight, preferences)

    def test_api_error_is_wrapped(self, adapter, client, flight, preferences):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        client.messages.create.side_effect = anthropic.APIConnectionError(request=request)

        with pytest.raises(RecommendationError) as exc_info:
            adapter.generate(flight, preferences)

        assert isinstance(exc_info.value.cause, anthropic.APIConnectionError)

    def test_follow_up(self, adapter, client, flight, preferences):
        from navietta.domain.schemas import TravelRecommendations

        recs = TravelRecommendations.model_validate(RECOMMENDATIONS)
        client.messages.create.return_value = _message("  Yes, lunch fits before **17:00**.  ")

        answer = adapter.follow_up(
            recs,
            flight,
            preferences,
            [ChatTurn(question="Is it safe?", response="Very.")],
            "Can I have lunch?",
        )

        assert answer == "Yes, lunch fits before **17:00**."
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["max_tokens"] == 1000
        prompt = kwargs["messages"][0]["content"]
        assert "Q1: Is it safe?" in prompt
        assert "Can I have lunch?" in prompt


def test_missing_api_key_is_a_configuration_error(flight, preferences):
    adapter = ClaudeRecommendationAdapter(config=LLMConfig(api_key=None))

    with pytest.raises(ConfigurationError):
        adapter.generate(flight, preferences)
