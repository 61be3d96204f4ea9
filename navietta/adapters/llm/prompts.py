"""Prompt construction for the recommendation generator."""

from __future__ import annotations

from typing import Sequence

from ...domain.schemas import ChatTurn, FlightDetails, Preferences, TravelRecommendations

TRANSIT_STYLE_HINTS = {
    "fast-track": "prioritise the quickest route and minimise travel time",
    "scenic-route": "take time, see sights and explore along the way",
    "fewer-transfers": "keep to the most straightforward routes with minimal transfers",
}

RECOMMENDATION_SYSTEM_PROMPT = """You are Navietta, a travel transit assistant. Give practical transit recommendations with clear reasoning.

Principles:
- Speak naturally using "you" and "I".
- Respect the traveller's budget, energy and transit style.
- Account for luggage, children and group size.
- Genuinely tight timeframes override budget, comfort and exploration; flag timing risks explicitly.
- When several places share a name, prefer the larger city unless the route suggests otherwise.

Respond with ONLY valid JSON, no markdown. Start with { and end with }."""

RESPONSE_FORMAT = """{
  "reasoning": "How you balanced the traveller's preferences",
  "options": [
    {
      "id": "option-1",
      "title": "Option title",
      "description": "Short description",
      "highlights": ["Benefit 1", "Benefit 2", "Benefit 3"],
      "timelineItems": [
        {"time": "15:45", "title": "Arrive", "description": "What happens", "type": "primary"}
      ],
      "cost": "EUR 75-90 total",
      "duration": "4.5 hours transit",
      "energyLevel": "Moderate activity",
      "comfortLevel": "Comfort",
      "stressLevel": "Minimal",
      "recommended": true,
      "confidence": "high"
    }
  ],
  "finalRecommendation": {"optionId": "option-1", "reasoning": "Why", "confidence": 85},
  "fallbackMode": false
}"""


def _travellers(flight: FlightDetails) -> str:
    text = f"{flight.adults} adult(s)"
    if flight.children > 0:
        text += f", {flight.children} child(ren)"
    return text


def build_recommendation_prompt(flight: FlightDetails, preferences: Preferences) -> str:
    """User prompt describing the transit leg and the preferences."""
    first = flight.stops[0] if flight.stops else None
    second = flight.stops[1] if len(flight.stops) > 1 else None
    transit_from = first.location if first else flight.from_location
    transit_to = second.location if second else (flight.to_location or "the final destination")
    arrival_time = first.arrival_time if first else flight.departure_time

    stops = "\n".join(
        f"- Stop {i}: {stop.location} at {stop.arrival_time} on {stop.arrival_date}"
        for i, stop in enumerate(flight.stops, 1)
    )

    return f"""TRANSIT: {transit_from} to {transit_to}
- Starting from {flight.from_location}, departing {flight.departure_date} at {flight.departure_time}
{stops}
- {_travellers(flight)}
- {flight.luggage_count} luggage
- Arrive {transit_from}: {arrival_time}

REQUIREMENTS:
- Provide EXACTLY 2 options
- Duration = transit time only ({transit_from} to {transit_to})
- Timeline starts from the {transit_from} arrival at {arrival_time}
- Include 5-7 timeline items covering the transit portion only
- Factor in realistic timing for luggage, connections and food/rest breaks

USER PREFERENCES:
- Budget: {preferences.budget}/5 (1=frugal, 3=balanced, 5=luxury)
- Activities: {preferences.activities}/5 (0=resting, 3=balanced, 5=energised)
- Transit style: {preferences.transit_style} ({TRANSIT_STYLE_HINTS[preferences.transit_style]})

Provide exactly 2 options in this JSON format:
{RESPONSE_FORMAT}"""


def build_follow_up_prompt(
    recommendations: TravelRecommendations,
    flight: FlightDetails,
    preferences: Preferences,
    history: Sequence[ChatTurn],
    question: str,
) -> str:
    """Prompt continuing the conversation about earlier recommendations."""
    first = flight.first_stop
    destination = first.location if first else (flight.to_location or "destination")
    first_stop_time = first.arrival_time if first else "time not specified"

    options = "\n".join(
        f"- **{opt.title}**: {opt.description} ({opt.cost}, {opt.duration})"
        + (" [RECOMMENDED]" if opt.recommended else "")
        for opt in recommendations.options
    )
    conversation = "\n\n".join(
        f"Q{i}: {turn.question}\nA{i}: {turn.response}" for i, turn in enumerate(history, 1)
    )

    return f"""You are Navietta, continuing a conversation about travel recommendations you gave earlier.

## Travel context
- Starting from {flight.from_location} on {flight.departure_date} at {flight.departure_time}
- First destination: {destination} at {first_stop_time}
- Travellers: {_travellers(flight)} with {flight.luggage_count} piece(s) of luggage
- Preferences: {preferences.budget}/5 budget, {preferences.activities}/5 activities, {preferences.transit_style} style

## Your earlier options
{options}

Your recommended option was: {recommendations.final_recommendation.option_id}

## Recent conversation
{conversation or "This is the first follow-up question."}

## Current question
{question}

## Instructions
- Answer naturally, like continuing a conversation with a friend
- Refer to the options you actually recommended and the real places ({destination})
- Keep it to one paragraph; use markdown lists for timelines and **bold** for key times and places
- Give times as start times in HH:MM format, never ranges

Respond directly as Navietta, no JSON."""
