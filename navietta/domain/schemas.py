"""Request and recommendation schemas.

These models travel over the wire, so they validate input and use
camelCase aliases (``luggageCount``, ``timelineItems``...) while
exposing snake_case attributes in Python.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..dates import normalize_date, normalize_time

TransitStyle = Literal["fast-track", "scenic-route", "fewer-transfers"]
TimelineItemType = Literal["primary", "accent", "secondary"]
StressLevel = Literal["Minimal", "Low", "Moderate", "High"]
ConfidenceLabel = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    """Base model serialising to camelCase and accepting either case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Stop(CamelModel):
    """An intermediate or final stop of the journey."""

    location: str = Field(min_length=1)
    arrival_time: str = Field(min_length=1)
    arrival_date: str = Field(min_length=1)
    departure_time: Optional[str] = None
    departure_date: Optional[str] = None

    @field_validator("arrival_time", "departure_time")
    @classmethod
    def normalize_times(cls, value: Optional[str]) -> Optional[str]:
        return normalize_time(value) if value else value

    @field_validator("arrival_date", "departure_date")
    @classmethod
    def normalize_dates(cls, value: Optional[str]) -> Optional[str]:
        return normalize_date(value) if value else value


class FlightDetails(CamelModel):
    """Journey details entered by the traveller.

    Times and dates accept free text ("8am", "2 Sep 2025") and are
    normalized to ``HH:MM`` and ``YYYY-MM-DD``.
    """

    from_location: str = Field(alias="from", min_length=1)
    to_location: Optional[str] = Field(default=None, alias="to")
    departure_time: str = Field(min_length=1)
    departure_date: str = Field(min_length=1)
    arrival_time: Optional[str] = None
    arrival_date: Optional[str] = None
    adults: int = Field(default=1, ge=1, le=10)
    children: int = Field(default=0, ge=0, le=10)
    luggage_count: int = Field(default=0, ge=0, le=20)
    stops: list[Stop] = Field(default_factory=list, max_length=2)

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def normalize_times(cls, value: Optional[str]) -> Optional[str]:
        return normalize_time(value) if value else value

    @field_validator("departure_date", "arrival_date")
    @classmethod
    def normalize_dates(cls, value: Optional[str]) -> Optional[str]:
        return normalize_date(value) if value else value

    @property
    def first_stop(self) -> Optional[Stop]:
        return self.stops[0] if self.stops else None

    @property
    def travellers(self) -> int:
        return self.adults + self.children


class Preferences(CamelModel):
    """Traveller preferences.

    Attributes:
        budget: 1 (frugal) to 5 (luxury)
        activities: 0 (resting) to 5 (energised)
        transit_style: Preferred way of getting there
    """

    budget: int = Field(ge=1, le=5)
    activities: int = Field(ge=0, le=5)
    transit_style: TransitStyle


class TimelineItem(CamelModel):
    time: str
    title: str
    description: str
    type: TimelineItemType = "primary"


class TransitOption(CamelModel):
    """One ranked way of getting through the layover."""

    id: str
    title: str
    description: str
    highlights: list[str] = Field(default_factory=list)
    timeline_items: list[TimelineItem] = Field(default_factory=list)
    cost: str
    duration: str
    energy_level: str
    comfort_level: str
    stress_level: StressLevel = "Moderate"
    recommended: bool = False
    confidence: ConfidenceLabel = "medium"
    total_time: Optional[str] = None
    confidence_score: Optional[int] = None
    summary: Optional[str] = None
    uncertainties: list[str] = Field(default_factory=list)
    fallback_suggestion: Optional[str] = None


class ReasoningBreakdown(CamelModel):
    situation_assessment: str
    generating_options: str
    trade_off_analysis: str


class FinalRecommendation(CamelModel):
    option_id: str
    reasoning: str
    confidence: int = Field(ge=0, le=100)


class UserContext(CamelModel):
    traveling_situation: str
    preferences: str
    constraints: str


class TravelRecommendations(CamelModel):
    """Recommendations as produced by the LLM or the mock generator."""

    reasoning: Union[ReasoningBreakdown, str]
    options: list[TransitOption]
    final_recommendation: FinalRecommendation
    user_context: Optional[UserContext] = None
    fallback_mode: bool = False

    def option(self, option_id: str) -> Optional[TransitOption]:
        for opt in self.options:
            if opt.id == option_id:
                return opt
        return None


class ChatTurn(CamelModel):
    question: str
    response: str


class TravelSessionData(CamelModel):
    """Fields supplied when creating or updating a session."""

    flight_details: Optional[FlightDetails] = None
    preferences: Optional[Preferences] = None
    ai_recommendations: Optional[TravelRecommendations] = None
    conversation: list[ChatTurn] = Field(default_factory=list)


class TravelSession(TravelSessionData):
    """A stored session: the supplied data plus identity and timestamp."""

    id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
