"""JSON API.

Routes (all under ``/api/travel``):
- POST /generate-recommendations: recommendations plus a new session
- GET  /sessions/{session_id}: a stored session
- POST /chat: follow-up question about a session
- POST /validate-location: resolve one place name
- POST /validate-journey: resolve both ends and check the timing

Run with ``uvicorn navietta.api:create_app --factory``.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import Field, field_validator

from .container import Container, get_container
from .domain.errors import SessionNotFoundError
from .domain.models import JourneyQuery
from .domain.schemas import CamelModel, ChatTurn, FlightDetails, Preferences
from .monitoring import configure_logging
from .services import JourneyValidatorService, LocationResolverService, TravelPlannerService

logger = logging.getLogger(__name__)

SESSION_NOT_FOUND = "Travel session not found"


class GenerateRecommendationsRequest(CamelModel):
    flight_details: FlightDetails
    preferences: Preferences


class ChatRequest(CamelModel):
    session_id: str
    question: str = Field(min_length=1)
    # None means "use the conversation stored with the session"
    conversation_history: Optional[list[ChatTurn]] = None


class ValidateLocationRequest(CamelModel):
    location: str


class ValidateJourneyRequest(CamelModel):
    """Journey to validate; timestamps are ISO 8601."""

    from_location: str = Field(alias="from")
    to_location: str = Field(alias="to")
    departure: datetime
    arrival: datetime

    @field_validator("departure", "arrival")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        # Mixed aware/naive pairs cannot be subtracted
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if not location:
        return first.get("msg", "Invalid request")
    return f"{location}: {first.get('msg', 'invalid value')}"


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        container: Dependency container; the global default when omitted.
    """
    container = container or get_container()
    configure_logging(container.config.observability)
    app = FastAPI(title="Navietta", version="0.1.0")
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _first_error_message(exc)
        logger.info(
            "Rejected invalid request",
            extra={"path": request.url.path, "detail": message},
        )
        return JSONResponse(status_code=400, content={"message": message})

    @app.post("/api/travel/generate-recommendations")
    def generate_recommendations(body: GenerateRecommendationsRequest) -> dict:
        planner = container.resolve(TravelPlannerService)
        session_id, recommendations = planner.generate_recommendations(
            body.flight_details, body.preferences
        )
        return {
            "sessionId": session_id,
            "recommendations": recommendations.to_payload(),
        }

    @app.get("/api/travel/sessions/{session_id}")
    def get_session(session_id: str):
        session = container.resolve(TravelPlannerService).get_session(session_id)
        if session is None:
            return JSONResponse(status_code=404, content={"message": SESSION_NOT_FOUND})
        return session.to_payload()

    @app.post("/api/travel/chat")
    def chat(body: ChatRequest):
        planner = container.resolve(TravelPlannerService)
        try:
            response = planner.answer_question(
                body.session_id, body.question, body.conversation_history
            )
        except SessionNotFoundError:
            return JSONResponse(status_code=404, content={"error": SESSION_NOT_FOUND})
        return {"response": response}

    @app.post("/api/travel/validate-location")
    async def validate_location(body: ValidateLocationRequest) -> dict:
        resolver = container.resolve(LocationResolverService)
        result = await asyncio.to_thread(resolver.resolve, body.location)
        return result.to_payload()

    @app.post("/api/travel/validate-journey")
    async def validate_journey(body: ValidateJourneyRequest) -> dict:
        validator = container.resolve(JourneyValidatorService)
        query = JourneyQuery(
            origin=body.from_location,
            destination=body.to_location,
            departure=body.departure,
            arrival=body.arrival,
        )
        result = await validator.validate_query(query)
        return result.to_payload()

    return app
