"""Travel planner service.

Produces layover recommendations and answers follow-up questions about
them. The configured LLM generator is used when available; the mock
generator takes over when it is missing or fails, so callers always get
recommendations back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..adapters.llm.mock_adapter import MOCK_FOLLOW_UP_RESPONSE
from ..domain.errors import NaviettaError, SessionNotFoundError
from ..domain.schemas import (
    ChatTurn,
    FlightDetails,
    Preferences,
    TravelRecommendations,
    TravelSession,
    TravelSessionData,
)
from ..ports.recommendations import RecommendationGeneratorPort
from ..ports.sessions import SessionStorePort

FOLLOW_UP_TROUBLE_RESPONSE = (
    "I'm having trouble processing your question right now. Could you try "
    "rephrasing it, or ask me about specific aspects of your travel options "
    "like timing, costs, or activities?"
)


@dataclass
class TravelPlannerService:
    """Recommendation and follow-up orchestration.

    Attributes:
        fallback: Generator used when the primary one is missing or fails
        sessions: Storage for the created travel sessions
        primary: LLM-backed generator, None when no API key is configured
    """

    fallback: RecommendationGeneratorPort
    sessions: SessionStorePort
    primary: Optional[RecommendationGeneratorPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _recommend(
        self,
        flight_details: FlightDetails,
        preferences: Preferences,
    ) -> TravelRecommendations:
        if self.primary is None:
            self._logger.info("No LLM configured, using mock recommendations")
            return self.fallback.generate(flight_details, preferences)

        try:
            return self.primary.generate(flight_details, preferences)
        except NaviettaError as e:
            self._logger.warning(
                "LLM recommendations failed, using mock recommendations",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            return self.fallback.generate(flight_details, preferences)

    def generate_recommendations(
        self,
        flight_details: FlightDetails,
        preferences: Preferences,
    ) -> tuple[str, TravelRecommendations]:
        """Generate recommendations and open a session for them.

        Returns:
            The new session id and the recommendations.
        """
        recommendations = self._recommend(flight_details, preferences)
        session_id = self.sessions.create(
            TravelSessionData(
                flight_details=flight_details,
                preferences=preferences,
                ai_recommendations=recommendations,
            )
        )
        self._logger.info(
            "Travel session created",
            extra={
                "session_id": session_id,
                "options": len(recommendations.options),
                "fallback_mode": recommendations.fallback_mode,
            },
        )
        return session_id, recommendations

    def get_session(self, session_id: str) -> Optional[TravelSession]:
        return self.sessions.get(session_id)

    def answer_question(
        self,
        session_id: str,
        question: str,
        history: Optional[Sequence[ChatTurn]] = None,
    ) -> str:
        """Answer a follow-up question about a session's recommendations.

        Args:
            session_id: The session the question refers to.
            question: The traveller's question.
            history: Earlier turns; defaults to the session's conversation.

        Returns:
            The answer text. Generator failures yield an apology rather
            than an error.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(
                "Travel session not found", session_id=session_id
            )

        turns = list(session.conversation if history is None else history)

        if self.primary is None:
            response = MOCK_FOLLOW_UP_RESPONSE
        elif (
            session.ai_recommendations is None
            or session.flight_details is None
            or session.preferences is None
        ):
            self._logger.warning(
                "Session is missing recommendation context",
                extra={"session_id": session_id},
            )
            response = FOLLOW_UP_TROUBLE_RESPONSE
        else:
            try:
                response = self.primary.follow_up(
                    session.ai_recommendations,
                    session.flight_details,
                    session.preferences,
                    turns,
                    question,
                )
            except NaviettaError as e:
                self._logger.warning(
                    "LLM follow-up failed",
                    extra={"session_id": session_id, "error": str(e)},
                )
                response = FOLLOW_UP_TROUBLE_RESPONSE

        self.sessions.update(
            session_id,
            {
                "conversation": [
                    *session.conversation,
                    ChatTurn(question=question, response=response),
                ]
            },
        )
        return response
