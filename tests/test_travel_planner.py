"""Tests for TravelPlannerService."""

from unittest.mock import MagicMock

import pytest

from navietta.adapters.llm.mock_adapter import MOCK_FOLLOW_UP_RESPONSE, MockRecommendationAdapter
from navietta.adapters.sessions import InMemorySessionStore
from navietta.config import MockConfig
from navietta.domain.errors import ConfigurationError, RecommendationError, SessionNotFoundError
from navietta.domain.schemas import ChatTurn
from navietta.services.travel_planner import FOLLOW_UP_TROUBLE_RESPONSE, TravelPlannerService


@pytest.fixture
def mock_generator():
    return MockRecommendationAdapter(config=MockConfig(delay_seconds=0))


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def primary():
    return MagicMock()


def test_without_llm_uses_mock(mock_generator, store, flight, preferences):
    planner = TravelPlannerService(fallback=mock_generator, sessions=store)

    session_id, recs = planner.generate_recommendations(flight, preferences)

    assert recs.fallback_mode is True
    session = planner.get_session(session_id)
    assert session.ai_recommendations == recs
    assert session.flight_details == flight
    assert session.preferences == preferences


def test_uses_llm_when_configured(mock_generator, store, primary, flight, preferences):
    llm_recs = mock_generator.generate(flight, preferences).model_copy(update={"fallback_mode": False})
    primary.generate.return_value = llm_recs
    planner = TravelPlannerService(fallback=mock_generator, sessions=store, primary=primary)

    _, recs = planner.generate_recommendations(flight, preferences)

    assert recs is llm_recs
    primary.generate.assert_called_once_with(flight, preferences)


@pytest.mark.parametrize(
    "error",
    [
        RecommendationError("bad json", generator="claude"),
        ConfigurationError("no key", setting_name="NAV_LLM_API_KEY"),
    ],
)
def test_llm_failure_falls_back_to_mock(mock_generator, store, primary, flight, preferences, error):
    primary.generate.side_effect = error
    planner = TravelPlannerService(fallback=mock_generator, sessions=store, primary=primary)

    _, recs = planner.generate_recommendations(flight, preferences)

    assert recs.fallback_mode is True


def test_unexpected_llm_error_propagates(mock_generator, store, primary, flight, preferences):
    primary.generate.side_effect = RuntimeError("bug")
    planner = TravelPlannerService(fallback=mock_generator, sessions=store, primary=primary)

    with pytest.raises(RuntimeError):
        planner.generate_recommendations(flight, preferences)


def test_question_for_unknown_session(mock_generator, store):
    planner = TravelPlannerService(fallback=mock_generator, sessions=store)

    with pytest.raises(SessionNotFoundError):
        planner.answer_question("missing", "Hello?")


def test_question_without_llm(mock_generator, store, flight, preferences):
    planner = TravelPlannerService(fallback=mock_generator, sessions=store)
    session_id, _ = planner.generate_recommendations(flight, preferences)

    answer = planner.answer_question(session_id, "Can I leave the airport?")

    assert answer == MOCK_FOLLOW_UP_RESPONSE
    conversation = store.get(session_id).conversation
    assert conversation == [ChatTurn(question="Can I leave the airport?", response=MOCK_FOLLOW_UP_RESPONSE)]


def test_question_with_llm_uses_stored_conversation(mock_generator, store, primary, flight, preferences):
    primary.generate.side_effect = RecommendationError("down", generator="claude")
    primary.follow_up.side_effect = ["First answer", "Second answer"]
    planner = TravelPlannerService(fallback=mock_generator, sessions=store, primary=primary)
    session_id, recs = planner.generate_recommendations(flight, preferences)

    planner.answer_question(session_id, "First?")
    answer = planner.answer_question(session_id, "Second?")

    assert answer == "Second answer"
    args = primary.follow_up.call_args.args
    assert args[0] == recs
    assert args[3] == [ChatTurn(question="First?", response="First answer")]
    assert args[4] == "Second?"
    assert len(store.get(session_id).conversation) == 2


def test_explicit_history_overrides_stored_conversation(mock_generator, store, primary, flight, preferences):
    primary.generate.side_effect = RecommendationError("down", generator="claude")
    primary.follow_up.return_value = "Answer"
    planner = TravelPlannerService(fallback=mock_generator, sessions=store, primary=primary)
    session_id, _ = planner.generate_recommendations(flight, preferences)

    planner.answer_question(session_id, "Now?", history=[])

    assert primary.follow_up.call_args.args[3] == []


def test_llm_failure_on_question(mock_generator, store, primary, flight, preferences):
    primary.generate.side_effect = RecommendationError("down", generator="claude")
    primary.follow_up.side_effect = RecommendationError("down", generator="claude")
    planner = TravelPlannerService(fallback=mock_generator, sessions=store, primary=primary)
    session_id, _ = planner.generate_recommendations(flight, preferences)

    answer = planner.answer_question(session_id, "Hello?")

    assert answer == FOLLOW_UP_TROUBLE_RESPONSE
    assert store.get(session_id).conversation[-1].response == FOLLOW_UP_TROUBLE_RESPONSE
