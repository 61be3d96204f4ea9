"""Tests for InMemorySessionStore."""

import uuid
from datetime import timezone

import pytest

from navietta.adapters.sessions import InMemorySessionStore
from navietta.domain.errors import SessionNotFoundError
from navietta.domain.schemas import ChatTurn, TravelSessionData


@pytest.fixture
def store():
    return InMemorySessionStore()


def test_create_and_get(store, preferences):
    session_id = store.create(TravelSessionData(preferences=preferences))

    session = store.get(session_id)

    assert uuid.UUID(session_id).version == 4
    assert session.id == session_id
    assert session.preferences == preferences
    assert session.conversation == []
    assert session.created_at.tzinfo == timezone.utc


def test_identifiers_are_unique(store):
    ids = {store.create(TravelSessionData()) for _ in range(20)}
    assert len(ids) == 20
    assert len(store) == 20


def test_unknown_session(store):
    assert store.get("missing") is None


def test_update_applies_partial_changes(store, preferences):
    session_id = store.create(TravelSessionData(preferences=preferences))
    turn = ChatTurn(question="Q", response="A")

    updated = store.update(session_id, {"conversation": [turn]})

    assert updated.conversation == [turn]
    assert updated.preferences == preferences
    assert store.get(session_id).conversation == [turn]


def test_update_unknown_session(store):
    with pytest.raises(SessionNotFoundError) as exc_info:
        store.update("missing", {"conversation": []})
    assert exc_info.value.session_id == "missing"
