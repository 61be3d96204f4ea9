"""Thread-safe in-memory session store.

Sessions live for the lifetime of the process. Identifiers are random
UUID4 strings, so they cannot be guessed from one another.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ...domain.errors import SessionNotFoundError
from ...domain.schemas import TravelSession, TravelSessionData


@dataclass
class InMemorySessionStore:
    """Dictionary-backed implementation of SessionStorePort.

    Attributes:
        name: Store name for logging

    Example:
        store = InMemorySessionStore()
        session_id = store.create(TravelSessionData(preferences=prefs))
        store.update(session_id, {"conversation": turns})
    """

    name: str = "sessions"

    _store: Dict[str, TravelSession] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"sessions.{self.name}")

    def create(self, data: TravelSessionData) -> str:
        session_id = str(uuid.uuid4())
        session = TravelSession(id=session_id, **dict(data))
        with self._lock:
            self._store[session_id] = session
        self._logger.debug("Session created", extra={"session_id": session_id})
        return session_id

    def get(self, session_id: str) -> Optional[TravelSession]:
        with self._lock:
            return self._store.get(session_id)

    def update(self, session_id: str, changes: Mapping[str, Any]) -> TravelSession:
        """Apply a partial update to a session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        with self._lock:
            session = self._store.get(session_id)
            if session is None:
                raise SessionNotFoundError(
                    "Travel session not found", session_id=session_id
                )
            updated = session.model_copy(update=dict(changes))
            self._store[session_id] = updated

        self._logger.debug(
            "Session updated",
            extra={"session_id": session_id, "fields": sorted(changes)},
        )
        return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
