"""Typed domain errors for Navietta.

Adapters raise these errors; services absorb the expected ones into
fallbacks or user-facing result values.

All errors inherit from NaviettaError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NaviettaError(Exception):
    """Base error for the Navietta domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GeocodingError(NaviettaError):
    """The geocoding service could not answer.

    Covers network errors, non-2xx responses, malformed bodies and
    error statuses reported by the service itself.

    Attributes:
        query: The location query that failed
        is_rate_limited: Whether the failure was due to rate limiting
        status_code: HTTP or service status code, when known
    """

    query: str = ""
    is_rate_limited: bool = False
    status_code: Optional[int] = None


@dataclass
class RecommendationError(NaviettaError):
    """The recommendation generator failed.

    Attributes:
        generator: Name of the generator that failed
        raw_response: Raw model output when parsing failed
    """

    generator: str = ""
    raw_response: Optional[str] = field(default=None, repr=False)


@dataclass
class SessionNotFoundError(NaviettaError):
    """No travel session exists for the given identifier.

    Attributes:
        session_id: The identifier that was looked up
    """

    session_id: str = ""


@dataclass
class ConfigurationError(NaviettaError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(NaviettaError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
