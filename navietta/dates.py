# dates.py
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

import dateparser

# Numeric dates are read day first: "02/09/2025" and "2/9/2025" are 2 September.
_SETTINGS = {"PREFER_DATES_FROM": "future", "DATE_ORDER": "DMY"}

# A digit followed by ":" / "h" / "am" / "pm". A bare "8" would parse as a day.
_TIME_MARKER = re.compile(r"\d\s*(?::|h\b|h\d|[ap]\.?m\b)", re.IGNORECASE)


def _parse(text: str) -> Optional[datetime]:
    if not text or not text.strip():
        return None
    return dateparser.parse(text.strip(), settings=_SETTINGS)


def normalize_date(text: str) -> str:
    """Normalize a user-typed date to ``YYYY-MM-DD``.

    ISO dates pass through unchanged; anything else goes to dateparser
    with a day-first order for numeric forms.

    Raises:
        ValueError: If the text is not a recognizable date.
    """
    try:
        return date.fromisoformat((text or "").strip()).isoformat()
    except ValueError:
        pass
    dt = _parse(text)
    if dt is None:
        raise ValueError(f"Unrecognized date: {text!r}")
    return dt.date().isoformat()


def normalize_time(text: str) -> str:
    """Normalize a user-typed time of day to 24-hour ``HH:MM``.

    Raises:
        ValueError: If the text is not a recognizable time, including
            bare numbers such as ``"8"`` that carry no hour marker.
    """
    if not text or not _TIME_MARKER.search(text):
        raise ValueError(f"Unrecognized time: {text!r}")
    dt = _parse(text)
    if dt is None:
        raise ValueError(f"Unrecognized time: {text!r}")
    return dt.strftime("%H:%M")


def combine(date_text: str, time_text: str) -> datetime:
    """Build a naive local datetime from separate date and time fields."""
    day = datetime.fromisoformat(normalize_date(date_text))
    hours, minutes = normalize_time(time_text).split(":")
    return day.replace(hour=int(hours), minute=int(minutes))
