"""Navietta - travel transit planning.

Resolves free-text place names to coordinates, checks that a journey's
timing is physically plausible, and produces layover recommendations
with an LLM or a deterministic fallback.
"""

__version__ = "0.1.0"
