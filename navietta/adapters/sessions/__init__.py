"""Session adapters - Implementations of SessionStorePort.

Available implementations:
- InMemorySessionStore: Thread-safe in-process store
"""

from .memory_store import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
