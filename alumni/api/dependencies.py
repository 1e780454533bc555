"""
FastAPI dependencies — DirectoryStore singleton.
"""
from __future__ import annotations

from fastapi import HTTPException

from alumni.data.store import DirectoryStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DirectoryStore | None = None


def set_store(store: DirectoryStore | None) -> None:
    global _store
    _store = store


def get_store() -> DirectoryStore:
    """The startup store, whatever its load status (the view reports it)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


def current_store() -> DirectoryStore | None:
    """The startup store without raising, for WebSocket handlers."""
    return _store
