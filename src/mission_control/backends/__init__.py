"""Document store backends."""

from __future__ import annotations

import logging

from mission_control.backends.base import ChangeEvent, ChangeKind, DocumentStore, MonotonicClock
from mission_control.backends.memory import InMemoryDocumentStore
from mission_control.exceptions import TransportError
from mission_control.settings import Settings

logger = logging.getLogger(__name__)


def create_document_store(config: Settings) -> DocumentStore:
    """Build the configured backend. Called once at process start."""
    if config.store_backend == "supabase":
        key = config.supabase_service_role_key or config.supabase_anon_key
        if not config.supabase_url or not key:
            raise TransportError("Supabase not configured: set SUPABASE_URL and SUPABASE_ANON_KEY")
        from mission_control.backends.supabase import SupabaseDocumentStore

        logger.info(f"[STORE] Using Supabase at {config.supabase_url}")
        return SupabaseDocumentStore(config.supabase_url, key)

    logger.info("[STORE] Using in-memory document store")
    return InMemoryDocumentStore()


__all__ = [
    "ChangeEvent",
    "ChangeKind",
    "DocumentStore",
    "InMemoryDocumentStore",
    "MonotonicClock",
    "create_document_store",
]
