"""Factory for creating user record store instances."""

import os

import structlog

from health_assistant.domain.health_profile.core.ports.repository import (
    IUserRecordStore,
)
from health_assistant.infrastructure.persistence.in_memory.user_record_store import (
    InMemoryUserRecordStore,
)

logger = structlog.get_logger(__name__)


def create_user_record_store() -> IUserRecordStore:
    """
    Create a user record store based on RECORD_STORE_BACKEND.

    Environment Variables:
        RECORD_STORE_BACKEND: Store type (only 'inmemory' is available)

    Returns:
        IUserRecordStore implementation, a fresh instance on every call

    Default:
        Returns InMemoryUserRecordStore if RECORD_STORE_BACKEND not set
    """
    store_type = os.getenv("RECORD_STORE_BACKEND", "inmemory").lower()

    if store_type != "inmemory":
        # Unknown type - graceful fallback to inmemory
        logger.warning("Unknown record store backend, using inmemory", backend=store_type)

    return InMemoryUserRecordStore()
