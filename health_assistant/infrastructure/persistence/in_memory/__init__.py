"""In-memory persistence adapters."""

from .user_record_store import InMemoryUserRecordStore

__all__ = ["InMemoryUserRecordStore"]
