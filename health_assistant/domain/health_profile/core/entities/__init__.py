"""Domain entities for the health profile."""

from .user_record import UserRecord

__all__ = ["UserRecord"]
