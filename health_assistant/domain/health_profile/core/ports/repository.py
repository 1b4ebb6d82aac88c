"""IUserRecordStore port - roster interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.user_record import UserRecord


class IUserRecordStore(ABC):
    """Port for the ordered roster of user records.

    Lookups compare the given name exactly against the stored name and
    return the first match; duplicates are allowed.
    """

    @abstractmethod
    def add(self, record: UserRecord) -> None:
        """Append a record to the end of the roster."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[UserRecord]:
        """Find the first record with this name.

        Returns:
            Optional[UserRecord]: Record if found, None otherwise
        """
        pass

    @abstractmethod
    def remove_by_name(self, name: str) -> bool:
        """Remove the first record with this name.

        Returns:
            bool: True if a record was removed
        """
        pass

    @abstractmethod
    def list_all(self) -> List[UserRecord]:
        """All records in insertion order."""
        pass

    @abstractmethod
    def list_one(self, name: str) -> Optional[UserRecord]:
        """The record to display for this name, None if absent."""
        pass
