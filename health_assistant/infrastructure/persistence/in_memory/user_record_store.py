"""In-memory implementation of IUserRecordStore."""

from typing import List, Optional

import structlog

from health_assistant.domain.health_profile.core.entities.user_record import UserRecord
from health_assistant.domain.health_profile.core.ports.repository import (
    IUserRecordStore,
)

logger = structlog.get_logger(__name__)


class InMemoryUserRecordStore(IUserRecordStore):
    """
    Ordered in-memory roster of user records.

    Records are kept in a list in insertion order and handed out by
    reference, so calculators update them in place. Duplicate names are
    allowed; lookups and removals act on the first match.

    Not thread-safe: concurrent add/remove would need a lock.

    Examples:
        >>> store = InMemoryUserRecordStore()
        >>> store.add(UserRecord.create("John", "male", 30, 80, 180, 90, 40, "active"))
        >>> store.find_by_name("john").age
        30
    """

    def __init__(self) -> None:
        """Initialize empty roster."""
        self._records: List[UserRecord] = []

    def add(self, record: UserRecord) -> None:
        self._records.append(record)

    def find_by_name(self, name: str) -> Optional[UserRecord]:
        """
        Find the first record whose stored name equals name.

        Args:
            name: Exact name to look for

        Returns:
            Record if found, None otherwise (reported in the log)
        """
        for record in self._records:
            if record.name == name:
                return record

        self._report_missing(name)
        return None

    def remove_by_name(self, name: str) -> bool:
        """
        Remove the first record whose stored name equals name.

        Returns:
            True if a record was removed, False if none matched (reported in
            the log)
        """
        for index, record in enumerate(self._records):
            if record.name == name:
                del self._records[index]
                return True

        self._report_missing(name)
        return False

    def _report_missing(self, name: str) -> None:
        if not self._records:
            logger.warning("no user in list", name=name)
        else:
            logger.warning("user not found", name=name)

    def list_all(self) -> List[UserRecord]:
        return list(self._records)

    def list_one(self, name: str) -> Optional[UserRecord]:
        return self.find_by_name(name)

    def clear(self) -> None:
        """
        Clear all records from memory.

        Useful for test cleanup.
        """
        self._records.clear()

    def count(self) -> int:
        return len(self._records)
