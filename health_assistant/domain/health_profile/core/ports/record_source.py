"""Record source/sink ports - line-oriented external storage."""

from abc import ABC, abstractmethod
from typing import Iterable, List


class IRecordSource(ABC):
    """Port for reading serialized record lines."""

    @abstractmethod
    def read_lines(self, name: str) -> List[str]:
        """Read all record lines of a named source.

        Args:
            name: Source identifier (e.g. a file name)

        Returns:
            List[str]: Lines without line terminators

        Raises:
            SourceMissingError: If the source does not exist
            SourceEmptyError: If the source has no content
        """
        pass


class IRecordSink(ABC):
    """Port for appending serialized record lines."""

    @abstractmethod
    def append_lines(self, name: str, lines: Iterable[str]) -> None:
        """Append lines to a named destination, never truncating it."""
        pass


class IRecordStorage(IRecordSource, IRecordSink):
    """Port for storage that can be both read and appended to."""

    pass
