"""In-memory record source and sink for testing."""

from typing import Dict, Iterable, List, Optional

from health_assistant.domain.health_profile.core.exceptions.domain_errors import (
    SourceEmptyError,
    SourceMissingError,
)
from health_assistant.domain.health_profile.core.ports.record_source import (
    IRecordStorage,
)


class InMemoryRecordStorage(IRecordStorage):
    """Named lists of record lines kept in a dictionary.

    Behaves like the file storage: unknown names are missing, names with no
    lines are empty, trailing blank lines are ignored on read.

    Examples:
        >>> storage = InMemoryRecordStorage({"users.csv": ["john,male,28,72,91,43,,172,sedentary"]})
        >>> storage.read_lines("users.csv")
        ['john,male,28,72,91,43,,172,sedentary']
    """

    def __init__(self, sources: Optional[Dict[str, List[str]]] = None) -> None:
        self._sources: Dict[str, List[str]] = {
            name: list(lines) for name, lines in (sources or {}).items()
        }

    def read_lines(self, name: str) -> List[str]:
        if name not in self._sources:
            raise SourceMissingError(name)

        lines = list(self._sources[name])
        if not lines:
            raise SourceEmptyError(name)

        while lines and not lines[-1].strip():
            lines.pop()
        return lines

    def append_lines(self, name: str, lines: Iterable[str]) -> None:
        self._sources.setdefault(name, []).extend(lines)

    def lines(self, name: str) -> List[str]:
        """Raw content of a source, [] if unknown."""
        return list(self._sources.get(name, []))
