"""Domain exceptions for the health profile.

Only conditions that abort a whole operation are raised. Not-found lookups,
unsupported categories and out-of-range ages are reported through return
values and log events instead.
"""

from typing import Optional


class HealthDomainError(Exception):
    """Base exception for health profile domain errors."""

    pass


class RecordSourceError(HealthDomainError):
    """Raised when a record source cannot be used."""

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source


class SourceMissingError(RecordSourceError):
    """Raised when a record source does not exist or cannot be opened."""

    def __init__(self, source: str):
        super().__init__(
            source,
            f"Cannot open file as it may not exist or cannot be opened: {source}",
        )


class SourceEmptyError(RecordSourceError):
    """Raised when a record source has no content."""

    def __init__(self, source: str):
        super().__init__(source, f"File is empty: {source}")


class SourceDecodeError(RecordSourceError):
    """Raised when a record source is not valid UTF-8 text."""

    def __init__(self, source: str, reason: str):
        super().__init__(source, f"File is not valid UTF-8 text: {source} ({reason})")
        self.reason = reason


class MalformedRecordError(HealthDomainError):
    """Raised when a record line cannot be parsed.

    Attributes:
        line: The offending line
        field: Name of the field that failed
        value: Raw token for that field
        line_number: 1-based position in the source, if known
    """

    def __init__(
        self,
        line: str,
        field: str,
        value: str,
        line_number: Optional[int] = None,
    ):
        where = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid value {value!r} for field '{field}'{where}: {line!r}")
        self.line = line
        self.field = field
        self.value = value
        self.line_number = line_number


class EmptyPopulationError(HealthDomainError):
    """Raised when statistics are requested over a source with no records."""

    def __init__(self, source: str):
        super().__init__(f"No user records to compute statistics from: {source}")
        self.source = source
