"""Health profile domain exceptions."""

from .domain_errors import (
    EmptyPopulationError,
    HealthDomainError,
    MalformedRecordError,
    RecordSourceError,
    SourceDecodeError,
    SourceEmptyError,
    SourceMissingError,
)

__all__ = [
    "HealthDomainError",
    "RecordSourceError",
    "SourceMissingError",
    "SourceEmptyError",
    "SourceDecodeError",
    "MalformedRecordError",
    "EmptyPopulationError",
]
