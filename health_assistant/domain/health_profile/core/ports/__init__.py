"""Ports (interfaces) for the health profile domain."""

from .calculators import IBodyFatCalculator, ICalorieEstimator, IMacroCalculator
from .record_source import IRecordSink, IRecordSource, IRecordStorage
from .repository import IUserRecordStore

__all__ = [
    "IBodyFatCalculator",
    "ICalorieEstimator",
    "IMacroCalculator",
    "IRecordSource",
    "IRecordSink",
    "IRecordStorage",
    "IUserRecordStore",
]
