"""Line-oriented record sources and sinks."""

from .codec import format_record_line, parse_record_line
from .csv_storage import CsvFileRecordStorage
from .in_memory_storage import InMemoryRecordStorage

__all__ = [
    "CsvFileRecordStorage",
    "InMemoryRecordStorage",
    "format_record_line",
    "parse_record_line",
]
